"""
Algorithm Visualizer Core
=========================

Step-recording engines for classical information-theory and graph
algorithms. Each engine is a pure function of its input: it computes the
complete sequence of algorithm steps up front, so a presentation layer can
replay them at its own pace without re-running anything.

Modules:
    - common: Shared data shapes, validation and code-table helpers
    - coding: Huffman, Fano, Shannon-Fano-Elias, Lempel-Ziv, Hamming(7,4)
    - graph: Directed graph model and Hamilton cycle search
    - benchmark: Timing harness over synthetic alphabets
    - comparison: Static complexity / use-case metadata

Quick Start:
    >>> from algoviz.common import Symbol
    >>> from algoviz.coding import build_huffman_coding
    >>> result = build_huffman_coding([Symbol("A", 3), Symbol("B", 2), Symbol("C", 1)])
    >>> sorted(len(code) for code in result.codes.values())
    [1, 2, 2]
"""

import logging

__version__ = "0.1.0"
__author__ = "Your Name"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import common
from . import coding
from . import graph
from . import benchmark
from . import comparison
