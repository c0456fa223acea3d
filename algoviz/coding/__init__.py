"""
Coding Engines

Step-recording implementations of the classic source and channel codes.

Key Components:
    - build_huffman_coding: Greedy bottom-up optimal prefix code
    - fano_encode: Top-down recursive partition
    - shannon_fano_elias_encode: Codes from cumulative-interval midpoints
    - lz_compress / lz_decompress: Sliding-window longest-match tokens
    - hamming_encode / hamming_decode: Hamming(7,4) parity codec

Usage:
    >>> from algoviz.coding import build_huffman_coding, lz_compress
    >>> result = build_huffman_coding({"A": 0.5, "B": 0.3, "C": 0.2})
    >>> for step in result.steps:
    ...     print(step.message)
"""

from .huffman import (
    HuffmanNode,
    HuffmanStep,
    HuffmanResult,
    build_huffman_coding,
    extract_codes,
    MIN_WEIGHT,
)
from .fano import FanoStep, FanoResult, fano_encode
from .shannon_fano_elias import (
    SFEStep,
    SFEResult,
    shannon_fano_elias_encode,
    binary_expansion,
)
from .lempel_ziv import (
    LZConfig,
    LZStep,
    LZResult,
    lz_compress,
    lz_decompress,
    DEFAULT_WINDOW_SIZE,
    DEFAULT_LOOKAHEAD_SIZE,
)
from .hamming import (
    HammingStep,
    HammingEncodeResult,
    HammingDecodeResult,
    hamming_encode,
    hamming_decode,
)

__all__ = [
    "HuffmanNode",
    "HuffmanStep",
    "HuffmanResult",
    "build_huffman_coding",
    "extract_codes",
    "MIN_WEIGHT",
    "FanoStep",
    "FanoResult",
    "fano_encode",
    "SFEStep",
    "SFEResult",
    "shannon_fano_elias_encode",
    "binary_expansion",
    "LZConfig",
    "LZStep",
    "LZResult",
    "lz_compress",
    "lz_decompress",
    "DEFAULT_WINDOW_SIZE",
    "DEFAULT_LOOKAHEAD_SIZE",
    "HammingStep",
    "HammingEncodeResult",
    "HammingDecodeResult",
    "hamming_encode",
    "hamming_decode",
]
