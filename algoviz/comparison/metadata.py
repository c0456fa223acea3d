"""
Algorithm Comparison Metadata.

A static, read-only table describing every algorithm in the toolkit:
complexity classes, typical use-cases, strengths and weaknesses. It holds
no logic; the comparison dashboard and the benchmark report read from it.

The table is built once at import time and exposed through a
MappingProxyType, so there is no way to mutate it.

Example:
    >>> get_algorithm_info("huffman").time_complexity.worst
    'O(n log n)'
"""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from tabulate import tabulate

from ..common.errors import ValidationError

COMPRESSION = "compression"
GRAPH = "graph"
ERROR_CORRECTION = "error_correction"


@dataclass(frozen=True)
class TimeComplexity:
    best: str
    average: str
    worst: str


@dataclass(frozen=True)
class AlgorithmInfo:
    """
    Descriptive metadata for one algorithm.

    Attributes:
        id: Lookup key, e.g. "huffman"
        name: Display name
        type: "compression", "graph" or "error_correction"
        time_complexity: Best / average / worst case
        space_complexity: Space class
        description: One-sentence summary
        use_cases, pros, cons: Bullet lists for the dashboard
    """
    id: str
    name: str
    type: str
    time_complexity: TimeComplexity
    space_complexity: str
    description: str
    use_cases: Tuple[str, ...]
    pros: Tuple[str, ...]
    cons: Tuple[str, ...]


_ALGORITHMS = (
    AlgorithmInfo(
        id="huffman",
        name="Huffman Coding",
        type=COMPRESSION,
        time_complexity=TimeComplexity("O(n log n)", "O(n log n)", "O(n log n)"),
        space_complexity="O(n)",
        description="Greedy algorithm building optimal prefix-free codes from leaf nodes upward",
        use_cases=("Image compression (JPEG)", "Audio compression",
                   "Text compression", "Lossless data compression"),
        pros=("Optimal for prefix-free codes", "Linear time decoding",
              "Proven efficiency", "Simple to implement"),
        cons=("Not optimal for small alphabets", "Requires frequency analysis",
              "Tree must be stored with data"),
    ),
    AlgorithmInfo(
        id="fano",
        name="Fano Algorithm",
        type=COMPRESSION,
        time_complexity=TimeComplexity("O(n log n)", "O(n log n)", "O(n log n)"),
        space_complexity="O(n)",
        description="Recursive probability-based splitting creating variable-length codes",
        use_cases=("Text compression", "General data compression", "Educational purposes"),
        pros=("Top-down approach (intuitive)", "Good compression ratio",
              "Faster practical performance"),
        cons=("Generally suboptimal vs Huffman", "Split point selection critical",
              "Requires sorted input"),
    ),
    AlgorithmInfo(
        id="shannon_fano_elias",
        name="Shannon-Fano-Elias",
        type=COMPRESSION,
        time_complexity=TimeComplexity("O(n log n)", "O(n log n)", "O(n log n)"),
        space_complexity="O(n)",
        description="Arithmetic coding variant using cumulative probability distribution",
        use_cases=("Source coding", "Information theory applications",
                   "Entropy encoding", "Foundation for arithmetic coding"),
        pros=("Theoretically sound", "Approaches entropy limit",
              "Foundation for advanced methods", "Guaranteed efficiency"),
        cons=("More complex to implement", "Slower than Huffman",
              "Requires floating-point arithmetic"),
    ),
    AlgorithmInfo(
        id="lempel_ziv",
        name="Lempel-Ziv",
        type=COMPRESSION,
        time_complexity=TimeComplexity("O(n)", "O(n)", "O(n²)"),
        space_complexity="O(d)",
        description="Dictionary-based compression replacing repeated patterns with codes",
        use_cases=("GIF/TIFF compression", "ZIP archives (DEFLATE)",
                   "Modem transmission", "Repetitive data"),
        pros=("Works on any data", "No frequency analysis needed",
              "Adaptive dictionary", "Used in standards (gzip)"),
        cons=("Not optimal for low-repetition data", "Dictionary overhead",
              "Slower on non-repetitive data"),
    ),
    AlgorithmInfo(
        id="hamming",
        name="Hamming(7,4) Code",
        type=ERROR_CORRECTION,
        time_complexity=TimeComplexity("O(1)", "O(1)", "O(1)"),
        space_complexity="O(1)",
        description="Three parity bits over four data bits locate and fix any single-bit error",
        use_cases=("ECC memory", "Satellite and deep-space links",
                   "Teaching syndrome decoding"),
        pros=("Corrects any single-bit error", "Syndrome gives the error position directly",
              "Constant-time encode and decode"),
        cons=("Cannot correct two-bit errors", "75% overhead for 4 data bits",
              "Fixed block size"),
    ),
    AlgorithmInfo(
        id="hamilton",
        name="Hamilton Cycle Detection",
        type=GRAPH,
        time_complexity=TimeComplexity("O(n!)", "O(n!)", "O(n!)"),
        space_complexity="O(n)",
        description="Backtracking algorithm finding paths visiting each vertex exactly once",
        use_cases=("Traveling Salesman Problem", "Route optimization",
                   "Circuit design", "Network planning"),
        pros=("Finds all cycles", "Exact solution", "Backtracking framework",
              "Handles any graph"),
        cons=("NP-complete problem", "Exponential time complexity",
              "Impractical for large graphs", "No known polynomial solution"),
    ),
)

ALGORITHM_DATABASE: Mapping[str, AlgorithmInfo] = MappingProxyType(
    {info.id: info for info in _ALGORITHMS}
)

COMPRESSION_ALGORITHMS = tuple(
    info.id for info in _ALGORITHMS if info.type == COMPRESSION
)


def get_algorithm_info(algorithm_id: str) -> AlgorithmInfo:
    """
    Look up metadata by algorithm id.

    Raises:
        ValidationError: If the id is unknown
    """
    try:
        return ALGORITHM_DATABASE[algorithm_id]
    except KeyError:
        known = ", ".join(ALGORITHM_DATABASE)
        raise ValidationError(
            f"Unknown algorithm '{algorithm_id}'. Known: {known}"
        ) from None


def list_algorithms(kind: Optional[str] = None) -> List[AlgorithmInfo]:
    """All algorithms, optionally filtered by type."""
    return [info for info in ALGORITHM_DATABASE.values()
            if kind is None or info.type == kind]


def comparison_table(algorithm_ids: Optional[List[str]] = None) -> str:
    """Render a complexity comparison as a text table."""
    infos = ([get_algorithm_info(a) for a in algorithm_ids]
             if algorithm_ids else list_algorithms())
    rows = [
        (info.name, info.time_complexity.best, info.time_complexity.average,
         info.time_complexity.worst, info.space_complexity)
        for info in infos
    ]
    return tabulate(rows, headers=["Algorithm", "Best", "Average", "Worst", "Space"])
