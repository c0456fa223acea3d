"""
Comparison Metadata

Static, read-only facts about every algorithm: complexity classes,
use-cases, pros and cons.

Usage:
    >>> from algoviz.comparison import get_algorithm_info
    >>> get_algorithm_info("lempel_ziv").space_complexity
    'O(d)'
"""

from .metadata import (
    AlgorithmInfo,
    TimeComplexity,
    ALGORITHM_DATABASE,
    COMPRESSION_ALGORITHMS,
    COMPRESSION,
    GRAPH,
    ERROR_CORRECTION,
    get_algorithm_info,
    list_algorithms,
    comparison_table,
)

__all__ = [
    "AlgorithmInfo",
    "TimeComplexity",
    "ALGORITHM_DATABASE",
    "COMPRESSION_ALGORITHMS",
    "COMPRESSION",
    "GRAPH",
    "ERROR_CORRECTION",
    "get_algorithm_info",
    "list_algorithms",
    "comparison_table",
]
