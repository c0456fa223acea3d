"""
Benchmark Harness

Wall-clock timing of the compression engines over synthetic alphabets.

Usage:
    >>> from algoviz.benchmark import compare_algorithms, format_results
    >>> results = compare_algorithms(["huffman", "fano"], data_size=500, seed=7)
    >>> print(format_results(results))
"""

from .core import (
    BenchmarkConfig,
    BenchmarkResult,
    ALGORITHM_RUNNERS,
    BENCHMARK_ALPHABET,
    benchmark,
    compare_algorithms,
    format_results,
    generate_test_data,
    generate_test_text,
)

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "ALGORITHM_RUNNERS",
    "BENCHMARK_ALPHABET",
    "benchmark",
    "compare_algorithms",
    "format_results",
    "generate_test_data",
    "generate_test_text",
]
