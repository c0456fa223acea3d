"""
Benchmark Harness.

Times the compression engines on synthetic alphabets. This is a pure
timing wrapper: it calls the real engines and measures wall-clock
duration, nothing more. Correctness is the engines' business.

Test Data:
    `generate_test_data(size)` draws `size` letters uniformly from A..Z and
    accumulates an empirical probability of 1/size per occurrence, so the
    resulting alphabet has at most 26 symbols whose probabilities sum to 1.

    The Lempel-Ziv engine takes text rather than an alphabet; its input is
    built by repeating each letter ceil(p * 100) times.

Example:
    >>> result = benchmark("huffman", data_size=200, iterations=5, seed=1)
    >>> result.iterations
    5
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple
import logging
import math
import random
import string
import time

import numpy as np
from tabulate import tabulate

from ..coding.fano import fano_encode
from ..coding.huffman import build_huffman_coding
from ..coding.lempel_ziv import lz_compress
from ..coding.shannon_fano_elias import shannon_fano_elias_encode
from ..common.errors import ValidationError
from ..common.symbols import Symbol

logger = logging.getLogger(__name__)

BENCHMARK_ALPHABET = string.ascii_uppercase

# Characters per unit of probability when building LZ input text
TEXT_SCALE = 100


def generate_test_text(data: Sequence[Symbol]) -> str:
    """Repeat each symbol ceil(p * 100) times."""
    return "".join(s.char * math.ceil(s.probability * TEXT_SCALE) for s in data)


ALGORITHM_RUNNERS: Dict[str, Callable[[List[Symbol]], object]] = {
    "huffman": build_huffman_coding,
    "fano": fano_encode,
    "shannon_fano_elias": shannon_fano_elias_encode,
    "lempel_ziv": lambda data: lz_compress(generate_test_text(data)),
}


@dataclass
class BenchmarkConfig:
    """
    Benchmark parameters.

    Attributes:
        data_size: Number of letters drawn to build the alphabet
        iterations: Number of timed runs
        seed: Seed for the data generator (None = nondeterministic)
    """
    data_size: int
    iterations: int = 5
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration."""
        if self.data_size < 2:
            raise ValidationError("data_size must be at least 2")
        if self.iterations < 1:
            raise ValidationError("iterations must be at least 1")


@dataclass
class BenchmarkResult:
    """
    Timing results for one algorithm.

    Attributes:
        algorithm: Algorithm id
        data_size: Letters drawn for the test alphabet
        iterations: Number of timed runs
        times_ms: Duration of each run in milliseconds
        total_time: Sum of all runs (ms)
        avg_time: Mean run duration (ms)
    """
    algorithm: str
    data_size: int
    iterations: int
    times_ms: Tuple[float, ...]
    total_time: float
    avg_time: float

    @property
    def min_time(self) -> float:
        return min(self.times_ms)

    @property
    def max_time(self) -> float:
        return max(self.times_ms)

    @property
    def std_time(self) -> float:
        return float(np.std(self.times_ms))

    def summary(self) -> str:
        return (
            f"BenchmarkResult:\n"
            f"  Algorithm: {self.algorithm}\n"
            f"  Data size: {self.data_size}\n"
            f"  Iterations: {self.iterations}\n"
            f"  Total: {self.total_time:.3f} ms\n"
            f"  Average: {self.avg_time:.3f} ms (±{self.std_time:.3f})"
        )

    def __repr__(self) -> str:
        return (f"BenchmarkResult({self.algorithm}, size={self.data_size}, "
                f"avg={self.avg_time:.3f}ms)")


def generate_test_data(size: int,
                       rng: Optional[random.Random] = None) -> List[Symbol]:
    """
    Draw `size` letters uniformly and return their empirical distribution.

    Symbols appear in order of first occurrence. For size >= 2 the first
    two draws are distinct letters, so the alphabet always has at least
    two symbols.
    """
    if size < 1:
        raise ValidationError("size must be at least 1")
    rng = rng or random.Random()

    draws = rng.sample(BENCHMARK_ALPHABET, min(size, 2))
    draws += [rng.choice(BENCHMARK_ALPHABET) for _ in range(size - len(draws))]

    probabilities: Dict[str, float] = {}
    for char in draws:
        probabilities[char] = probabilities.get(char, 0.0) + 1 / size

    return [Symbol(char, prob) for char, prob in probabilities.items()]


def benchmark(algorithm_id: str, data_size: int, iterations: int = 5,
              seed: Optional[int] = None) -> BenchmarkResult:
    """
    Time one compression engine.

    The test alphabet is generated once; every iteration runs the engine
    on the same data.

    Raises:
        ValidationError: On an unknown algorithm id or invalid sizes. Errors
            raised by the engine itself propagate unchanged.
    """
    if algorithm_id not in ALGORITHM_RUNNERS:
        known = ", ".join(ALGORITHM_RUNNERS)
        raise ValidationError(
            f"Cannot benchmark '{algorithm_id}'. Known: {known}"
        )
    config = BenchmarkConfig(data_size=data_size, iterations=iterations, seed=seed)
    runner = ALGORITHM_RUNNERS[algorithm_id]
    data = generate_test_data(config.data_size, random.Random(config.seed))

    times = np.empty(config.iterations, dtype=float)
    for i in range(config.iterations):
        start = time.perf_counter()
        runner(data)
        times[i] = (time.perf_counter() - start) * 1000.0

    result = BenchmarkResult(
        algorithm=algorithm_id,
        data_size=config.data_size,
        iterations=config.iterations,
        times_ms=tuple(float(t) for t in times),
        total_time=float(times.sum()),
        avg_time=float(times.mean()),
    )
    logger.debug("Benchmark %s: %d symbols, %d iterations, avg %.3f ms",
                 algorithm_id, len(data), config.iterations, result.avg_time)
    return result


def compare_algorithms(algorithm_ids: Sequence[str], data_size: int,
                       iterations: int = 5,
                       seed: Optional[int] = None) -> List[BenchmarkResult]:
    """Benchmark several engines on identically seeded data."""
    return [benchmark(a, data_size, iterations, seed) for a in algorithm_ids]


def format_results(results: Sequence[BenchmarkResult]) -> str:
    """Render results as a table, with each average relative to the slowest."""
    if not results:
        return ""
    slowest = max(r.avg_time for r in results) or 1.0
    rows = [
        (r.algorithm, r.data_size, r.iterations, f"{r.total_time:.3f}",
         f"{r.avg_time:.3f}", f"{r.avg_time / slowest:.0%}")
        for r in results
    ]
    return tabulate(rows, headers=["Algorithm", "Size", "Iter", "Total (ms)",
                                   "Avg (ms)", "Relative"])
