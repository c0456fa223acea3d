"""
Tests for the benchmark harness
"""

import math
import random

import pytest

from algoviz.benchmark import (
    ALGORITHM_RUNNERS, BENCHMARK_ALPHABET, BenchmarkConfig, benchmark,
    compare_algorithms, format_results, generate_test_data, generate_test_text,
)
from algoviz.common import Symbol, ValidationError


class TestGenerateTestData:
    def test_probabilities_sum_to_one(self):
        data = generate_test_data(500, random.Random(0))
        assert sum(s.probability for s in data) == pytest.approx(1.0)

    def test_symbols_drawn_from_fixed_alphabet(self):
        data = generate_test_data(500, random.Random(0))
        assert len(data) <= 26
        assert all(s.char in BENCHMARK_ALPHABET for s in data)
        assert len({s.char for s in data}) == len(data)

    def test_probability_is_empirical_frequency(self):
        data = generate_test_data(10, random.Random(3))
        for s in data:
            count = s.probability * 10
            assert count == pytest.approx(round(count))

    def test_same_seed_same_data(self):
        assert generate_test_data(100, random.Random(9)) == generate_test_data(100, random.Random(9))

    def test_invalid_size(self):
        with pytest.raises(ValidationError):
            generate_test_data(0)

    @pytest.mark.parametrize("seed", range(20))
    def test_two_draws_give_two_symbols(self, seed):
        data = generate_test_data(2, random.Random(seed))
        assert len(data) == 2
        assert [s.probability for s in data] == [0.5, 0.5]

    def test_text_repeats_each_symbol(self):
        text = generate_test_text([Symbol("A", 0.5), Symbol("B", 0.015)])
        assert text == "A" * 50 + "B" * 2
        assert len(text) == 50 + math.ceil(1.5)


class TestBenchmark:
    @pytest.mark.parametrize("algorithm", sorted(ALGORITHM_RUNNERS))
    def test_timings_are_consistent(self, algorithm):
        result = benchmark(algorithm, data_size=200, iterations=3, seed=1)
        assert result.algorithm == algorithm
        assert result.iterations == 3
        assert len(result.times_ms) == 3
        assert all(t >= 0 for t in result.times_ms)
        assert result.total_time == pytest.approx(sum(result.times_ms))
        assert result.avg_time == pytest.approx(result.total_time / 3)
        assert result.min_time - 1e-9 <= result.avg_time <= result.max_time + 1e-9

    def test_unknown_algorithm(self):
        with pytest.raises(ValidationError, match="Cannot benchmark"):
            benchmark("hamilton", data_size=10)

    @pytest.mark.parametrize("kwargs", [
        {"data_size": 0}, {"data_size": 1}, {"data_size": 10, "iterations": 0},
    ])
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValidationError):
            BenchmarkConfig(**kwargs)

    def test_compare_keeps_order(self):
        results = compare_algorithms(["fano", "huffman"], data_size=100, iterations=2, seed=5)
        assert [r.algorithm for r in results] == ["fano", "huffman"]

    def test_format_results(self):
        results = compare_algorithms(["huffman", "lempel_ziv"], data_size=100, iterations=1, seed=5)
        table = format_results(results)
        assert "huffman" in table and "lempel_ziv" in table
        assert format_results([]) == ""

    def test_summary(self):
        result = benchmark("huffman", data_size=50, iterations=2, seed=2)
        assert "Algorithm: huffman" in result.summary()

    @pytest.mark.parametrize("algorithm", sorted(ALGORITHM_RUNNERS))
    @pytest.mark.parametrize("data_size", [2, 3])
    def test_smallest_sizes_run_every_engine(self, algorithm, data_size):
        for seed in range(10):
            result = benchmark(algorithm, data_size=data_size, iterations=2, seed=seed)
            assert len(result.times_ms) == 2

    def test_size_one_rejected_before_timing(self):
        with pytest.raises(ValidationError, match="at least 2"):
            benchmark("huffman", data_size=1, iterations=2, seed=0)
