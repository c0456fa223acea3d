"""
Tests for the algorithm metadata store
"""

import pytest

from algoviz.benchmark import ALGORITHM_RUNNERS
from algoviz.common import ValidationError
from algoviz.comparison import (
    ALGORITHM_DATABASE, COMPRESSION, COMPRESSION_ALGORITHMS, GRAPH,
    comparison_table, get_algorithm_info, list_algorithms,
)


class TestAlgorithmDatabase:
    def test_known_ids(self):
        assert set(ALGORITHM_DATABASE) == {
            "huffman", "fano", "shannon_fano_elias", "lempel_ziv", "hamming", "hamilton",
        }

    def test_entries_keyed_by_their_id(self):
        for algorithm_id, info in ALGORITHM_DATABASE.items():
            assert info.id == algorithm_id
            assert info.use_cases and info.pros and info.cons

    def test_read_only(self):
        with pytest.raises(TypeError):
            ALGORITHM_DATABASE["huffman"] = None

    def test_entries_are_frozen(self):
        with pytest.raises(AttributeError):
            ALGORITHM_DATABASE["huffman"].name = "Other"

    def test_get_algorithm_info(self):
        info = get_algorithm_info("hamilton")
        assert info.type == GRAPH
        assert info.time_complexity.worst == "O(n!)"

    def test_unknown_id(self):
        with pytest.raises(ValidationError, match="Unknown algorithm"):
            get_algorithm_info("quicksort")

    def test_compression_algorithms_match_benchmark(self):
        assert [i.id for i in list_algorithms(COMPRESSION)] == list(COMPRESSION_ALGORITHMS)
        assert set(COMPRESSION_ALGORITHMS) == set(ALGORITHM_RUNNERS)

    def test_comparison_table(self):
        table = comparison_table(["huffman", "lempel_ziv"])
        assert "Huffman Coding" in table
        assert "O(n²)" in table
        assert "Hamilton" not in table
