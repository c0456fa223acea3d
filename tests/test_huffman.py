"""
Tests for Huffman coding
"""

import pytest

from algoviz.coding import build_huffman_coding
from algoviz.common import (
    Symbol, ValidationError, average_code_length, encode_text, entropy,
    is_prefix_free, decode_bits,
)

ALPHABETS = [
    {"A": 0.3, "B": 0.1, "C": 0.1, "D": 0.5},
    {"A": 3, "B": 2, "C": 1},
    {"X": 1, "Y": 1},
    {c: i + 1 for i, c in enumerate("ABCDEFGHIJ")},
    {"A": 0.45, "B": 0.13, "C": 0.12, "D": 0.16, "E": 0.09, "F": 0.05},
]


class TestHuffmanCodes:
    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_every_symbol_gets_a_prefix_free_code(self, alphabet):
        result = build_huffman_coding(alphabet)
        assert set(result.codes) == set(alphabet)
        assert is_prefix_free(result.codes)

    def test_classic_frequency_table(self):
        result = build_huffman_coding({"A": 3, "B": 2, "C": 1})
        lengths = {char: len(code) for char, code in result.codes.items()}
        assert lengths == {"A": 1, "B": 2, "C": 2}

        bits = encode_text(result.codes, "AAABBC")
        assert len(bits) == 9
        assert decode_bits(result.codes, bits) == "AAABBC"

    def test_equal_weights_keep_insertion_order(self):
        result = build_huffman_coding({"A": 1, "B": 1, "C": 1, "D": 1})
        assert result.codes == {"A": "00", "B": "01", "C": "10", "D": "11"}

    @pytest.mark.parametrize("alphabet", ALPHABETS)
    def test_average_length_within_one_bit_of_entropy(self, alphabet):
        result = build_huffman_coding(alphabet)
        symbols = [Symbol(r.char, r.probability) for r in result.results]
        h = entropy(symbols)
        avg = average_code_length(result.codes, symbols)
        assert h - 1e-9 <= avg < h + 1

    def test_zero_weight_is_floored(self):
        result = build_huffman_coding({"A": 0, "B": 1})
        assert sorted(result.codes.values()) == ["0", "1"]
        prob_a = next(r.probability for r in result.results if r.char == "A")
        assert prob_a == pytest.approx(0.01 / 1.01)

    def test_results_sorted_by_symbol(self):
        result = build_huffman_coding({"C": 1, "A": 2, "B": 3})
        assert [r.char for r in result.results] == ["A", "B", "C"]


class TestHuffmanSteps:
    def test_initialize_steps_precede_combine_steps(self):
        result = build_huffman_coding({"A": 0.3, "B": 0.1, "C": 0.1, "D": 0.5})
        actions = [step.action for step in result.steps]
        assert actions == ["initialize"] * 4 + ["combine"] * 3

    def test_first_merge_takes_two_lightest(self):
        result = build_huffman_coding({"A": 0.3, "B": 0.1, "C": 0.1, "D": 0.5})
        merge = result.steps[4]
        parent = result.node(merge.node_id)
        assert parent.left == 1 and parent.right == 2
        assert parent.weight == pytest.approx(0.2)
        assert "0.100 and 0.100 = 0.200" in merge.message

    def test_arena_shape(self):
        result = build_huffman_coding({"A": 5, "B": 4, "C": 3, "D": 2, "E": 1})
        assert len(result.nodes) == 2 * 5 - 1
        assert all(node.id == i for i, node in enumerate(result.nodes))
        assert result.root_id == len(result.nodes) - 1
        assert result.root.weight == pytest.approx(1.0)
        assert not result.root.is_leaf

    def test_forest_shrinks_to_root(self):
        result = build_huffman_coding({"A": 1, "B": 2, "C": 3})
        assert result.steps[2].forest == (0, 1, 2)
        assert result.steps[-1].forest == (result.root_id,)

    def test_steps_are_immutable(self):
        result = build_huffman_coding({"A": 1, "B": 2})
        with pytest.raises(AttributeError):
            result.steps[0].message = "changed"

    def test_summary_lists_codes(self):
        summary = build_huffman_coding({"A": 1, "B": 2}).summary()
        assert "Symbol" in summary and "Code" in summary


class TestHuffmanValidation:
    def test_single_symbol_rejected(self):
        with pytest.raises(ValidationError):
            build_huffman_coding({"A": 1})

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            build_huffman_coding({"A": -1, "B": 1})

    def test_duplicate_symbol_rejected(self):
        with pytest.raises(ValidationError):
            build_huffman_coding([("A", 1), ("A", 2)])
