"""
Tests for shared symbol, code-table and bit helpers
"""

import math

import pytest

from algoviz.common import (
    Symbol, ValidationError, as_alphabet, validate_alphabet, sort_by_probability,
    normalize, is_prefix_free, encode_text, decode_bits, entropy,
    average_code_length, compression_metrics, parse_bits, flip_bit,
)


class TestAlphabet:
    def test_as_alphabet_accepts_mapping(self):
        symbols = as_alphabet({"A": 0.5, "B": 0.5})
        assert symbols == [Symbol("A", 0.5), Symbol("B", 0.5)]

    def test_as_alphabet_accepts_pairs_and_symbols(self):
        symbols = as_alphabet([("A", 1), Symbol("B", 2.0)])
        assert symbols == [Symbol("A", 1.0), Symbol("B", 2.0)]

    def test_as_alphabet_rejects_string(self):
        with pytest.raises(ValidationError):
            as_alphabet("AB")

    def test_as_alphabet_rejects_bad_weight(self):
        with pytest.raises(ValidationError):
            as_alphabet([("A", "heavy")])

    @pytest.mark.parametrize("data", [5, 2.5, object()])
    def test_as_alphabet_rejects_non_iterable(self, data):
        with pytest.raises(ValidationError, match="sequence or mapping"):
            as_alphabet(data)

    def test_symbol_with_non_numeric_probability(self):
        with pytest.raises(ValidationError, match="not a number"):
            validate_alphabet([Symbol("A", "half"), Symbol("B", 0.5)])

    def test_multi_character_symbols_are_tokens(self):
        symbols = validate_alphabet({"AB": 0.5, "C": 0.5})
        assert [s.char for s in symbols] == ["AB", "C"]
        assert encode_text({"AB": "0", "C": "1"}, ["AB", "C", "AB"]) == "010"

    def test_too_few_symbols(self):
        with pytest.raises(ValidationError, match="at least 2"):
            validate_alphabet({"A": 1.0})

    def test_duplicate_symbol(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            validate_alphabet([("A", 0.5), ("A", 0.5)])

    def test_empty_symbol(self):
        with pytest.raises(ValidationError):
            validate_alphabet([("", 0.5), ("B", 0.5)])

    @pytest.mark.parametrize("weight", [0.0, -0.1, math.nan, math.inf])
    def test_rejects_non_positive_or_non_finite(self, weight):
        with pytest.raises(ValidationError):
            validate_alphabet({"A": weight, "B": 0.5})

    def test_zero_allowed_when_requested(self):
        symbols = validate_alphabet({"A": 0.0, "B": 1.0}, allow_zero=True)
        assert len(symbols) == 2

    def test_max_probability(self):
        with pytest.raises(ValidationError):
            validate_alphabet({"A": 1.5, "B": 0.5}, max_probability=1.0)

    def test_sort_is_descending_and_stable(self):
        symbols = as_alphabet([("A", 0.2), ("B", 0.4), ("C", 0.2), ("D", 0.2)])
        assert [s.char for s in sort_by_probability(symbols)] == ["B", "A", "C", "D"]

    def test_normalize_applies_floor(self):
        symbols = normalize(as_alphabet({"A": 0.0, "B": 0.99}), floor=0.01)
        assert symbols[0].probability == pytest.approx(0.01)
        assert sum(s.probability for s in symbols) == pytest.approx(1.0)


class TestCodeTables:
    def test_prefix_free(self):
        assert is_prefix_free({"A": "0", "B": "10", "C": "11"})
        assert not is_prefix_free({"A": "1", "B": "10"})
        assert not is_prefix_free({"A": "01", "B": "01"})

    def test_encode_decode(self):
        codes = {"A": "0", "B": "10", "C": "11"}
        bits = encode_text(codes, "AAABBC")
        assert bits == "000101011"
        assert decode_bits(codes, bits) == "AAABBC"

    def test_encode_unknown_symbol(self):
        with pytest.raises(ValidationError):
            encode_text({"A": "0"}, "AB")

    def test_decode_trailing_bits(self):
        with pytest.raises(ValidationError, match="Trailing"):
            decode_bits({"A": "0", "B": "11"}, "01")

    def test_entropy_of_uniform_source(self):
        symbols = as_alphabet({c: 0.25 for c in "ABCD"})
        assert entropy(symbols) == pytest.approx(2.0)

    def test_average_code_length(self):
        symbols = as_alphabet({"A": 0.5, "B": 0.25, "C": 0.25})
        codes = {"A": "0", "B": "10", "C": "11"}
        assert average_code_length(codes, symbols) == pytest.approx(1.5)

    def test_compression_metrics(self):
        metrics = compression_metrics(100, 25)
        assert metrics.compression_ratio == 75.0
        assert metrics.original_bits == 800
        assert metrics.saved_bits == 600

    def test_compression_metrics_rejects_zero_size(self):
        with pytest.raises(ValidationError):
            compression_metrics(0, 10)


class TestBits:
    def test_parse_bits(self):
        assert parse_bits("1011", 4) == [1, 0, 1, 1]

    @pytest.mark.parametrize("bits", ["101", "10110", "10a1", ""])
    def test_parse_bits_rejects(self, bits):
        with pytest.raises(ValidationError):
            parse_bits(bits, 4)

    def test_flip_bit(self):
        assert flip_bit("0110011", 1) == "1110011"
        assert flip_bit("0110011", 7) == "0110010"

    def test_flip_bit_out_of_range(self):
        with pytest.raises(ValidationError):
            flip_bit("0110011", 8)
