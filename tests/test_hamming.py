"""
Tests for the Hamming(7,4) parity codec
"""

from itertools import product

import pytest

from algoviz.coding import hamming_decode, hamming_encode
from algoviz.common import ValidationError, flip_bit

ALL_WORDS = ["".join(bits) for bits in product("01", repeat=4)]

# Data words for which the fixed encoder formulas coincide with the
# decoder's coverage sets (d2 ⊕ d3 ⊕ d4 = 0)
CONSISTENT_WORDS = [w for w in ALL_WORDS if (int(w[1]) ^ int(w[2]) ^ int(w[3])) == 0]


class TestHammingEncode:
    def test_encode_1011(self):
        result = hamming_encode("1011")
        assert result.encoded == "0110011"

    @pytest.mark.parametrize("word", ALL_WORDS)
    def test_fixed_parity_formulas(self, word):
        d1, d2, d3, d4 = (int(b) for b in word)
        code = [int(b) for b in hamming_encode(word).encoded]
        assert code[0] == d1 ^ d3
        assert code[1] == d1 ^ d2
        assert code[3] == d2 ^ d3 ^ d4
        assert [code[2], code[4], code[5], code[6]] == [d1, d2, d3, d4]

    def test_step_sequence(self):
        result = hamming_encode("1011")
        assert [s.action for s in result.steps] == [
            "input", "assign", "parity", "parity", "parity", "complete",
        ]
        assert result.steps[1].codeword == "??1?011"
        assert result.steps[2].parity_bits == ((1, 0),)
        assert result.steps[3].parity_bits == ((2, 1),)
        assert result.steps[4].parity_bits == ((4, 0),)
        assert result.steps[-1].codeword == "0110011"

    @pytest.mark.parametrize("bits", ["101", "10110", "", "1a11"])
    def test_rejects_bad_input(self, bits):
        with pytest.raises(ValidationError):
            hamming_encode(bits)


class TestHammingDecode:
    @pytest.mark.parametrize("word", CONSISTENT_WORDS)
    def test_round_trip_without_error(self, word):
        encoded = hamming_encode(word).encoded
        result = hamming_decode(encoded)
        assert result.error_position == 0
        assert result.corrected == encoded
        assert result.data == word

    @pytest.mark.parametrize("position", range(1, 8))
    def test_single_flip_of_1011_is_corrected(self, position):
        encoded = hamming_encode("1011").encoded
        result = hamming_decode(flip_bit(encoded, position))
        assert result.error_position == position
        assert result.corrected == encoded
        assert result.data == "1011"

    @pytest.mark.parametrize("word", CONSISTENT_WORDS)
    def test_any_single_flip_is_corrected(self, word):
        encoded = hamming_encode(word).encoded
        for position in range(1, 8):
            result = hamming_decode(flip_bit(encoded, position))
            assert result.error_position == position
            assert result.data == word

    def test_steps_without_error(self):
        result = hamming_decode("0110011")
        assert [s.action for s in result.steps] == [
            "received", "check", "check", "check", "valid", "corrected",
        ]
        assert not result.has_error

    def test_steps_with_error(self):
        result = hamming_decode("0110111")
        assert [s.action for s in result.steps] == [
            "received", "check", "check", "check", "error_found", "corrected",
        ]
        assert result.steps[4].position == 5
        assert result.steps[1].parity_bits == ((1, 1),)
        assert result.steps[2].parity_bits == ((2, 0),)
        assert result.steps[3].parity_bits == ((4, 1),)

    def test_syndrome_for_word_outside_fixed_formulas(self):
        # 0100 has d2 ⊕ d3 ⊕ d4 = 1, so the checks disagree with the encoder
        result = hamming_decode(hamming_encode("0100").encoded)
        assert result.error_position == 3

    @pytest.mark.parametrize("bits", ["011001", "01100110", "01100x1"])
    def test_rejects_bad_input(self, bits):
        with pytest.raises(ValidationError):
            hamming_decode(bits)
