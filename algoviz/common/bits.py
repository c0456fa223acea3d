"""Bit-string parsing helpers."""

from __future__ import annotations
from typing import List, Sequence

from .errors import ValidationError


def parse_bits(bits: str, expected_length: int) -> List[int]:
    """
    Parse a string of '0'/'1' characters into a list of ints.

    Raises:
        ValidationError: If the length differs from `expected_length` or a
            character is not a bit
    """
    if not isinstance(bits, str):
        raise ValidationError(f"Bits must be a string, got {type(bits).__name__}")
    if len(bits) != expected_length:
        raise ValidationError(
            f"Input must be exactly {expected_length} bits, got {len(bits)}"
        )
    if any(ch not in "01" for ch in bits):
        raise ValidationError(f"Input must contain only 0 and 1, got '{bits}'")
    return [int(ch) for ch in bits]


def bits_to_str(bits: Sequence[int]) -> str:
    return "".join(str(b) for b in bits)


def flip_bit(bits: str, position: int) -> str:
    """
    Flip one bit of a bit string (1-indexed), e.g. to inject an error.

    Example:
        >>> flip_bit("0110011", 3)
        '0100011'
    """
    if not 1 <= position <= len(bits):
        raise ValidationError(
            f"Position must be between 1 and {len(bits)}, got {position}"
        )
    index = position - 1
    flipped = "1" if bits[index] == "0" else "0"
    return bits[:index] + flipped + bits[index + 1:]
