"""
Code tables and coding metrics.

A code table maps each symbol to its binary code string. The helpers here
work on any table produced by the Huffman, Fano or Shannon-Fano-Elias
engines:

    - is_prefix_free: no code is a prefix of another
    - encode_text / decode_bits: apply a table to text and back
    - entropy / average_code_length: compare a code against the source
    - compression_metrics: size comparison for display

Example:
    >>> codes = {"A": "0", "B": "10", "C": "11"}
    >>> encode_text(codes, "AAABBC")
    '000101011'
    >>> decode_bits(codes, "000101011")
    'AAABBC'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping
import math

from .errors import ValidationError
from .symbols import Symbol


@dataclass(frozen=True)
class CodeResult:
    """
    Final code assigned to one symbol.

    Attributes:
        char: The symbol
        code: Binary code string, e.g. "101"
        probability: Probability the code was built from
    """
    char: str
    code: str
    probability: float

    @property
    def length(self) -> int:
        return len(self.code)


def is_prefix_free(codes: Mapping[str, str]) -> bool:
    """
    Check that no code is a prefix of another.

    After sorting, a code can only be a prefix of the codes immediately
    following it, so comparing neighbours is enough.
    """
    ordered = sorted(codes.values())
    for a, b in zip(ordered, ordered[1:]):
        if b.startswith(a):
            return False
    return True


def encode_text(codes: Mapping[str, str], text: Iterable[str]) -> str:
    """
    Concatenate the code of every symbol in `text`.

    `text` is a string, or a sequence of tokens when the alphabet has
    multi-character symbols.
    """
    try:
        return "".join(codes[ch] for ch in text)
    except KeyError as exc:
        raise ValidationError(f"Symbol {exc.args[0]!r} has no code") from None


def decode_bits(codes: Mapping[str, str], bits: str) -> str:
    """
    Decode a bit string by greedy prefix matching.

    Only meaningful for prefix-free tables: the first code that matches
    the accumulated bits is emitted.
    """
    lookup = {code: char for char, code in codes.items()}
    output: List[str] = []
    current = ""
    for bit in bits:
        if bit not in "01":
            raise ValidationError(f"Invalid bit {bit!r} in input")
        current += bit
        if current in lookup:
            output.append(lookup[current])
            current = ""
    if current:
        raise ValidationError(f"Trailing bits '{current}' do not form a code")
    return "".join(output)


def entropy(symbols: Iterable[Symbol]) -> float:
    """Shannon entropy H = -Σ p log2 p in bits per symbol."""
    return -sum(s.probability * math.log2(s.probability)
                for s in symbols if s.probability > 0)


def average_code_length(codes: Mapping[str, str],
                        symbols: Iterable[Symbol]) -> float:
    """Expected code length Σ p_i * len(code_i)."""
    return sum(s.probability * len(codes[s.char]) for s in symbols)


def code_table(results: Iterable[CodeResult]) -> Dict[str, str]:
    return {r.char: r.code for r in results}


@dataclass(frozen=True)
class CompressionMetrics:
    """
    Size comparison between original and compressed data.

    Attributes:
        original_size: Size of the original data in bytes
        compressed_size: Size of the compressed data in bytes
        compression_ratio: Space saved, in percent
        original_bits: original_size * 8
        saved_bits: Bits saved by compressing
    """
    original_size: int
    compressed_size: float
    compression_ratio: float
    original_bits: int
    saved_bits: float


def compression_metrics(original_size: int,
                        compressed_size: float) -> CompressionMetrics:
    """
    Compare original and compressed sizes (both in bytes).

    Example:
        >>> compression_metrics(100, 25).compression_ratio
        75.0
    """
    if original_size <= 0:
        raise ValidationError("Original size must be positive")
    if compressed_size < 0:
        raise ValidationError("Compressed size must not be negative")
    ratio = (1 - compressed_size / original_size) * 100
    original_bits = original_size * 8
    return CompressionMetrics(
        original_size=original_size,
        compressed_size=compressed_size,
        compression_ratio=round(ratio, 2),
        original_bits=original_bits,
        saved_bits=original_bits - compressed_size * 8,
    )
