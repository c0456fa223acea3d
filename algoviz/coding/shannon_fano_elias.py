"""
Shannon-Fano-Elias Coding (Cumulative-Interval Coder).

Each symbol owns a slice of the unit interval whose width equals its
probability. The code for a symbol is taken from the midpoint of its slice:

    F   = cumulative probability of all earlier symbols
    Z   = F + p / 2                  (midpoint of the slice)
    L   = ceil(-log2(p))             (code length)
    code = first L bits of the binary expansion of Z

Symbols are processed in descending probability order (ties keep input
order), so the cumulative distribution is fixed by the sort.

Binary Expansion:
    The expansion is computed by repeated doubling: multiply by two, the
    integer part is the next bit, keep the fractional part. This avoids
    any dependence on how floats are formatted as strings.

Example:
    >>> result = shannon_fano_elias_encode({"A": 0.5, "B": 0.25, "C": 0.25})
    >>> result.codes
    {'A': '0', 'B': '10', 'C': '11'}
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple
import logging
import math

from tabulate import tabulate

from ..common.codes import CodeResult
from ..common.errors import ValidationError
from ..common.steps import AlgorithmStep, ENCODE
from ..common.symbols import (
    AlphabetLike, sort_by_probability, total_probability, validate_alphabet,
)

logger = logging.getLogger(__name__)

# Slack allowed when probabilities are accumulated from floats
SUM_TOLERANCE = 1e-9


@dataclass(frozen=True)
class SFEStep(AlgorithmStep):
    """
    One Shannon-Fano-Elias step (one per symbol).

    Attributes:
        char: Symbol being encoded
        probability: Its probability
        interval_start: Cumulative probability before this symbol (F)
        interval_end: Cumulative probability after this symbol
        midpoint: F + p/2 (Z)
        code_length: ceil(-log2(p))
        code: The assigned code
        codes: Snapshot of all codes assigned so far
    """
    char: str
    probability: float
    interval_start: float
    interval_end: float
    midpoint: float
    code_length: int
    code: str
    codes: Tuple[Tuple[str, str], ...]


@dataclass
class SFEResult:
    """
    Complete result of a Shannon-Fano-Elias run.

    Attributes:
        steps: One "encode" step per symbol, in processing order
        results: Codes in processing order
    """
    steps: Tuple[SFEStep, ...]
    results: List[CodeResult]

    @property
    def codes(self) -> Dict[str, str]:
        return {r.char: r.code for r in self.results}

    def summary(self) -> str:
        rows = [
            (s.char, f"{s.probability:.3f}",
             f"[{s.interval_start:.3f}, {s.interval_end:.3f})",
             f"{s.midpoint:.4f}", s.code)
            for s in self.steps
        ]
        return (
            f"Shannon-Fano-Elias coding: {len(self.results)} symbols\n"
            + tabulate(rows, headers=["Symbol", "P", "Interval", "Midpoint", "Code"])
        )


def code_length(probability: float) -> int:
    """Return ceil(-log2(p)); zero when p == 1."""
    if probability <= 0:
        raise ValidationError(f"Probability must be positive, got {probability}")
    return max(0, math.ceil(-math.log2(probability)))


def binary_expansion(value: float, num_bits: int) -> str:
    """
    First `num_bits` bits after the binary point of a value in [0, 1).

    Example:
        >>> binary_expansion(0.625, 3)
        '101'
    """
    # Keep the value strictly below 1 so every doubling yields 0 or 1
    fraction = min(max(value, 0.0), 1.0 - 2.0 ** -53)
    bits: List[str] = []
    for _ in range(num_bits):
        fraction *= 2
        bit = 1 if fraction >= 1 else 0
        fraction -= bit
        bits.append(str(bit))
    return "".join(bits)


def shannon_fano_elias_encode(alphabet: AlphabetLike) -> SFEResult:
    """
    Assign Shannon-Fano-Elias codes.

    Args:
        alphabet: At least two symbols, each probability in (0, 1], the
            probabilities summing to at most 1

    Returns:
        SFEResult with one "encode" step per symbol

    Raises:
        ValidationError: If a probability is outside (0, 1] or the total
            exceeds 1
    """
    symbols = validate_alphabet(alphabet, min_size=2, max_probability=1.0)
    total = total_probability(symbols)
    if total > 1 + SUM_TOLERANCE:
        raise ValidationError(f"Probabilities must sum to at most 1, got {total:.6f}")

    ordered = sort_by_probability(symbols)
    steps: List[SFEStep] = []
    results: List[CodeResult] = []
    cumulative = 0.0

    for sym in ordered:
        start = cumulative
        midpoint = start + sym.probability / 2
        length = code_length(sym.probability)
        code = binary_expansion(midpoint, length)
        cumulative += sym.probability

        results.append(CodeResult(sym.char, code, sym.probability))
        steps.append(SFEStep(
            message=(f"{sym.char}: P={sym.probability:.2f}, "
                     f"Range=[{start:.2f}, {cumulative:.2f}], "
                     f"Mid={midpoint:.4f}, Code={code}"),
            action=ENCODE,
            char=sym.char,
            probability=sym.probability,
            interval_start=start,
            interval_end=cumulative,
            midpoint=midpoint,
            code_length=length,
            code=code,
            codes=tuple((r.char, r.code) for r in results),
        ))

    logger.debug("Shannon-Fano-Elias: %d symbols, cumulative %.6f",
                 len(ordered), cumulative)

    return SFEResult(steps=tuple(steps), results=results)


def decode_symbol(result: SFEResult, bits: str) -> str:
    """
    Find the symbol whose code is a prefix of `bits`.

    Codes are tried in processing order, i.e. by increasing interval.

    With L = ceil(-log2 p) the table is not always prefix-free: for
    {A: .3, B: .3, C: .3, D: .1}, C is "11" and D is "1111". Decoding is
    unambiguous only when `is_prefix_free(result.codes)` holds; otherwise
    the first matching code in processing order wins.
    """
    for r in result.results:
        if bits.startswith(r.code):
            return r.char
    raise ValidationError(f"No code is a prefix of '{bits}'")
