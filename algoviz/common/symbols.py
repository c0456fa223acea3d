"""
Symbols and Alphabets.

An alphabet is an ordered collection of symbols, each carrying a weight.
The weight is usually a probability in (0, 1], but Huffman coding also
accepts raw frequencies and normalizes them itself.

Input Shapes:
    Every engine accepts any of the following and converts it with
    `as_alphabet`:
        - a sequence of Symbol objects
        - a sequence of (char, weight) pairs
        - a mapping {char: weight} (insertion order is kept)

Ordering:
    Order matters. Fano and Shannon-Fano-Elias sort descending by
    probability and break ties by input order; Huffman breaks weight ties
    by insertion order. Python's sort is stable, so `sorted` with a
    descending key preserves input order among equal probabilities.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Tuple, Union
import math

from .errors import ValidationError


@dataclass(frozen=True)
class Symbol:
    """
    One entry of an alphabet.

    Attributes:
        char: The symbol itself, usually a single grapheme such as "A".
            Longer strings are accepted and treated as one opaque token.
            For such alphabets, give `encode_text` a sequence of tokens.
        probability: Probability or raw frequency weight

    Example:
        >>> Symbol("A", 0.5)
        Symbol(char='A', probability=0.5)
    """
    char: str
    probability: float


AlphabetLike = Union[
    Iterable[Symbol],
    Iterable[Tuple[str, float]],
    Mapping[str, float],
]


def as_alphabet(data: AlphabetLike) -> List[Symbol]:
    """Convert any supported alphabet shape into a list of Symbols."""
    if data is None:
        raise ValidationError("Alphabet must not be None")
    if isinstance(data, (str, bytes)):
        raise ValidationError("Alphabet must be a collection of symbols, not a string")

    if isinstance(data, Mapping):
        items = list(data.items())
    else:
        try:
            items = list(data)
        except TypeError:
            raise ValidationError(
                f"Alphabet must be a sequence or mapping, got {type(data).__name__}"
            ) from None

    symbols: List[Symbol] = []
    for item in items:
        if isinstance(item, Symbol):
            char, weight = item.char, item.probability
        else:
            try:
                char, weight = item
            except (TypeError, ValueError):
                raise ValidationError(
                    f"Cannot interpret {item!r} as a (char, weight) pair"
                ) from None
        try:
            symbols.append(Symbol(str(char), float(weight)))
        except (TypeError, ValueError):
            raise ValidationError(
                f"Weight for symbol {char!r} is not a number: {weight!r}"
            ) from None
    return symbols


def validate_alphabet(data: AlphabetLike, *,
                      min_size: int = 2,
                      allow_zero: bool = False,
                      max_probability: Optional[float] = None) -> List[Symbol]:
    """
    Validate an alphabet and return it as a list of Symbols.

    Args:
        data: Alphabet in any shape accepted by `as_alphabet`
        min_size: Minimum number of symbols required
        allow_zero: Accept zero weights (Huffman floors them later)
        max_probability: Upper bound for a single weight, if any

    Raises:
        ValidationError: On too few symbols, empty or duplicate symbols,
            non-finite weights or weights outside the accepted range
    """
    symbols = as_alphabet(data)

    if len(symbols) < min_size:
        raise ValidationError(
            f"Alphabet needs at least {min_size} symbols, got {len(symbols)}"
        )

    seen = set()
    for sym in symbols:
        if not sym.char:
            raise ValidationError("Symbol must be a non-empty string")
        if sym.char in seen:
            raise ValidationError(f"Duplicate symbol '{sym.char}'")
        seen.add(sym.char)

        if not math.isfinite(sym.probability):
            raise ValidationError(
                f"Weight for '{sym.char}' must be finite, got {sym.probability}"
            )
        if sym.probability < 0 or (sym.probability == 0 and not allow_zero):
            raise ValidationError(
                f"Probability for '{sym.char}' must be positive, got {sym.probability}"
            )
        if max_probability is not None and sym.probability > max_probability:
            raise ValidationError(
                f"Probability for '{sym.char}' must be at most {max_probability}, "
                f"got {sym.probability}"
            )

    return symbols


def sort_by_probability(symbols: Iterable[Symbol]) -> List[Symbol]:
    """Sort descending by probability; ties keep their input order."""
    return sorted(symbols, key=lambda s: -s.probability)


def normalize(symbols: Iterable[Symbol], floor: float = 0.0) -> List[Symbol]:
    """
    Scale weights so they sum to 1.

    Each weight is first raised to at least `floor`, then divided by the
    total of the floored weights.
    """
    floored = [Symbol(s.char, max(floor, s.probability)) for s in symbols]
    total = sum(s.probability for s in floored)
    if total <= 0:
        raise ValidationError("Total weight must be positive")
    return [Symbol(s.char, s.probability / total) for s in floored]


def total_probability(symbols: Iterable[Symbol]) -> float:
    return sum(s.probability for s in symbols)
