"""
Lempel-Ziv Compression (LZ77-style Dictionary Matcher).

The matcher walks the text with a cursor. At every position it looks for
the longest prefix of the upcoming text (the lookahead) inside the text
already seen (the window), and emits a token:

    (offset, length, next_char)

    offset:    how far back the match starts
    length:    how many characters the match covers
    next_char: the literal character following the match

The cursor then advances by length + 1. Because a literal always follows,
the match length is capped so that at least one character remains.

Match Selection:
    The longest match wins. Among matches of equal length the most recent
    one (the one closest to the cursor, smallest offset) is chosen. The
    match must lie entirely inside the window, so replay never reads
    characters it has not produced yet.

Dictionary:
    Every emitted sequence (match + next_char) is appended to an
    append-only dictionary unless it is already there. Entries are
    referenced by index and never removed during a run.

Example:
    >>> result = lz_compress("ABABCABABC")
    >>> [(t.offset, t.length, t.next_char) for t in result.steps]
    [(0, 0, 'A'), (0, 0, 'B'), (2, 2, 'C'), (5, 4, 'C')]
    >>> lz_decompress(result.steps)
    'ABABCABABC'
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple
import logging

from tabulate import tabulate

from ..common.errors import ValidationError
from ..common.steps import AlgorithmStep, ENCODE

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 4096
DEFAULT_LOOKAHEAD_SIZE = 18


@dataclass
class LZConfig:
    """
    Matcher configuration.

    Attributes:
        window_size: How many already-seen characters are searched (W)
        lookahead_size: Maximum match length (K)
    """
    window_size: int = DEFAULT_WINDOW_SIZE
    lookahead_size: int = DEFAULT_LOOKAHEAD_SIZE

    def __post_init__(self):
        """Validate configuration."""
        if self.window_size < 1:
            raise ValidationError("window_size must be at least 1")
        if self.lookahead_size < 1:
            raise ValidationError("lookahead_size must be at least 1")


@dataclass(frozen=True)
class LZStep(AlgorithmStep):
    """
    One emitted token.

    Attributes:
        position: Cursor position where the token starts
        offset: Distance back from the cursor to the match start
        length: Match length (0 for a bare literal)
        next_char: Literal character following the match
        dictionary_index: Index of match + next_char in the dictionary
    """
    position: int
    offset: int
    length: int
    next_char: str
    dictionary_index: int

    @property
    def token(self) -> Tuple[int, int, str]:
        return (self.offset, self.length, self.next_char)


@dataclass
class LZResult:
    """
    Complete result of an LZ run.

    Attributes:
        steps: One step per token, in text order
        dictionary: Every distinct sequence emitted, in discovery order
        config: Configuration the run used
    """
    steps: Tuple[LZStep, ...]
    dictionary: List[str]
    config: LZConfig

    @property
    def tokens(self) -> List[Tuple[int, int, str]]:
        return [step.token for step in self.steps]

    def summary(self) -> str:
        rows = [(s.position, s.offset, s.length, s.next_char, s.dictionary_index)
                for s in self.steps]
        return (
            f"LZ compression: {len(self.steps)} tokens, "
            f"{len(self.dictionary)} dictionary entries\n"
            + tabulate(rows, headers=["Pos", "Offset", "Length", "Next", "Dict"])
        )


def find_longest_match(text: str, position: int,
                       config: LZConfig) -> Tuple[int, int]:
    """
    Find (offset, length) of the best match for the lookahead at `position`.

    Returns (0, 0) when nothing in the window matches.
    """
    window_start = max(0, position - config.window_size)
    # Leave room for the literal that follows every match
    max_length = min(config.lookahead_size, len(text) - position - 1)

    best_offset, best_length = 0, 0
    if max_length <= 0:
        return best_offset, best_length

    # Scan from the most recent start backwards; only a strictly longer
    # match replaces the current best
    for start in range(position - 1, window_start - 1, -1):
        limit = min(max_length, position - start)
        length = 0
        while length < limit and text[start + length] == text[position + length]:
            length += 1
        if length > best_length:
            best_offset, best_length = position - start, length
            if best_length == max_length:
                break

    return best_offset, best_length


def lz_compress(text: str, window_size: Optional[int] = None,
                lookahead_size: Optional[int] = None) -> LZResult:
    """
    Compress text into (offset, length, next_char) tokens.

    Args:
        text: Non-empty input text
        window_size: History horizon (default 4096)
        lookahead_size: Maximum match length (default 18)

    Returns:
        LZResult with one step per token and the dictionary

    Raises:
        ValidationError: On empty text or invalid sizes
    """
    if not isinstance(text, str):
        raise ValidationError(f"Text must be a string, got {type(text).__name__}")
    if not text:
        raise ValidationError("Text must not be empty")

    config = LZConfig(
        window_size=DEFAULT_WINDOW_SIZE if window_size is None else window_size,
        lookahead_size=DEFAULT_LOOKAHEAD_SIZE if lookahead_size is None else lookahead_size,
    )

    steps: List[LZStep] = []
    dictionary: List[str] = []
    position = 0

    while position < len(text):
        offset, length = find_longest_match(text, position, config)
        next_char = text[position + length]
        sequence = text[position:position + length + 1]

        if sequence in dictionary:
            dictionary_index = dictionary.index(sequence)
        else:
            dictionary_index = len(dictionary)
            dictionary.append(sequence)

        steps.append(LZStep(
            message=(f"Match at offset {offset}, length {length}, "
                     f"next char: '{next_char}'"),
            action=ENCODE,
            position=position,
            offset=offset,
            length=length,
            next_char=next_char,
            dictionary_index=dictionary_index,
        ))
        position += length + 1

    logger.debug("LZ: %d chars -> %d tokens, %d dictionary entries",
                 len(text), len(steps), len(dictionary))

    return LZResult(steps=tuple(steps), dictionary=dictionary, config=config)


def lz_decompress(tokens: Iterable) -> str:
    """
    Rebuild text from a token stream.

    Accepts LZStep objects or plain (offset, length, next_char) tuples.
    For each token the `length` characters starting `offset` back are
    copied, then `next_char` is appended.
    """
    output: List[str] = []
    for token in tokens:
        if isinstance(token, LZStep):
            offset, length, next_char = token.token
        else:
            offset, length, next_char = token

        if length:
            start = len(output) - offset
            if start < 0 or offset < length:
                raise ValidationError(
                    f"Token ({offset}, {length}, {next_char!r}) reaches outside the output"
                )
            output.extend(output[start:start + length])
        output.append(next_char)
    return "".join(output)
