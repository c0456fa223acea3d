"""
Fano Coding (Prefix-Splitting Coder).

Fano's method builds a prefix-free code top-down:

    1. Sort symbols by probability, most probable first
    2. Split the group into two contiguous halves of (roughly) equal mass
    3. Append '0' to every code in the left half, '1' in the right half
    4. Recurse until every group holds a single symbol

The split point is the smallest index at which the running sum of the
left part reaches half of the group's total. The result is always a valid
prefix-free code, but unlike Huffman it is not guaranteed to be optimal.

Example:
    >>> result = fano_encode({"A": 0.4, "B": 0.3, "C": 0.2, "D": 0.1})
    >>> result.codes
    {'A': '00', 'B': '01', 'C': '10', 'D': '11'}
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple
import logging

from tabulate import tabulate

from ..common.codes import CodeResult
from ..common.steps import AlgorithmStep, ASSIGN, SPLIT
from ..common.symbols import (
    AlphabetLike, Symbol, sort_by_probability, total_probability, validate_alphabet,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FanoStep(AlgorithmStep):
    """
    One Fano step.

    Attributes:
        symbols: The group being split or assigned
        code: Code prefix accumulated for this group
        depth: Recursion depth (0 for the whole alphabet)
        split_index: Size of the left sub-group (split steps only)
    """
    symbols: Tuple[Symbol, ...]
    code: str
    depth: int
    split_index: int = 0


@dataclass
class FanoResult:
    """
    Complete result of a Fano run.

    Attributes:
        steps: Split / assign steps in recursion order
        codes: Symbol -> code
        results: Codes in sorted (descending probability) order
    """
    steps: Tuple[FanoStep, ...]
    codes: Dict[str, str]
    results: List[CodeResult]

    def summary(self) -> str:
        rows = [(r.char, f"{r.probability:.3f}", r.code) for r in self.results]
        return (
            f"Fano coding: {len(self.results)} symbols, {len(self.steps)} steps\n"
            + tabulate(rows, headers=["Symbol", "Probability", "Code"])
        )


def find_split(group: List[Symbol]) -> int:
    """
    Return the size of the left sub-group.

    The left part always keeps at least one symbol and the right part is
    never left empty.
    """
    half = total_probability(group) / 2
    running = 0.0
    for i, sym in enumerate(group):
        running += sym.probability
        if running >= half:
            return min(i + 1, len(group) - 1)
    return len(group) - 1


def fano_encode(alphabet: AlphabetLike) -> FanoResult:
    """
    Run Fano's recursive partition.

    Args:
        alphabet: At least two symbols with positive probabilities

    Returns:
        FanoResult with one "split" step per division (recorded before
        recursing) and one "assign" step per singleton

    Raises:
        ValidationError: On fewer than two symbols or non-positive
            probabilities
    """
    symbols = sort_by_probability(validate_alphabet(alphabet, min_size=2))
    steps: List[FanoStep] = []
    codes: Dict[str, str] = {}

    def divide(group: List[Symbol], prefix: str, depth: int) -> None:
        if not group:
            return
        if len(group) == 1:
            code = prefix or "0"
            codes[group[0].char] = code
            steps.append(FanoStep(
                message=f"Assigned code '{code}' to symbol '{group[0].char}'",
                action=ASSIGN,
                symbols=tuple(group),
                code=code,
                depth=depth,
            ))
            return

        split = find_split(group)
        left, right = group[:split], group[split:]
        steps.append(FanoStep(
            message=(
                f"Split into groups: {','.join(s.char for s in left)} "
                f"(prob: {total_probability(left):.3f}) and "
                f"{','.join(s.char for s in right)} "
                f"(prob: {total_probability(right):.3f})"
            ),
            action=SPLIT,
            symbols=tuple(group),
            code=prefix,
            depth=depth,
            split_index=split,
        ))

        divide(left, prefix + "0", depth + 1)
        divide(right, prefix + "1", depth + 1)

    divide(symbols, "", 0)

    results = [CodeResult(s.char, codes[s.char], s.probability) for s in symbols]
    logger.debug("Fano: %d symbols, %d steps", len(symbols), len(steps))

    return FanoResult(steps=tuple(steps), codes=codes, results=results)
