"""
Hamming(7,4) Parity Codec.

Four data bits are spread over a 7-bit codeword; positions 1, 2 and 4
(1-indexed) hold parity bits:

    Position:  1   2   3   4   5   6   7
    Content:   p1  p2  d1  p4  d2  d3  d4

Encoding uses this codec's fixed parity formulas:

    p1 = d1 ⊕ d3
    p2 = d1 ⊕ d2
    p4 = d2 ⊕ d3 ⊕ d4

Decoding recomputes three checks over the classic coverage sets

    c1 = b1 ⊕ b3 ⊕ b5 ⊕ b7
    c2 = b2 ⊕ b3 ⊕ b6 ⊕ b7
    c4 = b4 ⊕ b5 ⊕ b6 ⊕ b7

and reads the syndrome c1 + 2*c2 + 4*c4 as the 1-indexed position of the
faulty bit (0 means no error). At most one flipped bit can be corrected.

Note:
    The encoder formulas differ from textbook Hamming(7,4)
    (p1 = d1⊕d2⊕d4, p2 = d1⊕d3⊕d4). They agree whenever d2⊕d3⊕d4 = 0,
    which includes the classic example 1011; for other data words the
    decoder reports a non-zero syndrome even without a transmission error.

Example:
    >>> hamming_encode("1011").encoded
    '0110011'
    >>> hamming_decode("0110111").error_position
    5
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import logging

from ..common.bits import bits_to_str, parse_bits
from ..common.steps import (
    AlgorithmStep, ASSIGN, CHECK, COMPLETE, CORRECTED, ERROR_FOUND, INPUT,
    PARITY, RECEIVED, VALID,
)

logger = logging.getLogger(__name__)

DATA_BITS = 4
CODE_BITS = 7

# 1-indexed codeword positions of d1..d4
DATA_POSITIONS = (3, 5, 6, 7)

# Positions covered by each decoder check
CHECK_COVERAGE: Dict[int, Tuple[int, ...]] = {
    1: (1, 3, 5, 7),
    2: (2, 3, 6, 7),
    4: (4, 5, 6, 7),
}


@dataclass(frozen=True)
class HammingStep(AlgorithmStep):
    """
    One Hamming encode/decode step.

    Attributes:
        codeword: Codeword snapshot after the step ('?' marks parity bits
            not yet computed), empty if the step does not change it
        parity_bits: Parity / check value computed by this step, keyed by
            position
        position: Error position (error_found steps only)
    """
    codeword: str = ""
    parity_bits: Tuple[Tuple[int, int], ...] = ()
    position: int = 0


@dataclass
class HammingEncodeResult:
    """
    Result of encoding 4 data bits.

    Attributes:
        steps: input, assign, three parity steps, complete
        encoded: The 7-bit codeword
    """
    steps: Tuple[HammingStep, ...]
    encoded: str

    def summary(self) -> str:
        lines = [f"Hamming(7,4) encode -> {self.encoded}"]
        lines.extend(f"  {step}" for step in self.steps)
        return "\n".join(lines)


@dataclass
class HammingDecodeResult:
    """
    Result of decoding a 7-bit codeword.

    Attributes:
        steps: received, three checks, then valid or error_found, corrected
        corrected: The codeword after correction
        error_position: 1-indexed flipped position, 0 if none
        data: The 4 data bits read from positions 3, 5, 6, 7
    """
    steps: Tuple[HammingStep, ...]
    corrected: str
    error_position: int
    data: str

    @property
    def has_error(self) -> bool:
        return self.error_position != 0

    def summary(self) -> str:
        lines = [f"Hamming(7,4) decode -> {self.corrected} "
                 f"(error position {self.error_position}, data {self.data})"]
        lines.extend(f"  {step}" for step in self.steps)
        return "\n".join(lines)


def hamming_encode(bits: str) -> HammingEncodeResult:
    """
    Encode exactly 4 data bits into a 7-bit codeword.

    Raises:
        ValidationError: If `bits` is not exactly four '0'/'1' characters
    """
    d = parse_bits(bits, DATA_BITS)
    d1, d2, d3, d4 = d
    steps: List[HammingStep] = []

    steps.append(HammingStep(
        message=f"Input data bits: d1={d1}, d2={d2}, d3={d3}, d4={d4}",
        action=INPUT,
    ))

    code: List[Optional[int]] = [None, None, d1, None, d2, d3, d4]
    steps.append(HammingStep(
        message=("Assign data bits to positions (non-parity positions): "
                 "p1=?, p2=?, d1=3, p4=?, d2=5, d3=6, d4=7"),
        action=ASSIGN,
        codeword=_render(code),
    ))

    p1 = d1 ^ d3
    code[0] = p1
    steps.append(HammingStep(
        message=f"P1 (covers positions 1,3,5,7): p1 = d1 ⊕ d3 = {d1} ⊕ {d3} = {p1}",
        action=PARITY,
        codeword=_render(code),
        parity_bits=((1, p1),),
    ))

    p2 = d1 ^ d2
    code[1] = p2
    steps.append(HammingStep(
        message=f"P2 (covers positions 2,3,6,7): p2 = d1 ⊕ d2 = {d1} ⊕ {d2} = {p2}",
        action=PARITY,
        codeword=_render(code),
        parity_bits=((2, p2),),
    ))

    p4 = d2 ^ d3 ^ d4
    code[3] = p4
    encoded = _render(code)
    steps.append(HammingStep(
        message=(f"P4 (covers positions 4,5,6,7): p4 = d2 ⊕ d3 ⊕ d4 = "
                 f"{d2} ⊕ {d3} ⊕ {d4} = {p4}"),
        action=PARITY,
        codeword=encoded,
        parity_bits=((4, p4),),
    ))

    steps.append(HammingStep(
        message=f"Encoded result: {encoded} (7 bits with 3 parity bits)",
        action=COMPLETE,
        codeword=encoded,
    ))

    logger.debug("Hamming encode %s -> %s", bits, encoded)
    return HammingEncodeResult(steps=tuple(steps), encoded=encoded)


def hamming_decode(bits: str) -> HammingDecodeResult:
    """
    Check a 7-bit codeword, correct a single flipped bit and extract data.

    Raises:
        ValidationError: If `bits` is not exactly seven '0'/'1' characters
    """
    b = parse_bits(bits, CODE_BITS)
    steps: List[HammingStep] = [HammingStep(
        message=f"Received: {bits}. Checking parity bits to detect errors...",
        action=RECEIVED,
        codeword=bits,
    )]

    error_position = 0
    for check, positions in CHECK_COVERAGE.items():
        values = [b[p - 1] for p in positions]
        result = 0
        for v in values:
            result ^= v
        if result:
            error_position += check
        steps.append(HammingStep(
            message=(f"P{check} check (positions {','.join(map(str, positions))}): "
                     f"{' ⊕ '.join(map(str, values))} = {result} "
                     f"{'✓ OK' if result == 0 else '✗ ERROR'}"),
            action=CHECK,
            parity_bits=((check, result),),
        ))

    corrected = list(b)
    if error_position == 0:
        steps.append(HammingStep(
            message="No errors detected! Code is valid.",
            action=VALID,
            codeword=bits,
        ))
    else:
        steps.append(HammingStep(
            message=(f"Error detected at position {error_position}! "
                     f"Flipping bit at position {error_position}..."),
            action=ERROR_FOUND,
            position=error_position,
        ))
        corrected[error_position - 1] ^= 1

    corrected_str = bits_to_str(corrected)
    data = "".join(str(corrected[p - 1]) for p in DATA_POSITIONS)
    steps.append(HammingStep(
        message=(f"Corrected code: {corrected_str}. Extracted data bits "
                 f"from positions 3,5,6,7: {data}"),
        action=CORRECTED,
        codeword=corrected_str,
        position=error_position,
    ))

    logger.debug("Hamming decode %s -> %s (error position %d)",
                 bits, corrected_str, error_position)
    return HammingDecodeResult(
        steps=tuple(steps),
        corrected=corrected_str,
        error_position=error_position,
        data=data,
    )


def _render(code: List[Optional[int]]) -> str:
    return "".join("?" if bit is None else str(bit) for bit in code)
