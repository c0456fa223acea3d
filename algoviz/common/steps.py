"""
Algorithm step records.

Every engine returns an ordered tuple of steps. A step is an immutable
snapshot of one discrete transition: what happened (`message`), what kind
of action it was (`action`) and whatever partial structure the engine
wants to show at that point. Renderers index into the tuple; nothing is
recomputed during playback.
"""

from __future__ import annotations
from dataclasses import dataclass


# Action tags used across engines
INITIALIZE = "initialize"
COMBINE = "combine"
SPLIT = "split"
ASSIGN = "assign"
ENCODE = "encode"
INPUT = "input"
PARITY = "parity"
RECEIVED = "received"
CHECK = "check"
VALID = "valid"
ERROR_FOUND = "error_found"
CORRECTED = "corrected"
VISIT = "visit"
BACKTRACK = "backtrack"
CYCLE = "cycle"
COMPLETE = "complete"


@dataclass(frozen=True)
class AlgorithmStep:
    """
    Base record for one step of an algorithm run.

    Attributes:
        message: Human-readable description of the step
        action: Tag classifying the step (see the module constants)
    """
    message: str
    action: str

    def __str__(self) -> str:
        return f"[{self.action}] {self.message}"
