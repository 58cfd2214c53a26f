"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class FailureReason(StrEnum):
    """Classified cause of a failed copy."""

    RESOLUTION_FAILED = "resolution_failed"
    IO_FAILURE = "io_failure"


@dataclass(frozen=True)
class Copied:
    """Copy completed; ``byte_count`` bytes were written."""

    byte_count: int

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failed:
    """Copy did not complete.

    A failure after some bytes were written leaves the partial destination
    file on disk.
    """

    reason: FailureReason
    message: str = ""

    @property
    def ok(self) -> bool:
        return False


type CopyOutcome = Copied | Failed
