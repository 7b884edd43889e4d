"""
Per-line verification outcomes.

Every manifest line maps to exactly one of four outcome variants. Callers
dispatch on the concrete type and must handle all four.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from digestcheck.errors import DigestSourceError, MismatchError, ParseError


class OutcomeKind(str, Enum):
    """Outcome tag, used for reporting."""

    MATCH_SUCCESS = "ok"
    MATCH_FAILED = "failed"
    BAD_FORMAT = "bad_format"
    READ_ERROR = "read_error"


@dataclass(frozen=True)
class MatchSuccess:
    """Computed digest equals the expected one."""

    target_name: str
    kind = OutcomeKind.MATCH_SUCCESS


@dataclass(frozen=True)
class MatchFailed:
    """Computed digest differs from the expected one."""

    target_name: str
    error: MismatchError
    kind = OutcomeKind.MATCH_FAILED


@dataclass(frozen=True)
class BadFormat:
    """Line rejected by the parser; the target was never read."""

    error: ParseError
    kind = OutcomeKind.BAD_FORMAT

    @property
    def target_name(self) -> None:
        return None


@dataclass(frozen=True)
class ReadError:
    """Target could not be opened or read."""

    target_name: str
    error: DigestSourceError
    kind = OutcomeKind.READ_ERROR


Outcome = Union[MatchSuccess, MatchFailed, BadFormat, ReadError]


def describe_outcome(outcome: Outcome) -> str | None:
    """Short detail text for reports, or None for a clean match."""
    if isinstance(outcome, MatchSuccess):
        return None
    if isinstance(outcome, (MatchFailed, BadFormat, ReadError)):
        return str(outcome.error)
    raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")
