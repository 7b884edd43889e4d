"""
Run-level aggregation of verification outcomes.

Applies the reporting flags to each outcome, tracks failed targets across
all manifest sources of a run, and decides the exit status. Fatal
conditions write their diagnostic and raise RunAborted at the line where
they are detected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from digestcheck.core.config import RunConfiguration
from digestcheck.core.outcome import (
    BadFormat,
    MatchFailed,
    MatchSuccess,
    Outcome,
    OutcomeKind,
    ReadError,
    describe_outcome,
)
from digestcheck.errors import DigestSourceError, RunAborted
from digestcheck.logger import get_logger
from digestcheck.run.console import Console

logger = get_logger(__name__)

PROGRAM_NAME = "digestcheck"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


@dataclass(frozen=True)
class OutcomeRecord:
    """Where an outcome came from, for the run report."""

    source: str
    line: int
    kind: OutcomeKind
    target: str | None
    detail: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "source": self.source,
            "line": self.line,
            "kind": self.kind.value,
            "target": self.target,
            "detail": self.detail,
        }


@dataclass
class RunResult:
    """Mutable accumulator for one run. Only grows."""

    failed_targets: list[str] = field(default_factory=list)
    ok_count: int = 0
    bad_format_count: int = 0
    skipped_count: int = 0
    records: list[OutcomeRecord] = field(default_factory=list)
    aborted: bool = False
    exit_status: int | None = None

    @property
    def failed_count(self) -> int:
        return len(self.failed_targets)

    def counts(self) -> dict[str, int]:
        """Outcome counts by kind."""
        return {
            OutcomeKind.MATCH_SUCCESS.value: self.ok_count,
            OutcomeKind.MATCH_FAILED.value: self.failed_count,
            OutcomeKind.BAD_FORMAT.value: self.bad_format_count,
            OutcomeKind.READ_ERROR.value: self.skipped_count,
        }


def mismatch_summary(count: int) -> str:
    """End-of-run summary line for a number of failed targets."""
    suffix = "s" if count > 1 else ""
    return f"{PROGRAM_NAME}: WARNING: {count} computed checksum{suffix} did NOT match"


class ResultAggregator:
    """
    Consumes the ordered outcome stream of a run.

    Output gating:
    - status suppresses per-file OK/FAILED lines
    - quiet suppresses OK lines, FAILED lines, warnings and the summary
    - abort diagnostics are always written
    """

    def __init__(self, config: RunConfiguration, console: Console):
        self.config = config
        self.console = console
        self.result = RunResult()

    def record(self, outcome: Outcome, source: str = "-", line_number: int = 0) -> None:
        """
        Apply one outcome.

        Args:
            outcome: Outcome of one manifest line.
            source: Manifest source name the line came from.
            line_number: 1-based line number within the source.

        Raises:
            RunAborted: On a strict-mode format violation or a read error
                while ignore_missing is off.
        """
        cfg = self.config
        detail = describe_outcome(outcome)
        self.result.records.append(
            OutcomeRecord(
                source=source,
                line=line_number,
                kind=outcome.kind,
                target=outcome.target_name,
                detail=detail,
            )
        )

        if isinstance(outcome, MatchSuccess):
            self.result.ok_count += 1
            if not (cfg.status or cfg.quiet):
                self.console.out(f"{outcome.target_name}: OK")

        elif isinstance(outcome, MatchFailed):
            self.result.failed_targets.append(outcome.target_name)
            if not (cfg.status or cfg.quiet):
                self.console.err(f"{outcome.target_name}: FAILED")

        elif isinstance(outcome, BadFormat):
            self.result.bad_format_count += 1
            location = f"{source}: {line_number}"
            if cfg.strict:
                self._abort(f"ERROR: {location}: line badly formatted")
            elif cfg.warn and not cfg.quiet:
                self.console.err(f"WARNING: {location}: line badly formatted")

        elif isinstance(outcome, ReadError):
            if not cfg.ignore_missing:
                self._abort(f"FAILED: could not read {outcome.target_name}")
            self.result.skipped_count += 1
            logger.info("Skipping unreadable target %r", outcome.target_name)

        else:
            raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")

    def record_source_error(self, source: str, error: DigestSourceError) -> None:
        """
        Handle a manifest source that could not be opened or read.

        Treated like a read error on the source itself.

        Raises:
            RunAborted: Unless ignore_missing is on.
        """
        self.record(ReadError(target_name=source, error=error), source=source)

    def finish(self) -> int:
        """
        Close the run and decide its exit status.

        Returns:
            0 when no target failed, 1 otherwise.
        """
        failed = self.result.failed_count
        if failed:
            if not self.config.quiet:
                self.console.err(mismatch_summary(failed))
            status = EXIT_FAILURE
        else:
            status = EXIT_SUCCESS

        self.result.exit_status = status
        return status

    def _abort(self, message: str) -> None:
        self.console.err(message)
        self.result.aborted = True
        self.result.exit_status = EXIT_FAILURE
        raise RunAborted(message, exit_status=EXIT_FAILURE)
