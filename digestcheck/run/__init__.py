"""Run drivers: check and produce modes, aggregation, console output."""

from digestcheck.run.aggregator import ResultAggregator, RunResult, mismatch_summary
from digestcheck.run.console import ClickConsole, Console, RecordingConsole
from digestcheck.run.check import run_check
from digestcheck.run.produce import produce_digests

__all__ = [
    "ResultAggregator",
    "RunResult",
    "mismatch_summary",
    "ClickConsole",
    "Console",
    "RecordingConsole",
    "run_check",
    "produce_digests",
]
