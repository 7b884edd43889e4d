"""
JSON run reports.

Serialized with sorted keys so that identical runs produce byte-identical
reports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from digestcheck.run.aggregator import RunResult

REPORT_OPTIONS = orjson.OPT_SORT_KEYS | orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE


def build_report(result: RunResult, algorithm: str) -> dict[str, Any]:
    """
    Build the report document for a check run.

    Args:
        result: Accumulated run result.
        algorithm: Digest algorithm used.

    Returns:
        JSON-serializable dictionary.
    """
    return {
        "algorithm": algorithm,
        "exit_status": result.exit_status,
        "aborted": result.aborted,
        "failed_targets": list(result.failed_targets),
        "counts": result.counts(),
        "outcomes": [record.to_dict() for record in result.records],
    }


def write_report(path: Path | str, result: RunResult, algorithm: str) -> Path:
    """
    Write a run report, creating parent directories.

    Returns:
        Path written.
    """
    report_path = Path(path)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_bytes(orjson.dumps(build_report(result, algorithm), option=REPORT_OPTIONS))
    return report_path


def read_report(path: Path | str) -> dict[str, Any]:
    """Load a report written by write_report()."""
    return orjson.loads(Path(path).read_bytes())
