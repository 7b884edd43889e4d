"""
Check mode: verify every line of every manifest source, in order.
"""

from __future__ import annotations

from typing import Iterable

from digestcheck.core.verify import VerificationEngine
from digestcheck.errors import DigestSourceError
from digestcheck.io.sources import TargetOpener, iter_manifest_lines, open_target
from digestcheck.logger import get_logger
from digestcheck.run.aggregator import ResultAggregator

logger = get_logger(__name__)


def run_check(
    sources: Iterable[str],
    engine: VerificationEngine,
    aggregator: ResultAggregator,
    opener: TargetOpener = open_target,
) -> int:
    """
    Verify manifest sources in the order given.

    A source that cannot be opened, or fails while being read, is handed to
    the aggregator as a read error on the source itself; lines already
    processed from it keep their outcomes.

    Args:
        sources: Manifest names ("-" for standard input).
        engine: Verification engine for individual lines.
        aggregator: Aggregator owning the run state.
        opener: Opens manifest sources.

    Returns:
        Exit status decided by the aggregator.

    Raises:
        RunAborted: Propagated from the aggregator on fatal conditions.
    """
    for source in sources:
        logger.debug("Checking manifest %r", source)
        try:
            with opener(source) as stream:
                for line_number, line in enumerate(iter_manifest_lines(stream), 1):
                    outcome = engine.verify_line(line)
                    aggregator.record(outcome, source=source, line_number=line_number)
        except DigestSourceError as e:
            aggregator.record_source_error(source, e)
        except OSError as e:
            aggregator.record_source_error(source, DigestSourceError(source, e))

    return aggregator.finish()
