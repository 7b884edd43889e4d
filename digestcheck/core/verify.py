"""
Single-line verification.

Turns one manifest line into exactly one outcome: parse, digest the named
target, compare. A read failure is final for that line; nothing is retried.
"""

from __future__ import annotations

from digestcheck.core.outcome import (
    BadFormat,
    MatchFailed,
    MatchSuccess,
    Outcome,
    ReadError,
)
from digestcheck.core.parser import ManifestEntry, read_manifest_entry
from digestcheck.core.stream import StreamDigester
from digestcheck.errors import DigestSourceError, MismatchError, ParseError
from digestcheck.io.sources import TargetOpener, open_target
from digestcheck.logger import get_logger

logger = get_logger(__name__)


class VerificationEngine:
    """Verifies manifest lines against current target content."""

    def __init__(
        self,
        digester: StreamDigester,
        opener: TargetOpener = open_target,
    ):
        """
        Initialize engine.

        Args:
            digester: Digester whose algorithm the manifest was written with.
            opener: Maps a target name to a binary stream context manager.
        """
        self.digester = digester
        self.opener = opener

    def verify_line(self, line: str | bytes) -> Outcome:
        """
        Verify one manifest line.

        Args:
            line: Line without its terminator.

        Returns:
            MatchSuccess, MatchFailed, BadFormat or ReadError.
        """
        try:
            entry = read_manifest_entry(line, self.digester.digest_size)
        except ParseError as e:
            logger.debug("Rejected line %r: %s", line, e)
            return BadFormat(error=e)

        return self.verify_entry(entry)

    def verify_entry(self, entry: ManifestEntry) -> Outcome:
        """Digest the entry's target and compare with the expected digest."""
        name = entry.target_name
        try:
            with self.opener(name) as stream:
                digest = self.digester.digest(stream)
        except DigestSourceError as e:
            logger.debug("Cannot read %r: %s", name, e)
            return ReadError(target_name=name, error=e)
        except OSError as e:
            logger.debug("Read failed for %r: %s", name, e)
            return ReadError(target_name=name, error=DigestSourceError(name, e))

        if digest.matches(entry.expected_digest):
            return MatchSuccess(target_name=name)

        error = MismatchError(name, entry.expected_digest.lower(), digest.hexdigest)
        logger.debug("Mismatch: %s", error)
        return MatchFailed(target_name=name, error=error)
