"""
Error taxonomy for manifest verification.

Parse, source and mismatch errors are carried as values inside outcomes;
only RunAborted is raised past the aggregation boundary.
"""

from __future__ import annotations


class DigestCheckError(Exception):
    """Base class for all digestcheck errors."""

    pass


class ParseError(DigestCheckError):
    """A manifest line does not follow the checksum line grammar."""

    pass


class DigestSourceError(DigestCheckError):
    """A target or manifest source could not be opened or read."""

    def __init__(self, name: str, original_error: OSError | None = None):
        reason = original_error.strerror if original_error is not None else None
        message = f"{name}: {reason}" if reason else name
        super().__init__(message)
        self.name = name
        self.original_error = original_error

    @property
    def reason(self) -> str:
        """Short human-readable reason, without the target name."""
        if self.original_error is None:
            return "unreadable"
        return self.original_error.strerror or str(self.original_error)


class MismatchError(DigestCheckError):
    """Computed digest differs from the expected one."""

    def __init__(self, name: str, expected: str, actual: str):
        super().__init__(f"{name}: expected {expected}, computed {actual}")
        self.name = name
        self.expected = expected
        self.actual = actual


class RunAborted(DigestCheckError):
    """The run stopped early; diagnostics have already been written."""

    def __init__(self, message: str, exit_status: int = 1):
        super().__init__(message)
        self.exit_status = exit_status
