"""Shared fixtures for digestcheck tests."""

import io
from contextlib import contextmanager

import pytest

from digestcheck.core.primitive import Digest, DigestPrimitive
from digestcheck.errors import DigestSourceError


class SumPrimitive(DigestPrimitive):
    """Deterministic fake: 4-byte big-endian sum of all consumed bytes."""

    name = "sum32"
    digest_size = 4

    def __init__(self):
        self.total = 0
        self.chunks: list[int] = []

    def consume(self, data: bytes) -> None:
        self.chunks.append(len(data))
        self.total = (self.total + sum(data)) % 2**32

    def finalize(self) -> Digest:
        return Digest(self.total.to_bytes(4, "big"))


class FailingStream(io.RawIOBase):
    """Stream whose reads always fail."""

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError(5, "Input/output error")


def make_memory_opener(files: dict[str, bytes], failing: set[str] | None = None):
    """Build an opener over in-memory files; unknown names raise DigestSourceError."""
    failing = failing or set()
    opened: list[str] = []

    @contextmanager
    def opener(name: str):
        opened.append(name)
        if name in failing:
            yield FailingStream()
            return
        if name not in files:
            raise DigestSourceError(name, FileNotFoundError(2, "No such file or directory"))
        yield io.BytesIO(files[name])

    opener.opened = opened
    return opener


@pytest.fixture
def memory_opener():
    """Factory fixture for in-memory openers."""
    return make_memory_opener


@pytest.fixture
def sum_primitive():
    """The fake primitive class, usable as a primitive factory."""
    return SumPrimitive
