"""
Byte-stream sources for targets and manifests.

A name maps to a binary stream; "-" means standard input, which is
borrowed and never closed.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import BinaryIO, Callable, ContextManager, Iterator

from digestcheck.errors import DigestSourceError

STDIN_NAME = "-"

TargetOpener = Callable[[str], ContextManager[BinaryIO]]


@contextmanager
def open_target(name: str) -> Iterator[BinaryIO]:
    """
    Open a named target for binary reading.

    Args:
        name: File path, or "-" for standard input.

    Yields:
        Readable binary stream.

    Raises:
        DigestSourceError: If the target cannot be opened.
    """
    if name == STDIN_NAME:
        yield sys.stdin.buffer
        return

    try:
        handle = open(name, "rb")
    except OSError as e:
        raise DigestSourceError(name, e) from e

    with handle:
        yield handle


def iter_manifest_lines(stream: BinaryIO) -> Iterator[bytes]:
    """
    Iterate over manifest lines with their terminators removed.

    Both "\\n" and "\\r\\n" terminate a line. A final line without a
    terminator is still yielded; nothing else is stripped.

    Args:
        stream: Open binary manifest stream.

    Yields:
        Raw line bytes.
    """
    for raw in stream:
        if raw.endswith(b"\n"):
            raw = raw[:-1]
            if raw.endswith(b"\r"):
                raw = raw[:-1]
        yield raw
