"""
Checksum line parsing and formatting.

Line grammar, with width the digest size in bytes:

    <2*width hex digits><SP><SP or '*'><target name>

The target name is the verbatim remainder of the line. Nothing is trimmed,
so a trailing space belongs to the name and a leading space before the
digest rejects the line.
"""

from __future__ import annotations

from dataclasses import dataclass

from digestcheck.core.primitive import Digest
from digestcheck.errors import ParseError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
TEXT_SEPARATOR = " "
BINARY_SEPARATOR = "*"
MD5_DIGEST_SIZE = 16


@dataclass(frozen=True)
class ManifestEntry:
    """One parsed manifest line."""

    expected_digest: str
    target_name: str


def read_manifest_entry(
    line: str | bytes,
    digest_size: int = MD5_DIGEST_SIZE,
) -> ManifestEntry:
    """
    Parse a manifest line, raising on any grammar violation.

    Args:
        line: Line without its terminator. Bytes are decoded as strict UTF-8.
        digest_size: Digest width in bytes.

    Returns:
        Parsed entry; expected_digest keeps the case found in the line.

    Raises:
        ParseError: Naming the grammar step that failed.
    """
    if isinstance(line, bytes):
        try:
            line = line.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"line is not valid UTF-8: {e.reason}") from e

    width = 2 * digest_size
    token = line[:width]
    if len(token) != width or not all(c in HEX_DIGITS for c in token):
        raise ParseError(f"digest must be {width} hexadecimal characters")

    if line[width : width + 1] != " ":
        raise ParseError("expected a single space after the digest")

    separator = line[width + 1 : width + 2]
    if separator not in (TEXT_SEPARATOR, BINARY_SEPARATOR):
        raise ParseError("expected ' ' or '*' before the target name")

    return ManifestEntry(expected_digest=token, target_name=line[width + 2 :])


def parse_manifest_line(
    line: str | bytes,
    digest_size: int = MD5_DIGEST_SIZE,
) -> ManifestEntry | None:
    """
    Parse a manifest line.

    Args:
        line: Line without its terminator.
        digest_size: Digest width in bytes.

    Returns:
        Parsed entry, or None if the line is malformed.

    Examples:
        >>> parse_manifest_line("d41d8cd98f00b204e9800998ecf8427e *empty.txt")
        ManifestEntry(expected_digest='d41d8cd98f00b204e9800998ecf8427e', target_name='empty.txt')
        >>> parse_manifest_line(" d41d8cd98f00b204e9800998ecf8427e  empty.txt") is None
        True
    """
    try:
        return read_manifest_entry(line, digest_size)
    except ParseError:
        return None


def format_digest_line(digest: Digest, target_name: str) -> str:
    """
    Format a produce-mode line (text-mode separator).

    parse_manifest_line() is the exact inverse of this function.
    """
    return f"{digest.hexdigest}{TEXT_SEPARATOR}{TEXT_SEPARATOR}{target_name}"
