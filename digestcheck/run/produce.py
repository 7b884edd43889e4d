"""
Produce mode: print one checksum line per target.

Unlike check mode this is fail-fast: the first unreadable target stops the
run.
"""

from __future__ import annotations

from typing import Iterable, NoReturn

from digestcheck.core.parser import format_digest_line
from digestcheck.core.stream import StreamDigester
from digestcheck.errors import DigestSourceError, RunAborted
from digestcheck.io.sources import TargetOpener, open_target
from digestcheck.run.aggregator import EXIT_FAILURE, EXIT_SUCCESS
from digestcheck.run.console import Console


def produce_digests(
    targets: Iterable[str],
    digester: StreamDigester,
    console: Console,
    opener: TargetOpener = open_target,
    quiet: bool = False,
) -> int:
    """
    Digest each target and print "<hex>  <name>".

    Args:
        targets: Target names ("-" for standard input).
        digester: Digester to use.
        console: Output sink.
        opener: Opens targets.
        quiet: Suppress the read failure diagnostic.

    Returns:
        0 once every target has been printed.

    Raises:
        RunAborted: On the first target that cannot be read.
    """
    for name in targets:
        try:
            with opener(name) as stream:
                digest = digester.digest(stream)
        except DigestSourceError as e:
            _fail(console, name, e.reason, quiet)
        except OSError as e:
            _fail(console, name, e.strerror or str(e), quiet)

        console.out(format_digest_line(digest, name))

    return EXIT_SUCCESS


def _fail(console: Console, name: str, reason: str, quiet: bool) -> NoReturn:
    message = f'Error when reading "{name}": {reason}'
    if not quiet:
        console.err(message)
    raise RunAborted(message, exit_status=EXIT_FAILURE)
