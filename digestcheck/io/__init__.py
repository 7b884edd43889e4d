"""I/O utilities: target and manifest sources."""

from digestcheck.io.sources import STDIN_NAME, TargetOpener, iter_manifest_lines, open_target

__all__ = [
    "STDIN_NAME",
    "TargetOpener",
    "iter_manifest_lines",
    "open_target",
]
