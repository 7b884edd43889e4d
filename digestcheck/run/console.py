"""
Console sinks for normal output and diagnostics.
"""

from __future__ import annotations

from typing import Protocol

import click


class Console(Protocol):
    """Line-oriented output with separate normal and diagnostic streams."""

    def out(self, line: str) -> None:
        """Write a line of normal output."""
        ...

    def err(self, line: str) -> None:
        """Write a line of diagnostic output."""
        ...


class ClickConsole:
    """Console writing through click.echo (stdout / stderr)."""

    def out(self, line: str) -> None:
        click.echo(line)

    def err(self, line: str) -> None:
        click.echo(line, err=True)


class RecordingConsole:
    """Console that keeps lines in memory; useful for tests and embedding."""

    def __init__(self) -> None:
        self.stdout: list[str] = []
        self.stderr: list[str] = []

    def out(self, line: str) -> None:
        self.stdout.append(line)

    def err(self, line: str) -> None:
        self.stderr.append(line)
