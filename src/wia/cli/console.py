# topmark:header:start
#
#   project      : Wia
#   file         : console.py
#   file_relpath : src/wia/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""User-facing output of the CLI.

The resolved context goes to stdout; diagnostics go to stderr. Neither goes
through `logging`, which is reserved for internal tracing.
"""

from __future__ import annotations

import sys
from typing import TextIO

import click


class ClickConsole:
    """Thin wrapper over `click.echo` that remembers the color decision.

    ``out`` and ``err`` default to the process streams current at write time,
    so Click's test runner captures the output.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO | None = out
        self.err: TextIO | None = err

    def _echo(self, text: str, *, to_err: bool, nl: bool, fg: str | None = None) -> None:
        stream: TextIO = (self.err or sys.stderr) if to_err else (self.out or sys.stdout)
        click.secho(text, file=stream, nl=nl, fg=fg, color=self.enable_color)

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to stdout."""
        self._echo(text, to_err=False, nl=nl)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in yellow."""
        self._echo(text, to_err=True, nl=nl, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` to stderr in bright red."""
        self._echo(text, to_err=True, nl=nl, fg="bright_red")
