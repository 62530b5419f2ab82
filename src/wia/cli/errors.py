# topmark:header:start
#
#   project      : Wia
#   file         : errors.py
#   file_relpath : src/wia/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Exceptions for the Wia CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes. The resolution core never raises them; it reports through the
website context instead.
"""

from __future__ import annotations

from typing import IO, Any

import click

from wia.cli.exit_codes import ExitCode


class WiaError(click.ClickException):
    """Base class for all Wia CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the message without styling; `show()` adds color."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the error through the `ClickConsole` in ``ctx.obj``, if there is one.

        Before the group has set up its console, Click prints it instead.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(self.format_message())
            return
        super().show(file)


class WiaUsageError(WiaError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class WiaConfigError(WiaError):
    """Error for settings file errors (unreadable/malformed)."""

    exit_code = ExitCode.CONFIG_ERROR


class WiaFileNotFoundError(WiaError):
    """Error when the root directory does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
