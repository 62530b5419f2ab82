# topmark:header:start
#
#   project      : Wia
#   file         : version.py
#   file_relpath : src/wia/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Wia `version` command.

Prints the current Wia version as installed in the active Python environment.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from wia.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of Wia.",
)
def version_command() -> None:
    """Show the current version of Wia."""
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    try:
        console.print(get_version("wia"))
    except PackageNotFoundError:
        console.print("unknown (package metadata not found)")
