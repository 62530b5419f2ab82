# topmark:header:start
#
#   project      : Wia
#   file         : main.py
#   file_relpath : src/wia/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""The ``wia`` command group.

The group parses verbosity and color once and stores the outcome in
``ctx.obj`` (keys ``verbosity_level``, ``log_level``, ``color_enabled`` and
``console``); subcommands read it from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wia.cli.commands.resolve import resolve_command
from wia.cli.commands.version import version_command
from wia.cli.console import ClickConsole
from wia.cli.options import global_options, resolve_color_mode, resolve_verbosity
from wia.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from wia.config.logging import WiaLogger

logger: WiaLogger = get_logger(__name__)

USAGE_HINT = "Hint: use 'wia resolve [DIRECTORY]' to resolve a website context."


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Populate ``ctx.obj`` from the group options.

    Program output follows ``-v``/``-q``; internal logging follows
    ``WIA_LOG_LEVEL`` only.
    """
    state: dict[str, object] = ctx.ensure_object(dict)

    state["verbosity_level"] = resolve_verbosity(verbose, quiet)

    log_level: int | None = resolve_env_log_level()
    setup_logging(level=log_level)
    state["log_level"] = log_level

    color: bool = resolve_color_mode(color_mode, no_color=no_color)
    ctx.color = color
    state["color_enabled"] = color
    state["console"] = ClickConsole(enable_color=color)
    logger.debug("CLI state: %s", state)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Wia: resolve the build and deployment context of an EPiServer web project.",
)
@global_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Run the ``wia`` group; without a subcommand, print a hint and the help."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color)
    if ctx.invoked_subcommand is not None:
        return

    console: ClickConsole = ctx.obj["console"]
    console.print(USAGE_HINT)
    console.print()
    console.print(ctx.get_help())


cli.add_command(resolve_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
