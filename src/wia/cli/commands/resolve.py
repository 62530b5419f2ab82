# topmark:header:start
#
#   project      : Wia
#   file         : resolve.py
#   file_relpath : src/wia/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Wia `resolve` command.

Resolves the website context of a directory and prints it. The process exits
with `ExitCode.SUCCESS` when every step succeeded and `ExitCode.FAILURE`
when resolution halted.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wia.cli.emitters import emit_context_json, emit_context_text, emit_diagnostics
from wia.cli.errors import WiaConfigError, WiaFileNotFoundError
from wia.cli.exit_codes import ExitCode
from wia.cli.options import OutputFormat, override_options
from wia.config.io import SettingsFileError
from wia.config.logging import get_logger
from wia.config.model import MutableSettings
from wia.pipeline.context.model import normalize_root
from wia.pipeline.engine import run_resolution

if TYPE_CHECKING:
    from wia.cli.console import ClickConsole
    from wia.config.logging import WiaLogger
    from wia.config.model import WiaSettings
    from wia.pipeline.context.model import WebsiteContext

logger: WiaLogger = get_logger(__name__)


@click.command(
    name="resolve",
    help="Resolve the website context (solution, web project, URL, versions) of DIRECTORY.",
)
@click.argument("directory", required=False, default="")
@override_options
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (wia.toml or pyproject.toml). Default: wia.toml in DIRECTORY.",
)
@click.option(
    "--output-format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format.",
)
def resolve_command(
    *,
    directory: str,
    project_name: str | None,
    web_project: str | None,
    project_url: str | None,
    framework_version: float | None,
    episerver_version: int | None,
    config_file: Path | None,
    output_format: str,
) -> None:
    """Resolve and print the website context of DIRECTORY (default: current directory)."""
    ctx = click.get_current_context()
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj["verbosity_level"]
    fmt = OutputFormat(output_format)

    root: Path = normalize_root(directory, base_dir=Path.cwd())
    if not root.is_dir():
        raise WiaFileNotFoundError(f"Directory not found: {root}")

    cli_overrides = MutableSettings(
        project_name=project_name,
        web_project=web_project,
        project_url=project_url,
        framework_version=framework_version,
        episerver_version=episerver_version,
    )
    try:
        settings: WiaSettings = MutableSettings.load_merged(
            root, config_file=config_file, cli_overrides=cli_overrides
        ).freeze()
    except SettingsFileError as exc:
        raise WiaConfigError(str(exc)) from exc

    emit_diagnostics(console, settings.diagnostics, verbosity=verbosity)

    website: WebsiteContext = run_resolution(root, base_dir=root, settings=settings)

    if fmt == OutputFormat.JSON:
        emit_context_json(console, website)
    else:
        if verbosity >= 0:
            emit_context_text(console, website, verbosity=verbosity)
        emit_diagnostics(console, website.diagnostics, verbosity=verbosity)

    if website.exit_at_next_check:
        logger.info("Resolution halted at %s (%s)", website.flow.at_step, website.flow.reason)
        ctx.exit(ExitCode.FAILURE)
