# topmark:header:start
#
#   project      : Wia
#   file         : options.py
#   file_relpath : src/wia/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Click options shared by the Wia commands, and the helpers that interpret them.

Group options (``-v``/``-q``, ``--color``/``--no-color``) shape how output is
printed. Override options (``--projectname`` ... ``--episerver``) seed the
context fields so the matching discovery step is skipped.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, TypeVar

import click

from wia.cli.errors import WiaUsageError

if TYPE_CHECKING:
    from collections.abc import Callable

F = TypeVar("F", bound="Callable[..., object]")


class OutputFormat(str, Enum):
    """How ``wia resolve`` prints the resolved context."""

    TEXT = "text"
    JSON = "json"


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


# (flags, destination, extra click.option arguments), in --help order
_OVERRIDES: tuple[tuple[tuple[str, ...], str, dict[str, Any]], ...] = (
    (
        ("--projectname",),
        "project_name",
        {"help": "Project name (defaults to the solution file name)."},
    ),
    (
        ("--webproject",),
        "web_project",
        {"help": "Web project directory relative to the root, e.g. Contoso.Web."},
    ),
    (
        ("--url",),
        "project_url",
        {"help": "Site URL; 'http://' is prepended when no scheme is given."},
    ),
    (
        ("--framework",),
        "framework_version",
        {"type": float, "help": "Target framework version, e.g. 4.5 (skips discovery)."},
    ),
    (
        ("--episerver",),
        "episerver_version",
        {"type": int, "help": "EPiServer major version (skips discovery)."},
    ),
)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Fold the ``-v``/``-q`` counts into one level.

    ``-1`` means quiet, ``0`` is the default and positive values count ``-v``.

    Raises:
        WiaUsageError: If ``-v`` and ``-q`` are combined.
    """
    if quiet_count and verbose_count:
        raise WiaUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return -1 if quiet_count else verbose_count


def resolve_color_mode(
    color_mode: str | None,
    *,
    no_color: bool = False,
    stdout_isatty: bool | None = None,
) -> bool:
    """Decide whether terminal output is colored.

    Explicit flags decide first (``--no-color`` beats ``--color``). In ``auto``
    mode a non-empty ``FORCE_COLOR`` other than ``"0"`` turns color on, a set
    ``NO_COLOR`` turns it off, and otherwise color follows whether stdout is a
    terminal.
    """
    mode: ColorMode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    if mode is not ColorMode.AUTO:
        return mode is ColorMode.ALWAYS

    forced: str = os.environ.get("FORCE_COLOR", "")
    if forced not in ("", "0"):
        return True
    if "NO_COLOR" in os.environ:
        return False
    return sys.stdout.isatty() if stdout_isatty is None else stdout_isatty


def global_options(f: F) -> F:
    """Attach the verbosity and color options of the ``wia`` group."""
    decorators: list[Callable[[F], F]] = [
        click.option("-v", "--verbose", count=True, help="Show per-step status."),
        click.option("-q", "--quiet", count=True, help="Only print errors."),
        click.option(
            "--color",
            "color_mode",
            type=click.Choice([m.value for m in ColorMode]),
            default=None,
            help="Color output: auto (default), always, or never.",
        ),
        click.option("--no-color", is_flag=True, help="Same as --color=never."),
    ]
    for decorate in reversed(decorators):
        f = decorate(f)
    return f


def override_options(f: F) -> F:
    """Attach one option per overridable context field."""
    for flags, dest, extra in reversed(_OVERRIDES):
        f = click.option(*flags, dest, default=None, **extra)(f)
    return f
