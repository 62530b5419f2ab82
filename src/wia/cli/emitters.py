# topmark:header:start
#
#   project      : Wia
#   file         : emitters.py
#   file_relpath : src/wia/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Render a resolved website context for the console.

Two formats are supported: aligned human-readable text (optionally with the
per-step status) and JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from wia.constants import VALUE_NOT_SET
from wia.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from wia.cli.console import ClickConsole
    from wia.diagnostic.model import Diagnostic
    from wia.pipeline.context.model import WebsiteContext
    from wia.pipeline.status import StepStatus

# (label, context field) in pipeline order
FIELD_LABELS: tuple[tuple[str, str], ...] = (
    ("Project name", "project_name"),
    ("Web project", "web_project_name"),
    ("Project URL", "project_url"),
    ("Framework version", "framework_version"),
    ("EPiServer version", "episerver_version"),
)


def format_value(ctx: WebsiteContext, field_name: str) -> str:
    """Return the display text of a context field (``<not set>`` when unresolved)."""
    if not ctx.is_resolved(field_name):
        return VALUE_NOT_SET
    return str(getattr(ctx, field_name))


def emit_context_text(console: ClickConsole, ctx: WebsiteContext, *, verbosity: int) -> None:
    """Print the resolved fields, one per line, aligned on the colon.

    Args:
        console (ClickConsole): Output console.
        ctx (WebsiteContext): The resolved context.
        verbosity (int): Program-output verbosity; ``>= 1`` adds the step status.
    """
    labels: list[str] = ["Root directory"] + [label for label, _ in FIELD_LABELS]
    width: int = max(len(label) for label in labels)

    console.print(f"{'Root directory':<{width}} : {ctx.current_directory}")
    for label, field_name in FIELD_LABELS:
        line: str = f"{label:<{width}} : {format_value(ctx, field_name)}"
        if verbosity > 0:
            status: StepStatus = getattr(ctx.status, field_name)
            styled: str = status.color(status.value) if console.enable_color else status.value
            line = f"{line} [{styled}]"
        console.print(line)


def emit_context_json(console: ClickConsole, ctx: WebsiteContext) -> None:
    """Print the context as a JSON document."""
    console.print(json.dumps(ctx.to_dict(), indent=2))


def emit_diagnostics(
    console: ClickConsole,
    diagnostics: Iterable[Diagnostic],
    *,
    verbosity: int,
) -> None:
    """Print diagnostics to stderr; in quiet mode only errors are shown."""
    for diagnostic in diagnostics:
        if diagnostic.level == DiagnosticLevel.ERROR:
            console.error(diagnostic.message)
        elif verbosity >= 0 and diagnostic.level == DiagnosticLevel.WARNING:
            console.warn(diagnostic.message)
        elif verbosity > 0:
            console.print(diagnostic.message)
