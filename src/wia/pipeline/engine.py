# topmark:header:start
#
#   project      : Wia
#   file         : engine.py
#   file_relpath : src/wia/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Execution helpers for resolving a website context (engine layer).

This module provides the CLI-free entry points shared by the public API and
the CLI.

Design goals:
  - No CLI dependencies: do not import Click or anything under ``wia.cli.*``
    from here. Presentation (printing, colors, exit) belongs to the CLI layer.
  - No exceptions: failures are reported through the halt latch and the
    context's diagnostics (see `wia.pipeline.runner.run`). The full step
    sequence always runs and a context is always returned.

Typical usage:

    ctx = run_resolution(".", base_dir=Path.cwd(), settings=settings)
    if ctx.exit_at_next_check:
        # CLI maps this to a non-zero exit; API callers decide for themselves.
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.pipeline import runner
from wia.pipeline.context.model import WebsiteContext
from wia.pipeline.pipelines import RESOLVE_PIPELINE

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from wia.config.logging import WiaLogger
    from wia.config.model import WiaSettings
    from wia.pipeline.protocols import Step

logger: WiaLogger = get_logger(__name__)


def resolve_context(
    ctx: WebsiteContext,
    pipeline: Sequence[Step] = RESOLVE_PIPELINE,
) -> WebsiteContext:
    """Run ``pipeline`` over ``ctx`` and return it.

    Args:
        ctx (WebsiteContext): A bootstrapped context (normalized root directory).
        pipeline (Sequence[Step]): Steps to execute (default: the resolution pipeline).

    Returns:
        WebsiteContext: The same context, mutated in place.
    """
    logger.debug("Running %d step(s) for %s", len(pipeline), ctx.current_directory)
    return runner.run(ctx, pipeline)


def run_resolution(
    current_directory: str | Path | None,
    *,
    base_dir: Path,
    settings: WiaSettings | None = None,
    pipeline: Sequence[Step] = RESOLVE_PIPELINE,
) -> WebsiteContext:
    """Bootstrap a context for ``current_directory`` and resolve it.

    Args:
        current_directory (str | Path | None): Root directory to scan; relative
            paths are joined onto ``base_dir``, blank means ``base_dir``.
        base_dir (Path): Directory relative roots are resolved against.
        settings (WiaSettings | None): User overrides.
        pipeline (Sequence[Step]): Steps to execute.

    Returns:
        WebsiteContext: The resolved context.
    """
    ctx: WebsiteContext = WebsiteContext.bootstrap(
        current_directory, base_dir=base_dir, settings=settings
    )
    return resolve_context(ctx, pipeline)
