# topmark:header:start
#
#   project      : Wia
#   file         : runner.py
#   file_relpath : src/wia/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Run the resolution pipeline for a single context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.pipeline.outcomes import FailureKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wia.config.logging import WiaLogger

    from .context.model import WebsiteContext
    from .protocols import Step

logger: WiaLogger = get_logger(__name__)


def run(ctx: WebsiteContext, steps: Sequence[Step]) -> WebsiteContext:
    """Execute the pipeline sequentially.

    The runner does not inspect the halt latch; every step checks it on entry.
    An exception escaping a step sets the latch at that step and the remaining
    steps still run, so each of them writes its unresolved sentinel.

    Args:
        ctx (WebsiteContext): Mutable website context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
            Each step takes and returns a context.

    Returns:
        WebsiteContext: The final context after all steps have run.
    """
    logger.info("Resolving website context in %s", ctx.current_directory)
    for step in steps:
        try:
            ctx = step(ctx)
        except Exception as e:
            name: str = getattr(step, "name", None) or getattr(step, "__name__", repr(step))
            logger.exception("Unexpected error in step %s", name)
            ctx.add_error(f"Unexpected error while resolving the website context: {e}")
            ctx.flow.request_halt(reason=FailureKind.INTERNAL_ERROR.value, at_step=name)
    return ctx
