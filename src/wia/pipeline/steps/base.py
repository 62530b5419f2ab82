# topmark:header:start
#
#   project      : Wia
#   file         : base.py
#   file_relpath : src/wia/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Base class for class-based resolution steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → apply

Design goals
------------
- One place that honours the halt latch: a step never performs filesystem or
  parse work once an earlier step has failed.
- Steps compute a typed [`StepResult`][wia.pipeline.outcomes.StepResult];
  only the base class writes the context field, the status and the latch.
- Prerequisites are declared (``requires``) and checked before ``run()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from wia.config.logging import get_logger
from wia.pipeline.outcomes import FailureKind, StepResult
from wia.pipeline.status import StepStatus

if TYPE_CHECKING:
    from wia.config.logging import WiaLogger
    from wia.pipeline.context.model import WebsiteContext

logger: WiaLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class BaseStep(Generic[T]):
    """Reusable foundation for resolution steps.

    Subclass this and implement ``run()``. Do not override ``__call__`` unless
    you need custom lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs and the halt latch.
        field_name (str): Context attribute (and status attribute) the step resolves.
        sentinel (T | None): Value written to the field when unresolved.
        requires (tuple[str, ...]): Context fields that must be resolved before
            the step may run.
    """

    name: str
    field_name: str
    sentinel: T | None = None
    requires: tuple[str, ...] = ()

    def __call__(self, ctx: WebsiteContext) -> WebsiteContext:
        """Invoke the step lifecycle: gate → run (if allowed) → apply.

        Args:
            ctx (WebsiteContext): The mutable context for the current run.

        Returns:
            WebsiteContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if not self.may_proceed(ctx):
            logger.info("Step %s skipped (halted at %s)", self.name, ctx.flow.at_step)
            setattr(ctx, self.field_name, self.sentinel)
            setattr(ctx.status, self.field_name, StepStatus.SKIPPED)
            return ctx

        logger.debug("Step %s - running", self.name)
        try:
            result: StepResult[T] = self.run(ctx)
        except OSError as exc:
            result = StepResult.unresolved(
                FailureKind.MISSING_RESOURCE,
                f"Filesystem error while resolving {self.field_name}: {exc}",
            )
        except Exception as exc:
            logger.exception("Step %s raised", self.name)
            result = StepResult.unresolved(
                FailureKind.INTERNAL_ERROR,
                f"Unexpected error while resolving {self.field_name}: {exc}",
            )
        self.apply(ctx, result)
        return ctx

    def may_proceed(self, ctx: WebsiteContext) -> bool:
        """Return whether the step may run given the current context.

        A set latch always blocks. A missing prerequisite blocks and sets the
        latch, since a step invoked out of order cannot produce a value.

        Args:
            ctx (WebsiteContext): The mutable context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        if ctx.flow.halt:
            return False
        missing: list[str] = [f for f in self.requires if not ctx.is_resolved(f)]
        if missing:
            message: str = f"Step '{self.name}' requires unresolved field(s): {', '.join(missing)}"
            ctx.add_error(message)
            ctx.flow.request_halt(reason=FailureKind.MISSING_RESOURCE.value, at_step=self.name)
            logger.error(message)
            return False
        return True

    def run(self, ctx: WebsiteContext) -> StepResult[T]:
        """Compute the step's result without mutating ``ctx``.

        Subclasses must implement this method.

        Args:
            ctx (WebsiteContext): The context to read from.

        Returns:
            StepResult[T]: The step's outcome.
        """
        raise NotImplementedError

    def apply(self, ctx: WebsiteContext, result: StepResult[T]) -> None:
        """Write ``result`` back into ``ctx``: field value, status, latch and diagnostic.

        Args:
            ctx (WebsiteContext): The mutable context.
            result (StepResult[T]): The outcome returned by ``run()``.
        """
        value: T | None = result.value if result.value is not None else self.sentinel
        setattr(ctx, self.field_name, value)

        if result.failure is not None:
            ctx.add_error(result.failure.message)
            ctx.flow.request_halt(reason=result.failure.kind.value, at_step=self.name)
            logger.info(
                "Step %s failed (%s): %s",
                self.name,
                result.failure.kind.value,
                result.failure.message,
            )

        if result.failed:
            status = StepStatus.FAILED
        elif result.overridden:
            status = StepStatus.OVERRIDDEN
        elif result.value is None:
            status = StepStatus.NOT_FOUND
        else:
            status = StepStatus.RESOLVED
        setattr(ctx.status, self.field_name, status)
        logger.debug("Step %s: %s = %r (%s)", self.name, self.field_name, value, status.value)
