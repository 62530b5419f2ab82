# topmark:header:start
#
#   project      : Wia
#   file         : outcomes.py
#   file_relpath : src/wia/pipeline/outcomes.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Typed step results for the resolution pipeline.

Every resolution step computes a [`StepResult`][wia.pipeline.outcomes.StepResult]
instead of mutating the context directly. The base step applies the result:
the value (or the step's unresolved sentinel) is written to the context field,
and a [`Failure`][wia.pipeline.outcomes.Failure] sets the halt latch and records
a diagnostic.

A result may carry a value *and* a failure: the project name step honours a
user-supplied name even when no solution file exists, while still halting the
pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from yachalk import chalk

from wia.rendering.colored_enum import ColoredStrEnum

T = TypeVar("T")


class FailureKind(ColoredStrEnum):
    """Taxonomy of the ways a resolution step can fail.

    All kinds are handled identically by the pipeline (latch + diagnostic +
    unresolved sentinel); the kind is kept for reporting. ``INTERNAL_ERROR``
    marks an unexpected exception raised by the step itself.
    """

    MISSING_RESOURCE = ("missing resource", chalk.red)
    AMBIGUOUS_RESOURCE = ("ambiguous resource", chalk.yellow)
    MALFORMED_VALUE = ("malformed value", chalk.red_bright)
    MISSING_ELEMENT = ("missing element", chalk.red)
    INTERNAL_ERROR = ("internal error", chalk.red_bright)


@dataclass(frozen=True)
class Failure:
    """Structured reason why a step could not resolve its field."""

    kind: FailureKind
    message: str


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Outcome of a single resolution step.

    Attributes:
        value (T | None): The resolved value, or ``None`` when unresolved.
        failure (Failure | None): Why resolution failed; ``None`` on success
            and for soft misses that must not halt the pipeline.
        overridden (bool): True if the value came from a user override.
    """

    value: T | None = None
    failure: Failure | None = None
    overridden: bool = False

    @property
    def failed(self) -> bool:
        """Whether the step failed (and must set the halt latch)."""
        return self.failure is not None

    @classmethod
    def resolved(cls, value: T) -> StepResult[T]:
        """Return a successful result for a discovered value."""
        return cls(value=value)

    @classmethod
    def override(cls, value: T) -> StepResult[T]:
        """Return a successful result for a user-supplied value."""
        return cls(value=value, overridden=True)

    @classmethod
    def unresolved(cls, kind: FailureKind | None = None, message: str = "") -> StepResult[T]:
        """Return an unresolved result.

        Args:
            kind (FailureKind | None): Failure kind; ``None`` for a soft miss that
                leaves the latch untouched.
            message (str): Human-readable diagnostic for the failure.

        Returns:
            StepResult[T]: A result without a value.
        """
        if kind is None:
            return cls()
        return cls(failure=Failure(kind=kind, message=message))
