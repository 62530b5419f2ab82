# topmark:header:start
#
#   project      : Wia
#   file         : test_base_step.py
#   file_relpath : tests/pipeline/steps/test_base_step.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Tests for the shared step lifecycle in `wia.pipeline.steps.base`.

Covers the halt latch on entry (every step is a no-op returning its
unresolved sentinel), prerequisite checks, filesystem error conversion and
the mapping of step results to statuses.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from tests.conftest import parametrize
from tests.pipeline.conftest import make_context, run_step
from wia.pipeline.outcomes import FailureKind, StepResult
from wia.pipeline.status import StepStatus
from wia.pipeline.steps import (
    BaseStep,
    FrameworkVersionStep,
    PlatformVersionStep,
    ProjectNameStep,
    ProjectUrlStep,
    WebProjectStep,
)

if TYPE_CHECKING:
    from wia.pipeline.context.model import WebsiteContext

pytestmark: pytest.MarkDecorator = pytest.mark.pipeline

ALL_STEPS: list[tuple[type[BaseStep[Any]], str, object]] = [
    (ProjectNameStep, "project_name", None),
    (WebProjectStep, "web_project_name", None),
    (ProjectUrlStep, "project_url", None),
    (FrameworkVersionStep, "framework_version", -1),
    (PlatformVersionStep, "episerver_version", -1),
]


class _RaisingStep(BaseStep[str]):
    """Step whose discovery fails with a filesystem error."""

    def __init__(self) -> None:
        super().__init__(name="RaisingStep", field_name="project_url")

    def run(self, ctx: WebsiteContext) -> StepResult[str]:
        raise PermissionError("access denied")


class _BrokenStep(BaseStep[float]):
    """Step whose discovery fails with a programming error."""

    def __init__(self) -> None:
        super().__init__(name="BrokenStep", field_name="framework_version", sentinel=-1)

    def run(self, ctx: WebsiteContext) -> StepResult[float]:
        raise KeyError("TargetFrameworkVersion")


class _SoftMissStep(BaseStep[int]):
    """Step that finds nothing without failing."""

    def __init__(self) -> None:
        super().__init__(name="SoftMissStep", field_name="episerver_version", sentinel=-1)

    def run(self, ctx: WebsiteContext) -> StepResult[int]:
        return StepResult.unresolved()


@parametrize("step_cls,field_name,sentinel", ALL_STEPS)
def test_latched_step_is_noop(
    no_filesystem: None,
    step_cls: type[BaseStep[Any]],
    field_name: str,
    sentinel: object,
) -> None:
    """A step entered with the latch set returns its sentinel and touches nothing."""
    ctx: WebsiteContext = make_context(
        Path("/nonexistent/wia-root"),
        project_name="Contoso",
        web_project_name="Contoso.Web",
        project_url="contoso.local",
        framework_version=4.5,
        episerver_version=11,
    )
    ctx.flow.request_halt(reason="missing resource", at_step="EarlierStep")

    run_step(step_cls(), ctx)

    assert getattr(ctx, field_name) == sentinel
    assert getattr(ctx.status, field_name) == StepStatus.SKIPPED
    assert ctx.flow.at_step == "EarlierStep"
    assert len(ctx.diagnostics) == 0


@parametrize("step_cls", [ProjectUrlStep, FrameworkVersionStep, PlatformVersionStep])
def test_missing_prerequisite_sets_latch(step_cls: type[BaseStep[Any]]) -> None:
    """Steps that need the web project refuse to run without it."""
    step: BaseStep[Any] = step_cls()
    ctx: WebsiteContext = make_context(Path("/nonexistent/wia-root"))

    run_step(step, ctx)

    assert ctx.exit_at_next_check
    assert ctx.flow.at_step == step.name
    assert ctx.diagnostics.has_error()
    assert "web_project_name" in ctx.diagnostics.messages()[0]
    assert getattr(ctx.status, step.field_name) == StepStatus.SKIPPED


def test_filesystem_error_becomes_failure(tmp_path: Path) -> None:
    """An OSError raised during discovery latches instead of propagating."""
    ctx: WebsiteContext = make_context(tmp_path)

    run_step(_RaisingStep(), ctx)

    assert ctx.project_url is None
    assert ctx.exit_at_next_check
    assert ctx.flow.reason == FailureKind.MISSING_RESOURCE.value
    assert ctx.status.project_url == StepStatus.FAILED
    assert "access denied" in ctx.diagnostics.messages()[0]


def test_unexpected_error_becomes_failure(tmp_path: Path) -> None:
    """Any other exception latches as an internal error and later steps are skipped."""
    ctx: WebsiteContext = make_context(tmp_path, framework_version=4.8, episerver_version=12)

    run_step(_BrokenStep(), ctx)
    run_step(PlatformVersionStep(), ctx)

    assert ctx.framework_version == -1
    assert ctx.status.framework_version == StepStatus.FAILED
    assert ctx.flow.reason == FailureKind.INTERNAL_ERROR.value
    assert ctx.flow.at_step == "BrokenStep"
    assert "TargetFrameworkVersion" in ctx.diagnostics.messages()[0]
    assert ctx.episerver_version == -1
    assert ctx.status.episerver_version == StepStatus.SKIPPED


def test_soft_miss_keeps_latch_clear(tmp_path: Path) -> None:
    """An unresolved result without a failure writes the sentinel only."""
    ctx: WebsiteContext = make_context(tmp_path)

    run_step(_SoftMissStep(), ctx)

    assert ctx.episerver_version == -1
    assert not ctx.exit_at_next_check
    assert ctx.status.episerver_version == StepStatus.NOT_FOUND
    assert len(ctx.diagnostics) == 0


def test_first_halt_request_wins(tmp_path: Path) -> None:
    """The latch records the first failing step and is never cleared."""
    ctx: WebsiteContext = make_context(tmp_path)

    ctx.flow.request_halt(reason="ambiguous resource", at_step="WebProjectStep")
    ctx.flow.request_halt(reason="malformed value", at_step="FrameworkVersionStep")

    assert ctx.exit_at_next_check
    assert ctx.flow.at_step == "WebProjectStep"
    assert ctx.flow.reason == "ambiguous resource"


def test_steps_are_recorded_in_order(tmp_path: Path) -> None:
    """Every invoked step is appended to ``ctx.steps``, latched or not."""
    ctx: WebsiteContext = make_context(tmp_path)
    first = ProjectNameStep()
    second = WebProjectStep()

    run_step(first, ctx)  # no solution file: latches
    run_step(second, ctx)

    assert ctx.steps == [first, second]
    assert ctx.status.web_project_name == StepStatus.SKIPPED
