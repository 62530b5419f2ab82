# topmark:header:start
#
#   project      : Wia
#   file         : project_name.py
#   file_relpath : src/wia/pipeline/steps/project_name.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Project name step for the Wia resolution pipeline.

Locates the solution file (``*.sln``) directly inside the root directory and
derives the project name from its base name. A user-supplied name is still
honoured when no solution file exists, but the latch is set so that the rest
of the pipeline short-circuits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.constants import SOLUTION_FILE_SUFFIX
from wia.pipeline.outcomes import Failure, FailureKind, StepResult
from wia.pipeline.steps.base import BaseStep
from wia.utils.file import find_files_with_suffix

if TYPE_CHECKING:
    from pathlib import Path

    from wia.config.logging import WiaLogger
    from wia.pipeline.context.model import WebsiteContext

logger: WiaLogger = get_logger(__name__)


class ProjectNameStep(BaseStep[str]):
    """Resolve ``ctx.project_name`` from the solution file in the root directory.

    Fields written:
      - project_name
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, field_name="project_name")

    def run(self, ctx: WebsiteContext) -> StepResult[str]:
        """Find the solution file, then apply the override if one was given."""
        solutions: list[Path] = find_files_with_suffix(ctx.current_directory, SOLUTION_FILE_SUFFIX)

        failure: Failure | None = None
        if not solutions:
            failure = Failure(
                FailureKind.MISSING_RESOURCE,
                "Could not find a solution file in the current directory.",
            )
        elif len(solutions) > 1:
            ctx.add_warning(
                f"Found {len(solutions)} solution files; using {solutions[0].name} "
                f"(ignored: {', '.join(p.name for p in solutions[1:])})."
            )

        if ctx.is_resolved("project_name"):
            return StepResult(value=ctx.project_name, failure=failure, overridden=True)
        if failure is not None:
            return StepResult(failure=failure)

        logger.debug("Solution file: %s", solutions[0])
        return StepResult.resolved(solutions[0].stem)
