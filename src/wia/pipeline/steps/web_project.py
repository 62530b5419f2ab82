# topmark:header:start
#
#   project      : Wia
#   file         : web_project.py
#   file_relpath : src/wia/pipeline/steps/web_project.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Web project step for the Wia resolution pipeline.

Determines the directory of the web project relative to the root directory:

1. the user override, if any;
2. ``"."`` when the root itself contains ``web.config``;
3. the single immediate subdirectory whose name contains ``web``
   (case-insensitive).

The chosen directory must exist.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.constants import ROOT_WEB_PROJECT, WEB_CONFIG_NAME, WEB_PROJECT_MARKER
from wia.pipeline.outcomes import FailureKind, StepResult
from wia.pipeline.steps.base import BaseStep
from wia.utils.file import find_file, list_subdirectories

if TYPE_CHECKING:
    from pathlib import Path

    from wia.config.logging import WiaLogger
    from wia.pipeline.context.model import WebsiteContext

logger: WiaLogger = get_logger(__name__)

WEBPROJECT_OPTION: str = "--webproject"


class WebProjectStep(BaseStep[str]):
    """Resolve ``ctx.web_project_name``.

    Fields written:
      - web_project_name
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, field_name="web_project_name")

    def run(self, ctx: WebsiteContext) -> StepResult[str]:
        """Pick the web project directory and verify that it exists."""
        overridden: bool = ctx.is_resolved("web_project_name")
        if overridden:
            name: str = (ctx.web_project_name or "").strip()
        else:
            discovered: StepResult[str] = self._discover(ctx.current_directory)
            if discovered.failed or discovered.value is None:
                return discovered
            name = discovered.value

        project_directory: Path = ctx.current_directory / name
        if not project_directory.is_dir():
            return StepResult.unresolved(
                FailureKind.MISSING_RESOURCE,
                f"Web project directory does not seem to exist at {project_directory}",
            )

        return StepResult.override(name) if overridden else StepResult.resolved(name)

    def _discover(self, root: Path) -> StepResult[str]:
        if find_file(root, WEB_CONFIG_NAME) is not None:
            logger.debug("%s found in root; the root is the web project", WEB_CONFIG_NAME)
            return StepResult.resolved(ROOT_WEB_PROJECT)

        candidates: list[str] = [
            d.name for d in list_subdirectories(root) if WEB_PROJECT_MARKER in d.name.casefold()
        ]
        if not candidates:
            return StepResult.unresolved(
                FailureKind.MISSING_RESOURCE,
                "Web project could not be resolved. "
                f'Please specify using "{WEBPROJECT_OPTION} Project.Web".',
            )
        if len(candidates) > 1:
            suggestions: str = " ".join(f"{WEBPROJECT_OPTION} {c}" for c in candidates)
            return StepResult.unresolved(
                FailureKind.AMBIGUOUS_RESOURCE,
                f"You need to specify which web project to use: {suggestions}",
            )
        return StepResult.resolved(candidates[0])
