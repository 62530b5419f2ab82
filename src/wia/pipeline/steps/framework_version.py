# topmark:header:start
#
#   project      : Wia
#   file         : framework_version.py
#   file_relpath : src/wia/pipeline/steps/framework_version.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Framework version step for the Wia resolution pipeline.

Reads ``TargetFrameworkVersion`` (e.g. ``v4.5``) from the web project's
manifest and parses it as a decimal number.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.constants import UNRESOLVED_NUMBER
from wia.documents.project import ProjectManifest, find_project_manifest
from wia.documents.xml import DocumentError
from wia.pipeline.outcomes import FailureKind, StepResult
from wia.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from pathlib import Path

    from wia.config.logging import WiaLogger
    from wia.pipeline.context.model import WebsiteContext

logger: WiaLogger = get_logger(__name__)

_VERSION_RE: re.Pattern[str] = re.compile(r"\d+(?:\.\d+)?")


def parse_framework_version(text: str) -> float | None:
    """Parse ``"v4.5"`` (or ``"4.5"``) into ``4.5``; return None if malformed."""
    version: str = text.strip()
    if version[:1] in ("v", "V"):
        version = version[1:]
    if _VERSION_RE.fullmatch(version) is None:
        return None
    return float(version)


class FrameworkVersionStep(BaseStep[float]):
    """Resolve ``ctx.framework_version``.

    Fields written:
      - framework_version
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            field_name="framework_version",
            sentinel=UNRESOLVED_NUMBER,
            requires=("web_project_name",),
        )

    def run(self, ctx: WebsiteContext) -> StepResult[float]:
        """Return the override or the version declared in the project manifest."""
        if ctx.is_resolved("framework_version"):
            return StepResult.override(ctx.framework_version)

        web_dir: Path | None = ctx.web_project_directory
        assert web_dir is not None  # guaranteed by `requires`

        manifest_path: Path | None = find_project_manifest(web_dir)
        if manifest_path is None:
            return StepResult.unresolved(
                FailureKind.MISSING_RESOURCE,
                f"The .csproj file for the \"{ctx.web_project_name}\" (web) project "
                f"could not be found. Looked in: {web_dir}",
            )
        try:
            manifest: ProjectManifest = ProjectManifest.load(manifest_path)
        except DocumentError as exc:
            return StepResult.unresolved(FailureKind.MALFORMED_VALUE, str(exc))

        if manifest.target_framework_version is None:
            return StepResult.unresolved(
                FailureKind.MISSING_ELEMENT,
                "Could not find TargetFrameworkVersion in Web project.",
            )

        version: float | None = parse_framework_version(manifest.target_framework_version)
        if version is None:
            return StepResult.unresolved(
                FailureKind.MALFORMED_VALUE,
                f"Could not parse Framework Version from {manifest.target_framework_version}.",
            )
        return StepResult.resolved(version)
