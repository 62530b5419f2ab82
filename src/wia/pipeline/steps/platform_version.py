# topmark:header:start
#
#   project      : Wia
#   file         : platform_version.py
#   file_relpath : src/wia/pipeline/steps/platform_version.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Platform (EPiServer CMS) version step for the Wia resolution pipeline.

Sources, in order:

1. ``EPiServer.dll`` anywhere below the root directory: the major part of its
   embedded file version;
2. the ``EPiServer.CMS.Core`` entry of the web project's ``packages.config``.

Finding neither leaves the version unresolved (``-1``) *without* setting the
latch: an unknown CMS version does not prevent using the other fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.constants import (
    EPISERVER_ASSEMBLY_NAME,
    EPISERVER_CORE_PACKAGE_ID,
    PACKAGES_CONFIG_NAME,
    UNRESOLVED_NUMBER,
)
from wia.documents import assembly
from wia.documents.packages import PackageManifest, PackageReference, major_version
from wia.documents.xml import DocumentError
from wia.pipeline.outcomes import FailureKind, StepResult
from wia.pipeline.steps.base import BaseStep
from wia.utils.file import find_file, search_tree

if TYPE_CHECKING:
    from pathlib import Path

    from wia.config.logging import WiaLogger
    from wia.pipeline.context.model import WebsiteContext

logger: WiaLogger = get_logger(__name__)


class PlatformVersionStep(BaseStep[int]):
    """Resolve ``ctx.episerver_version``.

    Fields written:
      - episerver_version
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            field_name="episerver_version",
            sentinel=UNRESOLVED_NUMBER,
            requires=("web_project_name",),
        )

    def run(self, ctx: WebsiteContext) -> StepResult[int]:
        """Return the override, the assembly version or the package version."""
        if ctx.is_resolved("episerver_version"):
            return StepResult.override(ctx.episerver_version)

        assembly_path: Path | None = search_tree(ctx.current_directory, EPISERVER_ASSEMBLY_NAME)
        if assembly_path is not None:
            major: int | None = assembly.read_major_version(assembly_path)
            if major is not None:
                return StepResult.resolved(major)
            ctx.add_warning(
                f"Could not read the file version of {assembly_path}; "
                f"falling back to {PACKAGES_CONFIG_NAME}."
            )

        web_dir: Path | None = ctx.web_project_directory
        assert web_dir is not None  # guaranteed by `requires`
        return self._from_packages_config(web_dir)

    def _from_packages_config(self, web_dir: Path) -> StepResult[int]:
        packages_path: Path | None = find_file(web_dir, PACKAGES_CONFIG_NAME)
        if packages_path is None:
            logger.info("No %s in %s", PACKAGES_CONFIG_NAME, web_dir)
            return StepResult.unresolved()

        try:
            manifest: PackageManifest = PackageManifest.load(packages_path)
        except DocumentError as exc:
            return StepResult.unresolved(FailureKind.MALFORMED_VALUE, str(exc))

        package: PackageReference | None = manifest.find(EPISERVER_CORE_PACKAGE_ID)
        if package is None:
            logger.info("%s does not reference %s", packages_path, EPISERVER_CORE_PACKAGE_ID)
            return StepResult.unresolved()
        if package.version is None:
            return StepResult.unresolved(
                FailureKind.MISSING_ELEMENT,
                f"The {EPISERVER_CORE_PACKAGE_ID} package in {packages_path.name} has no version.",
            )

        try:
            return StepResult.resolved(major_version(package.version))
        except ValueError:
            return StepResult.unresolved(
                FailureKind.MALFORMED_VALUE,
                f"Could not parse {EPISERVER_CORE_PACKAGE_ID} version from {package.version}.",
            )
