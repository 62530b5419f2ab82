# topmark:header:start
#
#   project      : Wia
#   file         : project_url.py
#   file_relpath : src/wia/pipeline/steps/project_url.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Project URL step for the Wia resolution pipeline.

Fallback chain, each link tried only when the previous one yields nothing:

1. the user override, prefixed with ``http://`` when it has no scheme;
2. ``CustomServerUrl`` in the web project's manifest (``*.csproj``);
3. the ``siteUrl`` attribute of ``siteSettings`` in ``episerver.config``
   (searched recursively below the web project) or, failing that, in the web
   project's ``web.config``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.constants import (
    DEFAULT_URL_SCHEME,
    EPISERVER_CONFIG_NAME,
    KNOWN_URL_SCHEMES,
    WEB_CONFIG_NAME,
)
from wia.documents.cms import CmsConfig
from wia.documents.project import ProjectManifest, find_project_manifest
from wia.documents.xml import DocumentError
from wia.pipeline.outcomes import FailureKind, StepResult
from wia.pipeline.steps.base import BaseStep
from wia.utils.file import compute_relpath, find_file, search_tree

if TYPE_CHECKING:
    from pathlib import Path

    from wia.config.logging import WiaLogger
    from wia.pipeline.context.model import WebsiteContext

logger: WiaLogger = get_logger(__name__)


def normalize_url(url: str) -> str:
    """Return ``url`` stripped and prefixed with ``http://`` unless it has a scheme."""
    url = url.strip()
    if url.lower().startswith(KNOWN_URL_SCHEMES):
        return url
    return DEFAULT_URL_SCHEME + url


class ProjectUrlStep(BaseStep[str]):
    """Resolve ``ctx.project_url``.

    Fields written:
      - project_url
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            field_name="project_url",
            requires=("web_project_name",),
        )

    def run(self, ctx: WebsiteContext) -> StepResult[str]:
        """Walk the fallback chain: override, project manifest, CMS config."""
        if ctx.is_resolved("project_url"):
            return StepResult.override(normalize_url(ctx.project_url or ""))

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

        if manifest.custom_server_url is not None:
            logger.debug("Using CustomServerUrl from %s", manifest_path.name)
            return StepResult.resolved(manifest.custom_server_url)

        return self._from_cms_config(web_dir, ctx.current_directory)

    def _from_cms_config(self, web_dir: Path, root: Path) -> StepResult[str]:
        # The EPiServer section may live in its own file or inline in web.config
        config_path: Path | None = search_tree(web_dir, EPISERVER_CONFIG_NAME)
        if config_path is None:
            config_path = find_file(web_dir, WEB_CONFIG_NAME)
        if config_path is None:
            return StepResult.unresolved(
                FailureKind.MISSING_RESOURCE,
                f"The {WEB_CONFIG_NAME} file could not be found at {web_dir}",
            )
        logger.debug("Reading site settings from %s", compute_relpath(config_path, root))

        try:
            cms_config: CmsConfig = CmsConfig.load(config_path)
        except DocumentError as exc:
            return StepResult.unresolved(FailureKind.MALFORMED_VALUE, str(exc))

        if not cms_config.site_settings_found:
            return StepResult.unresolved(
                FailureKind.MISSING_ELEMENT,
                "Could not find the EPiServer configuration section in neither "
                f"{EPISERVER_CONFIG_NAME} or {WEB_CONFIG_NAME}.",
            )
        if cms_config.site_url is None:
            return StepResult.unresolved(
                FailureKind.MISSING_ELEMENT,
                f"The siteSettings element in {config_path.name} has no siteUrl attribute.",
            )
        return StepResult.resolved(cms_config.site_url)
