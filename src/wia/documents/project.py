# topmark:header:start
#
#   project      : Wia
#   file         : project.py
#   file_relpath : src/wia/documents/project.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Reader for MSBuild project manifests (``*.csproj``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.constants import PROJECT_MANIFEST_SUFFIX
from wia.documents.xml import element_text, find_first, load_document
from wia.utils.file import find_files_with_suffix

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET
    from pathlib import Path

    from wia.config.logging import WiaLogger

logger: WiaLogger = get_logger(__name__)


@dataclass(frozen=True)
class ProjectManifest:
    """Values of interest from a project manifest.

    Attributes:
        path (Path): The manifest file.
        custom_server_url (str | None): Text of ``CustomServerUrl``; None when the
            element is absent or empty.
        target_framework_version (str | None): Raw text of
            ``TargetFrameworkVersion`` (e.g. ``"v4.5"``); None when absent.
    """

    path: Path
    custom_server_url: str | None
    target_framework_version: str | None

    @classmethod
    def load(cls, path: Path) -> ProjectManifest:
        """Parse the manifest at ``path``.

        Raises:
            DocumentError: If the manifest is not well-formed XML.
        """
        root: ET.Element = load_document(path, expected_roots=("Project",))

        server_url: ET.Element | None = find_first(root, "CustomServerUrl")
        framework: ET.Element | None = find_first(root, "TargetFrameworkVersion")

        # Visual Studio writes an empty <CustomServerUrl /> when no custom server is used
        server_url_text: str = element_text(server_url) if server_url is not None else ""

        manifest = cls(
            path=path,
            custom_server_url=server_url_text or None,
            target_framework_version=element_text(framework) if framework is not None else None,
        )
        logger.debug("Loaded project manifest: %s", manifest)
        return manifest


def find_project_manifest(directory: Path) -> Path | None:
    """Return the first ``*.csproj`` file directly inside ``directory``."""
    if not directory.is_dir():
        return None
    candidates: list[Path] = find_files_with_suffix(directory, PROJECT_MANIFEST_SUFFIX)
    if len(candidates) > 1:
        logger.info(
            "Several project manifests in %s; using %s", directory, candidates[0].name
        )
    return candidates[0] if candidates else None
