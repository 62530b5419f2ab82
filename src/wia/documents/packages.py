# topmark:header:start
#
#   project      : Wia
#   file         : packages.py
#   file_relpath : src/wia/documents/packages.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Reader for NuGet package manifests (``packages.config``)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.documents.xml import iter_elements, load_document

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET
    from pathlib import Path

    from wia.config.logging import WiaLogger

logger: WiaLogger = get_logger(__name__)


@dataclass(frozen=True)
class PackageReference:
    """One ``<package id="..." version="..."/>`` entry."""

    id: str
    version: str | None


@dataclass(frozen=True)
class PackageManifest:
    """Installed packages listed in a package manifest."""

    path: Path
    packages: tuple[PackageReference, ...]

    @classmethod
    def load(cls, path: Path) -> PackageManifest:
        """Parse the package manifest at ``path``.

        Entries without an ``id`` attribute are ignored.

        Raises:
            DocumentError: If the file is not well-formed XML.
        """
        root: ET.Element = load_document(path, expected_roots=("packages",))
        packages: list[PackageReference] = []
        for element in iter_elements(root, "package"):
            package_id: str | None = element.get("id")
            if not package_id:
                logger.debug("Ignoring <package> without id in %s", path)
                continue
            packages.append(PackageReference(id=package_id, version=element.get("version")))
        return cls(path=path, packages=tuple(packages))

    def find(self, package_id: str) -> PackageReference | None:
        """Return the first entry whose id equals ``package_id``."""
        return next((p for p in self.packages if p.id == package_id), None)


def major_version(version: str) -> int:
    """Return the major component of a dotted version string.

    Pre-release and build suffixes are ignored (``"11.3.0-pre"`` -> ``11``).

    Raises:
        ValueError: If the major component is not a non-negative integer.
    """
    head: str = version.strip().split(".", 1)[0]
    if not head.isdigit():
        raise ValueError(f"invalid version: {version!r}")
    return int(head)
