# topmark:header:start
#
#   project      : Wia
#   file         : xml.py
#   file_relpath : src/wia/documents/xml.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""XML helpers shared by the document readers.

Documents are parsed with `xml.etree.ElementTree`. Element lookups compare
*local* names only, so MSBuild's default namespace
(``http://schemas.microsoft.com/developer/msbuild/2003``) and its absence in
SDK-style projects are treated alike.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from wia.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from wia.config.logging import WiaLogger

logger: WiaLogger = get_logger(__name__)


class DocumentError(Exception):
    """Raised when a document cannot be parsed as XML."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path: Path = path
        self.message: str = message


def local_name(tag: str) -> str:
    """Return ``tag`` without its ``{namespace}`` prefix."""
    return tag.rsplit("}", 1)[-1]


def load_document(path: Path, *, expected_roots: tuple[str, ...]) -> ET.Element:
    """Parse ``path`` and return its root element.

    Args:
        path (Path): XML file to parse.
        expected_roots (tuple[str, ...]): Local names the root element is expected
            to have. A different root is logged but still returned.

    Returns:
        ET.Element: The document root.

    Raises:
        DocumentError: If the file is not well-formed XML.
    """
    try:
        root: ET.Element = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise DocumentError(path, f"not well-formed XML ({exc})") from exc

    name: str = local_name(root.tag)
    if name not in expected_roots:
        logger.warning(
            "Unexpected root element <%s> in %s (expected one of: %s)",
            name,
            path,
            ", ".join(expected_roots),
        )
    return root


def iter_elements(root: ET.Element, name: str) -> Iterator[ET.Element]:
    """Yield every element below (and including) ``root`` with local name ``name``."""
    for element in root.iter():
        if isinstance(element.tag, str) and local_name(element.tag) == name:
            yield element


def find_first(root: ET.Element, name: str) -> ET.Element | None:
    """Return the first element (document order) with local name ``name``."""
    return next(iter_elements(root, name), None)


def element_text(element: ET.Element) -> str:
    """Return the concatenated, stripped text content of ``element``."""
    return "".join(element.itertext()).strip()
