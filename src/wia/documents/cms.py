# topmark:header:start
#
#   project      : Wia
#   file         : cms.py
#   file_relpath : src/wia/documents/cms.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Reader for the EPiServer site settings section.

The section lives either in a dedicated ``episerver.config`` (root element
``<episerver>``) or inline in ``web.config`` (root element ``<configuration>``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.documents.xml import find_first, load_document

if TYPE_CHECKING:
    import xml.etree.ElementTree as ET
    from pathlib import Path

    from wia.config.logging import WiaLogger

logger: WiaLogger = get_logger(__name__)


@dataclass(frozen=True)
class CmsConfig:
    """Site settings read from a CMS configuration file.

    Attributes:
        path (Path): The configuration file.
        site_settings_found (bool): True if a ``siteSettings`` element exists.
        site_url (str | None): The ``siteUrl`` attribute of ``siteSettings``.
    """

    path: Path
    site_settings_found: bool
    site_url: str | None

    @classmethod
    def load(cls, path: Path) -> CmsConfig:
        """Parse the configuration file at ``path``.

        Raises:
            DocumentError: If the file is not well-formed XML.
        """
        root: ET.Element = load_document(path, expected_roots=("episerver", "configuration"))
        site_settings: ET.Element | None = find_first(root, "siteSettings")
        if site_settings is None:
            return cls(path=path, site_settings_found=False, site_url=None)
        return cls(path=path, site_settings_found=True, site_url=site_settings.get("siteUrl"))
