# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/documents/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Readers for the project, CMS and package documents probed during resolution.

Each reader parses one known document shape into a small frozen record:

    - [`ProjectManifest`][wia.documents.project.ProjectManifest]: ``*.csproj``
    - [`CmsConfig`][wia.documents.cms.CmsConfig]: ``episerver.config`` / ``web.config``
    - [`PackageManifest`][wia.documents.packages.PackageManifest]: ``packages.config``

Malformed XML raises [`DocumentError`][wia.documents.xml.DocumentError].
"""

from __future__ import annotations

from wia.documents.cms import CmsConfig
from wia.documents.packages import PackageManifest, PackageReference, major_version
from wia.documents.project import ProjectManifest, find_project_manifest
from wia.documents.xml import DocumentError

__all__: list[str] = [
    "CmsConfig",
    "DocumentError",
    "PackageManifest",
    "PackageReference",
    "ProjectManifest",
    "find_project_manifest",
    "major_version",
]
