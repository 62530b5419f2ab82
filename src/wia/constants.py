# topmark:header:start
#
#   project      : Wia
#   file         : constants.py
#   file_relpath : src/wia/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Wia Constants."""

from __future__ import annotations

from typing import Final

# Settings files
SETTINGS_FILE_NAME: Final[str] = "wia.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "wia"

# Files and directories probed while resolving a website context
SOLUTION_FILE_SUFFIX: Final[str] = ".sln"
PROJECT_MANIFEST_SUFFIX: Final[str] = ".csproj"
WEB_CONFIG_NAME: Final[str] = "web.config"
EPISERVER_CONFIG_NAME: Final[str] = "episerver.config"
PACKAGES_CONFIG_NAME: Final[str] = "packages.config"
EPISERVER_ASSEMBLY_NAME: Final[str] = "EPiServer.dll"
EPISERVER_CORE_PACKAGE_ID: Final[str] = "EPiServer.CMS.Core"

# Substring (case-insensitive) identifying web project directories
WEB_PROJECT_MARKER: Final[str] = "web"
# Web project name used when the root directory is itself the web project
ROOT_WEB_PROJECT: Final[str] = "."

DEFAULT_URL_SCHEME: Final[str] = "http://"
KNOWN_URL_SCHEMES: Final[tuple[str, ...]] = ("http://", "https://")

# Unresolved sentinel for numeric context fields
UNRESOLVED_NUMBER: Final[int] = -1

VALUE_NOT_SET: Final[str] = "<not set>"
