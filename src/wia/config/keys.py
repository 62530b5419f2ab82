# topmark:header:start
#
#   project      : Wia
#   file         : keys.py
#   file_relpath : src/wia/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Keys of the Wia settings file (``wia.toml`` or ``[tool.wia]``)."""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys for user overrides."""

    PROJECT_NAME: Final[str] = "project_name"
    WEB_PROJECT: Final[str] = "web_project"
    PROJECT_URL: Final[str] = "project_url"
    FRAMEWORK_VERSION: Final[str] = "framework_version"
    EPISERVER_VERSION: Final[str] = "episerver_version"

    ALL: Final[frozenset[str]] = frozenset(
        {PROJECT_NAME, WEB_PROJECT, PROJECT_URL, FRAMEWORK_VERSION, EPISERVER_VERSION}
    )
