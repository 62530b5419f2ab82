# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Configuration for Wia: settings (user overrides) and logging."""

from __future__ import annotations

from wia.config.io import SettingsFileError
from wia.config.model import MutableSettings, WiaSettings

__all__: list[str] = [
    "MutableSettings",
    "SettingsFileError",
    "WiaSettings",
]
