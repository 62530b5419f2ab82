# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Command-line interface for Wia (Click)."""

from __future__ import annotations
