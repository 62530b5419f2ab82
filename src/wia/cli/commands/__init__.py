# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Wia CLI commands."""

from __future__ import annotations
