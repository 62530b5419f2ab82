# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Rendering helpers for Wia.

Color-aware primitives kept separate from the UI-agnostic resolution core.

Public modules:
    - wia.rendering.colored_enum
"""

from __future__ import annotations
