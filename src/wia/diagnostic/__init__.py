# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Diagnostics collected while resolving a website context."""

from __future__ import annotations

from wia.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog

__all__: list[str] = ["Diagnostic", "DiagnosticLevel", "DiagnosticLog"]
