# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/pipeline/context/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Context types for the Wia resolution pipeline."""

from __future__ import annotations

from wia.pipeline.context.model import FlowControl, WebsiteContext
from wia.pipeline.status import ResolutionStatus, StepStatus

__all__: list[str] = [
    "FlowControl",
    "ResolutionStatus",
    "StepStatus",
    "WebsiteContext",
]
