# topmark:header:start
#
#   project      : Wia
#   file         : __init__.py
#   file_relpath : src/wia/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Wia package.

Wia infers the build and deployment context of an ASP.NET / EPiServer web
project (solution name, web project directory, site URL, target framework and
CMS version) by probing the filesystem, and exposes both a CLI and a small
typed API for automation.

Example:
    ```python
    from pathlib import Path

    from wia import run_resolution

    ctx = run_resolution(".", base_dir=Path.cwd())
    if not ctx.exit_at_next_check:
        print(ctx.project_name, ctx.project_url)
    ```
"""

from __future__ import annotations

from wia.pipeline.context.model import FlowControl, WebsiteContext
from wia.pipeline.engine import resolve_context, run_resolution
from wia.pipeline.outcomes import Failure, FailureKind, StepResult

__all__: list[str] = [
    "Failure",
    "FailureKind",
    "FlowControl",
    "StepResult",
    "WebsiteContext",
    "resolve_context",
    "run_resolution",
]
