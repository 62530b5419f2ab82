# topmark:header:start
#
#   project      : Wia
#   file         : protocols.py
#   file_relpath : src/wia/pipeline/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Structural protocol for resolution pipeline steps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from wia.pipeline.context.model import WebsiteContext


class Step(Protocol):
    """A callable pipeline step that mutates and returns the context."""

    name: str

    def __call__(self, ctx: WebsiteContext) -> WebsiteContext:
        """Run the step against ``ctx`` and return it."""
        ...
