# topmark:header:start
#
#   project      : Wia
#   file         : model.py
#   file_relpath : src/wia/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Diagnostics produced while resolving a website context.

A resolution run reports each failure path as one human-readable line, for
example "Could not find a solution file in the current directory.". Steps
record these lines on the context's `DiagnosticLog`; the CLI prints them once
the run is over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from wia.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from wia.config.logging import WiaLogger


logger: WiaLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """How serious a diagnostic is. Only errors accompany a halted run."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """One recorded line, tagged with its level."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Ordered diagnostics for one context (or one settings load)."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add(self, level: DiagnosticLevel, message: str) -> None:
        """Append ``message`` at ``level``."""
        logger.trace("diagnostic %s: %s", level.value, message)
        self.items.append(Diagnostic(level, message))

    def add_info(self, message: str) -> None:
        """Record an informational line."""
        self.add(DiagnosticLevel.INFO, message)

    def add_warning(self, message: str) -> None:
        """Record a warning; the run continues."""
        self.add(DiagnosticLevel.WARNING, message)

    def add_error(self, message: str) -> None:
        """Record an error; usually paired with a halt."""
        self.add(DiagnosticLevel.ERROR, message)

    def count(self, level: DiagnosticLevel) -> int:
        """Number of diagnostics recorded at ``level``."""
        return sum(1 for d in self.items if d.level is level)

    def has_warning(self) -> bool:
        """Whether any warning was recorded."""
        return self.count(DiagnosticLevel.WARNING) > 0

    def has_error(self) -> bool:
        """Whether any error was recorded."""
        return self.count(DiagnosticLevel.ERROR) > 0

    def messages(self) -> list[str]:
        """Messages in the order they were recorded."""
        return [d.message for d in self.items]

    def to_dict(self) -> dict[str, int]:
        """Per-level counts keyed by level value, e.g. ``{"error": 1, ...}``."""
        return {level.value: self.count(level) for level in DiagnosticLevel}

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
