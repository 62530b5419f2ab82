# topmark:header:start
#
#   project      : Wia
#   file         : model.py
#   file_relpath : src/wia/pipeline/context/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Website context model for the Wia resolution pipeline.

This module defines the state that flows through the resolution pipeline. The
central type is [`WebsiteContext`][wia.pipeline.context.model.WebsiteContext]:
it holds the user-supplied overrides, the values discovered by each step, the
per-step status, collected diagnostics and the halt latch.

Sections:
    WebsiteContext:
        The single mutable record threaded through one resolution run.

    FlowControl:
        The soft-failure latch. Once a step requests a halt, every later step
        is a no-op that returns its unresolved sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from wia.config.logging import get_logger
from wia.constants import UNRESOLVED_NUMBER
from wia.diagnostic.model import DiagnosticLog
from wia.pipeline.status import ResolutionStatus

if TYPE_CHECKING:
    from wia.config.logging import WiaLogger
    from wia.config.model import WiaSettings
    from wia.pipeline.protocols import Step


logger: WiaLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "WebsiteContext",
    "normalize_root",
]


def normalize_root(current_directory: str | Path | None, *, base_dir: Path) -> Path:
    """Return the absolute root directory for a resolution run.

    An absolute ``current_directory`` is kept as is, a relative one is joined
    onto ``base_dir``, and a blank one is replaced by ``base_dir``.
    """
    base: Path = Path(base_dir).absolute()
    raw: str = str(current_directory).strip() if current_directory is not None else ""
    return base / raw if raw else base


@dataclass
class FlowControl:
    """Monotonic halt latch for one resolution run."""

    halt: bool = False
    reason: str = ""  # failure kind, e.g. "missing resource"
    at_step: str = ""  # step name that requested the halt

    def request_halt(self, *, reason: str, at_step: str) -> None:
        """Set the latch. The first request wins; the latch is never cleared.

        Args:
            reason (str): Short reason code for the halt.
            at_step (str): Name of the step requesting the halt.
        """
        if self.halt:
            logger.debug("Halt already requested by %s; ignoring %s", self.at_step, at_step)
            return
        self.halt = True
        self.reason = reason
        self.at_step = at_step


@dataclass
class WebsiteContext:
    """Mutable settings record threaded through a single resolution run.

    String fields are ``None`` while unset; numeric fields are unset when
    ``<= 0`` and receive ``-1`` when their step cannot resolve them.

    Attributes:
        current_directory (Path): Root directory to scan (normalized by
            [`bootstrap`][wia.pipeline.context.model.WebsiteContext.bootstrap]).
        project_name (str | None): Solution name.
        web_project_name (str | None): Directory name of the web project
            relative to ``current_directory`` (``"."`` for the root itself).
        project_url (str | None): Base URL of the site.
        framework_version (float): Target .NET framework version.
        episerver_version (int): Major version of the installed EPiServer CMS.
        flow (FlowControl): The halt latch.
        status (ResolutionStatus): Per-step outcome.
        diagnostics (DiagnosticLog): Diagnostics collected during the run.
        steps (list[Step]): Steps executed for this context, in order.
    """

    current_directory: Path
    project_name: str | None = None
    web_project_name: str | None = None
    project_url: str | None = None
    framework_version: float = UNRESOLVED_NUMBER
    episerver_version: int = UNRESOLVED_NUMBER

    flow: FlowControl = field(default_factory=FlowControl)
    status: ResolutionStatus = field(default_factory=ResolutionStatus)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    steps: list[Step] = field(default_factory=lambda: [])

    @classmethod
    def bootstrap(
        cls,
        current_directory: str | Path | None,
        *,
        base_dir: Path,
        settings: WiaSettings | None = None,
    ) -> WebsiteContext:
        """Create a context with a normalized root directory and optional overrides.

        The root directory is normalized with
        [`normalize_root`][wia.pipeline.context.model.normalize_root].

        Args:
            current_directory (str | Path | None): Root directory as supplied by the caller.
            base_dir (Path): Directory that relative roots are resolved against.
            settings (WiaSettings | None): User overrides for the resolved fields.

        Returns:
            WebsiteContext: A fresh context for one resolution run.
        """
        root: Path = normalize_root(current_directory, base_dir=base_dir)

        ctx = cls(current_directory=root)
        if settings is not None:
            ctx.project_name = settings.project_name
            ctx.web_project_name = settings.web_project
            ctx.project_url = settings.project_url
            if settings.framework_version is not None:
                ctx.framework_version = settings.framework_version
            if settings.episerver_version is not None:
                ctx.episerver_version = settings.episerver_version
        logger.debug("Bootstrapped context for root '%s'", root)
        return ctx

    @property
    def exit_at_next_check(self) -> bool:
        """Whether the halt latch has been set."""
        return self.flow.halt

    @property
    def web_project_directory(self) -> Path | None:
        """Directory of the web project, or None while it is unresolved."""
        if not self.web_project_name:
            return None
        return self.current_directory / self.web_project_name

    def is_resolved(self, field_name: str) -> bool:
        """Return True if ``field_name`` holds a usable value.

        Strings count when non-blank, numbers when positive.
        """
        value: object = getattr(self, field_name)
        if isinstance(value, str):
            return bool(value.strip())
        if isinstance(value, (int, float)):
            return value > 0
        return value is not None

    def add_warning(self, message: str) -> None:
        """Record a warning diagnostic."""
        self.diagnostics.add_warning(message)

    def add_error(self, message: str) -> None:
        """Record an error diagnostic."""
        self.diagnostics.add_error(message)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly snapshot of the resolved fields and run state."""
        return {
            "current_directory": str(self.current_directory),
            "project_name": self.project_name,
            "web_project_name": self.web_project_name,
            "project_url": self.project_url,
            "framework_version": self.framework_version,
            "episerver_version": self.episerver_version,
            "exit_at_next_check": self.exit_at_next_check,
            "halted_at": self.flow.at_step or None,
            "status": self.status.to_dict(),
            "diagnostics": [
                {"level": d.level.value, "message": d.message} for d in self.diagnostics
            ],
        }
