# topmark:header:start
#
#   project      : Wia
#   file         : status.py
#   file_relpath : src/wia/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Status enums for each resolution step.

Each step writes exactly one status attribute on
[`ResolutionStatus`][wia.pipeline.status.ResolutionStatus], named after the
context field it resolves. Values are human-readable strings used in CLI
output; compare with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass

from yachalk import chalk

from wia.rendering.colored_enum import ColoredStrEnum


class StepStatus(ColoredStrEnum):
    """Represents the outcome of one resolution step."""

    PENDING = ("pending", chalk.gray)
    OVERRIDDEN = ("overridden", chalk.blue)
    RESOLVED = ("resolved", chalk.green)
    NOT_FOUND = ("not found", chalk.yellow)
    FAILED = ("failed", chalk.red_bright)
    SKIPPED = ("skipped", chalk.gray)


@dataclass
class ResolutionStatus:
    """Per-step status for one resolution run."""

    project_name: StepStatus = StepStatus.PENDING
    web_project_name: StepStatus = StepStatus.PENDING
    project_url: StepStatus = StepStatus.PENDING
    framework_version: StepStatus = StepStatus.PENDING
    episerver_version: StepStatus = StepStatus.PENDING

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping of field name to status value."""
        return {
            "project_name": self.project_name.value,
            "web_project_name": self.web_project_name.value,
            "project_url": self.project_url.value,
            "framework_version": self.framework_version.value,
            "episerver_version": self.episerver_version.value,
        }
