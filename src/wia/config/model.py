# topmark:header:start
#
#   project      : Wia
#   file         : model.py
#   file_relpath : src/wia/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Settings model for Wia (immutable runtime snapshot + mutable builder).

Settings carry the user overrides that seed a
[`WebsiteContext`][wia.pipeline.context.model.WebsiteContext]. They come from
three layers, merged with "later wins" semantics:

    defaults (nothing set) → settings file → CLI options

The settings file is either ``wia.toml`` (top-level keys) or the ``[tool.wia]``
table of a ``pyproject.toml``. When no file is given explicitly, ``wia.toml``
in the root directory is used if present.

Example ``wia.toml``:

    ```toml
    web_project = "Contoso.Web"
    project_url = "contoso.local"
    episerver_version = 11
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from wia.config.io import (
    get_float_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    load_toml_dict,
)
from wia.config.keys import Toml
from wia.config.logging import get_logger
from wia.constants import PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION, SETTINGS_FILE_NAME
from wia.diagnostic.model import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from wia.config.io import TomlTable
    from wia.config.logging import WiaLogger

logger: WiaLogger = get_logger(__name__)


@dataclass(frozen=True)
class WiaSettings:
    """Immutable user overrides for one resolution run.

    Attributes:
        project_name (str | None): Solution name override.
        web_project (str | None): Web project directory override.
        project_url (str | None): Site URL override.
        framework_version (float | None): Target framework version override.
        episerver_version (int | None): EPiServer major version override.
        config_files (tuple[Path, ...]): Settings files that contributed.
        diagnostics (tuple[Diagnostic, ...]): Warnings raised while loading.
    """

    project_name: str | None = None
    web_project: str | None = None
    project_url: str | None = None
    framework_version: float | None = None
    episerver_version: int | None = None
    config_files: tuple[Path, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()


@dataclass
class MutableSettings:
    """Mutable settings builder used while layering sources."""

    project_name: str | None = None
    web_project: str | None = None
    project_url: str | None = None
    framework_version: float | None = None
    episerver_version: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> WiaSettings:
        """Return an immutable snapshot of these settings."""
        return WiaSettings(
            project_name=self.project_name,
            web_project=self.web_project,
            project_url=self.project_url,
            framework_version=self.framework_version,
            episerver_version=self.episerver_version,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, where: str) -> MutableSettings:
        """Build settings from a parsed TOML table.

        Unknown keys and values of the wrong type are reported as warnings.

        Args:
            data (TomlTable): The table holding the override keys.
            where (str): Location used in diagnostics (e.g. ``"wia.toml"``).

        Returns:
            MutableSettings: The settings read from ``data``.
        """
        draft = cls()
        diagnostics: DiagnosticLog = draft.diagnostics

        for key in sorted(set(data) - Toml.ALL):
            logger.warning("Unknown key in %s: %s", where, key)
            diagnostics.add_warning(f"Unknown key in {where}: {key}")

        draft.project_name = get_string_value_or_none_checked(
            data, Toml.PROJECT_NAME, where=where, diagnostics=diagnostics
        )
        draft.web_project = get_string_value_or_none_checked(
            data, Toml.WEB_PROJECT, where=where, diagnostics=diagnostics
        )
        draft.project_url = get_string_value_or_none_checked(
            data, Toml.PROJECT_URL, where=where, diagnostics=diagnostics
        )
        draft.framework_version = get_float_value_or_none_checked(
            data, Toml.FRAMEWORK_VERSION, where=where, diagnostics=diagnostics
        )
        draft.episerver_version = get_int_value_or_none_checked(
            data, Toml.EPISERVER_VERSION, where=where, diagnostics=diagnostics
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableSettings | None:
        """Load settings from a single TOML file.

        Supports both ``wia.toml`` and ``pyproject.toml`` (``[tool.wia]`` table).

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableSettings | None: The settings; None if a ``pyproject.toml``
                has no ``[tool.wia]`` table.

        Raises:
            SettingsFileError: If the file cannot be read or parsed.
        """
        logger.debug("Loading settings from %s", path)
        data: TomlTable = load_toml_dict(path)

        where: str = path.name
        if path.name == PYPROJECT_FILE_NAME:
            tool: object = data.get("tool")
            tool_section = tool.get(PYPROJECT_TOOL_SECTION) if isinstance(tool, dict) else None
            if not isinstance(tool_section, dict):
                logger.info("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = tool_section
            where = f"{path.name}[tool.{PYPROJECT_TOOL_SECTION}]"

        draft: MutableSettings = cls.from_toml_dict(data, where=where)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_settings_file(cls, root: Path) -> Path | None:
        """Return ``wia.toml`` in ``root`` if it exists."""
        candidate: Path = root / SETTINGS_FILE_NAME
        return candidate if candidate.is_file() else None

    def merge_with(self, other: MutableSettings) -> MutableSettings:
        """Return a new builder where values set in ``other`` take precedence."""
        return MutableSettings(
            project_name=other.project_name or self.project_name,
            web_project=other.web_project or self.web_project,
            project_url=other.project_url or self.project_url,
            framework_version=(
                other.framework_version
                if other.framework_version is not None
                else self.framework_version
            ),
            episerver_version=(
                other.episerver_version
                if other.episerver_version is not None
                else self.episerver_version
            ),
            config_files=[*self.config_files, *other.config_files],
            diagnostics=DiagnosticLog(items=[*self.diagnostics, *other.diagnostics]),
        )

    @classmethod
    def load_merged(
        cls,
        root: Path,
        *,
        config_file: Path | None = None,
        cli_overrides: MutableSettings | None = None,
    ) -> MutableSettings:
        """Layer the settings file (explicit or discovered) and CLI overrides.

        Args:
            root (Path): Normalized root directory, used for discovery.
            config_file (Path | None): Explicit settings file; disables discovery.
            cli_overrides (MutableSettings | None): Values given on the command line.

        Returns:
            MutableSettings: The merged settings.

        Raises:
            SettingsFileError: If a settings file cannot be read or parsed.
        """
        merged = cls()
        path: Path | None = config_file or cls.discover_settings_file(root)
        if path is not None:
            from_file: MutableSettings | None = cls.from_toml_file(path)
            if from_file is not None:
                merged = merged.merge_with(from_file)
        if cli_overrides is not None:
            merged = merged.merge_with(cli_overrides)
        logger.debug("Merged settings: %s", merged)
        return merged
