# topmark:header:start
#
#   project      : Wia
#   file         : io.py
#   file_relpath : src/wia/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Reading settings files and pulling typed values out of them.

`load_toml_dict` parses a file with tomlkit and unwraps it into plain Python
containers. The ``get_*_value_or_none_checked`` getters return a value of the
requested type or None; a value of the wrong type is dropped and reported as a
warning on the given [`DiagnosticLog`][wia.diagnostic.model.DiagnosticLog].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from wia.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from wia.config.logging import WiaLogger
    from wia.diagnostic.model import DiagnosticLog

logger: WiaLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class SettingsFileError(Exception):
    """A settings file exists (or was named) but could not be used."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path: Path = path


def load_toml_dict(path: Path) -> TomlTable:
    """Return the contents of the TOML file at ``path`` as plain dicts.

    Raises:
        SettingsFileError: If the file cannot be read or is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error("Cannot read settings file %s: %s", path, e)
        raise SettingsFileError(path, f"cannot read file ({e})") from e
    except TomlkitParseError as e:
        logger.error("Settings file %s is not valid TOML: %s", path, e)
        raise SettingsFileError(path, f"invalid TOML ({e})") from e

    unwrapped: Any = doc.unwrap()
    return cast("TomlTable", unwrapped) if isinstance(unwrapped, dict) else {}


def _reject(value: object, expected: str, *, loc: str, diagnostics: DiagnosticLog) -> None:
    message: str = f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}"
    logger.warning(message)
    diagnostics.add_warning(message)


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return ``table[key]`` stripped; None if missing, blank or not a string."""
    value: object = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        _reject(value, "string", loc=f"{where}.{key}", diagnostics=diagnostics)
        return None
    return value.strip() or None


def get_float_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> float | None:
    """Return ``table[key]`` as a float; integers are accepted, booleans are not."""
    value: object = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        _reject(value, "number", loc=f"{where}.{key}", diagnostics=diagnostics)
        return None
    return float(value)


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return ``table[key]`` if it is an integer (booleans excluded), else None."""
    value: object = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        _reject(value, "int", loc=f"{where}.{key}", diagnostics=diagnostics)
        return None
    return value
