# topmark:header:start
#
#   project      : Wia
#   file         : assembly.py
#   file_relpath : src/wia/documents/assembly.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Read the file version embedded in a .NET assembly.

Assemblies are PE images; the version lives in the ``VS_FIXEDFILEINFO``
structure of the version resource, read here with `pefile`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pefile

from wia.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from wia.config.logging import WiaLogger

logger: WiaLogger = get_logger(__name__)


def read_file_version(path: Path) -> tuple[int, int, int, int] | None:
    """Return the ``(major, minor, build, revision)`` file version of ``path``.

    Args:
        path (Path): A PE file (``.dll`` or ``.exe``).

    Returns:
        tuple[int, int, int, int] | None: The file version, or None if the file
            is not a PE image or carries no version resource.
    """
    try:
        pe = pefile.PE(str(path))
    except pefile.PEFormatError as exc:
        logger.warning("Not a PE image: %s (%s)", path, exc)
        return None

    try:
        fixed_infos = getattr(pe, "VS_FIXEDFILEINFO", None)
        if not fixed_infos:
            logger.info("No version resource in %s", path)
            return None
        info = fixed_infos[0]
        ms: int = info.FileVersionMS
        ls: int = info.FileVersionLS
        return (ms >> 16, ms & 0xFFFF, ls >> 16, ls & 0xFFFF)
    finally:
        pe.close()


def read_major_version(path: Path) -> int | None:
    """Return the major component of the file version of ``path``, if readable."""
    version: tuple[int, int, int, int] | None = read_file_version(path)
    if version is None:
        return None
    logger.debug("File version of %s: %s", path, ".".join(str(part) for part in version))
    return version[0]
