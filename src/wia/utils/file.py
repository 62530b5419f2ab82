# topmark:header:start
#
#   project      : Wia
#   file         : file.py
#   file_relpath : src/wia/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Filesystem lookup helpers for Wia.

All helpers return results in a deterministic (sorted) order so that "first
match" is stable across runs and platforms. File names are compared
case-insensitively: the probed projects originate on Windows, where
``Web.config`` and ``web.config`` name the same file.
"""

from __future__ import annotations

import os
from pathlib import Path

from wia.config.logging import get_logger

logger = get_logger(__name__)


def list_files(directory: Path) -> list[Path]:
    """Return the regular files directly inside ``directory``, sorted by name."""
    return sorted((p for p in directory.iterdir() if p.is_file()), key=lambda p: p.name)


def list_subdirectories(directory: Path) -> list[Path]:
    """Return the immediate subdirectories of ``directory``, sorted by name."""
    return sorted((p for p in directory.iterdir() if p.is_dir()), key=lambda p: p.name)


def find_files_with_suffix(directory: Path, suffix: str) -> list[Path]:
    """Return files directly inside ``directory`` whose name ends with ``suffix``.

    Args:
        directory (Path): Directory to list (not recursive).
        suffix (str): File name suffix such as ``".sln"``; compared case-insensitively.

    Returns:
        list[Path]: Matching files, sorted by name.
    """
    wanted: str = suffix.casefold()
    return [p for p in list_files(directory) if p.name.casefold().endswith(wanted)]


def find_file(directory: Path, name: str) -> Path | None:
    """Return the file called ``name`` directly inside ``directory``, if any.

    The name is matched case-insensitively; when several files differ only by
    case the first in sorted order wins.
    """
    if not directory.is_dir():
        return None
    wanted: str = name.casefold()
    for path in list_files(directory):
        if path.name.casefold() == wanted:
            return path
    return None


def search_tree(root: Path, name: str) -> Path | None:
    """Recursively search ``root`` for a file called ``name``.

    Files of a directory are considered before its subdirectories, and
    subdirectories are visited in sorted order.

    Args:
        root (Path): Directory whose subtree is searched.
        name (str): File name to look for (case-insensitive).

    Returns:
        Path | None: The first match, or None if the subtree has no such file.
    """
    wanted: str = name.casefold()
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename.casefold() == wanted:
                found = Path(dirpath) / filename
                logger.trace("search_tree: found %s", found)
                return found
    return None


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Compute the path of ``file_path`` relative to ``root_path``.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path): The root path to compute the relative path from.

    Returns:
        Path: The relative path from root_path to file_path.
    """
    try:
        return file_path.relative_to(root_path)
    except ValueError:
        # Not a direct subpath
        return Path(os.path.relpath(file_path, start=root_path))
