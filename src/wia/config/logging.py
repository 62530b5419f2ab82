# topmark:header:start
#
#   project      : Wia
#   file         : logging.py
#   file_relpath : src/wia/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Internal logging for Wia.

Every module obtains its logger through `get_logger`, which returns a
`WiaLogger`: a standard logger with an extra ``trace()`` method for a TRACE
level below DEBUG. Records go to stderr, colored per level with yachalk, so
stdout carries only the resolved context.

The level comes from the ``WIA_LOG_LEVEL`` environment variable (a level name
such as ``debug`` or a number). Without it only CRITICAL records are shown;
the ``-v``/``-q`` CLI flags drive program output, not logging.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "WIA_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

# Accepted spellings of WIA_LOG_LEVEL besides plain integers
LOG_LEVELS: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "FATAL": logging.CRITICAL,
    "CRITICAL": logging.CRITICAL,
}


class WiaLogger(logging.Logger):
    """Logger with a ``trace()`` method."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(WiaLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors the whole line according to the record level."""

    # Highest threshold first; the first one the record reaches picks the style
    STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color for its level."""
        line: str = super().format(record)
        for threshold, style in self.STYLES:
            if record.levelno >= threshold:
                return style(line)
        return chalk.dim(line)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``WIA_LOG_LEVEL``, or None if unset or unknown."""
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if raw.isdigit():
        return int(raw)
    return LOG_LEVELS.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Send all records at ``level`` and above to stderr.

    With ``level`` None, ``WIA_LOG_LEVEL`` is consulted, then CRITICAL is used.
    Calling this again replaces the handler installed by the previous call.
    """
    if level is None:
        level = resolve_env_log_level()
    effective: int = logging.CRITICAL if level is None else level

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if effective >= logging.INFO else DEBUG_LOG_FORMAT)
    )

    root = logging.getLogger()
    root.setLevel(effective)
    for previous in list(root.handlers):
        root.removeHandler(previous)
    root.addHandler(handler)


def get_logger(name: str) -> WiaLogger:
    """Return the `WiaLogger` called ``name`` (usually ``__name__``)."""
    return cast("WiaLogger", logging.getLogger(name))
