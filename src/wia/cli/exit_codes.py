# topmark:header:start
#
#   project      : Wia
#   file         : exit_codes.py
#   file_relpath : src/wia/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Exit codes for the Wia CLI.

Wia aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Wia CLI.

    Attributes:
        SUCCESS: The website context was fully resolved.
        FAILURE: Resolution halted (a step could not resolve its field).
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: The root directory does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        CONFIG_ERROR: The settings file is unreadable or malformed. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG
