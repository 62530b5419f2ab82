# topmark:header:start
#
#   project      : Wia
#   file         : __main__.py
#   file_relpath : src/wia/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Module entry point for running Wia via ``python -m wia``.

Delegates to [`wia.cli.main.cli`][wia.cli.main.cli], the single authoritative
CLI entry point.

Examples:
    Resolve the website context of the current directory::

        python -m wia resolve .
"""

from __future__ import annotations

from wia.cli.main import cli

if __name__ == "__main__":
    cli()
