# topmark:header:start
#
#   project      : Wia
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""CLI test helpers for running Wia in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so that a missing or relative ``DIRECTORY``
argument resolves against the test tree, as it does for a user running
``wia resolve`` from a solution folder.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from tests.conftest import fixture
from tests.pipeline.conftest import build_contoso_site
from wia.cli.exit_codes import ExitCode
from wia.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


def run_cli_in(cwd: Path, argv: Sequence[str]) -> Result:
    """Run ``wia *argv`` from ``cwd``, restoring the previous directory afterwards."""
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(previous)


def run_cli(argv: Sequence[str]) -> Result:
    """Run ``wia *argv`` where the outcome does not depend on the working directory."""
    return CliRunner().invoke(cli, list(argv))


def parse_fields(output: str) -> dict[str, str]:
    """Return the ``label : value`` lines of text output as a mapping."""
    fields: dict[str, str] = {}
    for line in output.splitlines():
        label, sep, value = line.partition(" : ")
        if sep:
            fields[label.strip()] = value.strip()
    return fields


@fixture()
def site(tmp_path: Path) -> Path:
    """A complete, resolvable project tree."""
    return build_contoso_site(tmp_path / "contoso")


def _assert_exit(result: Result, expected: ExitCode) -> None:
    assert result.exit_code == expected, f"exit {result.exit_code} != {expected}\n{result.output}"


def assert_SUCCESS(result: Result) -> None:
    _assert_exit(result, ExitCode.SUCCESS)


def assert_FAILURE(result: Result) -> None:
    _assert_exit(result, ExitCode.FAILURE)


def assert_USAGE_ERROR(result: Result) -> None:
    _assert_exit(result, ExitCode.USAGE_ERROR)
