# topmark:header:start
#
#   project      : Wia
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Nox sessions for Wia.

``nox`` runs ``lint`` and ``qa`` by default. ``qa`` runs once per Python
version listed in the ``pyproject.toml`` classifiers; ``property_test`` runs
only the Hypothesis tests.
"""

from __future__ import annotations

import pathlib
import re
import sys
import tomllib

import nox

PYPROJECT: pathlib.Path = pathlib.Path(__file__).parent / "pyproject.toml"
CLASSIFIER_RE = re.compile(r"^Programming Language :: Python :: (\d+)\.(\d+)$")
LINT_TARGETS = ("src/wia", "tests", "noxfile.py")


def supported_pythons() -> list[str]:
    """Return the ``X.Y`` versions declared in the classifiers, oldest first.

    Falls back to the running interpreter when none are declared. Only stdlib
    is used, since this runs when nox imports the file.
    """
    with PYPROJECT.open("rb") as fh:
        classifiers: list[str] = tomllib.load(fh).get("project", {}).get("classifiers", [])
    found: set[tuple[int, int]] = set()
    for classifier in classifiers:
        match = CLASSIFIER_RE.match(classifier.strip())
        if match:
            found.add((int(match[1]), int(match[2])))
    if not found:
        return [f"{sys.version_info.major}.{sys.version_info.minor}"]
    return [f"{major}.{minor}" for major, minor in sorted(found)]


PYTHONS: list[str] = supported_pythons()

nox.options.sessions = ["lint", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Tests, then pyright, on each supported Python."""
    session.install("-e", ".[dev]")
    session.run("pytest", "-q", "tests", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python))


@nox.session
def lint(session: nox.Session) -> None:
    """Ruff lint and format check."""
    session.install("-e", ".[dev]")
    session.run("ruff", "check", *LINT_TARGETS)
    session.run("ruff", "format", "--check", *LINT_TARGETS)


@nox.session
def property_test(session: nox.Session) -> None:
    """Hypothesis tests only."""
    session.install("-e", ".[test]")
    session.run("pytest", "-vv", "tests", "-m", "hypothesis", *session.posargs)
