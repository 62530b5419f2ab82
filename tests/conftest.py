# topmark:header:start
#
#   project      : Wia
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The Wia authors
#
# topmark:header:end

"""Shared test helpers for Wia.

- Type-preserving wrappers (`fixture`, `parametrize`, `mark_*`) so pyright
  keeps the decorated signatures.
- Logging at TRACE for the whole session, with ``WIA_LOG_LEVEL`` removed from
  the environment of every test.
- `make_settings` for frozen override sets.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from wia.config import MutableSettings
from wia.config import logging as wia_logging

if TYPE_CHECKING:
    from wia.config import WiaSettings

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Return ``mark`` as a decorator typed to give back what it receives."""

    def _apply(func: F) -> F:
        return cast("F", mark(func))

    return _apply


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """`pytest.mark.parametrize`, typed."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """`pytest.fixture`, typed."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """`pytest.hookimpl`, typed."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log everything down to TRACE while the suite runs."""
    wia_logging.setup_logging(level=wia_logging.TRACE_LEVEL)


@fixture(autouse=True)
def silence_wia_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore a ``WIA_LOG_LEVEL`` exported in the developer's shell."""
    monkeypatch.delenv(wia_logging.LOG_LEVEL_ENV_VAR, raising=False)


def make_settings(**overrides: Any) -> WiaSettings:
    """Freeze a `MutableSettings` built from ``overrides`` (field name to value)."""
    draft = MutableSettings()
    for name, value in overrides.items():
        setattr(draft, name, value)
    return draft.freeze()
