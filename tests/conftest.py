# topmark:header:start
#
#   project      : Goldie
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Pytest configuration for the Goldie test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.

Notes:
    Goldie's own tests compare against the golden files committed under
    ``tests/testdata``. The developer's shell must not leak ``GOLDIE_UPDATE`` into
    the run, otherwise those checks would silently turn into recordings.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from goldie.config import logging
from goldie.constants import LOG_LEVEL_ENV, UPDATE_ENV
from goldie.engine import Goldie

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def clean_goldie_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test in compare mode with Goldie's log level untouched.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(UPDATE_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log Goldie at TRACE level so failing tests show path resolution and I/O.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def golden_path(tmp_path: Path) -> Path:
    """Return a not-yet-existing golden file path nested below ``tmp_path``."""
    return tmp_path / "testdata" / "module" / "Scope" / "test_case.golden"


@pytest.fixture
def make_goldie(golden_path: Path) -> Callable[..., Goldie]:
    """Return a factory building a `Goldie` bound to ``golden_path``.

    Args:
        golden_path (Path): Golden file the testers are bound to.

    Returns:
        Callable[..., Goldie]: ``make_goldie(update=None, content=None)``; ``content``
            pre-records the golden file.
    """

    def _make(update: bool | None = None, content: str | None = None) -> Goldie:
        if content is not None:
            golden_path.parent.mkdir(parents=True, exist_ok=True)
            golden_path.write_bytes(content.encode("utf-8"))
        return Goldie(golden_file=golden_path, update=update)

    return _make
