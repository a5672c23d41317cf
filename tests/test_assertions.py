# topmark:header:start
#
#   project      : Goldie
#   file         : test_assertions.py
#   file_relpath : tests/test_assertions.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Goldie checked against its own committed golden files.

The expected outputs live in ``tests/testdata/test_assertions/``. Re-record them
with ``pytest --goldie-update tests/test_assertions.py`` and restore the
placeholders in the templated ones by hand.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

import goldie
from goldie.callsite import CallSite, current_test
from goldie.engine import Goldie
from goldie.paths import resolve


@dataclass
class Context:
    """Template context for the templated goldens."""

    test: str


def test_assert() -> None:
    """The golden file matches the produced text."""
    goldie.assert_golden("testing...\n")


def test_assert_template() -> None:
    """The golden template, rendered with the context, matches the produced text."""
    ctx = Context(test="testing...")
    goldie.assert_template(ctx, "Such testing...\n")


@pytest.mark.parametrize("word", ["alpha", "beta"])
def test_assert_parametrized(word: str) -> None:
    """Each parametrized case owns a golden file."""
    goldie.assert_golden(f"{word}\n")


class TestReport:
    """Golden files for class-based tests sit in a per-class directory."""

    def test_fixture(self, goldie: Goldie) -> None:
        """The fixture is bound to the requesting test node."""
        goldie.assert_matches("report\n")

    @pytest.mark.parametrize("lines", [1, 3], ids=["one", "three"])
    def test_fixture_parametrized(self, goldie: Goldie, lines: int) -> None:
        """The fixture distinguishes parametrized cases too."""
        goldie.assert_matches("".join(f"line {i}\n" for i in range(lines)))

    def test_fixture_template(self, goldie: Goldie) -> None:
        """The fixture supports templated goldens."""
        goldie.assert_template({"items": ["a", "b"]}, "- a\n- b\n")


def test_fixture_and_module_function_agree(goldie: Goldie) -> None:
    """Both entry points resolve the same golden file for the same test."""
    site: CallSite = current_test()
    assert goldie.golden_file == resolve(site.source_file, site.test_name)
