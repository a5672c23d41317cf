# topmark:header:start
#
#   project      : Goldie
#   file         : test_paths.py
#   file_relpath : tests/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Golden path resolution: layout, name splitting, sanitizing and purity."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from goldie.errors import GoldenPathError
from goldie.paths import resolve, sanitize_segment, split_test_name

SOURCE = Path("/full/path/to/source.py")


def test_resolve_plain_function() -> None:
    """A top-level test maps to ``testdata/<module stem>/<name>.golden``."""
    assert resolve(SOURCE, "function_name") == Path(
        "/full/path/to/testdata/source/function_name.golden"
    )


def test_resolve_accepts_str_source() -> None:
    """The source file may be given as a string."""
    assert resolve(str(SOURCE), "function_name") == resolve(SOURCE, "function_name")


@pytest.mark.parametrize(
    ("test_name", "expected"),
    [
        ("TestGroup::test_case", "TestGroup/test_case.golden"),
        ("TestOuter::TestInner::test_case", "TestOuter/TestInner/test_case.golden"),
        ("TestGroup.test_case", "TestGroup/test_case.golden"),
        ("test_outer.<locals>.test_inner", "test_outer/test_inner.golden"),
        ("source.py::TestGroup::test_case", "TestGroup/test_case.golden"),
        ("tests/unit/source.py::test_case", "test_case.golden"),
    ],
)
def test_resolve_scopes_become_directories(test_name: str, expected: str) -> None:
    """Segments before the leaf become nested directories; module parts are dropped."""
    assert resolve(SOURCE, test_name) == Path("/full/path/to/testdata/source") / expected


def test_resolve_parametrize_id_is_sanitized() -> None:
    """Parametrize ids with unsafe characters yield distinct, safe file names."""
    a: Path = resolve(SOURCE, "test_case[a/b]")
    b: Path = resolve(SOURCE, "test_case[a-b]")
    assert a.name == "test_case_a_b_.golden"
    assert b.name == "test_case_a-b_.golden"
    assert a != b


def test_resolve_dotted_param_id_is_not_split() -> None:
    """Dots inside a parametrize id stay in the leaf for dotted qualnames."""
    assert resolve(SOURCE, "TestGroup.test_case[1.5]") == Path(
        "/full/path/to/testdata/source/TestGroup/test_case_1.5_.golden"
    )


def test_resolve_relative_source() -> None:
    """Relative source paths stay relative."""
    assert resolve("tests/test_x.py", "test_y") == Path("tests/testdata/test_x/test_y.golden")


@pytest.mark.parametrize("test_name", ["", "::", "  ", "<locals>"])
def test_resolve_rejects_empty_names(test_name: str) -> None:
    """A name without a usable leaf is an error rather than a hidden ``.golden`` file."""
    with pytest.raises(GoldenPathError):
        resolve(SOURCE, test_name)


def test_golden_path_error_is_value_error() -> None:
    """`GoldenPathError` can be caught as `ValueError`."""
    with pytest.raises(ValueError):
        resolve(SOURCE, "")


def test_sanitize_segment_dot_only() -> None:
    """Segments made of dots never resolve to the current or parent directory."""
    assert sanitize_segment("..") == "_.."
    assert sanitize_segment("test_a b") == "test_a_b"


def test_split_test_name_keeps_foreign_first_segment() -> None:
    """Only a first segment naming a Python file is treated as the module part."""
    assert split_test_name(SOURCE, "TestGroup::test_case") == ["TestGroup", "test_case"]


@given(
    name=st.lists(
        st.text(min_size=1, max_size=12),
        min_size=1,
        max_size=4,
    ).map("::".join)
)
def test_resolve_is_pure(name: str) -> None:
    """Resolving the same call site twice yields the same path, always below ``testdata``."""
    try:
        first: Path = resolve(SOURCE, name)
    except GoldenPathError:
        with pytest.raises(GoldenPathError):
            resolve(SOURCE, name)
        return
    assert resolve(SOURCE, name) == first
    assert first.suffix == ".golden"
    assert Path("/full/path/to/testdata/source") in first.parents
    assert ".." not in first.parts
