# topmark:header:start
#
#   project      : Goldie
#   file         : paths.py
#   file_relpath : src/goldie/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Golden file path resolution.

A golden file lives next to the test module that owns it::

    tests/test_report.py :: TestSummary::test_totals[eur]
    -> tests/testdata/test_report/TestSummary/test_totals_eur_.golden

The mapping is a pure function of the source file and the test name. Nothing is
created or checked on disk here; the update-mode writer creates directories.
"""

from __future__ import annotations

import re
from pathlib import Path

from goldie.config.logging import GoldieLogger, get_logger
from goldie.constants import GOLDEN_EXTENSION, NODE_ID_SEPARATOR, TESTDATA_DIR
from goldie.errors import GoldenPathError

logger: GoldieLogger = get_logger(__name__)

_UNSAFE_CHARS: re.Pattern[str] = re.compile(r"[^A-Za-z0-9_.\-]")

# Qualname noise for functions defined inside other functions.
_LOCALS_SEGMENT: str = "<locals>"


def sanitize_segment(segment: str) -> str:
    """Make a single name segment safe to use as a file or directory name.

    Characters outside ``[A-Za-z0-9_.-]`` (brackets and slashes from parametrize
    ids, spaces, ...) are replaced by ``_``. A segment made only of dots is
    prefixed so it never resolves to ``.`` or ``..``.

    Args:
        segment (str): Raw segment, e.g. ``"test_x[a/b]"``.

    Returns:
        str: The sanitized segment, e.g. ``"test_x_a_b_"``.
    """
    cleaned: str = _UNSAFE_CHARS.sub("_", segment)
    if cleaned and set(cleaned) == {"."}:
        cleaned = "_" + cleaned
    return cleaned


def split_test_name(source_file: Path, test_name: str) -> list[str]:
    """Split a qualified test name into its segments.

    ``::`` separates segments (pytest node ids). A name without ``::`` is treated
    as a Python qualname and split on ``.`` outside of parametrize brackets. A
    leading segment naming the source file (full node ids) is dropped, as are
    ``<locals>`` markers.

    Args:
        source_file (Path): File that defines the test.
        test_name (str): Qualified test name.

    Returns:
        list[str]: Non-empty segments, outermost first.
    """
    if NODE_ID_SEPARATOR in test_name:
        parts: list[str] = test_name.split(NODE_ID_SEPARATOR)
        if parts and (parts[0].endswith(".py") or Path(parts[0]).name == source_file.name):
            parts = parts[1:]
    else:
        base, bracket, params = test_name.partition("[")
        parts = base.split(".")
        if bracket:
            parts[-1] = f"{parts[-1]}[{params}"

    return [p.strip() for p in parts if p.strip() and p.strip() != _LOCALS_SEGMENT]


def resolve(source_file: str | Path, test_name: str) -> Path:
    """Return the golden file path for a test.

    Args:
        source_file (str | Path): Path of the source file containing the test.
        test_name (str): Qualified name of the test, ``::``- or ``.``-separated.
            Segments before the leaf become subdirectories.

    Returns:
        Path: ``<dir>/testdata/<source stem>/<scopes...>/<leaf>.golden``.

    Raises:
        GoldenPathError: If ``test_name`` has no usable leaf segment.
    """
    src = Path(source_file)
    segments: list[str] = split_test_name(src, test_name)
    if not segments:
        raise GoldenPathError(f"cannot derive a golden file name from test name {test_name!r}")

    *scopes, leaf = (sanitize_segment(s) for s in segments)

    golden: Path = src.parent / TESTDATA_DIR / src.stem
    for scope in scopes:
        golden = golden / scope
    golden = golden / f"{leaf}{GOLDEN_EXTENSION}"

    logger.trace("resolve(%s, %r) -> %s", src, test_name, golden)
    return golden
