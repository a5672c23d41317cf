# topmark:header:start
#
#   project      : Goldie
#   file         : errors.py
#   file_relpath : src/goldie/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Exceptions raised by Goldie assertions.

Usage:
    Comparison failures derive from `AssertionError` (through
    `GoldenAssertionError`) so test runners report them as ordinary test
    failures. Environment problems (an update-mode write that cannot complete,
    a test name that cannot be mapped to a path) are plain errors.

Nothing here is retried: golden-file checks are deterministic.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from goldie.constants import UPDATE_ENV

if TYPE_CHECKING:
    from pathlib import Path


class GoldieError(Exception):
    """Base class for all Goldie errors."""


class GoldenAssertionError(GoldieError, AssertionError):
    """A golden-file check failed; reported by the test runner as a failure."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path: Path = path


class MissingGoldenFileError(GoldenAssertionError):
    """The golden file does not exist (never recorded, or deleted)."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            path,
            f"golden file `{path}` does not exist; run the test once with "
            f"{UPDATE_ENV}=true to record it",
        )


class ContentMismatchError(GoldenAssertionError):
    """The actual text differs from the (rendered) golden file.

    Attributes:
        expected (str): Golden content (after rendering, for templated goldens).
        actual (str): Text produced by the code under test.
        diff (str): Unified diff from ``expected`` to ``actual``.
    """

    def __init__(self, path: Path, expected: str, actual: str, diff: str, message: str) -> None:
        super().__init__(path, message)
        self.expected: str = expected
        self.actual: str = actual
        self.diff: str = diff


class TemplateRenderError(GoldenAssertionError):
    """The golden template could not be compiled or rendered with the given context."""


class GoldenFileWriteError(GoldieError):
    """Creating the golden directory or writing the golden file failed in update mode."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to write golden file `{path}`: {reason}")
        self.path: Path = path


class GoldenPathError(GoldieError, ValueError):
    """A test identity cannot be mapped to a golden file path."""


class CallSiteError(GoldieError, RuntimeError):
    """The currently running test could not be determined from the call stack."""
