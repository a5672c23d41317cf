# topmark:header:start
#
#   project      : Goldie
#   file         : constants.py
#   file_relpath : src/goldie/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Goldie Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    GOLDIE_VERSION: str = get_version("goldie")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    GOLDIE_VERSION = "0.0.0"

# Environment toggle switching every assertion in the process into update mode.
UPDATE_ENV: Final[str] = "GOLDIE_UPDATE"
UPDATE_ENV_VALUES: Final[frozenset[str]] = frozenset({"1", "true"})

LOG_LEVEL_ENV: Final[str] = "GOLDIE_LOG_LEVEL"

# Set by pytest while a test runs: "<node id> (<phase>)".
PYTEST_CURRENT_TEST_ENV: Final[str] = "PYTEST_CURRENT_TEST"

TESTDATA_DIR: Final[str] = "testdata"
GOLDEN_EXTENSION: Final[str] = ".golden"

NODE_ID_SEPARATOR: Final[str] = "::"

GOLDEN_ENCODING: Final[str] = "utf-8"
GOLDEN_DECODE_ERRORS: Final[str] = "surrogateescape"
