# topmark:header:start
#
#   project      : Goldie
#   file         : file.py
#   file_relpath : src/goldie/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Golden file I/O helpers.

Golden files are read and written as UTF-8 with newline translation disabled,
so ``\\r\\n`` in a golden file stays ``\\r\\n`` in memory and vice versa.
Comparing the decoded strings is then equivalent to comparing raw bytes.
"""

from __future__ import annotations

from pathlib import Path

from goldie.config.logging import GoldieLogger, get_logger
from goldie.constants import GOLDEN_DECODE_ERRORS, GOLDEN_ENCODING

logger: GoldieLogger = get_logger(__name__)


def display_path(file_path: Path, root_path: Path | None = None) -> Path:
    """Return ``file_path`` relative to ``root_path`` (default: the working directory).

    Unlike `Path.relative_to`, paths outside the root are returned unchanged
    (absolute) instead of raising.

    Args:
        file_path (Path): The path to display.
        root_path (Path | None): Base directory; defaults to ``Path.cwd()``.

    Returns:
        Path: The relative path when ``file_path`` is under the root, else ``file_path``.
    """
    resolved_root: Path = (root_path or Path.cwd()).resolve()
    try:
        return file_path.resolve().relative_to(resolved_root)
    except ValueError:
        return file_path


def read_golden(path: Path) -> str:
    """Read a golden file verbatim.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so such a file
    never equals well-formed text and compares as a mismatch.

    Args:
        path (Path): Golden file path.

    Returns:
        str: File content with line endings preserved.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    content: str = path.read_bytes().decode(GOLDEN_ENCODING, errors=GOLDEN_DECODE_ERRORS)
    logger.trace("read %d char(s) from %s", len(content), path)
    return content


def write_golden(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` verbatim, creating parent directories.

    The text is encoded before the file is opened, so unencodable content leaves
    an existing golden file untouched.

    Args:
        path (Path): Golden file path; overwritten if it exists.
        content (str): Text to record.

    Raises:
        UnicodeEncodeError: If ``content`` cannot be encoded as UTF-8.
    """
    data: bytes = content.encode(GOLDEN_ENCODING)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.trace("wrote %d byte(s) to %s", len(data), path)


def printable(text: str) -> str:
    """Return ``text`` with surrogates (undecodable golden bytes) shown as ``\\udcNN`` escapes.

    Args:
        text (str): Text that may hold surrogate escapes.

    Returns:
        str: Text safe to write to a terminal.
    """
    return text.encode(GOLDEN_ENCODING, errors="backslashreplace").decode(GOLDEN_ENCODING)
