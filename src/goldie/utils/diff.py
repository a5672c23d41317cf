# topmark:header:start
#
#   project      : Goldie
#   file         : diff.py
#   file_relpath : src/goldie/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Diff generation and rendering for golden file mismatches.

The diff goes from the golden content to the actual text, so ``-`` lines are
what the golden file expects and ``+`` lines are what the code produced.
"""

from __future__ import annotations

import difflib
from collections.abc import Sequence

from yachalk import chalk

from goldie.config.logging import GoldieLogger, get_logger

logger: GoldieLogger = get_logger(__name__)

NO_NEWLINE_MARKER: str = "\\ No newline at end of file"


def unified_diff(expected: str, actual: str, label: str = "golden") -> list[str]:
    """Return a unified diff between golden and actual text.

    Lines keep their terminators so that a missing final newline or a CRLF/LF
    difference still produces a visible hunk.

    Args:
        expected (str): Golden content.
        actual (str): Produced content.
        label (str): Name of the golden side in the ``---`` header.

    Returns:
        list[str]: Diff lines without trailing newlines; empty if the texts are equal.
    """
    out: list[str] = []
    for line in difflib.unified_diff(
        expected.splitlines(keepends=True),
        actual.splitlines(keepends=True),
        fromfile=label,
        tofile="actual",
    ):
        if line.startswith(("---", "+++", "@@")):
            out.append(line.rstrip("\n"))
        elif line.endswith("\n"):
            out.append(line[:-1])
        elif _has_line_break(line):
            # "\r", "\x0c", "\u2028"... end a line without a "\n".
            out.append(line)
        else:
            out.append(line)
            out.append(NO_NEWLINE_MARKER)
    logger.trace("diff: %d line(s)", len(out))
    return out


def _has_line_break(line: str) -> bool:
    """Return True if a diff line ends with one of the `str.splitlines` boundaries."""
    body: str = line[1:]
    return bool(body) and body.splitlines()[0] != body


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = list(patch)

    # Map diff markers to colors and show control characters explicitly.
    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r").replace("\t", "\\t")

        if line.startswith(("---", "+++")):
            return chalk.bold.white(content)
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case "\\":
                return chalk.yellow(content)
            case _:
                return chalk.white(content)

    if show_line_numbers is True:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
