# topmark:header:start
#
#   project      : Goldie
#   file         : engine.py
#   file_relpath : src/goldie/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Golden file assertion engine.

Every assertion follows the same decision tree:

  1. **Update mode** (``GOLDIE_UPDATE=true``): create the golden directory, write
     the actual text verbatim, succeed. The test never fails during an update run.
  2. **Compare mode**: read the golden file (missing → `MissingGoldenFileError`),
     optionally render it as a template (failure → `TemplateRenderError`), and
     compare it to the actual text (difference → `ContentMismatchError`).

Comparison is exact: no whitespace or trailing-newline normalization is applied,
so ``"hello\\n"`` and ``"hello"`` never match, in either direction. Producers must
emit the final newline they want recorded.

Templated goldens are written verbatim in update mode as well: the recorded file
is the *rendered* output, not a template. Re-introduce the placeholders by hand
after recording; update mode cannot refresh templated goldens.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from goldie.callsite import CallSite, current_test
from goldie.config.env import is_update_mode
from goldie.config.logging import GoldieLogger, get_logger
from goldie.errors import (
    ContentMismatchError,
    GoldenFileWriteError,
    MissingGoldenFileError,
    TemplateRenderError,
)
from goldie.paths import resolve
from goldie.templating import RenderError, render
from goldie.utils.diff import render_patch, unified_diff
from goldie.utils.file import display_path, printable, read_golden, write_golden

logger: GoldieLogger = get_logger(__name__)


@dataclass(frozen=True)
class Goldie:
    """Golden file tester bound to one golden file.

    Attributes:
        golden_file (Path): Path of the golden file.
        update (bool | None): Force update (True) or compare (False) mode. None reads
            ``GOLDIE_UPDATE`` from the environment on every assertion.
    """

    golden_file: Path
    update: bool | None = None

    @classmethod
    def new(cls, source_file: str | Path, test_name: str) -> Goldie:
        """Construct a tester for the test ``test_name`` defined in ``source_file``.

        Args:
            source_file (str | Path): Path of the source file containing the test.
            test_name (str): Qualified test name, e.g. ``TestA::test_b``.

        Returns:
            Goldie: A tester for the resolved golden file.
        """
        golden_file: Path = resolve(source_file, test_name)
        logger.debug("golden file %s", golden_file)
        return cls(golden_file=golden_file)

    @classmethod
    def for_call_site(cls, site: CallSite) -> Goldie:
        """Construct a tester for a discovered call site."""
        return cls.new(site.source_file, site.test_name)

    def assert_matches(self, actual: str) -> None:
        """Assert that the golden file matches ``actual``.

        In update mode the golden file is (re)written with ``actual`` instead.

        Args:
            actual (str): Text produced by the code under test.

        Raises:
            MissingGoldenFileError: The golden file does not exist (compare mode).
            ContentMismatchError: The golden file differs from ``actual``.
            GoldenFileWriteError: Writing the golden file failed (update mode).
        """
        if self.is_update_mode():
            self._record(actual)
            return
        expected: str = self._read()
        self._compare(expected, actual)

    def assert_template(self, context: object, actual: str) -> None:
        """Render the golden file as a template with ``context`` and compare it to ``actual``.

        In update mode ``actual`` is written verbatim, exactly like
        [`assert_matches`][goldie.engine.Goldie.assert_matches].

        Args:
            context (object): Template variables (mapping, dataclass, or object).
            actual (str): Text produced by the code under test.

        Raises:
            MissingGoldenFileError: The golden file does not exist (compare mode).
            TemplateRenderError: The golden template failed to compile or render.
            ContentMismatchError: The rendered golden differs from ``actual``.
            GoldenFileWriteError: Writing the golden file failed (update mode).
        """
        if self.is_update_mode():
            self._record(actual)
            return
        source: str = self._read()
        try:
            expected: str = render(source, context)
        except RenderError as exc:
            logger.debug("render failed for %s: %s", self.golden_file, exc)
            raise TemplateRenderError(
                self.golden_file,
                f"failed to render golden file template `{self._shown_path()}`: {exc}",
            ) from exc
        self._compare(expected, actual)

    def is_update_mode(self) -> bool:
        """Return whether this assertion records instead of compares."""
        if self.update is not None:
            return self.update
        return is_update_mode()

    def _shown_path(self) -> Path:
        return display_path(self.golden_file)

    def _record(self, actual: str) -> None:
        try:
            write_golden(self.golden_file, actual)
        except (OSError, UnicodeError) as exc:
            raise GoldenFileWriteError(self.golden_file, str(exc)) from exc
        logger.info("updated golden file %s", self._shown_path())

    def _read(self) -> str:
        try:
            return read_golden(self.golden_file)
        except FileNotFoundError:
            raise MissingGoldenFileError(self.golden_file) from None

    def _compare(self, expected: str, actual: str) -> None:
        if expected == actual:
            logger.trace("golden file %s matches", self.golden_file)
            return

        shown: Path = self._shown_path()
        diff_lines: list[str] = [
            printable(line) for line in unified_diff(expected, actual, label=str(shown))
        ]
        diff: str = "\n".join(diff_lines)
        logger.debug("golden file %s does not match (%d diff line(s))", shown, len(diff_lines))
        raise ContentMismatchError(
            self.golden_file,
            expected=expected,
            actual=actual,
            diff=diff,
            message=f"golden file `{shown}` does not match\n{render_patch(diff_lines)}",
        )


def assert_golden(actual: str) -> None:
    """Assert that the calling test's golden file matches ``actual``.

    The golden file is ``testdata/<module>/<test name>.golden`` next to the test
    module. Set ``GOLDIE_UPDATE=true`` to record it.

    Args:
        actual (str): Text produced by the code under test.
    """
    Goldie.for_call_site(current_test()).assert_matches(actual)


def assert_template(context: object, actual: str) -> None:
    """Assert that the calling test's golden template, rendered with ``context``, matches ``actual``.

    Args:
        context (object): Template variables.
        actual (str): Text produced by the code under test.
    """
    Goldie.for_call_site(current_test()).assert_template(context, actual)
