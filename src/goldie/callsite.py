# topmark:header:start
#
#   project      : Goldie
#   file         : callsite.py
#   file_relpath : src/goldie/callsite.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Discover which test is calling a Goldie assertion.

`goldie.assert_golden()` takes no path argument: the golden file is derived from
the source file and qualified name of the running test. This module recovers
both from the Python call stack, using pytest's ``PYTEST_CURRENT_TEST``
environment variable to tell parametrized cases apart.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from goldie.config.logging import GoldieLogger, get_logger
from goldie.constants import NODE_ID_SEPARATOR, PYTEST_CURRENT_TEST_ENV
from goldie.errors import CallSiteError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import FrameType

logger: GoldieLogger = get_logger(__name__)

TEST_FUNCTION_PREFIX: str = "test"


@dataclass(frozen=True)
class CallSite:
    """Identity of a running test.

    Attributes:
        source_file (Path): Absolute path of the file defining the test.
        test_name (str): ``::``-separated qualified name, e.g. ``TestA::test_b[x]``.
    """

    source_file: Path
    test_name: str


def _frame_qualname(frame: FrameType) -> str:
    """Return the qualified name of the function running in ``frame``."""
    code = frame.f_code
    qualname: str | None = getattr(code, "co_qualname", None)  # Python >= 3.11
    if qualname:
        return qualname
    # Python 3.10: recover the class of test methods from ``self``/``cls``.
    owner: object | None = frame.f_locals.get("self", frame.f_locals.get("cls"))
    if owner is not None:
        cls: type = owner if isinstance(owner, type) else type(owner)
        if callable(getattr(cls, code.co_name, None)):
            return f"{cls.__qualname__}.{code.co_name}"
    return code.co_name


def _to_node_style(qualname: str) -> str:
    return NODE_ID_SEPARATOR.join(p for p in qualname.split(".") if p != "<locals>")


def _pytest_leaf(environ: Mapping[str, str]) -> str | None:
    """Return the leaf of the node id pytest is currently running, if any.

    ``PYTEST_CURRENT_TEST`` looks like ``tests/test_x.py::TestA::test_b[p1] (call)``.
    """
    current: str | None = environ.get(PYTEST_CURRENT_TEST_ENV)
    if not current:
        return None
    node_id: str = current.rsplit(" (", 1)[0]
    return node_id.rsplit(NODE_ID_SEPARATOR, 1)[-1]


def from_node_id(source_file: str | Path, node_id: str) -> CallSite:
    """Build a `CallSite` from a pytest node id.

    Args:
        source_file (str | Path): Path of the test module (``request.path``).
        node_id (str): Node id such as ``tests/test_x.py::TestA::test_b[p1]``.

    Returns:
        CallSite: The call site; the module part of the node id is kept and
            dropped later by [`resolve`][goldie.paths.resolve].
    """
    return CallSite(source_file=Path(source_file).resolve(), test_name=node_id)


def current_test(
    *,
    frame: FrameType | None = None,
    environ: Mapping[str, str] | None = None,
) -> CallSite:
    """Return the identity of the test function on the call stack.

    The innermost frame whose function name starts with ``test`` wins, so helper
    functions called from a test resolve to the test itself.

    Args:
        frame (FrameType | None): Frame to start searching from; defaults to the caller's.
        environ (Mapping[str, str] | None): Environment to consult; defaults to ``os.environ``.

    Returns:
        CallSite: Source file and qualified test name.

    Raises:
        CallSiteError: If no test function is found on the stack.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    current: FrameType | None = frame if frame is not None else inspect.currentframe()
    if frame is None and current is not None:
        current = current.f_back

    try:
        while current is not None:
            name: str = current.f_code.co_name
            if name.startswith(TEST_FUNCTION_PREFIX):
                test_name: str = _to_node_style(_frame_qualname(current))
                leaf: str | None = _pytest_leaf(env)
                if leaf is not None and leaf.partition("[")[0] == name:
                    # Carry over the parametrize id, e.g. ``test_b[p1]``.
                    head, _, _ = test_name.rpartition(NODE_ID_SEPARATOR)
                    test_name = f"{head}{NODE_ID_SEPARATOR}{leaf}" if head else leaf
                site = CallSite(
                    source_file=Path(current.f_code.co_filename).resolve(),
                    test_name=test_name,
                )
                logger.debug("call site: %s :: %s", site.source_file, site.test_name)
                return site
            current = current.f_back
    finally:
        # Break the reference cycle frame <-> local.
        del current

    raise CallSiteError(
        f"no function named '{TEST_FUNCTION_PREFIX}*' found on the call stack; "
        "call Goldie from within a test or use the `goldie` fixture"
    )
