# topmark:header:start
#
#   project      : Goldie
#   file         : pytest_plugin.py
#   file_relpath : src/goldie/pytest_plugin.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""pytest integration for Goldie (registered through the ``pytest11`` entry point).

Provides:
    - ``--goldie-update``: record golden files for the whole session.
    - ``goldie`` fixture: a [`Goldie`][goldie.engine.Goldie] bound to the
      requesting test node, one golden file per parametrized case.
"""

from __future__ import annotations

import os

import pytest

from goldie.callsite import from_node_id
from goldie.config.env import is_update_mode
from goldie.config.logging import GoldieLogger, get_logger
from goldie.constants import UPDATE_ENV
from goldie.engine import Goldie

logger: GoldieLogger = get_logger(__name__)

_SAVED_UPDATE_KEY = pytest.StashKey[tuple[bool, str | None]]()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register Goldie's command line options."""
    group = parser.getgroup("goldie", "golden file assertions")
    group.addoption(
        "--goldie-update",
        action="store_true",
        default=False,
        help=f"write golden files instead of comparing them (same as {UPDATE_ENV}=true)",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Switch the session into update mode when ``--goldie-update`` is given."""
    if not config.getoption("goldie_update", default=False):
        return
    config.stash[_SAVED_UPDATE_KEY] = (UPDATE_ENV in os.environ, os.environ.get(UPDATE_ENV))
    os.environ[UPDATE_ENV] = "true"
    logger.debug("--goldie-update: %s=true for this session", UPDATE_ENV)


def pytest_unconfigure(config: pytest.Config) -> None:
    """Restore the update toggle saved by `pytest_configure`."""
    saved: tuple[bool, str | None] | None = config.stash.get(_SAVED_UPDATE_KEY, None)
    if saved is None:
        return
    was_set, value = saved
    if was_set and value is not None:
        os.environ[UPDATE_ENV] = value
    else:
        os.environ.pop(UPDATE_ENV, None)


def pytest_report_header(config: pytest.Config) -> str | None:  # pylint: disable=unused-argument
    """Announce update mode so a recording run is never mistaken for a check."""
    if is_update_mode():
        return "goldie: update mode, golden files will be rewritten"
    return None


@pytest.fixture
def goldie(request: pytest.FixtureRequest) -> Goldie:
    """Return a `Goldie` bound to the requesting test.

    Args:
        request (pytest.FixtureRequest): The pytest request of the test.

    Returns:
        Goldie: Tester for ``testdata/<module>/<class>/<test>_<params>_.golden``. The
            update toggle is read at each assertion, not when the fixture is built.
    """
    site = from_node_id(request.path, request.node.nodeid)
    return Goldie.for_call_site(site)
