# topmark:header:start
#
#   project      : Goldie
#   file         : env.py
#   file_relpath : src/goldie/config/env.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Environment-driven run mode.

The update flag is looked up again on every assertion; tests that toggle
``GOLDIE_UPDATE`` with ``monkeypatch.setenv`` see the new value immediately.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from goldie.config.logging import GoldieLogger, get_logger
from goldie.constants import UPDATE_ENV, UPDATE_ENV_VALUES

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: GoldieLogger = get_logger(__name__)


def is_update_mode(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when golden files should be (re)written instead of compared.

    Args:
        environ (Mapping[str, str] | None): Environment to consult; defaults to ``os.environ``.

    Returns:
        bool: True iff ``GOLDIE_UPDATE`` is ``"true"`` or ``"1"`` (case-sensitive).
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    value: str | None = env.get(UPDATE_ENV)
    update: bool = value in UPDATE_ENV_VALUES
    logger.trace("%s=%r -> update=%s", UPDATE_ENV, value, update)
    return update
