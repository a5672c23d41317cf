# topmark:header:start
#
#   project      : Goldie
#   file         : __init__.py
#   file_relpath : src/goldie/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Runtime configuration for Goldie (environment toggles and logging)."""

from __future__ import annotations

from goldie.config.env import is_update_mode

__all__ = ["is_update_mode"]
