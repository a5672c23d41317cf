# topmark:header:start
#
#   project      : Goldie
#   file         : __init__.py
#   file_relpath : src/goldie/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Utility helpers for Goldie."""
