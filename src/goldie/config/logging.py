# topmark:header:start
#
#   project      : Goldie
#   file         : logging.py
#   file_relpath : src/goldie/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Goldie contributors
#
# topmark:header:end

"""Goldie logging with a TRACE level.

Golden-file assertions run inside somebody else's test session, so Goldie never
configures logging on import. Loggers are obtained through
[`get_logger`][goldie.config.logging.get_logger]; a test suite (or a developer
chasing a path-resolution problem) opts in with
[`setup_logging`][goldie.config.logging.setup_logging] or by exporting
``GOLDIE_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from goldie.constants import LOG_LEVEL_ENV

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class GoldieLogger(logging.Logger):
    """Logger class for Goldie with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors ``GOLDIE_LOG_LEVEL`` (e.g., "TRACE", "DEBUG", "INFO", numeric "10").

    Args:
        environ (Mapping[str, str] | None): Environment to consult; defaults to ``os.environ``.

    Returns:
        int | None: The resolved level, or None when unset or unrecognized.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    val: str | None = env.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v: str = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Attach a colored stdout handler to the ``goldie`` logger.

    Only the package logger is touched; the root logger (owned by the test
    runner) is left alone. If ``level`` is None, the environment is consulted via
    [`resolve_env_log_level`][goldie.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.

    Args:
        level (int | None): Log level to apply.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    pkg_logger: logging.Logger = logging.getLogger("goldie")
    pkg_logger.setLevel(level)

    # Remove existing handlers to prevent duplicate log messages on re-configuration
    for handler in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    pkg_logger.addHandler(handler)

    pkg_logger.propagate = False


def get_logger(name: str) -> GoldieLogger:
    """Retrieve a GoldieLogger instance with the specified name.

    The logger class is swapped in for this call only, so loggers created by the
    host test suite keep their own class. A logger of the same name created before
    Goldie was imported (e.g. by ``logging.config.dictConfig``) is upgraded in place
    so that ``trace()`` is available on it.

    Args:
        name (str): The name of the logger.

    Returns:
        GoldieLogger: A GoldieLogger instance.
    """
    manager: logging.Manager = logging.Logger.manager
    existing = manager.loggerDict.get(name)
    if isinstance(existing, GoldieLogger):
        return existing

    previous = logging.getLoggerClass()
    logging.setLoggerClass(GoldieLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous)
    if not isinstance(logger, GoldieLogger):
        _upgrade(logger)
    return cast("GoldieLogger", logger)


_UPGRADED_CLASSES: dict[type[logging.Logger], type[GoldieLogger]] = {}


def _upgrade(logger: logging.Logger) -> None:
    """Re-class ``logger`` so it gains `GoldieLogger.trace` while keeping its own behavior."""
    cls: type[logging.Logger] = type(logger)
    if cls is logging.Logger:
        logger.__class__ = GoldieLogger
        return
    upgraded = _UPGRADED_CLASSES.get(cls)
    if upgraded is None:
        upgraded = type(f"Goldie{cls.__name__}", (GoldieLogger, cls), {})
        _UPGRADED_CLASSES[cls] = upgraded
    logger.__class__ = upgraded

