"""Centralized logging for graphsuite.

Every module logs through ``get_logger(__name__)``, so all records flow into
the single ``"graphsuite"`` logger configured here. Its level and format
default to ``CONFIG.log_level`` and ``CONFIG.log_format``. Algorithms only
log at DEBUG; the CLI switches levels with ``--verbose`` and ``--quiet``.
"""

import logging
import sys
from typing import Optional

from graphsuite.config import CONFIG

ROOT_LOGGER_NAME = "graphsuite"

_configured = False


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    resolved = logging.getLevelName(CONFIG.log_level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level '{CONFIG.log_level}'.")
    return resolved


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the package handler on the ``graphsuite`` logger.

    Only the first call has an effect until `reset_logging` is called.

    Args:
        level: Logging level; defaults to ``CONFIG.log_level``.
        format_string: Defaults to ``CONFIG.log_format``.
        handler: Defaults to a stdout ``StreamHandler``.

    Returns:
        The ``graphsuite`` logger.
    """
    global _configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root_logger

    root_logger.setLevel(_resolve_level(level))
    root_logger.handlers.clear()
    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or CONFIG.log_format))
    root_logger.addHandler(handler)
    # Records still reach the interpreter root, where pytest's caplog listens.
    root_logger.propagate = True

    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package logger first.

    Child loggers keep level NOTSET so `set_global_log_level` governs them.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``graphsuite`` logger and of its handlers."""
    root_logger = setup_root_logger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level; the next logger call reinstalls them."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
