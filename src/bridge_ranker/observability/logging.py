"""Shared logging utilities for consistent ranking observability.

Usage example:
    from bridge_ranker.observability.logging import get_logger, set_log_level

    logger = get_logger("bridge_ranker.intermediary_search")
    logger.info("Scoring %s candidates", candidate_count)
    set_log_level("WARNING")
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_configured: set[str] = set()
_level = logging.INFO


class LogLevelError(ValueError):
    """Raised when a log level name is not recognised."""

    def __init__(self, level: str) -> None:
        super().__init__(f"Unsupported log level: {level!r}.")


def get_logger(name: str) -> logging.Logger:
    """Return a standard logger configured for UTC timestamps.

    Args:
        name: Logger name (use a stable module-qualified name).

    Returns:
        A logger with a single stream handler and a consistent UTC format.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_level)
        logger.propagate = False
        _configured.add(name)
    return logger


def set_log_level(level: str) -> None:
    """Apply a level to every logger handed out by ``get_logger`` and to later ones."""
    global _level
    name = level.strip().upper()
    if name not in _LOG_LEVELS:
        raise LogLevelError(level)
    _level = logging.getLevelNamesMapping()[name]
    for logger_name in _configured:
        logging.getLogger(logger_name).setLevel(_level)
