"""Logging utilities for digraphkit.

Loggers live under the ``digraphkit.`` namespace, write to stderr and do not
propagate to the root logger, so an embedding application only hears from the
graph engine when it asks to.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack handlers. Pass
    ``__name__`` from the calling module.

    Args:
        name: Logger name. If None, returns the package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from digraphkit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("leveling %d vertices", 7)
    """
    if name is None:
        name = "digraphkit"

    if name == "digraphkit" or name.startswith("digraphkit."):
        logger_name = name
    else:
        logger_name = f"digraphkit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all digraphkit loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or its name
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for digraphkit.

    Replaces the handlers of every logger created so far and sets the level
    used for loggers created later. Call it once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr
    if format_string is None:
        format_string = _DEFAULT_FORMAT

    formatter = logging.Formatter(format_string)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _DEFAULT_LEVEL = level
