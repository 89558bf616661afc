"""Package-wide logging facility built on the standard logging module."""

from __future__ import annotations

import logging
from enum import Enum

__all__ = ["LogLevel", "get_logger", "set_level", "get_level"]

_LOGGER_NAME = "promethean"


class LogLevel(Enum):
    """Runtime severity thresholds understood by the package logger."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def get_logger() -> logging.Logger:
    """Return the single package logger, defaulting to INFO on first use."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    return logger


def set_level(level: LogLevel) -> None:
    """Set the minimum severity that the package logger emits."""
    get_logger().setLevel(LogLevel(level).value)


def get_level() -> LogLevel:
    """Return the current severity threshold of the package logger."""
    effective = get_logger().getEffectiveLevel()
    candidates = [lv for lv in LogLevel if lv.value <= effective]
    if not candidates:
        return LogLevel.DEBUG
    return max(candidates, key=lambda lv: lv.value)