"""Validation helpers."""

import logging
from typing import Any

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def ensure(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def ensure_str(value: Any, key: str) -> str:
    ensure(isinstance(value, str), f"{key} must be a string, got {type(value).__name__}")
    return value


def ensure_log_level(value: Any, key: str = "logging.level") -> int:
    """Return the numeric level for ``value`` or raise ``ValueError``."""

    name = ensure_str(value, key).upper()
    ensure(name in LOG_LEVELS, f"{key} must be one of {', '.join(LOG_LEVELS)}")
    return logging.getLevelName(name)
