"""Local configuration for pagescript.

Settings that need validation are read on demand, so a bad environment value
surfaces as a ``ConfigError`` where it is used rather than on import.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pagescript.exceptions import ConfigError

DEFAULT_MAX_DEPTH = 64
DEFAULT_OUTPUT_DIR = "out"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_PAGE_EXTENSION = ".md"

PAGESCRIPT_OUTPUT_DIR = Path(os.getenv("PAGESCRIPT_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)).expanduser()
PAGESCRIPT_PAGE_EXTENSION = os.getenv("PAGESCRIPT_PAGE_EXTENSION", DEFAULT_PAGE_EXTENSION)


def get_max_depth() -> int:
    """Nesting levels the block builder accepts before reporting NestingTooDeep."""
    raw = os.getenv("PAGESCRIPT_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"PAGESCRIPT_MAX_DEPTH must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigError(f"PAGESCRIPT_MAX_DEPTH must be at least 1, got {value}")
    return value


def get_log_level() -> str:
    """Name of the level the command line configures logging with."""
    level = os.getenv("PAGESCRIPT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        raise ConfigError(f"PAGESCRIPT_LOG_LEVEL is not a logging level: {level!r}")
    return level
