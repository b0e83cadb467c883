"""Logging utilities for the norges_fx package."""

from __future__ import annotations

import logging
import sys
from typing import Optional

_LOGGER: Optional[logging.Logger] = None
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str = "norges_fx") -> logging.Logger:
    """Return a module-level logger configured with a simple formatter.

    Records go to stderr so stdout stays free for command output and the
    stdio protocol stream.
    """
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
        _LOGGER = logging.getLogger("norges_fx")
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Adjust the package log level from a CLI-style name such as ``debug``."""

    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    get_logger().setLevel(resolved)
