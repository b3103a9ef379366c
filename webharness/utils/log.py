#!/usr/bin/env python3
"""
Logging configuration module.

Library modules only ask for a named logger. The entry point installs the
stdout handler through ``configure_logging``, and may call it again once
the configured level is known.
"""

import logging
import os
from logging.config import dictConfig
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"
LOG_LEVEL_ENV = "WEBHARNESS_LOG_LEVEL"


def resolve_level(level: Optional[Union[str, int]] = None) -> int:
    """
    Turn a level name or number into a numeric level.

    None means the WEBHARNESS_LOG_LEVEL environment variable; unknown or
    missing names mean INFO.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV) or "INFO"
    if isinstance(level, int):
        return level
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def configure_logging(level: Optional[Union[str, int]] = None) -> int:
    """
    Send harness logs to stdout at the given level.

    Safe to call more than once; each call replaces the root handler.

    Returns:
        int: The numeric level now in effect
    """
    numeric_level = resolve_level(level)
    dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"harness": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT}},
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "harness",
                "stream": "ext://sys.stdout",
            }
        },
        "root": {"level": numeric_level, "handlers": ["stdout"]},
    })
    return numeric_level


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
