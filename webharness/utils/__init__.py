"""
Utility module for shared helpers.

This package contains the logging setup used across the harness.
"""

from .log import configure_logging, get_logger, resolve_level

__all__ = ["configure_logging", "get_logger", "resolve_level"]
