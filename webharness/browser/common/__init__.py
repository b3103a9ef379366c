"""
Common browser interfaces module.

This package contains the protocols shared by the browser facade and
the drivers (or test doubles) it runs against.
"""

from .interface import AlertHandle, DriverHandle, ElementHandle, SwitchTo

__all__ = ["AlertHandle", "DriverHandle", "ElementHandle", "SwitchTo"]
