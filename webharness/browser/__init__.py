"""
Browser module for driving a browser session.

This package contains the wait-guarded action facade, its wait primitive,
element locators and the WebDriver setup helpers.
"""

from .actions import BrowserActions
from .common.interface import DriverHandle, ElementHandle
from .driver import setup_webdriver, teardown_webdriver
from .locators import Locator
from .waits import Waiter, WaitPolicy

__all__ = [
    "BrowserActions",      # Wait-guarded browser facade
    "DriverHandle",        # Driver capability protocol
    "ElementHandle",       # Element protocol
    "Locator",             # (by, value) element locator
    "Waiter",              # Wait primitive
    "WaitPolicy",          # Timeout / poll configuration
    "setup_webdriver",     # Create a Chrome WebDriver
    "teardown_webdriver",  # Quit a WebDriver without raising
]
