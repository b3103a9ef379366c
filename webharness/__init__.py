"""
Web harness package.

This package provides a Page-Object-Model browser test harness: a
wait-guarded facade over a Selenium WebDriver, page objects built on it,
and a workbook helper for test data.
"""

__version__ = "1.0.0"

from .browser.actions import BrowserActions
from .browser.locators import Locator
from .browser.waits import Waiter, WaitPolicy
from .data.spreadsheet import SpreadsheetSession
from .errors import DriverError, HarnessError, IllegalArgument, WaitTimeout

__all__ = [
    "BrowserActions",
    "Locator",
    "Waiter",
    "WaitPolicy",
    "SpreadsheetSession",
    "HarnessError",
    "IllegalArgument",
    "WaitTimeout",
    "DriverError",
]
