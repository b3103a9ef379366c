"""
Test data module.

This package contains helpers for reading test data from workbooks.
"""

from .spreadsheet import SpreadsheetSession

__all__ = ["SpreadsheetSession"]
