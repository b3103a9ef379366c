"""
Page objects module.

This package contains page objects built on the BrowserActions facade.
"""

from .base import BasePage
from .google_search import GOOGLE_URL, GoogleSearchPage

__all__ = ["BasePage", "GoogleSearchPage", "GOOGLE_URL"]
