#!/usr/bin/env python3
"""
Google search page object.

This module names the locators of the Google home page and composes
BrowserActions calls into search steps.
"""

from ..browser.locators import Locator
from .base import BasePage

GOOGLE_URL = "https://www.google.com"


class GoogleSearchPage(BasePage):
    """Page object for the Google search home page."""

    SEARCH_BAR = Locator.name("q")
    SEARCH_BUTTON = Locator.name("btnK")
    FEELING_LUCKY_BUTTON = Locator.name("btnI")

    def navigate(self, url=GOOGLE_URL):
        self.actions.open(url)

    def enter_search_term(self, search_term):
        self.actions.send_keys(self.SEARCH_BAR, search_term)

    def click_search(self):
        self.actions.click(self.SEARCH_BUTTON)

    def title(self):
        return self.actions.current_title()

    def click_feeling_lucky(self):
        self.actions.click(self.FEELING_LUCKY_BUTTON)
