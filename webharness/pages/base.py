"""Base class for page objects."""

from ..browser.actions import BrowserActions


class BasePage:
    """Holds the driver and the BrowserActions facade bound to it."""

    def __init__(self, driver, policy=None):
        self.driver = driver
        self.actions = BrowserActions(driver, policy)
