#!/usr/bin/env python3
"""
Browser actions module.

This module contains BrowserActions, the facade page objects use to drive a
browser. Every element operation waits for its element first, and every
failure goes through the module logger.

Failure policy:
    - missing arguments are logged and raised as IllegalArgument
    - existence checks turn a timeout into False without logging
    - a click that times out is logged and raised as WaitTimeout
    - a failing title lookup is logged and raised
    - anything else is logged and swallowed; the operation returns None
"""

from typing import Any, Callable, Optional, Tuple, Type

from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.select import Select

from ..errors import IllegalArgument, WaitTimeout
from ..utils.log import get_logger
from .common.interface import DriverHandle
from .locators import Locator
from .waits import Waiter, WaitPolicy, document_ready

logger = get_logger(__name__)

SCROLL_INTO_VIEW_SCRIPT = "arguments[0].scrollIntoView(true);"


class BrowserActions:
    """
    Wait-guarded browser operations bound to a single driver.

    The driver is supplied and owned by the caller; BrowserActions never
    quits it and never keeps element references between calls.
    """

    def __init__(self, driver: DriverHandle, policy: Optional[WaitPolicy] = None, clock=None,
                 sleep=None):
        """
        Initialize the facade.

        Args:
            driver: Live browser session (see DriverHandle)
            policy: Wait policy for every pre-wait; defaults to WaitPolicy()
            clock: Optional monotonic clock override for the waiter
            sleep: Optional sleep override for the waiter
        """
        self.driver = driver
        waiter_kwargs = {}
        if clock is not None:
            waiter_kwargs["clock"] = clock
        if sleep is not None:
            waiter_kwargs["sleep"] = sleep
        self.waiter = Waiter(driver, policy or WaitPolicy(), **waiter_kwargs)

    @property
    def policy(self) -> WaitPolicy:
        return self.waiter.policy

    # Navigation & window

    def open(self, url: str) -> None:
        """Navigate to an absolute URL."""
        def action():
            self.driver.get(url)
            logger.info("Opened URL: %s", url)

        self._perform(f"Error opening URL: {url}", action)

    def refresh(self) -> None:
        """Reload the current page."""
        self._perform("Error refreshing page", lambda: self.driver.refresh())

    def maximize(self) -> None:
        """Maximize the browser window."""
        self._perform("Error maximizing window", lambda: self.driver.maximize_window())

    def current_title(self) -> str:
        """
        Get the current page title.

        Raises:
            Exception: Whatever the driver raised; titles back assertions, so
                a failure is never turned into None
        """
        return self._perform("Error getting page title", lambda: self.driver.title,
                             propagate=(Exception,))

    def wait_page_loaded(self) -> None:
        """Wait until document.readyState reports 'complete'."""
        self._perform("Page load timeout",
                      lambda: self.waiter.until(document_ready, "Page did not finish loading"))

    # Element actions

    def click(self, locator: Locator) -> None:
        """
        Click an element once it is clickable.

        Raises:
            WaitTimeout: If the element does not become clickable in time
        """
        message = f"Element not clickable within timeout: {locator}"

        def action():
            element = self.waiter.until(EC.element_to_be_clickable(locator), message)
            element.click()

        self._perform(message, action, propagate=(WaitTimeout,))

    def send_keys(self, locator: Locator, text: str) -> None:
        """Clear a visible element and type text into it."""
        self._require(locator=locator, text=text)
        self._type_into(locator, text)

    def clear_and_send_keys(self, locator: Locator, text: str) -> None:
        """Clear a visible element and type text into it (same as send_keys)."""
        self._require(locator=locator, text=text)
        self._type_into(locator, text)

    def text(self, locator: Locator) -> Optional[str]:
        """Get the text of a visible element, or None on failure."""
        return self._perform(
            f"Error getting text from element: {locator}",
            lambda: self._visible(locator).text,
        )

    def attribute(self, locator: Locator, name: str) -> Optional[str]:
        """Get an attribute of a present element, or None on failure."""
        self._require(locator=locator, name=name)
        return self._perform(
            f"Error getting attribute value: {locator}",
            lambda: self._present(locator).get_attribute(name),
        )

    def is_present(self, locator: Locator) -> bool:
        """
        Check whether an element is present in the document.

        Never raises; a timeout is an ordinary miss and is not logged.
        """
        if locator is None:
            return False
        try:
            self._present(locator)
            return True
        except WaitTimeout:
            return False
        except Exception:
            logger.exception("Error checking presence of element: %s", locator)
            return False

    def select_by_visible_text(self, locator: Locator, text: str) -> None:
        """Select the option of a native <select> whose visible text matches."""
        self._require(locator=locator, text=text)
        self._perform(
            f"Error selecting option from dropdown: {locator}",
            lambda: Select(self._present(locator)).select_by_visible_text(text),
        )

    def hover(self, locator: Locator) -> None:
        """Move the mouse over a visible element."""
        def action():
            element = self._visible(locator)
            ActionChains(self.driver).move_to_element(element).perform()

        self._perform(f"Error hovering over element: {locator}", action)

    def drag_and_drop(self, source: Locator, target: Locator) -> None:
        """Drag one present element onto another."""
        def action():
            source_element = self._present(source)
            target_element = self._present(target)
            ActionChains(self.driver).drag_and_drop(source_element, target_element).perform()

        self._perform(f"Error performing drag and drop: {source} -> {target}", action)

    def scroll_into_view(self, locator: Locator) -> None:
        """Scroll a present element into the viewport."""
        self._perform(
            f"Error scrolling to element: {locator}",
            lambda: self.driver.execute_script(SCROLL_INTO_VIEW_SCRIPT, self._present(locator)),
        )

    def wait_gone(self, locator: Locator) -> None:
        """Wait until an element is invisible or absent."""
        message = f"Element did not disappear: {locator}"
        self._perform(message,
                      lambda: self.waiter.until(EC.invisibility_of_element_located(locator), message))

    # Context switches

    def switch_to_frame(self, locator: Locator) -> None:
        """Wait for a frame and switch into it."""
        message = f"Error switching to frame: {locator}"
        self._perform(message, lambda: self.waiter.until(
            EC.frame_to_be_available_and_switch_to_it(locator), message))

    def switch_to_default(self) -> None:
        """Switch back to the top-level document."""
        self._perform("Error switching to default content",
                      lambda: self.driver.switch_to.default_content())

    def accept_alert(self) -> None:
        self._perform("Error accepting alert", lambda: self._alert().accept())

    def dismiss_alert(self) -> None:
        self._perform("Error dismissing alert", lambda: self._alert().dismiss())

    def alert_text(self) -> Optional[str]:
        return self._perform("Error getting alert text", lambda: self._alert().text)

    def send_keys_to_alert(self, text: str) -> None:
        self._require(text=text)
        self._perform("Error sending keys to alert", lambda: self._alert().send_keys(text))

    # Scripting & capture

    def execute_script(self, script: str, *args: Any) -> Any:
        """Execute JavaScript and return its result, or None on failure."""
        return self._perform(f"Error executing JavaScript: {script}",
                             lambda: self.driver.execute_script(script, *args))

    def screenshot(self, path: str) -> bool:
        """
        Capture the viewport as PNG and write it to path.

        The parent directory must exist; an existing file is overwritten.
        Never raises.

        Returns:
            bool: True if the file was written
        """
        try:
            png = self.driver.get_screenshot_as_png()
        except Exception:
            logger.exception("Unable to take screenshot")
            return False

        try:
            with open(path, "wb") as f:
                f.write(png)
        except (OSError, TypeError, ValueError):
            logger.exception("Unable to save screenshot to %s", path)
            return False

        logger.info("Screenshot saved to: %s", path)
        return True

    # Helpers

    def _perform(
        self,
        message: str,
        action: Callable[[], Any],
        propagate: Tuple[Type[BaseException], ...] = (),
    ) -> Any:
        """
        Run an action, logging any failure with message.

        Exceptions matching propagate are re-raised after logging; all
        others are swallowed and None is returned.
        """
        try:
            return action()
        except propagate:
            logger.exception(message)
            raise
        except Exception:
            logger.exception(message)
            return None

    def _require(self, **arguments: Any) -> None:
        missing = [name for name, value in arguments.items() if value is None]
        if missing:
            message = f"Required argument(s) missing: {', '.join(missing)}"
            logger.error(message)
            raise IllegalArgument(message)

    def _type_into(self, locator: Locator, text: str) -> None:
        def action():
            element = self._visible(locator)
            element.clear()
            element.send_keys(text)

        self._perform(f"Failed to clear and send keys to element: {locator}", action)

    def _visible(self, locator: Locator):
        return self.waiter.until(EC.visibility_of_element_located(locator),
                                 f"Element not visible: {locator}")

    def _present(self, locator: Locator):
        return self.waiter.until(EC.presence_of_element_located(locator),
                                 f"Element not present: {locator}")

    def _alert(self):
        return self.waiter.until(EC.alert_is_present(), "No alert present")
