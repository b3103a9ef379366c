#!/usr/bin/env python3
"""
Browser interface definition module.

This module defines the protocols describing what the harness needs from a
browser session. A Selenium WebDriver satisfies them structurally, and so
does any recording double used in tests.
"""

from typing import Any, List, Optional, Protocol, runtime_checkable


class ElementHandle(Protocol):
    """Protocol defining the interface for located elements."""

    @property
    def text(self) -> str:
        """Get the text content of the element."""
        ...

    def click(self) -> None:
        ...

    def clear(self) -> None:
        ...

    def send_keys(self, *value: str) -> None:
        ...

    def get_attribute(self, name: str) -> Optional[str]:
        """Get the value of the specified attribute."""
        ...

    def is_displayed(self) -> bool:
        """Check if the element is visible."""
        ...

    def is_enabled(self) -> bool:
        """Check if the element is enabled."""
        ...


class AlertHandle(Protocol):
    """Protocol for a JavaScript alert, confirm or prompt dialog."""

    @property
    def text(self) -> str:
        ...

    def accept(self) -> None:
        ...

    def dismiss(self) -> None:
        ...

    def send_keys(self, keys_to_send: str) -> None:
        ...


class SwitchTo(Protocol):
    """Protocol for the driver's context switching helper."""

    @property
    def alert(self) -> AlertHandle:
        ...

    def frame(self, frame_reference: Any) -> None:
        ...

    def default_content(self) -> None:
        ...


@runtime_checkable
class DriverHandle(Protocol):
    """
    Capability set the harness consumes from a live browser session.

    The harness never creates or quits a session through this protocol on
    its own; lifecycle belongs to whoever built the driver.
    """

    @property
    def title(self) -> str:
        """Get the page title."""
        ...

    @property
    def switch_to(self) -> SwitchTo:
        ...

    def get(self, url: str) -> None:
        """Navigate to the specified URL."""
        ...

    def refresh(self) -> None:
        ...

    def maximize_window(self) -> None:
        ...

    def find_element(self, by: str, value: Optional[str] = None) -> ElementHandle:
        """Find a single element using the specified selector strategy."""
        ...

    def find_elements(self, by: str, value: Optional[str] = None) -> List[ElementHandle]:
        """Find all elements matching the specified selector strategy."""
        ...

    def execute_script(self, script: str, *args: Any) -> Any:
        """Execute JavaScript in the browser context."""
        ...

    def get_screenshot_as_png(self) -> bytes:
        ...

    def quit(self) -> None:
        """Close the browser and release resources."""
        ...
