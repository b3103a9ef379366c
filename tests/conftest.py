from __future__ import annotations

from typing import Any

import pytest
from selenium.common.exceptions import (JavascriptException, NoAlertPresentException,
                                        NoSuchElementException, WebDriverException)

from webharness.browser.actions import BrowserActions
from webharness.browser.waits import WaitPolicy

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class FakeClock:
    """Monotonic clock whose sleep advances time instantly."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def time(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class _FakeElement:
    def __init__(
        self,
        driver: "_FakeDriver",
        name: str,
        *,
        text: str = "",
        attributes: dict[str, str] | None = None,
        displayed: bool = True,
        enabled: bool = True,
        click_error: Exception | None = None,
    ) -> None:
        self._driver = driver
        self.name = name
        self._text = text
        self.attributes = attributes or {}
        self.displayed = displayed
        self.enabled = enabled
        self.click_error = click_error
        self.typed: list[str] = []

    @property
    def text(self) -> str:
        self._driver.calls.append(("element.text", self.name))
        return self._text

    def click(self) -> None:
        self._driver.calls.append(("element.click", self.name))
        if self.click_error is not None:
            raise self.click_error

    def clear(self) -> None:
        self._driver.calls.append(("element.clear", self.name))
        self.typed.clear()

    def send_keys(self, *value: str) -> None:
        self._driver.calls.append(("element.send_keys", self.name, "".join(value)))
        self.typed.append("".join(value))

    def get_attribute(self, name: str) -> str | None:
        self._driver.calls.append(("element.get_attribute", self.name, name))
        return self.attributes.get(name)

    def is_displayed(self) -> bool:
        return self.displayed

    def is_enabled(self) -> bool:
        return self.enabled


class _FakeAlert:
    def __init__(self, driver: "_FakeDriver", text: str) -> None:
        self._driver = driver
        self._text = text

    @property
    def text(self) -> str:
        self._driver.calls.append(("alert.text",))
        return self._text

    def accept(self) -> None:
        self._driver.calls.append(("alert.accept",))

    def dismiss(self) -> None:
        self._driver.calls.append(("alert.dismiss",))

    def send_keys(self, keys_to_send: str) -> None:
        self._driver.calls.append(("alert.send_keys", keys_to_send))


class _FakeSwitchTo:
    def __init__(self, driver: "_FakeDriver") -> None:
        self._driver = driver

    @property
    def alert(self) -> _FakeAlert:
        if self._driver.alert is None:
            raise NoAlertPresentException("no such alert")
        return self._driver.alert

    def frame(self, frame_reference: Any) -> None:
        self._driver.calls.append(("switch_to.frame", getattr(frame_reference, "name", frame_reference)))

    def default_content(self) -> None:
        self._driver.calls.append(("switch_to.default_content",))


class _FakeDriver:
    """Recording stand-in for a Selenium WebDriver."""

    def __init__(
        self,
        *,
        title: str = "",
        ready_state: str = "complete",
        script_result: Any = None,
        title_error: Exception | None = None,
        script_error: Exception | None = None,
        screenshot_error: Exception | None = None,
        refresh_error: Exception | None = None,
        get_error: Exception | None = None,
    ) -> None:
        self._title = title
        self.ready_state = ready_state
        self.script_result = script_result
        self.title_error = title_error
        self.script_error = script_error
        self.screenshot_error = screenshot_error
        self.refresh_error = refresh_error
        self.get_error = get_error
        self.elements: dict[tuple[str, str], _FakeElement] = {}
        self.alert: _FakeAlert | None = None
        self.quit_called = False

        # recording
        self.calls: list[tuple] = []

    def add_element(self, locator: tuple[str, str], **kwargs: Any) -> _FakeElement:
        element = _FakeElement(self, locator[1], **kwargs)
        self.elements[tuple(locator)] = element
        return element

    def open_alert(self, text: str = "") -> _FakeAlert:
        self.alert = _FakeAlert(self, text)
        return self.alert

    # DriverHandle
    @property
    def title(self) -> str:
        self.calls.append(("title",))
        if self.title_error is not None:
            raise self.title_error
        return self._title

    @property
    def switch_to(self) -> _FakeSwitchTo:
        return _FakeSwitchTo(self)

    def get(self, url: str) -> None:
        self.calls.append(("get", url))
        if self.get_error is not None:
            raise self.get_error

    def refresh(self) -> None:
        self.calls.append(("refresh",))
        if self.refresh_error is not None:
            raise self.refresh_error

    def maximize_window(self) -> None:
        self.calls.append(("maximize_window",))

    def find_element(self, by: str, value: str | None = None) -> _FakeElement:
        self.calls.append(("find_element", by, value))
        try:
            return self.elements[(by, value)]
        except KeyError:
            raise NoSuchElementException(f"Unable to locate element: {by}={value}")

    def find_elements(self, by: str, value: str | None = None) -> list[_FakeElement]:
        self.calls.append(("find_elements", by, value))
        element = self.elements.get((by, value))
        return [element] if element is not None else []

    def execute_script(self, script: str, *args: Any) -> Any:
        self.calls.append(("execute_script", script, args))
        if self.script_error is not None:
            raise self.script_error
        if script == "return document.readyState":
            return self.ready_state
        return self.script_result

    def get_screenshot_as_png(self) -> bytes:
        self.calls.append(("get_screenshot_as_png",))
        if self.screenshot_error is not None:
            raise self.screenshot_error
        return PNG_BYTES

    def quit(self) -> None:
        self.calls.append(("quit",))
        self.quit_called = True


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fake_driver_factory():
    """Return a factory that constructs a configured recording driver.

    Usage:
        driver = fake_driver_factory(title='Google')
        driver.add_element(Locator.name('q'))
    """

    def _factory(**kwargs):
        return _FakeDriver(**kwargs)

    return _factory


@pytest.fixture
def fake_driver(fake_driver_factory):
    return fake_driver_factory()


@pytest.fixture
def actions_factory(fake_clock):
    """Return a factory building BrowserActions on the fake clock.

    Usage:
        actions = actions_factory(driver, timeout=10, poll_interval=0.5)
    """

    def _factory(driver, timeout: float = 10.0, poll_interval: float = 0.5):
        policy = WaitPolicy(timeout=timeout, poll_interval=poll_interval)
        return BrowserActions(driver, policy, clock=fake_clock.time, sleep=fake_clock.sleep)

    return _factory


@pytest.fixture
def script_error():
    return JavascriptException("javascript error: boom")


@pytest.fixture
def driver_error():
    return WebDriverException("invalid session id")
