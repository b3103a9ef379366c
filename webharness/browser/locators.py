#!/usr/bin/env python3
"""
Element locator module.

A Locator names an element on the current document. It is a plain
(by, value) pair, so it unpacks straight into ``driver.find_element(*loc)``
and is accepted by Selenium's expected conditions.
"""

from typing import NamedTuple

from selenium.webdriver.common.by import By


class Locator(NamedTuple):
    """Immutable (strategy, value) pair identifying an element."""

    by: str
    value: str

    @classmethod
    def name(cls, value: str) -> "Locator":
        return cls(By.NAME, value)

    @classmethod
    def id(cls, value: str) -> "Locator":
        return cls(By.ID, value)

    @classmethod
    def css(cls, value: str) -> "Locator":
        return cls(By.CSS_SELECTOR, value)

    @classmethod
    def xpath(cls, value: str) -> "Locator":
        return cls(By.XPATH, value)

    @classmethod
    def class_name(cls, value: str) -> "Locator":
        return cls(By.CLASS_NAME, value)

    @classmethod
    def tag(cls, value: str) -> "Locator":
        return cls(By.TAG_NAME, value)

    @classmethod
    def link_text(cls, value: str) -> "Locator":
        return cls(By.LINK_TEXT, value)

    def __str__(self) -> str:
        return f"By.{self.by}: {self.value}"
