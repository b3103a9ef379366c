#!/usr/bin/env python3
"""
Wait primitive module.

This module contains the polling loop every wait-guarded browser operation
goes through, and the policy value that configures it.
"""

import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type

from selenium.common.exceptions import (NoSuchElementException,
                                        StaleElementReferenceException)

from ..errors import IllegalArgument, WaitTimeout

DEFAULT_TIMEOUT = 10.0
DEFAULT_POLL_INTERVAL = 0.5
DEFAULT_IGNORED_EXCEPTIONS = (NoSuchElementException, StaleElementReferenceException)

Condition = Callable[[Any], Any]


@dataclass(frozen=True)
class WaitPolicy:
    """
    Timing configuration for a Waiter.

    Attributes:
        timeout: Overall time budget of a single wait, in seconds
        poll_interval: Pause between two evaluations of the condition, in seconds
        ignored_exceptions: Exception types treated as "not yet" while polling
    """
    timeout: float = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    ignored_exceptions: Tuple[Type[BaseException], ...] = DEFAULT_IGNORED_EXCEPTIONS

    def __post_init__(self):
        if self.timeout is None or self.timeout < 0:
            raise IllegalArgument(f"timeout must be >= 0, got {self.timeout!r}")
        if self.poll_interval is None or self.poll_interval <= 0:
            raise IllegalArgument(f"poll_interval must be > 0, got {self.poll_interval!r}")
        object.__setattr__(self, "ignored_exceptions", tuple(self.ignored_exceptions))

    @property
    def max_evaluations(self) -> int:
        """Upper bound on condition evaluations performed by one wait."""
        return math.ceil(self.timeout / self.poll_interval) + 1


class Waiter:
    """
    Polls a condition against a driver until it matches or the deadline passes.

    The clock and sleep functions are injectable so the loop can be driven
    by a fake clock.
    """

    def __init__(
        self,
        driver: Any,
        policy: Optional[WaitPolicy] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.driver = driver
        self.policy = policy or WaitPolicy()
        self._clock = clock
        self._sleep = sleep

    def until(self, condition: Condition, message: str = "") -> Any:
        """
        Wait until the condition returns a truthy value.

        Args:
            condition: Callable taking the driver, returning a value or a falsy sentinel
            message: Description used in the timeout error

        Returns:
            The first truthy value returned by the condition

        Raises:
            WaitTimeout: If the deadline expires first
        """
        return self._poll(condition, message, lambda value: value, expect_truthy=True)

    def until_not(self, condition: Condition, message: str = "") -> bool:
        """
        Wait until the condition returns a falsy value or raises an ignored error.

        Returns:
            bool: Always True; a miss raises WaitTimeout
        """
        return self._poll(condition, message, lambda value: True, expect_truthy=False)

    def _poll(self, condition, message, result, expect_truthy):
        policy = self.policy
        deadline = self._clock() + policy.timeout
        last_error = None

        while True:
            try:
                value = condition(self.driver)
                if bool(value) == expect_truthy:
                    return result(value)
            except policy.ignored_exceptions as e:
                if not expect_truthy:
                    return True
                last_error = e

            now = self._clock()
            if now >= deadline:
                raise WaitTimeout(message or f"Condition not met within {policy.timeout}s",
                                  timeout=policy.timeout) from last_error

            self._sleep(min(policy.poll_interval, deadline - now))


def document_ready(driver) -> bool:
    """Condition: the current document has finished loading."""
    return driver.execute_script("return document.readyState") == "complete"
