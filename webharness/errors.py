"""Exceptions raised by the harness."""

from selenium.common.exceptions import TimeoutException


class HarnessError(Exception):
    """Base exception for all harness failures."""

    pass


class IllegalArgument(HarnessError, ValueError):
    """A required argument was None or missing."""

    pass


class WaitTimeout(HarnessError, TimeoutException):
    """A wait condition was not met before its deadline."""

    def __init__(self, message: str = "", timeout: float = 0.0):
        TimeoutException.__init__(self, message)
        self.timeout = timeout


class DriverError(HarnessError):
    """Browser session could not be created."""

    pass
