#!/usr/bin/env python3
"""
WebDriver setup and teardown module.

This module contains functions for creating a Chrome WebDriver instance for
the harness and for shutting it down again. The facade itself never calls
these; the caller owns the session lifecycle.
"""

import platform
import time

from selenium import webdriver
from selenium.common.exceptions import (SessionNotCreatedException,
                                        WebDriverException)
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

from ..errors import DriverError
from ..utils.log import get_logger

logger = get_logger(__name__)


def build_chrome_options(headless=True):
    """
    Build the Chrome options used by the harness.

    Args:
        headless: Whether to run in headless mode

    Returns:
        Options: Chrome options instance
    """
    chrome_options = Options()
    if headless:
        chrome_options.add_argument('--headless=new')

    chrome_options.page_load_strategy = 'normal'

    chrome_options.add_argument('--no-sandbox')
    chrome_options.add_argument('--disable-dev-shm-usage')
    chrome_options.add_argument('--disable-gpu')
    chrome_options.add_argument('--disable-extensions')
    chrome_options.add_argument('--disable-notifications')
    chrome_options.add_argument('--window-size=1920,1080')

    return chrome_options


def setup_webdriver(headless=True, webdriver_path=None, retry_count=3, page_load_timeout=30,
                    retry_delay=2):
    """
    Set up and return a Selenium Chrome WebDriver instance with retry logic.

    Args:
        headless: Whether to run in headless mode
        webdriver_path: Path to the chromedriver executable; resolved with
            webdriver-manager when omitted
        retry_count: Number of times to try WebDriver creation
        page_load_timeout: Timeout for page loads and scripts in seconds
        retry_delay: Seconds to wait between attempts

    Returns:
        WebDriver: Configured Selenium WebDriver instance

    Raises:
        DriverError: If WebDriver creation fails after all attempts
    """
    logger.info("Starting WebDriver setup: headless=%s, system=%s, python=%s",
                headless, platform.system(), platform.python_version())
    chrome_options = build_chrome_options(headless=headless)

    last_error = None
    for attempt in range(retry_count):
        try:
            if not webdriver_path:
                service = Service(ChromeDriverManager().install())
            else:
                service = Service(webdriver_path)

            driver = webdriver.Chrome(service=service, options=chrome_options)

            driver.set_page_load_timeout(page_load_timeout)
            driver.set_script_timeout(page_load_timeout)

            return driver

        except (WebDriverException, SessionNotCreatedException) as e:
            last_error = e
            logger.warning("WebDriver creation failed (attempt %d/%d): %s",
                           attempt + 1, retry_count, e)
            if attempt < retry_count - 1:
                time.sleep(retry_delay)

    raise DriverError(f"Failed to create WebDriver after {retry_count} attempts") from last_error


def teardown_webdriver(driver):
    """
    Quit the WebDriver instance, logging rather than raising on failure.

    Args:
        driver: WebDriver instance, or None

    Returns:
        bool: True if the session was shut down cleanly
    """
    if driver is None:
        return False
    try:
        driver.quit()
        logger.info("WebDriver session closed")
        return True
    except Exception:
        logger.exception("Error quitting WebDriver")
        return False
