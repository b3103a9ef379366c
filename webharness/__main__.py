#!/usr/bin/env python3
"""
Main entry point for the harness.

This module runs the Google search scenario end to end: it builds a
driver, wires the page object, performs a search and checks the title.
It takes no command-line arguments; see config.load_config_from_env.
"""

import os
import sys

from .browser.driver import setup_webdriver, teardown_webdriver
from .config import load_config_from_env
from .data.spreadsheet import SpreadsheetSession
from .pages.google_search import GoogleSearchPage
from .utils.log import LOG_LEVEL_ENV, configure_logging, get_logger

logger = get_logger(__name__)


def resolve_search_term(config):
    """
    Pick the search term, preferring the configured workbook cell.

    Args:
        config: Configuration instance

    Returns:
        str: Search term to type
    """
    if not config.data_file:
        return config.search_term

    session = SpreadsheetSession(config.data_file)
    value = session.get(config.data_sheet, config.data_row, config.data_col)
    if value is None:
        logger.warning("No search term in %s, falling back to %r",
                       config.data_file, config.search_term)
        return config.search_term
    return value


def run_search_scenario(page, url, search_term, screenshot_path=None):
    """
    Search for a term and check the result page title.

    Args:
        page: GoogleSearchPage instance
        url: Start URL
        search_term: Term to search for
        screenshot_path: Where to save a screenshot if the check fails

    Returns:
        bool: True if the title mentions the search term
    """
    page.navigate(url)
    page.enter_search_term(search_term)
    page.click_search()
    page.actions.wait_page_loaded()

    title = page.title()
    if title and search_term.lower() in title.lower():
        logger.info("Search performed successfully: %s", title)
        return True

    logger.error("Search failed: title %r does not mention %r", title, search_term)
    if screenshot_path:
        page.actions.screenshot(screenshot_path)
    return False


def main(environ=None, driver_factory=setup_webdriver):
    """Main entry point for the harness."""
    environ = os.environ if environ is None else environ
    driver = None
    try:
        # Loading the configuration may already log warnings.
        configure_logging(environ.get(LOG_LEVEL_ENV))
        config = load_config_from_env(environ)
        configure_logging(config.log_level)
        config.log_summary()

        search_term = resolve_search_term(config)

        driver = driver_factory(
            headless=config.headless,
            webdriver_path=config.webdriver_path,
            page_load_timeout=config.page_load_timeout,
        )
        page = GoogleSearchPage(driver, config.wait_policy())

        ok = run_search_scenario(page, config.url, search_term, config.screenshot_path)
        return 0 if ok else 1

    except KeyboardInterrupt:
        logger.warning("Scenario interrupted by user.")
        return 130

    except Exception:
        logger.exception("Scenario failed")
        return 1

    finally:
        teardown_webdriver(driver)


if __name__ == "__main__":
    sys.exit(main())
