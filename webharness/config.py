#!/usr/bin/env python3
"""
Configuration management module.

This module provides functionality for loading and saving configuration
files, and for managing the harness configuration.
"""

import json
import os
from dataclasses import asdict, dataclass, fields
from typing import Optional
from urllib.parse import urlparse

from .browser.waits import DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT, WaitPolicy
from .utils.log import LOG_LEVEL_ENV, get_logger

logger = get_logger(__name__)

CONFIG_ENV = "WEBHARNESS_CONFIG"
URL_ENV = "WEBHARNESS_URL"
HEADLESS_ENV = "WEBHARNESS_HEADLESS"
WEBDRIVER_PATH_ENV = "WEBHARNESS_WEBDRIVER_PATH"

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Configuration:
    """
    Configuration class for the harness.

    This dataclass holds all configuration parameters for a scenario run,
    allowing for easy serialization and deserialization.
    """
    # Scenario
    url: str = "https://www.google.com"
    search_term: str = "Open AI chatGPT"

    # Browser configuration
    headless: bool = True
    webdriver_path: Optional[str] = None
    page_load_timeout: int = 30

    # Waits
    wait_timeout: float = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL

    # Artifacts
    screenshot_path: Optional[str] = None

    # Test data workbook
    data_file: Optional[str] = None
    data_sheet: str = "Sheet1"
    data_row: int = 0
    data_col: int = 0

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        parsed_url = urlparse(self.url or "")
        if not parsed_url.scheme or not parsed_url.netloc:
            raise ValueError(f"Invalid URL: {self.url}")

        if self.wait_timeout < 0:
            logger.warning("wait_timeout (%s) is negative. Setting wait_timeout to %s.",
                           self.wait_timeout, DEFAULT_TIMEOUT)
            self.wait_timeout = DEFAULT_TIMEOUT

        if self.poll_interval <= 0:
            logger.warning("poll_interval (%s) must be positive. Setting poll_interval to %s.",
                           self.poll_interval, DEFAULT_POLL_INTERVAL)
            self.poll_interval = DEFAULT_POLL_INTERVAL

        if self.page_load_timeout <= 0:
            logger.warning("page_load_timeout (%s) must be positive. Setting page_load_timeout to 30.",
                           self.page_load_timeout)
            self.page_load_timeout = 30

        if self.data_row < 0 or self.data_col < 0:
            raise ValueError(f"Data cell indices must be >= 0, got ({self.data_row}, {self.data_col})")

    def wait_policy(self) -> WaitPolicy:
        """Build the wait policy described by this configuration."""
        return WaitPolicy(timeout=self.wait_timeout, poll_interval=self.poll_interval)

    def to_dict(self):
        """
        Convert configuration to a dictionary.

        Returns:
            dict: Dictionary representation of the configuration
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict):
        """
        Create a Configuration instance from a dictionary.

        Unknown keys are ignored with a warning.

        Args:
            config_dict: Dictionary containing configuration parameters

        Returns:
            Configuration: Configuration instance
        """
        known = {f.name for f in fields(cls)}
        config = {}
        for key, value in config_dict.items():
            if key in known:
                config[key] = value
            else:
                logger.warning("Ignoring unknown configuration key: %s", key)
        return cls(**config)

    def log_summary(self):
        """Log a summary of the configuration."""
        logger.info("Harness configuration:")
        logger.info("- URL: %s", self.url)
        logger.info("- Search term: %s", self.search_term)
        logger.info("- Browser mode: %s", "Headless" if self.headless else "Visible")
        logger.info("- Waits: timeout=%ss, poll=%ss", self.wait_timeout, self.poll_interval)
        if self.data_file:
            logger.info("- Test data: %s [%s!%s,%s]", self.data_file, self.data_sheet,
                        self.data_row, self.data_col)
        if self.screenshot_path:
            logger.info("- Screenshot on failure: %s", self.screenshot_path)


def load_config(config_file: str) -> Configuration:
    """
    Load configuration from a JSON file.

    Args:
        config_file: Path to the configuration file

    Returns:
        Configuration: Configuration instance

    Raises:
        FileNotFoundError: If the configuration file does not exist
        json.JSONDecodeError: If the configuration file is not valid JSON
        KeyError: If the configuration file is missing required fields
    """
    if not os.path.exists(config_file):
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with open(config_file, 'r', encoding='utf-8') as f:
        config_dict = json.load(f)

    required_fields = ['url']
    for field in required_fields:
        if field not in config_dict:
            raise KeyError(f"Missing required field in configuration: {field}")

    return Configuration.from_dict(config_dict)


def save_config(config: Configuration, config_file: str) -> None:
    """
    Save configuration to a JSON file.

    Args:
        config: Configuration instance
        config_file: Path to the configuration file

    Raises:
        IOError: If the configuration file cannot be written
    """
    directory = os.path.dirname(os.path.abspath(config_file))
    if directory and not os.path.exists(directory):
        os.makedirs(directory)

    try:
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
    except IOError as e:
        raise IOError(f"Error saving configuration: {e}")

    logger.info("Configuration saved to %s", config_file)


def load_config_from_env(environ=None) -> Configuration:
    """
    Load configuration from the environment.

    WEBHARNESS_CONFIG names an optional JSON file; WEBHARNESS_URL,
    WEBHARNESS_HEADLESS, WEBHARNESS_WEBDRIVER_PATH and WEBHARNESS_LOG_LEVEL
    override single fields.

    Args:
        environ: Mapping to read instead of os.environ

    Returns:
        Configuration: Configuration instance
    """
    environ = os.environ if environ is None else environ

    config_dict = {}
    config_file = environ.get(CONFIG_ENV)
    if config_file:
        config_dict = load_config(config_file).to_dict()
        logger.info("Loaded configuration from %s", config_file)

    if environ.get(URL_ENV):
        config_dict['url'] = environ[URL_ENV]
    if environ.get(HEADLESS_ENV):
        config_dict['headless'] = environ[HEADLESS_ENV].strip().lower() not in _FALSE_VALUES
    if environ.get(WEBDRIVER_PATH_ENV):
        config_dict['webdriver_path'] = environ[WEBDRIVER_PATH_ENV]
    if environ.get(LOG_LEVEL_ENV):
        config_dict['log_level'] = environ[LOG_LEVEL_ENV]

    return Configuration.from_dict(config_dict)
