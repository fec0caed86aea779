"""Module: init_logging.py

Date: 2026-10-19

Provides a single entry point to initialize logging for a tool that uses
fsgateway.

Functions:
init_logging(app_name, verbosity): Sets up handlers and returns the package logger.
"""

import logging

from fsgateway.config import DEFAULT_VERBOSITY
from fsgateway.utils.logging.logger_factory import get_cached_logger
from fsgateway.utils.logging.logger_helper import PACKAGE_LOGGER_NAME
from fsgateway.utils.logging.logger_setup import ConfigureLogger


def init_logging(app_name: str = "fsgateway", verbosity: int = DEFAULT_VERBOSITY, **kwargs) -> logging.Logger:
    """Initializes logging for the application.

    Args:
        app_name (str): The base name for log files.
        verbosity (int): 0-6 verbosity for fsgateway messages.
        **kwargs: Forwarded to ConfigureLogger.

    Returns:
        logging.Logger: The fsgateway package logger.

    """
    ConfigureLogger(log_name=app_name, verbosity=verbosity, **kwargs)
    return get_cached_logger(PACKAGE_LOGGER_NAME)
