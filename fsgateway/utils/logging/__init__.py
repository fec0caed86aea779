"""Logging utilities package.

Logging setup, factory, verbosity tiers and helper functions.
"""

from fsgateway.utils.logging.logger_factory import get_cached_logger
from fsgateway.utils.logging.logger_helper import (
    TRACE4,
    TRACE5,
    TRACE6,
    log_verbose,
    set_verbosity,
)

__all__ = [
    "get_cached_logger",
    "log_verbose",
    "set_verbosity",
    "TRACE4",
    "TRACE5",
    "TRACE6",
]
