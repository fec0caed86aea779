"""Module: logger_setup.py

Date: 2026-10-19

This module provides the ConfigureLogger class for setting up logging in the
supervision tools that embed fsgateway. Console output, a rotating file for
warnings and an optional trace file capturing every verbosity tier are driven
by fsgateway.config and can be overridden per call.
"""

import contextlib
import logging
import os
import sys
from datetime import datetime

from fsgateway.config import (
    DEFAULT_VERBOSITY,
    LOG_CONSOLE_LEVEL,
    LOG_DATE_FORMAT,
    LOG_DIR,
    LOG_FILE_BACKUP_COUNT,
    LOG_FILE_LEVEL,
    LOG_FILE_MAX_BYTES,
    LOG_FORMAT,
    LOG_TO_CONSOLE,
    LOG_TO_FILE,
    LOG_TRACE_FILE_BACKUP_COUNT,
    LOG_TRACE_FILE_ENABLED,
    LOG_TRACE_FILE_MAX_BYTES,
)
from fsgateway.utils.logging.logger_file_helper import add_file_handler
from fsgateway.utils.logging.logger_helper import TRACE6, set_verbosity


class ConfigureLogger:
    """
    Configures application-wide logging.

    The root logger accepts everything; handlers filter by level and the
    package logger level is derived from the verbosity.
    """

    def __init__(
        self,
        log_name: str = "fsgateway",
        log_dir: str = LOG_DIR,
        verbosity: int = DEFAULT_VERBOSITY,
        console_enabled: bool = LOG_TO_CONSOLE,
        file_enabled: bool = LOG_TO_FILE,
        trace_enabled: bool = LOG_TRACE_FILE_ENABLED,
    ):
        """
        Initializes and configures the logger.

        Args:
            log_name (str): Base name for the log files.
            log_dir (str): Directory to store log files.
            verbosity (int): 0-6 verbosity for fsgateway messages.
            console_enabled (bool): Attach a stdout handler.
            file_enabled (bool): Attach a rotating file handler.
            trace_enabled (bool): Attach a rotating file handler for all tiers.
        """
        self.logger = logging.getLogger()
        self.logger.setLevel(TRACE6)
        self.level = set_verbosity(verbosity)

        if self.logger.hasHandlers():
            return

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        if console_enabled:
            # Console shows whatever the verbosity lets through
            self._setup_console_handler(
                min(getattr(logging, LOG_CONSOLE_LEVEL, logging.INFO), self.level)
            )

        if file_enabled:
            add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}_{timestamp}.log"),
                level=getattr(logging, LOG_FILE_LEVEL, logging.WARNING),
                max_bytes=LOG_FILE_MAX_BYTES,
                backup_count=LOG_FILE_BACKUP_COUNT,
            )

        if trace_enabled:
            add_file_handler(
                logger=self.logger,
                log_path=os.path.join(log_dir, f"{log_name}_trace_{timestamp}.log"),
                level=TRACE6,
                max_bytes=LOG_TRACE_FILE_MAX_BYTES,
                backup_count=LOG_TRACE_FILE_BACKUP_COUNT,
            )

    def _setup_console_handler(self, level: int):
        """Sets up console handler with UTF-8-safe formatting."""
        console_handler = logging.StreamHandler(sys.stdout)

        with contextlib.suppress(AttributeError, ValueError):
            console_handler.stream.reconfigure(encoding="utf-8")

        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        self.logger.addHandler(console_handler)
