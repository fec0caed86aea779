"""
Module: test_logging_setup.py

Date: 2026-10-19

Tests for the logging helpers: verbosity tiers, the cached logger factory,
file handlers and ConfigureLogger.
"""

import logging

import pytest

from fsgateway.utils.logging.init_logging import init_logging
from fsgateway.utils.logging.logger_factory import LoggerFactory, get_cached_logger
from fsgateway.utils.logging.logger_file_helper import add_file_handler
from fsgateway.utils.logging.logger_helper import (
    PACKAGE_LOGGER_NAME,
    TRACE4,
    TRACE5,
    TRACE6,
    log_verbose,
    safe_text,
    set_verbosity,
    verbosity_to_level,
)
from fsgateway.utils.logging.logger_setup import ConfigureLogger


class TestVerbosity:
    """Tests for verbosity tiers."""

    def test_level_names_registered(self):
        """Test that trace tiers have readable names."""
        assert logging.getLevelName(TRACE4) == "TRACE4"
        assert logging.getLevelName(TRACE5) == "TRACE5"
        assert logging.getLevelName(TRACE6) == "TRACE6"

    def test_tiers_are_increasingly_verbose(self):
        """Test tier ordering below WARNING."""
        assert logging.WARNING > logging.DEBUG > TRACE4 > TRACE5 > TRACE6

    @pytest.mark.parametrize(
        ("verbosity", "level"),
        [
            (-1, logging.WARNING),
            (0, logging.WARNING),
            (1, logging.DEBUG),
            (3, logging.DEBUG),
            (4, TRACE4),
            (5, TRACE5),
            (6, TRACE6),
            (9, TRACE6),
        ],
    )
    def test_verbosity_to_level(self, verbosity, level):
        """Test verbosity mapping and clamping."""
        assert verbosity_to_level(verbosity) == level

    def test_set_verbosity_sets_package_level(self):
        """Test that set_verbosity applies to the package logger."""
        assert set_verbosity(4) == TRACE4
        assert logging.getLogger(PACKAGE_LOGGER_NAME).level == TRACE4

    def test_log_verbose_respects_level(self, caplog):
        """Test that a tier is emitted only when enabled."""
        logger = get_cached_logger("fsgateway.tests.verbose")

        with caplog.at_level(TRACE4, logger=PACKAGE_LOGGER_NAME):
            log_verbose(logger, 4, "removing %s", "a")
            log_verbose(logger, 5, "reading %s", "b")

        messages = [r.getMessage() for r in caplog.records]
        assert messages == ["removing a"]
        assert caplog.records[0].levelname == "TRACE4"


class TestLoggerFactory:
    """Tests for the cached logger factory."""

    def test_returns_cached_logger(self):
        """Test that the same logger object is returned per name."""
        first = get_cached_logger("fsgateway.tests.cached")
        second = get_cached_logger("fsgateway.tests.cached")

        assert first is second
        assert "fsgateway.tests.cached" in LoggerFactory.get_cached_names()

    def test_default_name_is_caller_module(self):
        """Test that the caller's module name is used when omitted."""
        logger = LoggerFactory.get_logger()

        assert logger.name == __name__

    def test_logger_level_left_to_package(self):
        """Test that module loggers inherit the package verbosity."""
        logger = get_cached_logger("fsgateway.tests.inherit")
        set_verbosity(5)

        assert logger.level == logging.NOTSET
        assert logger.getEffectiveLevel() == TRACE5

    def test_clear_cache(self):
        """Test that clearing empties the cache."""
        get_cached_logger("fsgateway.tests.clear")
        LoggerFactory.clear_cache()

        assert LoggerFactory.get_logger_count() == 0


class TestSafeText:
    """Tests for ASCII fallbacks."""

    def test_replaces_arrow_and_dashes(self):
        """Test replacement of unsupported characters."""
        assert safe_text("a → b — c…") == "a -> b -- c..."


class TestFileHandler:
    """Tests for add_file_handler."""

    def test_writes_formatted_records(self, tmp_path):
        """Test that records land in the rotating file."""
        logger = logging.getLogger("fsgateway.tests.file")
        logger.propagate = False
        log_path = tmp_path / "logs" / "gateway.log"
        handler = add_file_handler(logger, str(log_path), level=logging.WARNING)
        try:
            logger.warning("Could not rename %s", "x")
            logger.info("not written")
        finally:
            logger.removeHandler(handler)
            handler.close()

        content = log_path.read_text(encoding="utf-8")
        assert "[WARNING] fsgateway.tests.file: Could not rename x" in content
        assert "not written" not in content


class TestConfigureLogger:
    """Tests for ConfigureLogger and init_logging."""

    def test_applies_verbosity(self):
        """Test that the package level follows the verbosity argument."""
        configured = ConfigureLogger(verbosity=5, console_enabled=False)

        assert configured.level == TRACE5
        assert logging.getLogger(PACKAGE_LOGGER_NAME).level == TRACE5

    def test_adds_handlers_to_bare_root(self, tmp_path):
        """Test console and file handlers on an unconfigured root logger."""
        root = logging.getLogger()
        saved_handlers = root.handlers[:]
        root.handlers.clear()
        try:
            ConfigureLogger(
                log_name="svc",
                log_dir=str(tmp_path),
                verbosity=1,
                console_enabled=True,
                file_enabled=True,
                trace_enabled=True,
            )
            handler_types = sorted(type(h).__name__ for h in root.handlers)
            assert handler_types == ["RotatingFileHandler", "RotatingFileHandler", "StreamHandler"]
            assert len(list(tmp_path.glob("svc_*.log"))) == 2
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers[:] = saved_handlers

    def test_init_logging_returns_package_logger(self):
        """Test the one-call entry point."""
        logger = init_logging("svc", verbosity=0, console_enabled=False)

        assert logger.name == PACKAGE_LOGGER_NAME
        assert logger.getEffectiveLevel() == logging.WARNING
