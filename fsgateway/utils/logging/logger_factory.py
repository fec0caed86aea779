"""Module: logger_factory.py

Date: 2026-10-19

Logger factory with caching.
Provides centralized logger management with thread-safe operations.
"""

import logging
import threading

from fsgateway.utils.logging.logger_helper import get_logger


class LoggerFactory:
    """
    Thread-safe logger factory with caching.

    Maintains a single logger instance per module name.
    """

    _loggers: dict[str, logging.Logger] = {}
    _lock = threading.Lock()

    @classmethod
    def get_logger(cls, name: str | None = None) -> logging.Logger:
        """
        Get or create a cached logger for the given name.

        Args:
            name (str): Logger name, typically __name__ from calling module

        Returns:
            logging.Logger: Cached logger instance
        """
        if name is None:
            import inspect

            frame = inspect.currentframe().f_back
            name = frame.f_globals.get("__name__", "unknown")

        with cls._lock:
            if name not in cls._loggers:
                cls._loggers[name] = get_logger(name)

            return cls._loggers[name]

    @classmethod
    def get_logger_count(cls) -> int:
        """Get number of cached loggers."""
        return len(cls._loggers)

    @classmethod
    def clear_cache(cls) -> None:
        """
        Clear all cached loggers.

        Warning: modules keep the logger they already fetched.
        """
        with cls._lock:
            cls._loggers.clear()

    @classmethod
    def get_cached_names(cls) -> list[str]:
        """Get list of all cached logger names."""
        return list(cls._loggers.keys())


def get_cached_logger(name: str | None = None) -> logging.Logger:
    """
    Convenience function for getting cached logger.

    Args:
        name (str): Logger name

    Returns:
        logging.Logger: Cached logger instance
    """
    return LoggerFactory.get_logger(name)
