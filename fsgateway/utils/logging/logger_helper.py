"""Module: logger_helper.py

Date: 2026-10-19

Provides utility functions for working with loggers in a safe and consistent way.

Functions:
get_logger(name): Returns a patched logger whose logging methods survive encoding errors.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message safely, falling back to ASCII if needed.
set_verbosity(level): Maps a 0-6 verbosity onto the package logger.
log_verbose(logger, tier, message): Emits a message at one of the verbosity tiers.

The gateway logs failures at WARNING and uses four increasingly verbose trace
tiers below that: DEBUG (tier 1), TRACE4, TRACE5 and TRACE6.
"""

import logging
import re
from functools import partial

PACKAGE_LOGGER_NAME = "fsgateway"

TRACE4 = logging.DEBUG - 1
TRACE5 = logging.DEBUG - 2
TRACE6 = logging.DEBUG - 3

logging.addLevelName(TRACE4, "TRACE4")
logging.addLevelName(TRACE5, "TRACE5")
logging.addLevelName(TRACE6, "TRACE6")

_TIER_LEVELS = {
    1: logging.DEBUG,
    4: TRACE4,
    5: TRACE5,
    6: TRACE6,
}


def safe_text(text: str) -> str:
    """
    Replaces unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text with replacements for problematic characters.
    """
    replacements = {
        "→": "->",  # -> Right arrow
        "—": "--",  # em dash
        "–": "-",  # en dash
        "…": "...",  # ellipsis
    }
    pattern = re.compile("|".join(map(re.escape, replacements.keys())))
    return pattern.sub(lambda m: replacements[m.group(0)], text)


def safe_log(logger_func, message: str, *args, **kwargs):
    """
    Logs a message using the given logger function (e.g. logger.info),
    falling back to ASCII-safe output if UnicodeEncodeError occurs.

    Args:
        logger_func (Callable): A logger method like logger.info or logger.error.
        message (str): The message to log.
    """
    try:
        if not isinstance(message, str):
            message = repr(message)
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(str(message)), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger):
    """
    Replaces logger's logging methods with safe_log-wrapped versions.
    """
    for method_name in ["debug", "info", "warning", "error", "critical"]:
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Returns a logger with the given name, delegating to the package logger for output.
    Patches logging methods to avoid UnicodeEncodeError.

    The level is left unset so the package-wide verbosity applies.

    Args:
        name (str): Optional name for the logger (defaults to this module)

    Returns:
        logging.Logger: Patched logger instance
    """
    logger = logging.getLogger(name or __name__)
    logger.propagate = True

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


def verbosity_to_level(verbosity: int) -> int:
    """
    Converts a 0-6 verbosity into a logging level.

    0 shows warnings only, 1-3 add DEBUG, 4, 5 and 6 add the matching trace tier.
    Values outside the range are clamped.
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity < 4:
        return logging.DEBUG
    return _TIER_LEVELS[min(verbosity, 6)]


def set_verbosity(verbosity: int) -> int:
    """
    Sets the level of the package logger from a 0-6 verbosity.

    Returns:
        int: The logging level that was applied.
    """
    level = verbosity_to_level(verbosity)
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(level)
    return level


def log_verbose(logger: logging.Logger, tier: int, message: str, *args) -> None:
    """
    Logs a message at a verbosity tier (1, 4, 5 or 6).

    Args:
        logger (logging.Logger): Logger to emit on.
        tier (int): Verbosity tier of the message.
        message (str): %-style format string.
    """
    level = _TIER_LEVELS.get(tier, logging.DEBUG)
    if logger.isEnabledFor(level):
        logger.log(level, message, *args)
