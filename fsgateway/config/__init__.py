"""Module: fsgateway.config

Date: 2026-10-19

Configuration package for fsgateway.

- app: application info and logging settings
- paths: on-disk conventions (temp suffix, encoding, line terminator)

All settings are re-exported from this module:
    from fsgateway.config import TEMP_FILE_SUFFIX, LOG_TO_CONSOLE
"""

from fsgateway.config.app import *  # noqa: F401, F403
from fsgateway.config.paths import *  # noqa: F401, F403
