"""Module: fsgateway.config.app

Date: 2026-10-19

Application-level configuration: app info and logging settings.
"""

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "fsgateway"
APP_VERSION = "1.0.0"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = False
LOG_DIR = "logs"
LOG_FILE_LEVEL = "WARNING"
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Trace file logging (captures every verbosity tier)
LOG_TRACE_FILE_ENABLED = False
LOG_TRACE_FILE_MAX_BYTES = 20_000_000  # 20MB per trace file
LOG_TRACE_FILE_BACKUP_COUNT = 3

# =====================================
# VERBOSITY
# =====================================

# 0 = warnings only, 1 = directory changes, 4 = removals,
# 5 = reads/writes/renames, 6 = skipped entries
DEFAULT_VERBOSITY = 0
MAX_VERBOSITY = 6
