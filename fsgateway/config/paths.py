"""Module: fsgateway.config.paths

Date: 2026-10-19

On-disk conventions shared with other tools that read the same files.
"""

# =====================================
# ATOMIC WRITE
# =====================================

# Writes are staged through "<target>.new" and then renamed over the target.
# Other tools scanning a directory may transiently observe these files.
TEMP_FILE_SUFFIX = ".new"

# Appended to every written payload
LINE_TERMINATOR = "\n"

# Remove the staged temp file when the write or the final rename fails
CLEANUP_TEMP_ON_FAILURE = True

# =====================================
# TEXT
# =====================================

TEXT_ENCODING = "utf-8"
