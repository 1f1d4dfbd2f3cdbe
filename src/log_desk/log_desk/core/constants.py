"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_STORAGE_KEY = "timeLogs"
CHECKSUM_KEY_SUFFIX = "_checksum"

# 8h 30m shift used for the expected logout projection.
DEFAULT_SHIFT_MINUTES = 510

MAX_TIME_INPUT_LENGTH = 8
EDITABLE_RANGE_YEARS = 1

INVALID_DURATION = "Invalid"
