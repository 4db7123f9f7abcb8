"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_POOL_NAME = "school_attendance"
DEFAULT_POOL_SIZE = 5

ISO_DATE_FORMAT = "%Y-%m-%d"
MAX_STATUS_LENGTH = 32

# MySQL server error codes the repositories translate into domain outcomes.
ER_DUP_ENTRY = 1062
ER_NO_REFERENCED_ROW_2 = 1452
