"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Asia/Kolkata"
MAX_ENTRY_HOURS = 16
DEFAULT_BREAK_TYPE = "Unpaid"
DEFAULT_LEAVE_TYPE = "Full Day"
DEFAULT_REQUEST_TYPE = "Planned"

# Defaults used by the log editor when a row is added.
DEFAULT_SESSION_START = "09:00"
DEFAULT_SESSION_END = "17:00"
DEFAULT_BREAK_START = "12:00"
DEFAULT_BREAK_END = "13:00"
