import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

TIMEZONE = "Asia/Kolkata"
MAX_ENTRY_HOURS = 16
STATUS_PRECEDENCE = "holiday_first"
COLLECT_ALL_ERRORS = True

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
