import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

TIMEZONE = os.getenv("TIMEZONE", "Asia/Kolkata")
MAX_ENTRY_HOURS = int(os.getenv("MAX_ENTRY_HOURS", "16"))
STATUS_PRECEDENCE = os.getenv("STATUS_PRECEDENCE", "holiday_first")
COLLECT_ALL_ERRORS = bool(int(os.getenv("COLLECT_ALL_ERRORS", "1")))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
