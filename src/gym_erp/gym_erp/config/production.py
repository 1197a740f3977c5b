import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "gym_erp"),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")

DEFAULT_STAFF_IN_TIME = os.getenv("DEFAULT_STAFF_IN_TIME", "09:00")
REMINDER_WINDOW_DAYS = int(os.getenv("REMINDER_WINDOW_DAYS", "14"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
