import os

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_DIR = os.getenv("STORAGE_DIR", "data")
STORAGE_KEY = "timeLogs"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "log_desk_test"),
}

SHIFT_MINUTES = 510

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
