import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# file | mysql | memory
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")
STORAGE_DIR = os.getenv("STORAGE_DIR", "data")
STORAGE_KEY = os.getenv("STORAGE_KEY", "timeLogs")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "log_desk"),
}

# Expected logout = login + SHIFT_MINUTES (8h 30m)
SHIFT_MINUTES = int(os.getenv("SHIFT_MINUTES", "510"))

DEBUG = True

# If enabled (mysql backend), app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
