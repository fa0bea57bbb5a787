import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_ops"),
}

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

STUDENT_SCAN_WINDOW_MINUTES = int(os.getenv("STUDENT_SCAN_WINDOW_MINUTES", "5"))
STAFF_SCAN_WINDOW_MINUTES = int(os.getenv("STAFF_SCAN_WINDOW_MINUTES", "2"))
