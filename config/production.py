import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_ops"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

STUDENT_SCAN_WINDOW_MINUTES = int(os.getenv("STUDENT_SCAN_WINDOW_MINUTES", "5"))
STAFF_SCAN_WINDOW_MINUTES = int(os.getenv("STAFF_SCAN_WINDOW_MINUTES", "2"))
