import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_attendance"),
}

# Required: the app refuses to start without it.
IDENTITY_SECRET = os.getenv("IDENTITY_SECRET", "")
IDENTITY_AUDIENCE = os.getenv("IDENTITY_AUDIENCE", "authenticated")
IDENTITY_TOKEN_LEEWAY_SECONDS = int(os.getenv("IDENTITY_TOKEN_LEEWAY_SECONDS", "30"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
