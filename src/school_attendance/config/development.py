import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "school_attendance"),
}

# HS256 secret shared with the identity service that signs callback tokens.
IDENTITY_SECRET = os.getenv("IDENTITY_SECRET", "dev-identity-secret")
IDENTITY_AUDIENCE = os.getenv("IDENTITY_AUDIENCE", "authenticated")
IDENTITY_TOKEN_LEEWAY_SECONDS = int(os.getenv("IDENTITY_TOKEN_LEEWAY_SECONDS", "30"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
