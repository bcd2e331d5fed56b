import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """
    Application configuration loaded from environment variables.

    Environment Variables:
        DATABASE_URL: SQLAlchemy URL (default: local sqlite file)
        FERNET_KEY: Key used to sign and encrypt auth tokens
        TOKEN_TTL_SECONDS: How long an auth token stays valid (default: 24h)
        UPLOAD_DIR: Where bill photos are written (default: uploads)
        MAX_UPLOAD_BYTES: Largest accepted bill photo (default: 5MB)
        CORS_ORIGINS: Comma separated list of allowed origins (default: *)
        LOG_LEVEL / LOG_FILE: Logging setup
    """

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./watertrack.db")

    FERNET_KEY = os.getenv("FERNET_KEY")
    TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", "86400"))

    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
    MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE = os.getenv("LOG_FILE")
