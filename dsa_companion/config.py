import logging
from logging.config import dictConfig
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    ENVIRONMENT: str = "local"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/dsa_companion.db"

    # JWT
    JWT_SECRET: str = "dev-secret-key-change-me"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRY: int = 7 * 24 * 60 * 60  # seconds

    # Password hashing
    BCRYPT_ROUNDS: int = 12

    # Model provider
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4"
    OPENAI_BASE_URL: Optional[str] = None

    # API SERVER
    API_SERVER_HOST: str = "0.0.0.0"
    API_SERVER_PORT: int = 5001
    CORS_ORIGINS: List[str] = ["*"]

    # Rate limiting (disabled unless REDIS_URL is set)
    REDIS_URL: Optional[str] = None
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW: int = 15 * 60

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def SQLITE_PATH(self) -> Optional[Path]:
        """Filesystem path of the database file, if the URL points at one."""
        prefix = "sqlite+aiosqlite:///"
        if not self.DATABASE_URL.startswith(prefix):
            return None
        path = self.DATABASE_URL[len(prefix):]
        if not path or path == ":memory:":
            return None
        return Path(path)


Config = Settings()

# Ensure logs directory exists
Path(Config.LOG_FILE).parent.mkdir(parents=True, exist_ok=True)


def configure_logging():
    """Configure logging for the application."""
    handlers = ["console", "file"]
    log_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            },
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(lineno)d - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": Config.LOG_LEVEL,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "detailed",
                "filename": Config.LOG_FILE,
                "maxBytes": 10485760,  # 10MB
                "backupCount": 5,
                "level": Config.LOG_LEVEL,
            },
        },
        "loggers": {
            "app": {
                "handlers": handlers,
                "level": Config.LOG_LEVEL,
                "propagate": False,
            },
        },
        "root": {
            "handlers": handlers,
            "level": Config.LOG_LEVEL,
        },
    }
    dictConfig(log_config)
    return logging.getLogger("app")


# Initialize logger
logger = configure_logging()
