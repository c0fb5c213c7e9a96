"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Blog List backend application.
"""

from dataclasses import dataclass
from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_USERNAME_LENGTH = 50
MAX_NAME_LENGTH = 100

# Response constants
DEFAULT_ERROR_MESSAGE = "Internal Server Error"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Blog List Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "staging", "production", "test"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3003

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Token Configuration
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Password hashing
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"


@dataclass(frozen=True)
class Argon2Config:
    """Argon2id cost parameters for one security level."""

    memory_cost: int
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, Argon2Config] = {
    "low": Argon2Config(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": Argon2Config(memory_cost=64 * 1024, time_cost=3, parallelism=4),
    "high": Argon2Config(memory_cost=512 * 1024, time_cost=2, parallelism=2),
}


settings = Settings()


def file_logger(logger: Logger) -> Logger:
    """
    Attach a rotating JSON file handler to `logger` when file logging is enabled.

    Args:
        logger: Logger to extend.

    Returns:
        Logger: The same logger, for one-line module setup.
    """
    if not settings.LOG_TO_FILE:
        return logger

    log_file = Path(settings.LOG_FILE)
    if any(getattr(h, "baseFilename", None) == str(log_file.resolve()) for h in logger.handlers):
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=5 * 1024 * 1024, backupCount=5)
    handler.setLevel(INFO)
    handler.setFormatter(JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    return logger
