"""Application configuration loaded from environment variables."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Storage stays client-resident: only SQLite URLs are accepted for the SQL backend.
VALID_STORAGE_URL_PREFIXES = (
    "sqlite://",
    "sqlite+pysqlite://",
)

# Fixed names of the three persisted records. Not configurable at runtime.
CATALOG_KEY = "cm_products_v1"
SESSION_KEY = "cm_user_v1"
THEME_KEY = "cm_theme_v1"


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Where the catalog, session and theme records live.
    STORAGE_BACKEND: Literal["memory", "sql"] = "sql"
    STORAGE_URL: str = "sqlite:///commodities.db"

    # When False, a persisted session is trusted as-is on startup (single-user local trust model).
    # When True, it must still match a known credential by username and role.
    VERIFY_SESSION_ON_RESTORE: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = (v or "").strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(
                "LOG_LEVEL must be a standard logging level (e.g. DEBUG, INFO, WARNING)"
            )
        return level

    @field_validator("STORAGE_URL")
    @classmethod
    def validate_storage_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("STORAGE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_STORAGE_URL_PREFIXES):
            raise ValueError(
                "STORAGE_URL must be a SQLite URL (e.g. sqlite:///commodities.db or sqlite://)"
            )
        return v.strip()


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
