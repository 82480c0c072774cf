"""Application settings loaded from environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Raw runtime settings for the database connection.

    Every ``db_*_file`` field names a mounted secret file whose first line
    replaces the matching bare variable. Resolution of those pairs happens in
    :mod:`dbconfig.db.config`; this class only collects the inputs.
    """

    db_host: Optional[str] = Field(default=None)
    # None when DB_PORT is not an integer; the connection check reports it
    db_port: Optional[int] = Field(default=5432)
    db_name: Optional[str] = Field(default=None)
    db_name_file: Optional[str] = Field(default=None)
    db_user: Optional[str] = Field(default=None)
    db_user_file: Optional[str] = Field(default=None)
    db_password: Optional[str] = Field(default=None, repr=False)
    db_password_file: Optional[str] = Field(default=None)
    # Environment picked by get_config() when none is passed explicitly
    app_env: str = Field(default="development")
    service_name: str = Field(default="dbconfig")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # DB_PORT= and DB_USER_FILE= behave as if the variable were unset.
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("db_port", mode="before")
    @classmethod
    def _parse_port(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            logger.warning("DB_PORT is not an integer, port left unset")
            return None


@lru_cache
def get_settings() -> Settings:
    """Return application settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
