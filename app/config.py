"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

MERGE_POLICY_COLLAPSE = "collapse"
MERGE_POLICY_WINDOW = "window"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    app_timezone: str | None = Field(
        default=None,
        description="IANA timezone name (or UTC+HH:MM offset) used for stored datetimes",
    )
    notification_lookback_days: int = Field(
        default=30,
        description="Only inbox notifications created within this many days are deduplicated",
        gt=0,
    )
    notification_merge_threshold_minutes: int = Field(
        default=60,
        description="Gap under which two identical notifications belong to the same send run",
        gt=0,
    )
    notification_merge_policy: Literal["collapse", "window"] = Field(
        default=MERGE_POLICY_COLLAPSE,
        description=(
            "'collapse' keeps one notification per identity group; 'window' only removes "
            "copies sent within the merge threshold of the previous one"
        ),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = [
    "MERGE_POLICY_COLLAPSE",
    "MERGE_POLICY_WINDOW",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
