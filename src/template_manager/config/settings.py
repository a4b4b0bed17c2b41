"""Application settings loaded from the environment and an optional .env file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from template_manager.constants import COPY_FEEDBACK_SECONDS, DEFAULT_OWNER, Timeouts

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Runtime configuration.

    Every field can be overridden with a ``TEMPLATE_MANAGER_`` prefixed
    environment variable, e.g. ``TEMPLATE_MANAGER_DEFAULT_OWNER=utk``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATE_MANAGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    content_root: Path = Field(
        default=Path("."),
        description="Directory that manifest content paths are resolved against",
    )
    base_url: str | None = Field(
        default=None,
        description="When set, template content is fetched over HTTP from this URL",
    )
    manifest_path: Path | None = Field(
        default=None,
        description="JSON manifest replacing the built-in one",
    )
    default_owner: str = Field(
        default=DEFAULT_OWNER,
        min_length=1,
        description="Owner assigned to rows that do not declare one",
    )
    http_timeout: float = Field(default=Timeouts.CONTENT_FETCH, gt=0)
    fetch_concurrency: int = Field(default=1, ge=1)
    copy_feedback_seconds: float = Field(default=COPY_FEEDBACK_SECONDS, gt=0)
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (for testing)."""
    get_settings.cache_clear()
