"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"
DEVELOPMENT_ENVIRONMENT = "development"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_name: str = Field(
        default="MicFx",
        description="Site title rendered in the page layout",
        min_length=1,
    )
    environment: str = Field(
        default="production",
        description="Hosting environment name; 'development' disables the production pipeline",
        min_length=1,
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for records emitted by the root logger",
    )
    https_redirect: bool = Field(
        default=True,
        description="Redirect plain HTTP requests to HTTPS outside development",
    )
    hsts_max_age: int = Field(
        default=30 * 24 * 60 * 60,
        description="Value in seconds of the Strict-Transport-Security max-age directive",
        gt=0,
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
            )
        return normalized

    @property
    def is_development(self) -> bool:
        """Return ``True`` when running in the development environment."""

        return self.environment.strip().lower() == DEVELOPMENT_ENVIRONMENT


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
