"""
Application settings.

Values come from the environment (prefix ``WEATHER_REPORT_``) or a ``.env``
file. The tomorrow.io key keeps its conventional unprefixed name,
``TOMORROW_API_KEY``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_report.datasources.tomorrow.client import TOMORROW_REALTIME_API


class Settings(BaseSettings):
    """Runtime configuration for the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_REPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "weather-report"
    tomorrow_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TOMORROW_API_KEY", "WEATHER_REPORT_TOMORROW_API_KEY"),
        repr=False,
    )
    location: str = "New York City"
    # Not validated: anything but "metric" renders imperial.
    units: str = "imperial"
    api_url: str = TOMORROW_REALTIME_API
    timeout: float = Field(default=30, gt=0)
    debug: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
