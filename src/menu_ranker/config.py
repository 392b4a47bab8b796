"""Application configuration."""

import os
from datetime import date, datetime
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    menu_language: str = "fi"
    menu_timezone: str = "Europe/Helsinki"
    request_timeout_seconds: float = 10.0
    max_concurrent_requests: int = 16
    semma_menu_base_url: str | None = None
    semma_recipe_base_url: str | None = None
    compass_menu_base_url: str | None = None
    compass_recipe_base_url: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_menu_date(raw: str) -> str:
    """Validate a menu date and return it as YYYY-MM-DD."""
    return date.fromisoformat(raw.strip()).isoformat()


def today_in(timezone_name: str) -> str:
    """Return today's date in the given timezone as YYYY-MM-DD."""
    return datetime.now(tz=ZoneInfo(timezone_name)).date().isoformat()
