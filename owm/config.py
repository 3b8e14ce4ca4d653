import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from owm.services.urls import DEFAULT_BASE_URL


class Settings(BaseSettings):
    """Read from the environment and ``.env`` when instantiated, never at import."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Logging
    log_level: str = "WARNING"

    # Provider
    openweather_api_key: Optional[str] = None
    openweather_base_url: str = DEFAULT_BASE_URL
    openweather_timeout_seconds: float = 10.0


def configure_logging(config: Optional[Settings] = None) -> None:
    """Apply ``log_level`` to the package logger; handlers are left to the application."""
    config = config or Settings()
    logging.getLogger("owm").setLevel(config.log_level.upper())
