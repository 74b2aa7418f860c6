"""Application configuration using Pydantic Settings.

Every field can be overridden from the environment with the
``WEATHER_DASHBOARD_`` prefix (e.g. ``WEATHER_DASHBOARD_DEFAULT_NAME=Oslo``)
or from a local ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_dashboard.reference.locations import DEFAULT_LOCATION
from weather_dashboard.schemas import PlaceLocation


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_DASHBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Weather Dashboard"
    app_env: str = "development"
    debug: bool = False

    # Location shown on startup
    default_name: str = DEFAULT_LOCATION.name
    default_admin1: str = DEFAULT_LOCATION.admin1
    default_country: str = DEFAULT_LOCATION.country
    default_label: str = ""  # empty = derived from name/region/country
    default_lat: float = Field(default=DEFAULT_LOCATION.latitude, ge=-90, le=90)
    default_lon: float = Field(default=DEFAULT_LOCATION.longitude, ge=-180, le=180)

    # Open-Meteo
    forecast_api: str = "https://api.open-meteo.com/v1/forecast"
    geocoding_api: str = "https://geocoding-api.open-meteo.com/v1/search"
    reverse_geocoding_api: str = "https://geocoding-api.open-meteo.com/v1/reverse"
    language: str = "en"
    request_timeout: float = Field(default=10.0, gt=0)

    # Static site preview
    site_dir: Path = Path("site")
    api_port: int = 8000

    def default_location(self) -> PlaceLocation:
        """Build the startup location from the configured defaults."""
        label = self.default_label.strip()
        parts = (self.default_name, self.default_admin1, self.default_country)
        if not label and parts == (
            DEFAULT_LOCATION.name,
            DEFAULT_LOCATION.admin1,
            DEFAULT_LOCATION.country,
        ):
            label = DEFAULT_LOCATION.label
        return PlaceLocation(
            name=self.default_name,
            admin1=self.default_admin1,
            country=self.default_country,
            label=label,
            latitude=self.default_lat,
            longitude=self.default_lon,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    return Settings()
