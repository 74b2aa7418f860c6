"""
Domain models for the weather dashboard.

Pydantic models for locations and the render-ready view models built from
Open-Meteo payloads. These define the canonical schema - datasources
normalize API responses to these. All models are frozen: a new forecast
replaces the old models wholesale instead of mutating them.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

# =============================================================================
# Locations
# =============================================================================


def build_label(name: str | None, admin1: str | None, country: str | None) -> str:
    """Join the non-empty parts of a place name with ", "."""
    return ", ".join(part for part in (name, admin1, country) if part)


class PlaceLocation(BaseModel):
    """A resolved place with display label and coordinates."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    name: str
    country: str = ""
    admin1: str = Field(default="", description="First-level region (state, province)")
    label: str = ""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @model_validator(mode="before")
    @classmethod
    def _fill_label(cls, data: object) -> object:
        if isinstance(data, dict):
            # The geocoding API sends null for unknown regions/countries
            data = dict(data)
            for key in ("country", "admin1", "label"):
                if data.get(key) is None:
                    data[key] = ""
            if not str(data["label"]).strip():
                data["label"] = build_label(
                    data.get("name"), data.get("admin1"), data.get("country")
                )
        return data


# =============================================================================
# Forecast view models
# =============================================================================


class CurrentSnapshot(BaseModel):
    """Conditions right now, plus today's extremes from the daily block."""

    model_config = {"frozen": True}

    time: str
    temperature: float | None = None
    apparent_temperature: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    code: int | None = None
    high: float | None = None
    low: float | None = None
    precipitation_chance: float | None = None
    sunrise: str | None = None
    sunset: str | None = None


class DailyEntry(BaseModel):
    """One day of the daily outlook."""

    model_config = {"frozen": True}

    date: str
    label: str = Field(..., description="Short weekday, e.g. 'Mon'")
    full_label: str = Field(..., description="Long date, e.g. 'Monday, October 17'")
    max: float | None = None
    min: float | None = None
    code: int | None = None
    precipitation: float | None = None


class HourlyEntry(BaseModel):
    """One hour of the 'next hours' strip.

    ``feels_like`` and ``precipitation`` are None when the API has no value,
    so renderers can tell "no data" apart from zero.
    """

    model_config = {"frozen": True}

    time: str
    hour_label: str
    temperature: float | None = None
    feels_like: float | None = None
    precipitation: float | None = None
    code: int | None = None


class ForecastBundle(BaseModel):
    """Everything one successful fetch produces, applied as a single unit."""

    model_config = {"frozen": True}

    location: PlaceLocation
    current: CurrentSnapshot
    daily: tuple[DailyEntry, ...] = ()
    hourly: tuple[HourlyEntry, ...] = ()
    fetched_at: datetime
