"""Shared fixtures: a realistic Open-Meteo forecast payload."""

from __future__ import annotations

from typing import Any

import pytest

from weather_dashboard.config import get_settings


def _hours(day: str) -> list[str]:
    return [f"{day}T{h:02d}:00" for h in range(24)]


@pytest.fixture(autouse=True)
def _fresh_settings() -> Any:
    """Re-read settings for every test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """Two days of hourly data, seven days of daily data, 'now' at 15:00."""
    hourly_times = _hours("2026-10-17") + _hours("2026-10-18")
    n = len(hourly_times)
    return {
        "latitude": 40.71,
        "longitude": -74.01,
        "timezone": "America/New_York",
        "current": {
            "time": "2026-10-17T15:00",
            "interval": 900,
            "temperature_2m": 21.6,
            "apparent_temperature": 20.4,
            "relative_humidity_2m": 55,
            "wind_speed_10m": 12.3,
            "weather_code": 2,
        },
        "daily": {
            "time": [f"2026-10-{d}" for d in range(17, 24)],
            "temperature_2m_max": [23.1, 19.0, 17.5, 16.2, 18.8, 20.0, 21.4],
            "temperature_2m_min": [12.4, 10.1, 9.8, 8.0, 9.9, 11.3, 12.0],
            "weather_code": [2, 61, 63, 3, 0, 1, 95],
            "precipitation_probability_max": [10, 80, 95, 30, 0, 5, 60],
            "sunrise": [f"2026-10-{d}T07:{d + 10}" for d in range(17, 24)],
            "sunset": [f"2026-10-{d}T18:{d + 5}" for d in range(17, 24)],
        },
        "hourly": {
            "time": hourly_times,
            "temperature_2m": [10.0 + i * 0.5 for i in range(n)],
            "apparent_temperature": [9.0 + i * 0.5 for i in range(n)],
            "precipitation_probability": [i % 100 for i in range(n)],
            "weather_code": [0 if i % 2 else 3 for i in range(n)],
        },
    }
