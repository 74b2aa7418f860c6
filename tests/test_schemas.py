"""
Tests for locations, view models and settings.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from weather_dashboard.config import Settings, get_settings
from weather_dashboard.reference.locations import DEFAULT_LOCATION
from weather_dashboard.schemas import HourlyEntry, PlaceLocation


class TestPlaceLocation:
    """Labels are derived unless given explicitly."""

    def test_derived_label(self) -> None:
        location = PlaceLocation(
            name="Paris", admin1="", country="France", latitude=48.85, longitude=2.35
        )
        assert location.label == "Paris, France"

    def test_explicit_label(self) -> None:
        assert DEFAULT_LOCATION.label == "New York, United States"

    def test_null_parts(self) -> None:
        location = PlaceLocation.model_validate(
            {"name": "Paris", "admin1": None, "country": None, "latitude": 48.85, "longitude": 2.35}
        )
        assert location.admin1 == ""
        assert location.country == ""
        assert location.label == "Paris"

    def test_blank_label_is_derived(self) -> None:
        location = PlaceLocation(
            name="Paris", country="France", label="   ", latitude=48.85, longitude=2.35
        )
        assert location.label == "Paris, France"

    def test_immutable(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_LOCATION.name = "Boston"  # type: ignore[misc]

    @pytest.mark.parametrize(("lat", "lon"), [(91.0, 0.0), (-91.0, 0.0), (0.0, 181.0)])
    def test_coordinates_range(self, lat: float, lon: float) -> None:
        with pytest.raises(ValidationError):
            PlaceLocation(name="Nowhere", latitude=lat, longitude=lon)


class TestHourlyEntry:
    def test_optional_fields_default_to_none(self) -> None:
        entry = HourlyEntry(time="2026-10-17T15:00", hour_label="3:00 PM", temperature=0.0)
        assert entry.temperature == 0.0
        assert entry.feels_like is None
        assert entry.precipitation is None


class TestSettings:
    """Settings come from WEATHER_DASHBOARD_* variables."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.default_location() == DEFAULT_LOCATION
        assert settings.request_timeout == 10.0
        assert settings.language == "en"
        assert settings.site_dir == Path("site")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_DASHBOARD_DEFAULT_NAME", "Oslo")
        monkeypatch.setenv("WEATHER_DASHBOARD_DEFAULT_ADMIN1", "")
        monkeypatch.setenv("WEATHER_DASHBOARD_DEFAULT_COUNTRY", "Norway")
        monkeypatch.setenv("WEATHER_DASHBOARD_DEFAULT_LAT", "59.91")
        monkeypatch.setenv("WEATHER_DASHBOARD_DEFAULT_LON", "10.75")

        location = get_settings().default_location()

        assert location.label == "Oslo, Norway"
        assert location.latitude == 59.91

    def test_explicit_label(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_DASHBOARD_DEFAULT_LABEL", "Home")
        assert get_settings().default_location().label == "Home"

    def test_blank_label(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_DASHBOARD_DEFAULT_LABEL", "  ")
        assert get_settings().default_location().label == "New York, United States"

    def test_invalid_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WEATHER_DASHBOARD_REQUEST_TIMEOUT", "0")
        with pytest.raises(ValidationError):
            get_settings()

    def test_cached(self) -> None:
        assert get_settings() is get_settings()
