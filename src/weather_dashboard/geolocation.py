"""Device location sources for the "use my location" action.

A geolocator answers ``locate()`` with ``(latitude, longitude)`` or raises
``GeolocationDenied`` / ``GeolocationFailed``.  A dashboard without one
reports ``GeolocationUnsupported``.
"""

from __future__ import annotations

from typing import Protocol

from weather_dashboard.errors import GeolocationFailed


class Geolocator(Protocol):
    """Anything that can report the device's coordinates."""

    def locate(self) -> tuple[float, float]: ...


class FixedGeolocator:
    """Reports coordinates supplied up front (CLI flags, config)."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude

    def locate(self) -> tuple[float, float]:
        if not (-90 <= self.latitude <= 90 and -180 <= self.longitude <= 180):
            raise GeolocationFailed
        return self.latitude, self.longitude
