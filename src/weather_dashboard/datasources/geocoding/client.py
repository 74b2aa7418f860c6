"""Open-Meteo geocoding API helpers.

API docs: https://open-meteo.com/en/docs/geocoding-api
"""

from __future__ import annotations

from typing import Any

from weather_dashboard.schemas import PlaceLocation, build_label

# Only the best match is used.
RESULT_COUNT = 1


def location_from_result(
    result: dict[str, Any],
    *,
    latitude: float | None = None,
    longitude: float | None = None,
    fallback_name: str | None = None,
) -> PlaceLocation:
    """
    Build a PlaceLocation from one entry of a geocoding ``results`` array.

    Args:
        result: ``{name, admin1, country, latitude, longitude}`` from the API.
        latitude: Override the result's latitude (reverse lookups keep the
            device's own coordinates).
        longitude: Override the result's longitude.
        fallback_name: Name (and label) to use when the result has none.
    """
    name = result.get("name") or ""
    admin1 = result.get("admin1") or ""
    country = result.get("country") or ""
    label = build_label(name, admin1, country) or (fallback_name or "")
    return PlaceLocation(
        name=name or (fallback_name or ""),
        admin1=admin1,
        country=country,
        label=label,
        latitude=result["latitude"] if latitude is None else latitude,
        longitude=result["longitude"] if longitude is None else longitude,
    )
