"""Reverse geocoding: coordinates -> PlaceLocation (best effort)."""

from __future__ import annotations

import logging

from weather_dashboard.config import get_settings
from weather_dashboard.datasources.geocoding.client import RESULT_COUNT, location_from_result
from weather_dashboard.reference.locations import CURRENT_LOCATION_NAME
from weather_dashboard.schemas import PlaceLocation
from weather_dashboard.services.http import session

logger = logging.getLogger(__name__)


def unnamed_location(latitude: float, longitude: float) -> PlaceLocation:
    """The generic "Current location" used when coordinates can't be named."""
    return PlaceLocation(
        name=CURRENT_LOCATION_NAME,
        label=CURRENT_LOCATION_NAME,
        latitude=latitude,
        longitude=longitude,
    )


def resolve_coordinates(latitude: float, longitude: float) -> PlaceLocation:
    """
    Name the place at the given coordinates.

    Never raises for lookup problems: a failed or empty lookup logs a
    warning and returns ``unnamed_location``.  The returned location always
    keeps the coordinates that were passed in.
    """
    settings = get_settings()
    params: dict[str, str | int | float] = {
        "latitude": latitude,
        "longitude": longitude,
        "count": RESULT_COUNT,
        "language": settings.language,
    }

    try:
        resp = session.get(settings.reverse_geocoding_api, params=params)
        resp.raise_for_status()
        results = resp.json().get("results") or []
        if not results:
            logger.info("No place found at (%s, %s)", latitude, longitude)
            return unnamed_location(latitude, longitude)
        return location_from_result(
            results[0],
            latitude=latitude,
            longitude=longitude,
            fallback_name=CURRENT_LOCATION_NAME,
        )
    except (OSError, ValueError, AttributeError, TypeError, KeyError) as exc:
        # requests.RequestException is an OSError; ValueError covers bad JSON
        # and pydantic.ValidationError
        logger.warning("Reverse geocoding failed: %s", exc)
        return unnamed_location(latitude, longitude)
