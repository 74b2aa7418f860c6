"""Current, hourly and daily forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import requests

from weather_dashboard.config import get_settings
from weather_dashboard.datasources.weather.client import CURRENT_VARS, DAILY_VARS, HOURLY_VARS
from weather_dashboard.datasources.weather.normalize import normalize_forecast
from weather_dashboard.errors import IncompleteData, RequestFailed
from weather_dashboard.renderers.formatting import DEFAULT_FORMATTERS, DateFormatters
from weather_dashboard.schemas import ForecastBundle, PlaceLocation
from weather_dashboard.services.http import session

logger = logging.getLogger(__name__)


def fetch_forecast(location: PlaceLocation) -> dict[str, Any]:
    """
    Fetch the raw forecast payload for a location.

    Args:
        location: Place to forecast; only its coordinates are sent.

    Returns:
        Decoded JSON with ``current``, ``daily`` and ``hourly`` blocks
        (not yet validated).

    Raises:
        RequestFailed: Network error or non-success HTTP status.
        IncompleteData: The body isn't JSON.
    """
    params: dict[str, str | float] = {
        "latitude": location.latitude,
        "longitude": location.longitude,
        "timezone": "auto",
        "current": ",".join(CURRENT_VARS),
        "daily": ",".join(DAILY_VARS),
        "hourly": ",".join(HOURLY_VARS),
    }

    logger.info(
        "Fetching forecast for %s (%s, %s)", location.label, location.latitude, location.longitude
    )
    try:
        resp = session.get(get_settings().forecast_api, params=params)
    except requests.RequestException as exc:
        logger.warning("Forecast request failed: %s", exc)
        raise RequestFailed from exc

    if not resp.ok:
        logger.warning("Forecast API returned %s", resp.status_code)
        raise RequestFailed

    try:
        result: dict[str, Any] = resp.json()
    except ValueError as exc:
        raise IncompleteData from exc
    return result


def fetch_and_normalize(
    location: PlaceLocation,
    *,
    formatters: DateFormatters = DEFAULT_FORMATTERS,
) -> ForecastBundle:
    """Fetch the forecast for ``location`` and build all view models at once."""
    payload = fetch_forecast(location)
    current, daily, hourly = normalize_forecast(payload, formatters=formatters)
    logger.debug("Normalized %d days and %d hours for %s", len(daily), len(hourly), location.label)
    return ForecastBundle(
        location=location,
        current=current,
        daily=tuple(daily),
        hourly=tuple(hourly),
        fetched_at=datetime.now(UTC),
    )
