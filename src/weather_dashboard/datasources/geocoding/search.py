"""Forward geocoding: place name -> PlaceLocation."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from weather_dashboard.config import get_settings
from weather_dashboard.datasources.geocoding.client import RESULT_COUNT, location_from_result
from weather_dashboard.errors import EmptyQuery, LookupUnavailable, NoMatch
from weather_dashboard.schemas import PlaceLocation
from weather_dashboard.services.http import session

logger = logging.getLogger(__name__)


def search_by_name(text: str) -> PlaceLocation:
    """
    Resolve free text (city, region or country) to the best matching place.

    Args:
        text: Search text; surrounding whitespace is ignored.

    Returns:
        The first geocoding result, labelled "Name, Region, Country".

    Raises:
        EmptyQuery: ``text`` is blank (no request is made).
        LookupUnavailable: Network error, non-success status or bad body.
        NoMatch: The service found nothing.
    """
    query = text.strip()
    if not query:
        raise EmptyQuery

    settings = get_settings()
    params: dict[str, str | int] = {
        "name": query,
        "count": RESULT_COUNT,
        "language": settings.language,
        "format": "json",
    }

    logger.info("Searching for %r", query)
    try:
        resp = session.get(settings.geocoding_api, params=params)
    except requests.RequestException as exc:
        logger.warning("Geocoding request failed: %s", exc)
        raise LookupUnavailable from exc

    if not resp.ok:
        logger.warning("Geocoding API returned %s", resp.status_code)
        raise LookupUnavailable

    try:
        data: dict[str, Any] = resp.json()
    except ValueError as exc:
        raise LookupUnavailable from exc

    if not isinstance(data, dict):
        logger.warning("Unexpected geocoding body for %r", query)
        raise LookupUnavailable

    results = data.get("results") or []
    if not results:
        raise NoMatch

    try:
        return location_from_result(results[0])
    except (AttributeError, KeyError, TypeError, ValidationError) as exc:
        logger.warning("Unusable geocoding result for %r: %s", query, exc)
        raise LookupUnavailable from exc
