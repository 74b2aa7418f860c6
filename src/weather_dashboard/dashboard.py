"""
Dashboard state and the actions that change it.

``WeatherDashboard`` owns the UI state: search text, the current location,
the three forecast view models, the loading flag, the error message and the
last-updated time.  Three actions replace that state:

  - ``load_initial()``: forecast for the default location
  - ``search(text)``: forward geocode, then forecast
  - ``use_my_location(geolocator)``: device position, reverse geocode
    (best effort), then forecast

Every action sets ``loading`` and clears the error before it starts, and
clears ``loading`` when it ends.  Failures become a message in
``state.error``; actions never raise.

Actions may overlap (e.g. two quick searches from worker threads).  Each one
takes a generation number when it starts and its outcome is only applied if
no newer action has started since, so the last action issued wins no matter
which response arrives first.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime

from weather_dashboard.datasources.geocoding import resolve_coordinates, search_by_name
from weather_dashboard.datasources.weather import fetch_and_normalize
from weather_dashboard.errors import DashboardError, EmptyQuery, GeolocationUnsupported
from weather_dashboard.geolocation import Geolocator
from weather_dashboard.reference.conditions import Variant, theme_variant
from weather_dashboard.reference.locations import DEFAULT_LOCATION
from weather_dashboard.schemas import (
    CurrentSnapshot,
    DailyEntry,
    ForecastBundle,
    HourlyEntry,
    PlaceLocation,
)

logger = logging.getLogger(__name__)

# Shown when an action fails with something other than a DashboardError.
INITIAL_LOAD_FAILED = "Unable to load the initial forecast."
SEARCH_FAILED = "Something went wrong while searching."
LOCATE_FAILED = "We couldn't fetch weather for your location."


@dataclass(frozen=True)
class DashboardState:
    """Everything the renderers need. Replaced, never mutated."""

    query: str
    location: PlaceLocation
    current: CurrentSnapshot | None = None
    daily: tuple[DailyEntry, ...] = ()
    hourly: tuple[HourlyEntry, ...] = ()
    loading: bool = False
    error: str = ""
    last_updated: datetime | None = None


class WeatherDashboard:
    """Holds the dashboard state and runs the user actions."""

    def __init__(self, default_location: PlaceLocation | None = None) -> None:
        self.default_location = default_location or DEFAULT_LOCATION
        self._state = DashboardState(
            query=self.default_location.name, location=self.default_location
        )
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def theme_variant(self) -> Variant:
        """Theme for the current conditions; ``default`` before any data."""
        current = self._state.current
        if current is None:
            return Variant.DEFAULT
        return theme_variant(current.code)

    @property
    def location_label(self) -> str:
        return self._state.location.label

    def set_query(self, text: str) -> None:
        """Update the search box text."""
        with self._lock:
            self._state = replace(self._state, query=text)

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def load_initial(self) -> bool:
        """Load the forecast for the default location."""

        def action() -> tuple[ForecastBundle, str | None]:
            return fetch_and_normalize(self.default_location), None

        return self._run(action, INITIAL_LOAD_FAILED)

    def search(self, text: str | None = None) -> bool:
        """
        Search for a place and load its forecast.

        Args:
            text: Search text; defaults to the current ``state.query``.

        Returns:
            True if the forecast was loaded and applied.
        """
        query = self._state.query if text is None else text
        if not query.strip():
            # Checked before any request is issued
            self._set_error(EmptyQuery.user_message)
            return False

        def action() -> tuple[ForecastBundle, str | None]:
            location = search_by_name(query)
            return fetch_and_normalize(location), location.name

        return self._run(action, SEARCH_FAILED)

    def use_my_location(self, geolocator: Geolocator | None) -> bool:
        """Load the forecast for the device's position."""
        if geolocator is None:
            self._set_error(GeolocationUnsupported.user_message)
            return False

        def action() -> tuple[ForecastBundle, str | None]:
            latitude, longitude = geolocator.locate()
            location = resolve_coordinates(latitude, longitude)
            return fetch_and_normalize(location), location.name

        return self._run(action, LOCATE_FAILED)

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def _run(
        self,
        action: Callable[[], tuple[ForecastBundle, str | None]],
        fallback_message: str,
    ) -> bool:
        token = self._begin()
        bundle: ForecastBundle | None = None
        query: str | None = None
        error = ""
        try:
            bundle, query = action()
        except DashboardError as exc:
            logger.info("Action failed: %s", exc.user_message)
            error = exc.user_message
        except Exception:
            logger.exception("Unexpected error while loading the forecast")
            error = fallback_message
        finally:
            applied = self._finish(token, bundle, query, error)
        return applied and not error

    def _begin(self) -> int:
        with self._lock:
            self._generation += 1
            self._state = replace(self._state, loading=True, error="")
            return self._generation

    def _finish(
        self,
        token: int,
        bundle: ForecastBundle | None,
        query: str | None,
        error: str,
    ) -> bool:
        with self._lock:
            if token != self._generation:
                logger.debug(
                    "Discarding result of request %d (latest is %d)", token, self._generation
                )
                return False

            if bundle is None:
                self._state = replace(self._state, loading=False, error=error)
                return True

            self._state = replace(
                self._state,
                query=self._state.query if query is None else query,
                location=bundle.location,
                current=bundle.current,
                daily=bundle.daily,
                hourly=bundle.hourly,
                last_updated=bundle.fetched_at,
                loading=False,
                error="",
            )
            return True

    def _set_error(self, message: str) -> None:
        # Counts as the newest action, so an older request still in flight
        # can no longer clear the message
        with self._lock:
            self._generation += 1
            self._state = replace(self._state, loading=False, error=message)
