"""Error kinds surfaced by the dashboard.

Every error carries a ``user_message`` that the dashboard shows verbatim.
None of them are fatal: the orchestration layer in ``dashboard.py`` catches
them at its boundary and stores the message in its state.
"""

from __future__ import annotations


class DashboardError(Exception):
    """Base class for all user-facing dashboard errors."""

    user_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.user_message = message
        super().__init__(self.user_message)


class EmptyQuery(DashboardError):
    """Search text was blank after trimming."""

    user_message = "Please enter a city or region to search."


class LookupUnavailable(DashboardError):
    """The geocoding service answered with a non-success status."""

    user_message = "Unable to search for that location."


class NoMatch(DashboardError):
    """Forward geocoding returned no results."""

    user_message = "We couldn't find that location. Try another search."


class RequestFailed(DashboardError):
    """The forecast service answered with a non-success status."""

    user_message = "Unable to retrieve forecast details right now."


class IncompleteData(DashboardError):
    """The forecast payload is missing a required block or value."""

    user_message = "Incomplete weather data received."


class GeolocationUnsupported(DashboardError):
    """No geolocation source is available."""

    user_message = "Location access isn't available on this device."


class GeolocationDenied(DashboardError):
    """The user declined to share their location."""

    user_message = "Please allow location access to use automatic weather detection."


class GeolocationFailed(DashboardError):
    """Any other geolocation problem (timeout, position unavailable)."""

    user_message = "We couldn't access your location just now."
