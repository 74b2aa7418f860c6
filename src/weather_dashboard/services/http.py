"""
Shared HTTP client with a bounded timeout on every request.

Provides a pre-configured ``requests.Session`` for the Open-Meteo services.
Requests are never retried: the dashboard reports a failure to the user
right away and lets them try again.  Every request gets a default timeout so
a stalled connection can't keep the dashboard in its loading state forever.

Usage::

    from weather_dashboard.services.http import session

    resp = session.get("https://api.open-meteo.com/v1/forecast", params={...})
    if not resp.ok:
        ...
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_dashboard import __version__
from weather_dashboard.config import get_settings

#: No retries, and let the caller inspect the status instead of raising.
DEFAULT_RETRY = Retry(
    total=0,
    connect=0,
    read=0,
    redirect=3,
    raise_on_redirect=False,
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 10  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry policy and default timeout.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = f"weather-dashboard/{__version__}"
    s.headers["Accept"] = "application/json"

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        if kwargs.get("timeout") is None:
            kwargs["timeout"] = timeout
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session(timeout=get_settings().request_timeout)
