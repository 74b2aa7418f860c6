"""Tests for the shared HTTP session."""

from __future__ import annotations

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from weather_dashboard.services.http import DEFAULT_RETRY, DEFAULT_TIMEOUT, create_session, session


class TestDefaultRetry:
    """Failures are reported right away, never retried."""

    def test_no_retries(self) -> None:
        assert DEFAULT_RETRY.total == 0
        assert DEFAULT_RETRY.connect == 0
        assert DEFAULT_RETRY.read == 0

    def test_status_not_raised(self) -> None:
        assert DEFAULT_RETRY.raise_on_status is False


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_adapters(self) -> None:
        s = create_session()
        for url in ("https://example.com", "http://example.com"):
            adapter = s.get_adapter(url)
            assert isinstance(adapter, requests.adapters.HTTPAdapter)
            assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        custom = Retry(total=2, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 2

    def test_headers(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"].startswith("weather-dashboard/")
        assert s.headers["Accept"] == "application/json"

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=4)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 4

    def test_timeout_injected_through_get(self) -> None:
        """Session.get passes timeout=None explicitly; it must still be bounded."""
        s = create_session(timeout=4)
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.get("https://example.com")
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 4

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=4)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=99)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 99


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 10
