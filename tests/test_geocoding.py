"""
Tests for forward and reverse geocoding.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from weather_dashboard.datasources.geocoding import (
    build_label,
    location_from_result,
    resolve_coordinates,
    search_by_name,
)
from weather_dashboard.errors import EmptyQuery, LookupUnavailable, NoMatch

PARIS = {
    "id": 2988507,
    "name": "Paris",
    "latitude": 48.85341,
    "longitude": 2.3488,
    "country": "France",
    "admin1": "Île-de-France",
}


def _response(payload: Any, status: int = 200) -> Mock:
    resp = Mock()
    resp.ok = status < 400
    resp.status_code = status
    resp.json.return_value = payload
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} Error")
    return resp


class TestBuildLabel:
    """Labels join only the non-empty parts."""

    def test_all_parts(self) -> None:
        assert build_label("Paris", "Île-de-France", "France") == "Paris, Île-de-France, France"

    def test_skips_empty_region(self) -> None:
        assert build_label("Paris", "", "France") == "Paris, France"

    def test_skips_none(self) -> None:
        assert build_label("Paris", None, None) == "Paris"

    def test_nothing(self) -> None:
        assert build_label("", None, "") == ""


class TestLocationFromResult:
    """Geocoding results become PlaceLocations."""

    def test_full_result(self) -> None:
        location = location_from_result(PARIS)
        assert location.name == "Paris"
        assert location.admin1 == "Île-de-France"
        assert location.label == "Paris, Île-de-France, France"
        assert location.latitude == 48.85341

    def test_missing_admin1(self) -> None:
        result = {"name": "Monaco", "country": "Monaco", "latitude": 43.73, "longitude": 7.42}
        location = location_from_result(result)
        assert location.admin1 == ""
        assert location.label == "Monaco, Monaco"


class TestSearchByName:
    """Forward geocoding."""

    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_best_match(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"results": [PARIS]})

        location = search_by_name("  Paris ")

        assert location.label == "Paris, Île-de-France, France"
        url = mock_get.call_args.args[0]
        params = mock_get.call_args.kwargs["params"]
        assert url == "https://geocoding-api.open-meteo.com/v1/search"
        assert params == {"name": "Paris", "count": 1, "language": "en", "format": "json"}

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_blank_query(self, mock_get: Mock, text: str) -> None:
        with pytest.raises(EmptyQuery):
            search_by_name(text)
        mock_get.assert_not_called()

    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_no_results(self, mock_get: Mock) -> None:
        # The API omits "results" entirely when nothing matches
        mock_get.return_value = _response({"generationtime_ms": 0.5})
        with pytest.raises(NoMatch):
            search_by_name("Zzqqxx")

    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_empty_results(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"results": []})
        with pytest.raises(NoMatch):
            search_by_name("Zzqqxx")

    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_error_status(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({}, status=503)
        with pytest.raises(LookupUnavailable):
            search_by_name("Paris")

    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_network_error(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("down")
        with pytest.raises(LookupUnavailable):
            search_by_name("Paris")

    @pytest.mark.parametrize("payload", [[{"name": "Paris"}], {"results": ["Paris"]}])
    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_malformed_body(self, mock_get: Mock, payload: Any) -> None:
        mock_get.return_value = _response(payload)
        with pytest.raises(LookupUnavailable):
            search_by_name("Paris")

    @patch("weather_dashboard.datasources.geocoding.search.session.get")
    def test_result_without_coordinates(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"results": [{"name": "Nowhere"}]})
        with pytest.raises(LookupUnavailable):
            search_by_name("Nowhere")


class TestResolveCoordinates:
    """Reverse geocoding never fails."""

    @patch("weather_dashboard.datasources.geocoding.reverse.session.get")
    def test_named_place(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"results": [PARIS]})

        location = resolve_coordinates(48.86, 2.35)

        assert location.name == "Paris"
        assert location.label == "Paris, Île-de-France, France"
        # The device's coordinates win over the candidate's
        assert (location.latitude, location.longitude) == (48.86, 2.35)
        params = mock_get.call_args.kwargs["params"]
        assert params == {"latitude": 48.86, "longitude": 2.35, "count": 1, "language": "en"}

    @patch("weather_dashboard.datasources.geocoding.reverse.session.get")
    def test_network_error(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("offline")

        location = resolve_coordinates(51.5, -0.12)

        assert location.name == "Current location"
        assert location.label == "Current location"
        assert location.admin1 == ""
        assert location.country == ""
        assert (location.latitude, location.longitude) == (51.5, -0.12)

    @patch("weather_dashboard.datasources.geocoding.reverse.session.get")
    def test_error_status(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({}, status=500)
        assert resolve_coordinates(51.5, -0.12).label == "Current location"

    @patch("weather_dashboard.datasources.geocoding.reverse.session.get")
    def test_no_results(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({})
        assert resolve_coordinates(0.0, -160.0).name == "Current location"

    @patch("weather_dashboard.datasources.geocoding.reverse.session.get")
    def test_bad_json(self, mock_get: Mock) -> None:
        resp = _response(None)
        resp.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = resp
        assert resolve_coordinates(10.0, 10.0).name == "Current location"

    @patch("weather_dashboard.datasources.geocoding.reverse.session.get")
    def test_candidate_without_name(self, mock_get: Mock) -> None:
        mock_get.return_value = _response(
            {"results": [{"country": "Norway", "latitude": 60.0, "longitude": 10.0}]}
        )

        location = resolve_coordinates(60.0, 10.0)

        assert location.name == "Current location"
        assert location.label == "Norway"

    @patch("weather_dashboard.datasources.geocoding.reverse.session.get")
    def test_empty_candidate(self, mock_get: Mock) -> None:
        mock_get.return_value = _response({"results": [{}]})
        location = resolve_coordinates(60.0, 10.0)
        assert location.label == "Current location"
