"""Tests for the tomorrow.io data source."""

from __future__ import annotations

from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from weather_report.datasources import tomorrow
from weather_report.errors import MissingApiKeyError, WeatherApiError


def mock_response(payload: Any = None, status_error: Exception | None = None) -> Mock:
    resp = Mock()
    resp.json.return_value = payload
    resp.raise_for_status = Mock(side_effect=status_error)
    return resp


class TestCleanLocation:
    """Test location normalization for the query string."""

    def test_replaces_spaces(self) -> None:
        assert tomorrow.clean_location("New York City") == "New_York_City"

    def test_leaves_other_text_alone(self) -> None:
        assert tomorrow.clean_location("Portland,OR") == "Portland,OR"


class TestFetchRealtime:
    """Test the realtime fetch function."""

    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_request_params(self, mock_get: Mock, realtime_payload: dict[str, Any]) -> None:
        mock_get.return_value = mock_response(realtime_payload)

        result = tomorrow.fetch_realtime("New York City", "secret")

        assert result == realtime_payload
        mock_get.assert_called_once()
        call_args = mock_get.call_args
        assert call_args.args[0] == tomorrow.TOMORROW_REALTIME_API
        assert call_args.kwargs["params"] == {
            "location": "New_York_City",
            "units": "metric",
            "apikey": "secret",
        }

    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_custom_url_and_timeout(self, mock_get: Mock, realtime_payload: dict[str, Any]) -> None:
        mock_get.return_value = mock_response(realtime_payload)

        tomorrow.fetch_realtime("Paris", "secret", api_url="https://example.test/rt", timeout=5)

        assert mock_get.call_args.args[0] == "https://example.test/rt"
        assert mock_get.call_args.kwargs["timeout"] == 5

    @pytest.mark.parametrize("api_key", [None, ""])
    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_missing_api_key(self, mock_get: Mock, api_key: str | None) -> None:
        with pytest.raises(MissingApiKeyError, match="TOMORROW_API_KEY"):
            tomorrow.fetch_realtime("Paris", api_key)
        mock_get.assert_not_called()

    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_http_error(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response(
            status_error=requests.HTTPError("401 Client Error: Unauthorized")
        )
        with pytest.raises(WeatherApiError, match="Unauthorized") as excinfo:
            tomorrow.fetch_realtime("Paris", "bad-key")
        assert isinstance(excinfo.value.__cause__, requests.HTTPError)

    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_connection_error(self, mock_get: Mock) -> None:
        mock_get.side_effect = requests.ConnectionError("no route to host")
        with pytest.raises(WeatherApiError, match="no route to host"):
            tomorrow.fetch_realtime("Paris", "secret")
        assert mock_get.call_count == 1

    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_invalid_json(self, mock_get: Mock) -> None:
        resp = mock_response()
        resp.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
        mock_get.return_value = resp
        with pytest.raises(WeatherApiError, match="invalid JSON"):
            tomorrow.fetch_realtime("Paris", "secret")


class TestFetchObservation:
    """Test fetch + decode."""

    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_returns_observation(self, mock_get: Mock, realtime_payload: dict[str, Any]) -> None:
        mock_get.return_value = mock_response(realtime_payload)

        observation = tomorrow.fetch_observation("New York City", "secret")

        assert observation.location_name == "City of New York, New York, United States"
        assert observation.condition_code == 1000
        assert observation.temperature == 6.7

    @patch("weather_report.datasources.tomorrow.realtime.session.get")
    def test_unexpected_shape(self, mock_get: Mock) -> None:
        mock_get.return_value = mock_response({"code": 400001, "type": "Invalid Body Parameters"})
        with pytest.raises(WeatherApiError, match="Unexpected weather API response"):
            tomorrow.fetch_observation("Paris", "secret")


class TestParseObservation:
    """Test payload decoding."""

    def test_missing_weather_code_still_decodes(self, realtime_payload: dict[str, Any]) -> None:
        """A missing code is the composer's problem, not the decoder's."""
        del realtime_payload["data"]["values"]["weatherCode"]
        observation = tomorrow.parse_observation(realtime_payload)
        assert observation.condition_code is None

    def test_out_of_range_value(self, realtime_payload: dict[str, Any]) -> None:
        realtime_payload["data"]["values"]["humidity"] = 250
        with pytest.raises(WeatherApiError):
            tomorrow.parse_observation(realtime_payload)
