"""Current conditions from the tomorrow.io realtime API."""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import ValidationError

from weather_report.datasources.tomorrow.client import (
    REQUEST_UNITS,
    TOMORROW_REALTIME_API,
    clean_location,
)
from weather_report.errors import MissingApiKeyError, WeatherApiError
from weather_report.schemas import Observation, RealtimeResponse
from weather_report.services.http import session

logger = logging.getLogger(__name__)


def fetch_realtime(
    location: str,
    api_key: str | None,
    *,
    api_url: str = TOMORROW_REALTIME_API,
    timeout: float | None = None,
) -> dict[str, Any]:
    """
    Fetch current conditions for a place.

    Args:
        location: Free-text place name (ex. "New York City").
        api_key: tomorrow.io API key.
        api_url: Endpoint override, mainly for tests.
        timeout: Request timeout in seconds (session default if None).

    Returns:
        Raw API response dict with ``data`` and ``location`` keys.

    Raises:
        MissingApiKeyError: ``api_key`` is empty.
        WeatherApiError: The request failed or the body was not JSON.
    """
    if not api_key:
        raise MissingApiKeyError()

    params = {
        "location": clean_location(location),
        "units": REQUEST_UNITS,
        "apikey": api_key,
    }
    logger.debug("Requesting realtime weather for %r", location)
    try:
        resp = session.get(api_url, params=params, timeout=timeout)
        resp.raise_for_status()
        result: dict[str, Any] = resp.json()
    except requests.JSONDecodeError as exc:
        raise WeatherApiError(f"Weather API returned invalid JSON: {exc}") from exc
    except requests.RequestException as exc:
        raise WeatherApiError(f"Weather request for {location!r} failed: {exc}") from exc

    logger.debug("Received realtime weather for %r", location)
    return result


def parse_observation(payload: dict[str, Any], fallback_name: str = "") -> Observation:
    """
    Decode a realtime payload into an :class:`Observation`.

    Unknown fields are ignored.

    Raises:
        WeatherApiError: The payload does not have the expected shape.
    """
    try:
        return RealtimeResponse.model_validate(payload).to_observation(fallback_name)
    except ValidationError as exc:
        raise WeatherApiError(f"Unexpected weather API response: {exc}") from exc


def fetch_observation(
    location: str,
    api_key: str | None,
    *,
    api_url: str = TOMORROW_REALTIME_API,
    timeout: float | None = None,
) -> Observation:
    """Fetch and decode current conditions for a place."""
    payload = fetch_realtime(location, api_key, api_url=api_url, timeout=timeout)
    return parse_observation(payload, fallback_name=location)
