"""Shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def realtime_payload() -> dict[str, Any]:
    """A trimmed tomorrow.io realtime response for New York."""
    return {
        "data": {
            "time": "2026-10-18T14:05:00Z",
            "values": {
                "cloudBase": None,
                "cloudCeiling": None,
                "cloudCover": 3,
                "dewPoint": -5.1,
                "freezingRainIntensity": 0,
                "humidity": 42,
                "precipitationProbability": 0,
                "pressureSurfaceLevel": 1017.9,
                "temperature": 6.7,
                "temperatureApparent": 6.7,
                "uvHealthConcern": 0,
                "uvIndex": 0,
                "visibility": 16,
                "weatherCode": 1000,
                "windDirection": 300,
                "windGust": 7.2,
                "windSpeed": 3.6,
            },
        },
        "location": {
            "lat": 40.71272659301758,
            "lon": -74.00601196289062,
            "name": "City of New York, New York, United States",
            "type": "administrative",
        },
    }
