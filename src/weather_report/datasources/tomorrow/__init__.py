"""tomorrow.io weather data source.

Fetches current conditions from the tomorrow.io realtime endpoint (API key
required).

Public API:
  - realtime: fetch_realtime (raw JSON), fetch_observation (parsed Observation),
    parse_observation
  - client: API URL, clean_location
"""

from weather_report.datasources.tomorrow.client import TOMORROW_REALTIME_API, clean_location
from weather_report.datasources.tomorrow.realtime import (
    fetch_observation,
    fetch_realtime,
    parse_observation,
)

__all__ = [
    "TOMORROW_REALTIME_API",
    "clean_location",
    "fetch_observation",
    "fetch_realtime",
    "parse_observation",
]
