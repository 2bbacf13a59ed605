"""Exceptions raised by weather-report.

Library code raises these; only ``cli.main`` turns them into exit codes.
"""

from __future__ import annotations


class WeatherReportError(Exception):
    """Base class for all weather-report errors."""


class MissingRequiredFieldError(WeatherReportError):
    """An observation lacks a field the report cannot be built without."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Observation is missing required field: {field}")
        self.field = field


class MissingApiKeyError(WeatherReportError):
    """No tomorrow.io API key was configured."""

    def __init__(self) -> None:
        super().__init__(
            "API Key for tomorrow.io not found. Please set the environment variable "
            '"TOMORROW_API_KEY" to your tomorrow.io API key'
        )


class WeatherApiError(WeatherReportError):
    """The weather API call failed or returned an unusable payload."""
