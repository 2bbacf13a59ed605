"""
Domain models for weather report.

Pydantic models for the tomorrow.io payload and the normalized
:class:`Observation` the report composer consumes, plus the small value types
that flow out of the composer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Enumerations
# =============================================================================


class Units(StrEnum):
    """Display unit system."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class StyleClass(StrEnum):
    """Presentation intent for a report, derived from condition and temperature."""

    CLEAR_WARM = "clear-warm"
    CLEAR_COLD = "clear-cold"
    OVERCAST = "overcast"
    RAIN = "rain"
    WINTRY = "wintry"
    STORM = "storm"
    OTHER = "other"


class TemperatureEmoji(StrEnum):
    """Face glyphs keyed on how the temperature feels."""

    COLD = "\U0001f976"  # cold face
    GRIMACING = "\U0001f62c"  # grimacing face
    GRINNING = "\U0001f601"  # beaming face with smiling eyes
    HOT = "\U0001f975"  # hot face


# =============================================================================
# Observation
# =============================================================================


class Observation(BaseModel):
    """
    One current-conditions snapshot for a location.

    Temperatures are degrees Celsius, wind speed is m/s, humidity and
    precipitation probability are percentages. Every measurement is optional;
    ``None`` means the API did not report it, never zero. The composer
    enforces that ``condition_code`` and ``temperature`` are present.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    location_name: str
    condition_code: int | None = Field(default=None, ge=0)
    temperature: float | None = None
    temperature_apparent: float | None = None
    humidity: float | None = Field(default=None, ge=0, le=100)
    precipitation_probability: float | None = Field(default=None, ge=0, le=100)
    wind_speed: float | None = None
    uv_index: float | None = None


@dataclass(frozen=True)
class ReportLine:
    """A single line of report text with its presentation hint."""

    text: str
    style: StyleClass | None = None


# =============================================================================
# tomorrow.io realtime payload
# =============================================================================


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class RealtimeValues(_ApiModel):
    """Measurements under ``data.values``."""

    weather_code: int | None = None
    temperature: float | None = None
    temperature_apparent: float | None = None
    humidity: float | None = None
    precipitation_probability: float | None = None
    wind_speed: float | None = None
    wind_gust: float | None = None
    wind_direction: float | None = None
    uv_index: float | None = None
    cloud_cover: float | None = None
    dew_point: float | None = None
    visibility: float | None = None


class RealtimeData(_ApiModel):
    time: str
    values: RealtimeValues


class RealtimeLocation(_ApiModel):
    lat: float
    lon: float
    name: str | None = None
    type: str | None = None


class RealtimeResponse(_ApiModel):
    """Top-level body of ``GET /v4/weather/realtime``."""

    data: RealtimeData
    location: RealtimeLocation

    def to_observation(self, fallback_name: str = "") -> Observation:
        """Normalize the payload into an :class:`Observation`."""
        values = self.data.values
        return Observation(
            location_name=self.location.name or fallback_name,
            condition_code=values.weather_code,
            temperature=values.temperature,
            temperature_apparent=values.temperature_apparent,
            humidity=values.humidity,
            precipitation_probability=values.precipitation_probability,
            wind_speed=values.wind_speed,
            uv_index=values.uv_index,
        )
