"""
Report composer: turns an :class:`Observation` into styled report lines.

Pure functions only. No I/O, no logging, no terminal styling; the caller
decides how a :class:`StyleClass` is presented.

Temperatures arrive in Celsius. Threshold decisions (style, face emoji) are
always made on the Fahrenheit equivalent so they do not depend on the unit
system the user picked for display.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_report.catalog import describe, weather_emoji
from weather_report.errors import MissingRequiredFieldError
from weather_report.schemas import ReportLine, StyleClass, TemperatureEmoji, Units

if TYPE_CHECKING:
    from weather_report.schemas import Observation

#: Clear skies at or above this temperature (°F) render as warm.
WARM_THRESHOLD_F = 65.0

_CLEAR_CODES = frozenset({1000, 1100})
_OVERCAST_CODES = frozenset({1101, 1102, 1001, 2000, 2100})
_RAIN_CODES = frozenset({4000, 4001, 4200, 4201})
_WINTRY_CODES = frozenset(
    {5000, 5001, 5100, 5101, 6000, 6001, 6200, 6201, 7000, 7101, 7102}
)
_STORM_CODES = frozenset({8000})


def c_to_f(celsius: float) -> float:
    """Convert Celsius to Fahrenheit."""
    return celsius * 1.8 + 32


def parse_units(value: str | Units | None) -> Units:
    """
    Interpret a units string.

    Only an exact ``"metric"`` selects metric. Everything else, including
    typos and ``None``, falls back to imperial.
    """
    if value == Units.METRIC:
        return Units.METRIC
    return Units.IMPERIAL


def display_temperature(celsius: float, units: Units) -> float:
    """Temperature in the unit system the user asked for."""
    if units is Units.METRIC:
        return celsius
    return c_to_f(celsius)


def temperature_suffix(units: Units) -> str:
    return "°C" if units is Units.METRIC else "°F"


def classify(code: int, temperature_f: float) -> StyleClass:
    """
    Pick the style for a weather code.

    Args:
        code: tomorrow.io weather code.
        temperature_f: Comparison temperature in °F, only consulted for clear skies.
    """
    if code in _CLEAR_CODES:
        if temperature_f >= WARM_THRESHOLD_F:
            return StyleClass.CLEAR_WARM
        return StyleClass.CLEAR_COLD
    if code in _OVERCAST_CODES:
        return StyleClass.OVERCAST
    if code in _RAIN_CODES:
        return StyleClass.RAIN
    if code in _WINTRY_CODES:
        return StyleClass.WINTRY
    if code in _STORM_CODES:
        return StyleClass.STORM
    return StyleClass.OTHER


def temperature_emoji(temperature_f: float) -> TemperatureEmoji:
    """Face emoji for a temperature in °F."""
    if temperature_f <= 32:
        return TemperatureEmoji.COLD
    if temperature_f <= 60:
        return TemperatureEmoji.GRIMACING
    if temperature_f <= 85:
        return TemperatureEmoji.GRINNING
    return TemperatureEmoji.HOT


def compose_report(
    observation: Observation,
    units: str | Units | None = Units.IMPERIAL,
) -> list[ReportLine]:
    """
    Build the report for one observation.

    Lines for optional measurements are left out when the measurement is
    missing. The "Real Feel" line only appears when it differs from the
    actual temperature.

    Args:
        observation: Parsed current conditions (Celsius).
        units: ``"metric"`` or ``"imperial"``; other values mean imperial.

    Returns:
        Report lines, each tagged with the report's :class:`StyleClass`.

    Raises:
        MissingRequiredFieldError: ``condition_code`` or ``temperature`` is absent.
    """
    if observation.condition_code is None:
        raise MissingRequiredFieldError("condition_code")
    if observation.temperature is None:
        raise MissingRequiredFieldError("temperature")

    units = parse_units(units)
    code = observation.condition_code
    temperature_f = c_to_f(observation.temperature)
    style = classify(code, temperature_f)
    suffix = temperature_suffix(units)

    texts = [
        f"Weather For {observation.location_name} : {temperature_emoji(temperature_f)}",
        f"> Currently it is {describe(code)} outside {weather_emoji(code)}",
        f"> Temperature: {display_temperature(observation.temperature, units):.0f}{suffix}",
    ]

    apparent = observation.temperature_apparent
    if apparent is not None and apparent != observation.temperature:
        texts.append(f"> Real Feel: {display_temperature(apparent, units):.0f}{suffix}")
    if observation.wind_speed is not None:
        texts.append(f"> Wind Speed: {observation.wind_speed:.0f} m/s")
    if observation.precipitation_probability is not None:
        texts.append(f"> Chance Of Rain: {observation.precipitation_probability:.0f}%")
    if observation.humidity is not None:
        texts.append(f"> Humidity: {observation.humidity:.0f}%")
    if observation.uv_index is not None:
        texts.append(f"> UV Index: {observation.uv_index:.0f}")

    return [ReportLine(text, style) for text in texts]
