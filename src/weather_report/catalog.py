"""tomorrow.io weather codes: descriptions and pictograms.

Pure lookup tables with no external dependencies. Codes are documented at
https://docs.tomorrow.io/reference/data-layers-weather-codes
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

UNKNOWN_CODE = 0


@dataclass(frozen=True)
class ConditionCatalogEntry:
    """A known weather code and how to present it."""

    code: int
    description: str
    emoji: str


# Pictograms, one per condition family
CLEAR_SUN = "\u2600\ufe0f"
PARTLY_CLOUDY = "\u26c5"
MOSTLY_CLOUDY = "\U0001f325\ufe0f"
OVERCAST = "\u2601\ufe0f"
FOG = "\U0001f301"
RAIN = "\U0001f327\ufe0f"
SNOW = "\U0001f328\ufe0f"
WINTRY_MIX = "\U0001f9ca\U0001f327\ufe0f"
STORM = "\u26c8\ufe0f"
FALLBACK = "\U0001f975"

_ENTRIES = [
    ConditionCatalogEntry(UNKNOWN_CODE, "unknown", FALLBACK),
    ConditionCatalogEntry(1000, "clear", CLEAR_SUN),
    ConditionCatalogEntry(1100, "mostly clear", PARTLY_CLOUDY),
    ConditionCatalogEntry(1101, "partly cloudy", PARTLY_CLOUDY),
    ConditionCatalogEntry(1102, "mostly cloudy", MOSTLY_CLOUDY),
    ConditionCatalogEntry(1001, "cloudy", OVERCAST),
    ConditionCatalogEntry(2000, "foggy", FOG),
    ConditionCatalogEntry(2100, "lightly foggy", FOG),
    ConditionCatalogEntry(4000, "drizzling", RAIN),
    ConditionCatalogEntry(4001, "raining", RAIN),
    ConditionCatalogEntry(4200, "light raining", RAIN),
    ConditionCatalogEntry(4201, "heavy raining", RAIN),
    ConditionCatalogEntry(5000, "snowing", SNOW),
    ConditionCatalogEntry(5001, "flurrying", SNOW),
    ConditionCatalogEntry(5100, "light snowing", SNOW),
    ConditionCatalogEntry(5101, "heavy snowing", SNOW),
    ConditionCatalogEntry(6000, "freezing drizzle", WINTRY_MIX),
    ConditionCatalogEntry(6001, "freezing raining", WINTRY_MIX),
    ConditionCatalogEntry(6200, "light freezing raining", WINTRY_MIX),
    ConditionCatalogEntry(6201, "heavy freezing raining", WINTRY_MIX),
    ConditionCatalogEntry(7000, "ice pelleting", WINTRY_MIX),
    ConditionCatalogEntry(7101, "heavy ice pelleting", WINTRY_MIX),
    ConditionCatalogEntry(7102, "light ice pelleting", WINTRY_MIX),
    ConditionCatalogEntry(8000, "thunderstorming", STORM),
]

#: Read-only code -> entry mapping.
CATALOG: MappingProxyType[int, ConditionCatalogEntry] = MappingProxyType(
    {entry.code: entry for entry in _ENTRIES}
)


def lookup(code: int) -> ConditionCatalogEntry:
    """Return the catalog entry for ``code``, or the "unknown" entry."""
    return CATALOG.get(code, CATALOG[UNKNOWN_CODE])


def describe(code: int) -> str:
    """Convert a weather code to a human-readable description."""
    return lookup(code).description


def weather_emoji(code: int) -> str:
    """Convert a weather code to its condition-family pictogram."""
    return lookup(code).emoji
