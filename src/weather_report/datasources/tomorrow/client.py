"""tomorrow.io API constants and request helpers.

API docs: https://docs.tomorrow.io/reference/realtime-weather
"""

TOMORROW_REALTIME_API = "https://api.tomorrow.io/v4/weather/realtime"

# Observation temperatures are Celsius; display conversion happens in report.py.
REQUEST_UNITS = "metric"


def clean_location(location: str) -> str:
    """Replace spaces so a free-text place name can go in the query string."""
    return location.replace(" ", "_")
