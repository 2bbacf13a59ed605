"""Weather Report - current conditions for a place, rendered on the terminal.

Architecture::

    datasources/   External APIs (tomorrow.io realtime weather)
    schemas.py     Pydantic models (API payload, Observation, report lines)
    catalog.py     Weather code -> description / pictogram lookup
    report.py      Observation -> styled report lines (pure)
    renderers/     Report lines -> ANSI terminal text
    services/      Shared utilities (HTTP client)

Data flow: cli → datasources → schemas.Observation → report → renderers → stdout
"""

__version__ = "0.1.0"

from weather_report.config import Settings
from weather_report.schemas import Observation, ReportLine, StyleClass, Units

__all__ = ["Observation", "ReportLine", "Settings", "StyleClass", "Units", "__version__"]
