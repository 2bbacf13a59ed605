"""
Logging setup for the CLI.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed once, here, by the entry point.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level."""
    logger = logging.getLogger("weather_report")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
