"""Pure rendering functions: report lines -> display strings.

Renderers take the composer's output and return text. They never write to a
stream themselves; ``cli.py`` does the printing.

Public API:
  - terminal: render_report, style_text, STYLE_CODES, color_enabled
"""

from weather_report.renderers.terminal import STYLE_CODES, color_enabled, render_report, style_text

__all__ = ["STYLE_CODES", "color_enabled", "render_report", "style_text"]
