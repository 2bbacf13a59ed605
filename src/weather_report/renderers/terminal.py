"""ANSI terminal rendering for report lines.

Each :class:`StyleClass` maps to bold plus one SGR color. Lines without a
style are emitted as plain text.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, TextIO

from weather_report.schemas import StyleClass

if TYPE_CHECKING:
    from collections.abc import Iterable

    from weather_report.schemas import ReportLine

ESC = "\x1b["
RESET = f"{ESC}0m"
INDENT = "   "

BOLD = "1"

#: SGR parameters per style (all bold).
STYLE_CODES: dict[StyleClass, tuple[str, ...]] = {
    StyleClass.CLEAR_WARM: (BOLD, "33"),  # yellow
    StyleClass.CLEAR_COLD: (BOLD, "94"),  # bright blue
    StyleClass.OVERCAST: (BOLD, "2"),  # dim
    StyleClass.RAIN: (BOLD, "34"),  # blue
    StyleClass.WINTRY: (BOLD, "37"),  # white
    StyleClass.STORM: (BOLD, "30"),  # black
    StyleClass.OTHER: (BOLD, "32"),  # green
}


def style_text(text: str, style: StyleClass | None) -> str:
    """Wrap text in the escape sequence for style."""
    if style is None:
        return text
    return f"{ESC}{';'.join(STYLE_CODES[style])}m{text}{RESET}"


def color_enabled(stream: TextIO, *, no_color: bool = False) -> bool:
    """
    Whether ANSI styling should be written to stream.

    Disabled by no_color, by a non-empty NO_COLOR environment
    variable (https://no-color.org), or when the stream is not a terminal.
    """
    if no_color or os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def render_report(lines: Iterable[ReportLine], *, color: bool = True) -> str:
    """Render report lines as indented text, one line per entry."""
    rendered = [
        INDENT + (style_text(line.text, line.style) if color else line.text) for line in lines
    ]
    return "\n".join(rendered) + "\n" if rendered else ""
