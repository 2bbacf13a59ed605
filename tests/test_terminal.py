"""Tests for the ANSI terminal renderer."""

from __future__ import annotations

from io import StringIO
from unittest.mock import Mock

import pytest

from weather_report.renderers import STYLE_CODES, color_enabled, render_report, style_text
from weather_report.schemas import ReportLine, StyleClass


class TestStyleText:
    """Test escape-sequence wrapping."""

    def test_clear_warm_is_bold_yellow(self) -> None:
        assert style_text("hi", StyleClass.CLEAR_WARM) == "\x1b[1;33mhi\x1b[0m"

    def test_storm_is_bold_black(self) -> None:
        assert style_text("hi", StyleClass.STORM) == "\x1b[1;30mhi\x1b[0m"

    def test_no_style_is_plain(self) -> None:
        assert style_text("hi", None) == "hi"

    def test_every_style_has_codes(self) -> None:
        assert set(STYLE_CODES) == set(StyleClass)
        assert all(codes[0] == "1" for codes in STYLE_CODES.values())

    def test_styles_are_distinct(self) -> None:
        assert len(set(STYLE_CODES.values())) == len(StyleClass)


class TestRenderReport:
    """Test full report rendering."""

    def test_plain(self) -> None:
        lines = [ReportLine("one", StyleClass.RAIN), ReportLine("two", StyleClass.RAIN)]
        assert render_report(lines, color=False) == "   one\n   two\n"

    def test_colored(self) -> None:
        lines = [ReportLine("one", StyleClass.RAIN)]
        assert render_report(lines, color=True) == "   \x1b[1;34mone\x1b[0m\n"

    def test_empty(self) -> None:
        assert render_report([], color=True) == ""


class TestColorEnabled:
    """Test color auto-detection."""

    @pytest.fixture(autouse=True)
    def _clear_no_color(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NO_COLOR", raising=False)

    def test_tty(self) -> None:
        stream = Mock()
        stream.isatty.return_value = True
        assert color_enabled(stream) is True

    def test_not_a_tty(self) -> None:
        assert color_enabled(StringIO()) is False

    def test_flag_disables(self) -> None:
        stream = Mock()
        stream.isatty.return_value = True
        assert color_enabled(stream, no_color=True) is False

    def test_no_color_env_disables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NO_COLOR", "1")
        stream = Mock()
        stream.isatty.return_value = True
        assert color_enabled(stream) is False
