"""Unit tests for ConsoleRenderer."""

import io
from types import SimpleNamespace
from typing import List
from unittest.mock import patch

import pytest

from textcal.config.settings import LayoutSettings
from textcal.display.console_renderer import ConsoleRenderer


def make_settings(**overrides) -> SimpleNamespace:
    values = dict(
        year_start=2022,
        effective_year_end=2023,
        locale=None,
        layout=LayoutSettings(),
        trim_trailing_whitespace=True,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


class TestConsoleRendererInitialization:
    """Test ConsoleRenderer initialization."""

    def test_init_with_settings(self) -> None:
        settings = make_settings()
        with patch("textcal.display.console_renderer.get_logger") as mock_get_logger:
            renderer = ConsoleRenderer(settings)

        assert renderer.settings is settings
        assert renderer.stream is None
        assert renderer.trim_trailing_whitespace is True
        mock_get_logger.assert_called_once_with("display.console_renderer")
        mock_get_logger.return_value.debug.assert_called_once_with("Console renderer initialized")

    def test_logger_namespaced_under_textcal(self) -> None:
        renderer = ConsoleRenderer(make_settings())

        assert renderer.logger.name == "textcal.display.console_renderer"

    def test_locale_passed_to_names(self, stub_names) -> None:
        with patch(
            "textcal.display.console_renderer.LocaleNames", return_value=stub_names
        ) as mock_names:
            renderer = ConsoleRenderer(make_settings(locale="C"))

        mock_names.assert_called_once_with("C")
        assert renderer.calendar.names is stub_names
        assert renderer.render_calendar().split("\n")[2].startswith(" Su Mo Tu")


class TestConsoleRendererOutput:
    """Test rendering and writing calendars."""

    def test_render_calendar_matches_reference(self, reference_calendar_2022: List[str]) -> None:
        renderer = ConsoleRenderer(make_settings())

        assert renderer.render_calendar() == "\n".join(reference_calendar_2022)

    def test_trailing_whitespace_kept_when_disabled(self) -> None:
        renderer = ConsoleRenderer(make_settings(trim_trailing_whitespace=False))

        lines = renderer.render_calendar().split("\n")

        assert lines[0] == "2022" + " " * (3 * 21 + 2 - 4)
        assert {len(line) for line in lines if line} == {65}

    def test_display_writes_to_stream(self, reference_calendar_2022: List[str]) -> None:
        stream = io.StringIO()
        renderer = ConsoleRenderer(make_settings(), stream=stream)

        count = renderer.display()

        assert stream.getvalue() == "".join(line + "\n" for line in reference_calendar_2022)
        assert count == len(reference_calendar_2022)

    def test_display_defaults_to_stdout(self, capsys: pytest.CaptureFixture) -> None:
        renderer = ConsoleRenderer(make_settings(layout=LayoutSettings(columns=12)))

        renderer.display()

        out = capsys.readouterr().out
        assert out.startswith("2022\n")
        assert "December" in out

    def test_display_multiple_years(self) -> None:
        stream = io.StringIO()
        renderer = ConsoleRenderer(
            make_settings(effective_year_end=2025, layout=LayoutSettings(columns=6)), stream=stream
        )

        renderer.display()

        years = [line for line in stream.getvalue().splitlines() if line in ("2022", "2023", "2024")]
        assert years == ["2022", "2023", "2024"]
