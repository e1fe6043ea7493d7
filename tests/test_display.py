"""Tests for ASCII art, formatting and frame rendering."""

import io
import os
import select

import pytest
from rich.console import Console

from weathr.display.ascii_art import render_house
from weathr.display.formatters import (
    format_coordinates,
    format_temperature,
    format_visibility,
    format_weather_info,
    format_wind,
    get_wind_direction_name,
)
from weathr.display.keys import KeyReader, is_quit_key
from weathr.display.renderer import DisplayRenderer
from weathr.weather.models import (
    TemperatureUnit,
    WeatherLocation,
    WeatherUnits,
    WindSpeedUnit,
)


def _render(renderable, width: int = 80) -> str:
    console = Console(file=io.StringIO(), width=width, color_system=None)
    console.print(renderable)
    return console.file.getvalue()


class TestHouse:
    """Static house art."""

    def test_not_empty(self):
        assert render_house()

    def test_has_structure(self):
        house = render_house()
        assert len(house) >= 7
        text = "\n".join(house)
        assert "_________H" in text
        assert "/\\" in text
        assert "[]" in text
        assert "~~~" in text

    def test_consistent(self):
        assert render_house() == render_house()


class TestWeatherInfo:
    """Header line formatting."""

    @pytest.mark.parametrize(
        "lat,lon",
        [(52.52, 13.41), (40.7128, -74.0060), (-33.8688, 151.2093), (0.0, 0.0)],
    )
    def test_header_parts(self, lat, lon):
        info = format_weather_info(WeatherLocation(latitude=lat, longitude=lon))
        assert info.startswith("Weather for:")
        assert "°N" in info
        assert "°E" in info
        assert "Press 'q' to quit" in info

    def test_precision(self):
        info = format_weather_info(
            WeatherLocation(latitude=52.123456789, longitude=13.987654321)
        )
        assert "52.12°N" in info
        assert "13.99°E" in info

    def test_negative_and_extreme(self):
        assert format_coordinates(-33.87, -74.01) == "-33.87°N, -74.01°E"
        assert format_coordinates(-90.0, 180.0) == "-90.00°N, 180.00°E"
        assert format_coordinates(0.0, 0.0) == "0.00°N, 0.00°E"

    def test_includes_conditions(self, sample_location, sample_weather):
        info = format_weather_info(sample_location, sample_weather, WeatherUnits())
        lines = info.splitlines()
        assert len(lines) == 4
        assert "Partly Cloudy (day)" in lines[1]
        assert "18.4°C" in lines[1]
        assert "8.0 km/h W" in lines[2]
        assert "24.0 km" in lines[3]


class TestFormatters:
    """Unit-aware value formatting."""

    def test_temperature(self):
        assert format_temperature(21.54) == "21.5°C"
        assert format_temperature(70.0, TemperatureUnit.FAHRENHEIT) == "70.0°F"

    def test_wind(self):
        assert format_wind(12.0, 180) == "12.0 km/h S"
        assert format_wind(5.0, unit=WindSpeedUnit.KN) == "5.0 kn"

    @pytest.mark.parametrize(
        "degrees,name", [(0, "N"), (90, "E"), (225, "SW"), (359, "N")]
    )
    def test_wind_direction(self, degrees, name):
        assert get_wind_direction_name(degrees) == name

    def test_visibility(self):
        assert format_visibility(None) == "n/a"
        assert format_visibility(0.0) == "0 m"
        assert format_visibility(850.0) == "850 m"
        assert format_visibility(24140.0) == "24.1 km"


class TestRenderer:
    """Frame composition."""

    def test_frame_without_data(self, sample_location):
        renderer = DisplayRenderer(Console(file=io.StringIO(), width=80))
        output = _render(renderer.build_frame(sample_location, WeatherUnits()))
        assert "Weather for: 52.52°N, 13.41°E" in output
        assert "Fetching weather..." in output
        assert "_________H" in output

    def test_frame_with_data(self, sample_location, sample_weather):
        renderer = DisplayRenderer(Console(file=io.StringIO(), width=80))
        frame = renderer.build_frame(
            sample_location, WeatherUnits(), sample_weather, provider_name="Open-Meteo"
        )
        output = _render(frame)
        assert "Partly Cloudy" in output
        assert "Data: Open-Meteo | Observed 2024-06-01T09:15" in output
        assert "Fetching" not in output

    def test_frame_with_error_keeps_data(self, sample_location, sample_weather):
        renderer = DisplayRenderer(Console(file=io.StringIO(), width=80))
        frame = renderer.build_frame(
            sample_location, WeatherUnits(), sample_weather, error="HTTP 503"
        )
        output = _render(frame)
        assert "Update failed: HTTP 503" in output
        assert "Partly Cloudy" in output

    def test_house_centred(self, sample_location):
        renderer = DisplayRenderer(Console(file=io.StringIO(), width=100))
        house_width = max(len(line) for line in render_house())
        expected_pad = (100 - house_width) // 2
        output = _render(renderer.build_frame(sample_location, WeatherUnits()), 100)
        chimney = next(line for line in output.splitlines() if "_________H" in line)
        assert chimney.startswith(" " * expected_pad + "     _________H")

    def test_narrow_terminal_no_padding(self, sample_location):
        renderer = DisplayRenderer(Console(file=io.StringIO(), width=20))
        assert renderer._house_offset() == 0

    def test_print_warning_escapes_markup(self):
        out = io.StringIO()
        renderer = DisplayRenderer(Console(file=out, width=80))
        renderer.print_warning("No config at [red]x[/red]")
        assert "⚠ No config at [red]x[/red]" in out.getvalue()


class TestKeys:
    """Key input helpers."""

    @pytest.mark.parametrize("key", ["q", "Q", "\x03"])
    def test_quit_keys(self, key):
        assert is_quit_key(key)

    @pytest.mark.parametrize("key", ["a", " ", None])
    def test_other_keys(self, key):
        assert not is_quit_key(key)

    def test_non_tty_reader_is_inert(self):
        with KeyReader(io.StringIO("q")) as reader:
            assert not reader.enabled
            assert reader.read_key() is None


@pytest.fixture
def terminal():
    """Pseudo-terminal pair: (master fd, slave side as a text stream)."""
    pty = pytest.importorskip("pty")
    master, slave = pty.openpty()
    stream = os.fdopen(slave, "r")
    yield master, stream
    stream.close()
    os.close(master)


def _drain(reader: KeyReader, stream) -> list[str]:
    """Wait for input to arrive, then read every pending key."""
    select.select([stream.fileno()], [], [], 1.0)
    keys = []
    while (key := reader.read_key()) is not None:
        keys.append(key)
    return keys


class TestKeyReaderTerminal:
    """KeyReader against a real terminal device."""

    def test_single_key(self, terminal):
        master, stream = terminal
        with KeyReader(stream) as reader:
            assert reader.enabled
            assert reader.read_key() is None
            os.write(master, b"q")
            assert _drain(reader, stream) == ["q"]

    def test_burst_yields_every_key(self, terminal):
        master, stream = terminal
        with KeyReader(stream) as reader:
            os.write(master, b"aq")
            assert _drain(reader, stream) == ["a", "q"]

    def test_quit_after_escape_sequence(self, terminal):
        master, stream = terminal
        with KeyReader(stream) as reader:
            os.write(master, b"\x1b[Aq")
            keys = _drain(reader, stream)
        assert keys == ["\x1b", "[", "A", "q"]
        assert is_quit_key(keys[-1])

    def test_terminal_mode_restored(self, terminal):
        termios = pytest.importorskip("termios")
        _, stream = terminal
        before = termios.tcgetattr(stream.fileno())

        with KeyReader(stream):
            during = termios.tcgetattr(stream.fileno())
            assert not during[3] & termios.ICANON
            assert not during[3] & termios.ECHO

        assert termios.tcgetattr(stream.fileno()) == before
        assert before[3] & termios.ICANON
