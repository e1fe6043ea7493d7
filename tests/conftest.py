"""Pytest fixtures for weathr tests."""

import pytest

from weathr.weather.models import (
    WeatherCondition,
    WeatherData,
    WeatherLocation,
    WeatherUnits,
)
from weathr.weather.protocols import WeatherProviderResponse

BASE_URL = "https://api.open-meteo.com/v1/forecast"

SAMPLE_CURRENT = {
    "time": "2024-01-01T12:00",
    "interval": 900,
    "temperature_2m": 21.5,
    "relative_humidity_2m": 60,
    "apparent_temperature": 20.0,
    "is_day": 1,
    "precipitation": 0.0,
    "weather_code": 3,
    "cloud_cover": 40,
    "surface_pressure": 1013.2,
    "wind_speed_10m": 12.0,
    "wind_direction_10m": 180,
}

SAMPLE_PAYLOAD = {
    "latitude": 52.52,
    "longitude": 13.419998,
    "generationtime_ms": 0.05,
    "utc_offset_seconds": 0,
    "timezone": "GMT",
    "elevation": 38.0,
    "current_units": {"time": "iso8601", "temperature_2m": "°C"},
    "current": SAMPLE_CURRENT,
}


class FakeProvider:
    """Provider returning canned responses, or raising canned errors."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []
        self.closed = False

    async def fetch_current_weather(self, location, units):
        self.calls.append((location, units))
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result

    def get_name(self) -> str:
        return "Fake"

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def sample_location() -> WeatherLocation:
    """Berlin, no elevation."""
    return WeatherLocation(latitude=52.52, longitude=13.41)


@pytest.fixture
def default_units() -> WeatherUnits:
    return WeatherUnits()


@pytest.fixture
def provider_response() -> WeatherProviderResponse:
    """Response matching SAMPLE_CURRENT."""
    return WeatherProviderResponse(
        weather_code=3,
        temperature=21.5,
        apparent_temperature=20.0,
        humidity=60,
        precipitation=0.0,
        wind_speed=12.0,
        wind_direction=180,
        cloud_cover=40,
        pressure=1013.2,
        visibility=None,
        is_day=1,
        timestamp="2024-01-01T12:00",
    )


@pytest.fixture
def sample_weather() -> WeatherData:
    return WeatherData(
        condition=WeatherCondition.PARTLY_CLOUDY,
        temperature=18.4,
        apparent_temperature=17.0,
        humidity=55,
        precipitation=0.2,
        wind_speed=8.0,
        wind_direction=270,
        cloud_cover=30,
        pressure=1018.0,
        visibility=24000.0,
        is_day=True,
        timestamp="2024-06-01T09:15",
    )
