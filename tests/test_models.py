"""Tests for weather domain models."""

import pytest
from pydantic import ValidationError

from weathr.weather.models import (
    PrecipitationUnit,
    TemperatureUnit,
    WeatherCondition,
    WeatherLocation,
    WeatherUnits,
    WindSpeedUnit,
)


class TestWeatherLocation:
    """Location validation."""

    def test_elevation_optional(self):
        location = WeatherLocation(latitude=52.52, longitude=13.41)
        assert location.elevation is None

    @pytest.mark.parametrize("lat,lon", [(90, 180), (-90, -180), (0, 0)])
    def test_boundaries_accepted(self, lat, lon):
        location = WeatherLocation(latitude=lat, longitude=lon)
        assert (location.latitude, location.longitude) == (lat, lon)

    @pytest.mark.parametrize("lat,lon", [(90.1, 0), (-91, 0), (0, 180.5), (0, -181)])
    def test_out_of_range_rejected(self, lat, lon):
        with pytest.raises(ValidationError):
            WeatherLocation(latitude=lat, longitude=lon)

    def test_immutable(self, sample_location):
        with pytest.raises(ValidationError):
            sample_location.latitude = 10.0


class TestWeatherUnits:
    """Unit system defaults."""

    def test_defaults(self):
        units = WeatherUnits()
        assert units.temperature is TemperatureUnit.CELSIUS
        assert units.wind_speed is WindSpeedUnit.KMH
        assert units.precipitation is PrecipitationUnit.MM

    def test_from_strings(self):
        units = WeatherUnits(temperature="fahrenheit", wind_speed="mph", precipitation="inch")
        assert units.temperature is TemperatureUnit.FAHRENHEIT
        assert units.wind_speed is WindSpeedUnit.MPH
        assert units.precipitation is PrecipitationUnit.INCH

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValidationError):
            WeatherUnits(temperature="kelvin")


class TestWeatherCondition:
    """Condition labels."""

    def test_labels(self):
        assert WeatherCondition.CLEAR.label == "Clear"
        assert WeatherCondition.PARTLY_CLOUDY.label == "Partly Cloudy"
        assert WeatherCondition.THUNDERSTORM_HAIL.label == "Thunderstorm with Hail"

    def test_fourteen_conditions(self):
        assert len(WeatherCondition) == 14
