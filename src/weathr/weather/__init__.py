"""Weather acquisition and normalization."""

from weathr.weather.client import WeatherClient
from weathr.weather.models import (
    PrecipitationUnit,
    TemperatureUnit,
    WeatherCondition,
    WeatherData,
    WeatherLocation,
    WeatherUnits,
    WindSpeedUnit,
)
from weathr.weather.normalizer import WeatherNormalizer
from weathr.weather.openmeteo import OpenMeteoProvider
from weathr.weather.protocols import WeatherProvider, WeatherProviderResponse

__all__ = [
    "WeatherClient",
    "WeatherNormalizer",
    "OpenMeteoProvider",
    "WeatherProvider",
    "WeatherProviderResponse",
    "PrecipitationUnit",
    "TemperatureUnit",
    "WeatherCondition",
    "WeatherData",
    "WeatherLocation",
    "WeatherUnits",
    "WindSpeedUnit",
]
