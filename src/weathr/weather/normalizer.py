"""Normalization of provider responses into display-ready weather data."""

import logging

from weathr.weather.models import WeatherCondition, WeatherData
from weathr.weather.protocols import WeatherProviderResponse

logger = logging.getLogger(__name__)

# WMO weather interpretation codes, as used by Open-Meteo
WEATHER_CODE_CONDITIONS: dict[int, WeatherCondition] = {
    0: WeatherCondition.CLEAR,
    1: WeatherCondition.PARTLY_CLOUDY,
    2: WeatherCondition.CLOUDY,
    3: WeatherCondition.OVERCAST,
    45: WeatherCondition.FOG,
    48: WeatherCondition.FOG,
    51: WeatherCondition.DRIZZLE,
    53: WeatherCondition.DRIZZLE,
    55: WeatherCondition.DRIZZLE,
    56: WeatherCondition.FREEZING_RAIN,
    57: WeatherCondition.FREEZING_RAIN,
    61: WeatherCondition.RAIN,
    63: WeatherCondition.RAIN,
    65: WeatherCondition.RAIN,
    66: WeatherCondition.FREEZING_RAIN,
    67: WeatherCondition.FREEZING_RAIN,
    71: WeatherCondition.SNOW,
    73: WeatherCondition.SNOW,
    75: WeatherCondition.SNOW,
    77: WeatherCondition.SNOW_GRAINS,
    80: WeatherCondition.RAIN_SHOWERS,
    81: WeatherCondition.RAIN_SHOWERS,
    82: WeatherCondition.RAIN_SHOWERS,
    85: WeatherCondition.SNOW_SHOWERS,
    86: WeatherCondition.SNOW_SHOWERS,
    95: WeatherCondition.THUNDERSTORM,
    96: WeatherCondition.THUNDERSTORM_HAIL,
    99: WeatherCondition.THUNDERSTORM_HAIL,
}

# Used for codes missing from the table above. Every unknown code is logged.
FALLBACK_CONDITION = WeatherCondition.CLEAR


def condition_from_code(code: int) -> WeatherCondition:
    """Map a provider weather code to a condition.

    Unknown codes never raise; they map to :data:`FALLBACK_CONDITION`.
    """
    condition = WEATHER_CODE_CONDITIONS.get(code)
    if condition is None:
        logger.warning(
            f"Unmapped weather code {code}, using {FALLBACK_CONDITION.label}"
        )
        return FALLBACK_CONDITION
    return condition


class WeatherNormalizer:
    """Converts raw provider responses into :class:`WeatherData`.

    Pure and deterministic: no I/O apart from the warning logged for
    unknown weather codes.
    """

    def normalize(self, response: WeatherProviderResponse) -> WeatherData:
        return WeatherData(
            condition=condition_from_code(response.weather_code),
            temperature=response.temperature,
            apparent_temperature=response.apparent_temperature,
            humidity=response.humidity,
            precipitation=response.precipitation,
            wind_speed=response.wind_speed,
            wind_direction=response.wind_direction,
            cloud_cover=response.cloud_cover,
            pressure=response.pressure,
            visibility=response.visibility,
            is_day=response.is_day != 0,
            timestamp=response.timestamp,
        )


def normalize(response: WeatherProviderResponse) -> WeatherData:
    """Normalize a provider response with the default normalizer."""
    return WeatherNormalizer().normalize(response)
