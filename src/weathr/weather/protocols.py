"""Weather provider protocol (interface) and its raw response shape."""

from typing import Protocol

from pydantic import BaseModel, ConfigDict

from weathr.weather.models import WeatherLocation, WeatherUnits


class WeatherProviderResponse(BaseModel):
    """Provider-shaped current conditions, before normalization.

    Never shown to the user directly; pass it through
    :class:`~weathr.weather.normalizer.WeatherNormalizer` first.
    """

    model_config = ConfigDict(frozen=True)

    weather_code: int
    temperature: float
    apparent_temperature: float
    humidity: float
    precipitation: float
    wind_speed: float
    wind_direction: float
    cloud_cover: float
    pressure: float
    visibility: float | None = None
    is_day: int
    timestamp: str


class WeatherProvider(Protocol):
    """Protocol for current-weather data sources."""

    async def fetch_current_weather(
        self, location: WeatherLocation, units: WeatherUnits
    ) -> WeatherProviderResponse:
        """Fetch current conditions.

        Performs exactly one request per call and never retries.

        Args:
            location: Where to fetch weather for
            units: Units the numeric fields should be expressed in

        Returns:
            Raw provider response

        Raises:
            WeatherAPIError: On request, transport, status or decode failure
        """
        ...

    def get_name(self) -> str:
        """Stable provider name for display and diagnostics."""
        ...

    async def close(self) -> None:
        """Release any network resources the provider owns."""
        ...
