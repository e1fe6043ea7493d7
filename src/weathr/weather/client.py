"""High-level weather client: fetch, bound by a timeout, then normalize."""

import asyncio
import logging

from weathr.core.exceptions import WeatherTimeoutError
from weathr.weather.models import WeatherData, WeatherLocation, WeatherUnits
from weathr.weather.normalizer import WeatherNormalizer
from weathr.weather.protocols import WeatherProvider

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT = 10.0


class WeatherClient:
    """Fetches normalized current weather from any :class:`WeatherProvider`.

    One request at a time; callers await each fetch before starting the
    next. Retry policy belongs to the caller.
    """

    def __init__(
        self,
        provider: WeatherProvider,
        units: WeatherUnits | None = None,
        normalizer: WeatherNormalizer | None = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
    ):
        """Initialize the client.

        Args:
            provider: Weather data source
            units: Unit system (defaults to Celsius, km/h, mm)
            normalizer: Response normalizer
            timeout: Upper bound in seconds for a single fetch
        """
        self.provider = provider
        self.units = units or WeatherUnits()
        self.normalizer = normalizer or WeatherNormalizer()
        self.timeout = timeout

    @property
    def provider_name(self) -> str:
        return self.provider.get_name()

    async def get_current_weather(self, location: WeatherLocation) -> WeatherData:
        """Fetch and normalize current conditions.

        Raises:
            WeatherTimeoutError: If the provider takes longer than ``timeout``
            WeatherAPIError: Any other failure reported by the provider
        """
        try:
            response = await asyncio.wait_for(
                self.provider.fetch_current_weather(location, self.units),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning(
                f"{self.provider_name} fetch exceeded {self.timeout:.0f}s"
            )
            raise WeatherTimeoutError(
                f"No response within {self.timeout:.0f} seconds",
                source=self.provider_name,
            ) from e

        logger.debug(
            f"{self.provider_name} response at {response.timestamp}: "
            f"code {response.weather_code}"
        )
        return self.normalizer.normalize(response)

    async def close(self) -> None:
        await self.provider.close()

    async def __aenter__(self) -> "WeatherClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
