"""Open-Meteo current weather provider."""

import logging
from urllib.parse import urlencode, urlsplit, urlunsplit

import httpx
from pydantic import BaseModel, ValidationError

from weathr.core.exceptions import (
    WeatherDecodeError,
    WeatherHTTPStatusError,
    WeatherRequestError,
    WeatherTimeoutError,
    WeatherTransportError,
)
from weathr.core.utils import format_decimal
from weathr.weather.models import (
    PrecipitationUnit,
    TemperatureUnit,
    WeatherLocation,
    WeatherUnits,
    WindSpeedUnit,
)
from weathr.weather.protocols import WeatherProviderResponse

logger = logging.getLogger(__name__)

BASE_URL = "https://api.open-meteo.com/v1/forecast"

# Variables we request under ``current``
CURRENT_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "is_day",
    "precipitation",
    "weather_code",
    "cloud_cover",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
    "visibility",
]

_TEMPERATURE_PARAMS = {
    TemperatureUnit.CELSIUS: "celsius",
    TemperatureUnit.FAHRENHEIT: "fahrenheit",
}

_WIND_SPEED_PARAMS = {
    WindSpeedUnit.KMH: "kmh",
    WindSpeedUnit.MS: "ms",
    WindSpeedUnit.MPH: "mph",
    WindSpeedUnit.KN: "kn",
}

_PRECIPITATION_PARAMS = {
    PrecipitationUnit.MM: "mm",
    PrecipitationUnit.INCH: "inch",
}

# Raw bodies attached to decode errors are cut to this many characters
_BODY_PREVIEW = 500


def temperature_unit_param(unit: TemperatureUnit) -> str:
    """Open-Meteo ``temperature_unit`` value for a temperature unit."""
    return _TEMPERATURE_PARAMS[unit]


def wind_speed_unit_param(unit: WindSpeedUnit) -> str:
    """Open-Meteo ``wind_speed_unit`` value for a wind speed unit."""
    return _WIND_SPEED_PARAMS[unit]


def precipitation_unit_param(unit: PrecipitationUnit) -> str:
    """Open-Meteo ``precipitation_unit`` value for a precipitation unit."""
    return _PRECIPITATION_PARAMS[unit]


def build_params(location: WeatherLocation, units: WeatherUnits) -> dict[str, str]:
    """Build the query parameters for a current-conditions request.

    ``elevation`` is only sent when the location carries one; otherwise
    Open-Meteo falls back to its own terrain model.
    """
    params = {
        "latitude": format_decimal(location.latitude),
        "longitude": format_decimal(location.longitude),
        "current": ",".join(CURRENT_VARIABLES),
        "temperature_unit": temperature_unit_param(units.temperature),
        "wind_speed_unit": wind_speed_unit_param(units.wind_speed),
        "precipitation_unit": precipitation_unit_param(units.precipitation),
    }
    if location.elevation is not None:
        params["elevation"] = format_decimal(location.elevation)
    return params


class OpenMeteoCurrent(BaseModel):
    """The ``current`` object of an Open-Meteo forecast response."""

    time: str
    temperature_2m: float
    relative_humidity_2m: float
    apparent_temperature: float
    is_day: int
    precipitation: float
    weather_code: int
    cloud_cover: float
    surface_pressure: float
    wind_speed_10m: float
    wind_direction_10m: float
    visibility: float | None = None


class OpenMeteoPayload(BaseModel):
    """Top-level Open-Meteo forecast response (only the parts we use)."""

    current: OpenMeteoCurrent


class OpenMeteoProvider:
    """Provider for the Open-Meteo API (free, no API key required)."""

    NAME = "Open-Meteo"
    TIMEOUT = 10.0

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        base_url: str = BASE_URL,
    ):
        """Initialize the provider.

        Args:
            client: Optional httpx client (for testing/reuse)
            base_url: Forecast endpoint URL
        """
        self._client = client
        self._owns_client = client is None
        self._base_url = base_url

    def get_name(self) -> str:
        return self.NAME

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.TIMEOUT)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_url(self, location: WeatherLocation, units: WeatherUnits) -> str:
        """Build the full request URL.

        Raises:
            WeatherRequestError: If the base URL is not an absolute http(s) URL
        """
        try:
            parts = urlsplit(self._base_url)
        except ValueError as e:
            raise WeatherRequestError(
                f"Invalid base URL: {self._base_url!r}", source=self.NAME
            ) from e
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise WeatherRequestError(
                f"Invalid base URL: {self._base_url!r}", source=self.NAME
            )
        query = urlencode(build_params(location, units))
        if parts.query:
            query = f"{parts.query}&{query}"
        return urlunsplit(parts._replace(query=query))

    async def fetch_current_weather(
        self, location: WeatherLocation, units: WeatherUnits
    ) -> WeatherProviderResponse:
        """Fetch current conditions from Open-Meteo.

        Args:
            location: Where to fetch weather for
            units: Units to request

        Returns:
            Raw provider response

        Raises:
            WeatherRequestError: Base URL is malformed
            WeatherTimeoutError: The HTTP request timed out
            WeatherTransportError: DNS/connection/TLS failure
            WeatherHTTPStatusError: Non-2xx status
            WeatherDecodeError: Body is not the expected JSON shape
        """
        url = self.build_url(location, units)
        client = await self._get_client()

        logger.debug(f"GET {url}")
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Open-Meteo HTTP error: {e.response.status_code}")
            raise WeatherHTTPStatusError(
                e.response.status_code,
                body=e.response.text[:_BODY_PREVIEW],
                source=self.NAME,
            ) from e
        except httpx.TimeoutException as e:
            logger.warning(f"Open-Meteo request timed out: {e}")
            raise WeatherTimeoutError(
                f"Request timed out: {e}", source=self.NAME
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"Open-Meteo request error: {e}")
            raise WeatherTransportError(
                f"Request failed: {e}", source=self.NAME
            ) from e

        return self._parse_response(response.text)

    def _parse_response(self, body: str) -> WeatherProviderResponse:
        """Decode the JSON body into a provider response."""
        try:
            payload = OpenMeteoPayload.model_validate_json(body)
        except ValidationError as e:
            logger.warning(f"Failed to decode Open-Meteo response: {e}")
            raise WeatherDecodeError(
                f"Unexpected response from {self.NAME}: "
                f"{e.error_count()} validation error(s)",
                body=body[:_BODY_PREVIEW],
                source=self.NAME,
            ) from e

        current = payload.current
        return WeatherProviderResponse(
            weather_code=current.weather_code,
            temperature=current.temperature_2m,
            apparent_temperature=current.apparent_temperature,
            humidity=current.relative_humidity_2m,
            precipitation=current.precipitation,
            wind_speed=current.wind_speed_10m,
            wind_direction=current.wind_direction_10m,
            cloud_cover=current.cloud_cover,
            pressure=current.surface_pressure,
            visibility=current.visibility,
            is_day=current.is_day,
            timestamp=current.time,
        )
