"""Core utilities and exceptions."""

from weathr.core.exceptions import (
    ConfigError,
    InvalidLocationError,
    WeatherAPIError,
    WeatherDecodeError,
    WeatherHTTPStatusError,
    WeatherRequestError,
    WeatherTimeoutError,
    WeatherTransportError,
    WeathrError,
)

__all__ = [
    "WeathrError",
    "ConfigError",
    "InvalidLocationError",
    "WeatherAPIError",
    "WeatherRequestError",
    "WeatherTransportError",
    "WeatherTimeoutError",
    "WeatherHTTPStatusError",
    "WeatherDecodeError",
]
