"""Custom exception hierarchy for weathr."""


class WeathrError(Exception):
    """Base exception for all weathr errors."""

    pass


class ConfigError(WeathrError):
    """Configuration-related errors."""

    pass


class InvalidLocationError(WeathrError):
    """Invalid coordinates provided."""

    def __init__(self, lat: float | None = None, lon: float | None = None):
        self.lat = lat
        self.lon = lon
        message = "Invalid coordinates"
        if lat is not None:
            message += f" (latitude: {lat})"
        if lon is not None:
            message += f" (longitude: {lon})"
        super().__init__(message)


class WeatherAPIError(WeathrError):
    """Weather API failures."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)


class WeatherRequestError(WeatherAPIError):
    """The request could not be built (e.g. malformed base URL)."""

    pass


class WeatherTransportError(WeatherAPIError):
    """DNS, connection, TLS or read failure."""

    pass


class WeatherTimeoutError(WeatherTransportError):
    """The fetch did not complete within its time budget."""

    pass


class WeatherHTTPStatusError(WeatherAPIError):
    """The API answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str = "", source: str | None = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code}", source=source)


class WeatherDecodeError(WeatherAPIError):
    """The response body did not match the expected shape.

    The raw body is kept on ``body`` for logs; it is never part of the message.
    """

    def __init__(self, message: str, body: str = "", source: str | None = None):
        self.body = body
        super().__init__(message, source=source)
