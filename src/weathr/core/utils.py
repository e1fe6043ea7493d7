"""Common utilities."""

from decimal import Decimal

from weathr.core.exceptions import InvalidLocationError


def validate_coordinates(lat: float, lon: float) -> tuple[float, float]:
    """Validate latitude/longitude.

    Args:
        lat: Latitude in degrees (-90 to 90)
        lon: Longitude in degrees (-180 to 180)

    Returns:
        Tuple of (latitude, longitude)

    Raises:
        InvalidLocationError: If coordinates are out of range
    """
    if not -90 <= lat <= 90:
        raise InvalidLocationError(lat=lat)
    if not -180 <= lon <= 180:
        raise InvalidLocationError(lon=lon)
    return (lat, lon)


def format_decimal(value: float) -> str:
    """Shortest decimal form of a float, without a trailing ``.0``.

    ``120.0`` becomes ``"120"``, ``52.52`` stays ``"52.52"`` and ``1e-05``
    is written out as ``"0.00001"``.
    """
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")
