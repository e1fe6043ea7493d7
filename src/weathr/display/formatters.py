"""Formatting utilities for display."""

from weathr.weather.models import (
    PrecipitationUnit,
    TemperatureUnit,
    WeatherData,
    WeatherLocation,
    WeatherUnits,
    WindSpeedUnit,
)

QUIT_HINT = "Press 'q' to quit"

_TEMPERATURE_SYMBOLS = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
}

_WIND_SPEED_SYMBOLS = {
    WindSpeedUnit.KMH: "km/h",
    WindSpeedUnit.MS: "m/s",
    WindSpeedUnit.MPH: "mph",
    WindSpeedUnit.KN: "kn",
}

_PRECIPITATION_SYMBOLS = {
    PrecipitationUnit.MM: "mm",
    PrecipitationUnit.INCH: "in",
}


def format_coordinates(lat: float, lon: float) -> str:
    """Format coordinates for display.

    Signed, two decimals: ``52.52°N, 13.41°E`` or ``-33.87°N, -74.01°E``.
    """
    return f"{lat:.2f}°N, {lon:.2f}°E"


def format_temperature(temp: float, unit: TemperatureUnit = TemperatureUnit.CELSIUS) -> str:
    """Format temperature, e.g. ``21.5°C``."""
    return f"{temp:.1f}{_TEMPERATURE_SYMBOLS[unit]}"


def get_wind_direction_name(degrees: float) -> str:
    """Get cardinal direction from degrees.

    Args:
        degrees: Wind direction in degrees (0=N, 90=E)

    Returns:
        Cardinal direction string (N, NE, E, etc.)
    """
    directions = ["N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
                  "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW"]
    idx = round(degrees / 22.5) % 16
    return directions[idx]


def format_wind(
    speed: float,
    direction: float | None = None,
    unit: WindSpeedUnit = WindSpeedUnit.KMH,
) -> str:
    """Format wind speed and direction, e.g. ``12.0 km/h S``."""
    text = f"{speed:.1f} {_WIND_SPEED_SYMBOLS[unit]}"
    if direction is not None:
        text += f" {get_wind_direction_name(direction)}"
    return text


def format_precipitation(
    value: float, unit: PrecipitationUnit = PrecipitationUnit.MM
) -> str:
    if unit is PrecipitationUnit.INCH:
        return f"{value:.2f} {_PRECIPITATION_SYMBOLS[unit]}"
    return f"{value:.1f} {_PRECIPITATION_SYMBOLS[unit]}"


def format_percentage(value: float) -> str:
    return f"{value:.0f}%"


def format_pressure(value: float) -> str:
    return f"{value:.0f} hPa"


def format_visibility(meters: float | None) -> str:
    """Format visibility; ``n/a`` when the provider did not report it.

    Zero is a real reading and is shown as such.
    """
    if meters is None:
        return "n/a"
    if meters >= 1000:
        return f"{meters / 1000:.1f} km"
    return f"{meters:.0f} m"


def format_header(location: WeatherLocation) -> str:
    """Top line of every frame."""
    return (
        f"Weather for: {format_coordinates(location.latitude, location.longitude)}"
        f" | {QUIT_HINT}"
    )


def format_conditions(weather: WeatherData, units: WeatherUnits) -> list[str]:
    """Readout lines for a weather snapshot."""
    daylight = "day" if weather.is_day else "night"
    return [
        f"{weather.condition.label} ({daylight}), "
        f"{format_temperature(weather.temperature, units.temperature)}, "
        f"feels like {format_temperature(weather.apparent_temperature, units.temperature)}",
        f"Wind {format_wind(weather.wind_speed, weather.wind_direction, units.wind_speed)}"
        f" | Humidity {format_percentage(weather.humidity)}"
        f" | Clouds {format_percentage(weather.cloud_cover)}",
        f"Precipitation {format_precipitation(weather.precipitation, units.precipitation)}"
        f" | Pressure {format_pressure(weather.pressure)}"
        f" | Visibility {format_visibility(weather.visibility)}",
    ]


def format_weather_info(
    location: WeatherLocation,
    weather: WeatherData | None = None,
    units: WeatherUnits | None = None,
) -> str:
    """Full text readout: header line followed by the conditions, if any."""
    lines = [format_header(location)]
    if weather is not None:
        lines.extend(format_conditions(weather, units or WeatherUnits()))
    return "\n".join(lines)
