"""Weather domain models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TemperatureUnit(str, Enum):
    """Temperature unit for requested readings."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WindSpeedUnit(str, Enum):
    """Wind speed unit for requested readings."""

    KMH = "kmh"
    MS = "ms"
    MPH = "mph"
    KN = "kn"


class PrecipitationUnit(str, Enum):
    """Precipitation unit for requested readings."""

    MM = "mm"
    INCH = "inch"


class WeatherCondition(str, Enum):
    """Normalized sky/precipitation condition."""

    CLEAR = "clear"
    PARTLY_CLOUDY = "partly_cloudy"
    CLOUDY = "cloudy"
    OVERCAST = "overcast"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    FREEZING_RAIN = "freezing_rain"
    SNOW = "snow"
    SNOW_GRAINS = "snow_grains"
    RAIN_SHOWERS = "rain_showers"
    SNOW_SHOWERS = "snow_showers"
    THUNDERSTORM = "thunderstorm"
    THUNDERSTORM_HAIL = "thunderstorm_hail"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``Partly Cloudy``."""
        if self is WeatherCondition.THUNDERSTORM_HAIL:
            return "Thunderstorm with Hail"
        return self.value.replace("_", " ").title()


class WeatherLocation(BaseModel):
    """Point on Earth to fetch weather for."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90, description="Latitude in degrees")
    longitude: float = Field(ge=-180, le=180, description="Longitude in degrees")
    elevation: float | None = Field(
        default=None, description="Elevation in meters (provider default if unset)"
    )


class WeatherUnits(BaseModel):
    """Unit system used both for the request and for reading the result."""

    model_config = ConfigDict(frozen=True)

    temperature: TemperatureUnit = TemperatureUnit.CELSIUS
    wind_speed: WindSpeedUnit = WindSpeedUnit.KMH
    precipitation: PrecipitationUnit = PrecipitationUnit.MM


class WeatherData(BaseModel):
    """Normalized current-conditions snapshot, ready for display."""

    model_config = ConfigDict(frozen=True)

    condition: WeatherCondition
    temperature: float = Field(description="Air temperature at 2m")
    apparent_temperature: float = Field(description="Feels-like temperature")
    humidity: float = Field(description="Relative humidity 0-100%")
    precipitation: float = Field(description="Precipitation amount")
    wind_speed: float = Field(description="Wind speed at 10m")
    wind_direction: float = Field(description="Wind direction in degrees (0-360)")
    cloud_cover: float = Field(description="Total cloud cover 0-100%")
    pressure: float = Field(description="Surface pressure in hPa")
    visibility: float | None = Field(
        default=None, description="Visibility in meters, None when not reported"
    )
    is_day: bool
    timestamp: str = Field(description="Observation time as sent by the provider")
