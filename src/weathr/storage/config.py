"""Configuration management using TOML."""

import logging
import os
import sys
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from weathr.core.exceptions import ConfigError
from weathr.core.utils import validate_coordinates
from weathr.weather.models import (
    PrecipitationUnit,
    TemperatureUnit,
    WeatherLocation,
    WeatherUnits,
    WindSpeedUnit,
)

logger = logging.getLogger(__name__)

APP_DIR_NAME = "weathr"
CONFIG_FILENAME = "config.toml"
DEFAULT_REFRESH_INTERVAL = 60

EXAMPLE_CONFIG = """\
[location]
latitude = 52.52
longitude = 13.41
"""


def default_config_path() -> Path:
    """Resolve the config file location.

    ``$XDG_CONFIG_HOME/weathr/config.toml`` when the variable is set,
    otherwise ``~/.config/weathr/config.toml``.
    """
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / APP_DIR_NAME / CONFIG_FILENAME


class ConfigManager:
    """Reads and writes the user's ``config.toml``.

    The file is loaded lazily on first access, so ``config set`` works
    before any file exists.
    """

    def __init__(self, config_file: Path | None = None):
        """Initialize config manager.

        Args:
            config_file: Custom config file (default: XDG location)
        """
        self.config_file = config_file or default_config_path()
        self._config: dict[str, Any] | None = None

    @property
    def exists(self) -> bool:
        return self.config_file.is_file()

    def load(self) -> dict[str, Any]:
        """Load configuration from file.

        Raises:
            ConfigError: If the file cannot be read or is not valid TOML
        """
        try:
            content = self.config_file.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(
                f"Failed to read config file {self.config_file}: {e}"
            ) from e
        try:
            self._config = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse config {self.config_file}: {e}") from e
        logger.debug(f"Loaded config from {self.config_file}")
        return self._config

    def _data(self) -> dict[str, Any]:
        if self._config is None:
            self.load()
        return self._config

    def _write_config(self, config: dict[str, Any]) -> None:
        """Write configuration to file."""
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "wb") as f:
                tomli_w.dump(config, f)
        except OSError as e:
            raise ConfigError(f"Failed to write config: {e}") from e
        self._config = config

    def _existing_or_empty(self) -> dict[str, Any]:
        """Current config for editing; empty if no file exists yet."""
        if self._config is None and not self.exists:
            return {}
        return dict(self._data())

    # Location
    @property
    def location(self) -> WeatherLocation:
        """The configured location.

        Raises:
            ConfigError: If ``[location]`` is missing or invalid
        """
        section = self._data().get("location")
        if not isinstance(section, dict):
            raise ConfigError("Missing [location] section in config")
        for key in ("latitude", "longitude"):
            if key not in section:
                raise ConfigError(f"Missing '{key}' in [location] section")
        try:
            return WeatherLocation(
                latitude=section["latitude"],
                longitude=section["longitude"],
                elevation=section.get("elevation"),
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid [location] section: {e}") from e

    def set_location(
        self,
        latitude: float,
        longitude: float,
        elevation: float | None = None,
    ) -> WeatherLocation:
        """Save the location, keeping the rest of the file.

        Returns:
            The saved location
        """
        validate_coordinates(latitude, longitude)
        section: dict[str, Any] = {"latitude": latitude, "longitude": longitude}
        if elevation is not None:
            section["elevation"] = elevation

        config = self._existing_or_empty()
        config["location"] = section
        self._write_config(config)
        return WeatherLocation(**section)

    # Units
    @property
    def units(self) -> WeatherUnits:
        """Configured units; defaults fill in anything not set.

        Raises:
            ConfigError: If a unit name is not recognised
        """
        section = self._data().get("units", {})
        try:
            return WeatherUnits(**section)
        except (ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid [units] section: {e}") from e

    def set_units(
        self,
        temperature: TemperatureUnit | None = None,
        wind_speed: WindSpeedUnit | None = None,
        precipitation: PrecipitationUnit | None = None,
    ) -> WeatherUnits:
        """Update any of the unit settings and save.

        Returns:
            The resulting unit system
        """
        config = self._existing_or_empty()
        section = dict(config.get("units", {}))
        if temperature is not None:
            section["temperature"] = TemperatureUnit(temperature).value
        if wind_speed is not None:
            section["wind_speed"] = WindSpeedUnit(wind_speed).value
        if precipitation is not None:
            section["precipitation"] = PrecipitationUnit(precipitation).value
        config["units"] = section
        self._write_config(config)
        return self.units

    # Display
    @property
    def refresh_interval(self) -> int:
        """Seconds between weather refreshes."""
        value = self._data().get("display", {}).get(
            "refresh_interval", DEFAULT_REFRESH_INTERVAL
        )
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigError(
                f"refresh_interval must be a positive integer, got {value!r}"
            )
        return value
