"""CLI context management."""

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from weathr.display.renderer import DisplayRenderer
from weathr.storage.config import EXAMPLE_CONFIG, ConfigManager
from weathr.weather.client import WeatherClient
from weathr.weather.models import WeatherLocation
from weathr.weather.openmeteo import OpenMeteoProvider


@dataclass
class CliContext:
    """Context object passed to all CLI commands."""

    config: ConfigManager
    console: Console
    renderer: DisplayRenderer
    verbose: bool = False

    # Lazily initialized
    _weather_client: WeatherClient | None = None

    @classmethod
    def create(
        cls,
        config_file: Path | None = None,
        verbose: bool = False,
    ) -> "CliContext":
        """Create a new CLI context.

        Args:
            config_file: Custom config file
            verbose: Enable verbose output

        Returns:
            Initialized CliContext
        """
        config = ConfigManager(config_file)
        console = Console()
        renderer = DisplayRenderer(console)

        return cls(
            config=config,
            console=console,
            renderer=renderer,
            verbose=verbose,
        )

    def get_weather_client(self) -> WeatherClient:
        """Get or create the weather client, using the configured units."""
        if self._weather_client is None:
            self._weather_client = WeatherClient(
                provider=OpenMeteoProvider(),
                units=self.config.units,
            )
        return self._weather_client

    async def cleanup(self) -> None:
        """Clean up resources."""
        if self._weather_client:
            await self._weather_client.close()
            self._weather_client = None

    def require_location(self) -> WeatherLocation:
        """Load the configured location or exit with setup instructions."""
        if not self.config.exists:
            self.renderer.print_error(f"No config file at {self.config.config_file}")
            self.console.print(
                "\nCreate one with [bold]weathr config set --lat 52.52 --lon 13.41[/bold]"
                " or write it by hand:\n"
            )
            self.console.print(EXAMPLE_CONFIG, markup=False, highlight=False)
            raise SystemExit(1)
        return self.config.location
