"""Rich-based display renderer."""

from rich.console import Console, Group
from rich.markup import escape
from rich.text import Text

from weathr.display.ascii_art import art_width, render_house
from weathr.display.formatters import format_conditions, format_header
from weathr.weather.models import WeatherData, WeatherLocation, WeatherUnits


class DisplayRenderer:
    """Renders weather frames to the terminal using Rich."""

    def __init__(self, console: Console | None = None):
        """Initialize renderer.

        Args:
            console: Rich console (creates one if not provided)
        """
        self.console = console or Console()
        self.house = render_house()

    def _house_offset(self) -> int:
        """Left padding that centres the house in the current terminal."""
        width = art_width(self.house)
        if self.console.width > width:
            return (self.console.width - width) // 2
        return 0

    def build_frame(
        self,
        location: WeatherLocation,
        units: WeatherUnits,
        weather: WeatherData | None = None,
        error: str | None = None,
        provider_name: str | None = None,
    ) -> Group:
        """Build one full frame.

        Args:
            location: Location being shown
            units: Units the weather values are expressed in
            weather: Latest good snapshot, if any
            error: Message from the last failed refresh
            provider_name: Data source shown in the footer

        Returns:
            Renderable for ``Console.print`` or ``Live.update``
        """
        parts: list[Text] = [Text(format_header(location), style="cyan")]

        if weather is not None:
            for line in format_conditions(weather, units):
                parts.append(Text(line, style="cyan"))
        elif error is None:
            parts.append(Text("Fetching weather...", style="dim"))

        if error is not None:
            parts.append(Text(f"Update failed: {error}", style="red"))

        parts.append(Text(""))
        pad = " " * self._house_offset()
        for line in self.house:
            parts.append(Text(pad + line, style="yellow", no_wrap=True))

        if provider_name:
            footer = f"Data: {provider_name}"
            if weather is not None:
                footer += f" | Observed {weather.timestamp}"
            parts.append(Text(""))
            parts.append(Text(footer, style="dim"))

        return Group(*parts)

    def render_once(
        self,
        location: WeatherLocation,
        units: WeatherUnits,
        weather: WeatherData | None = None,
        error: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        """Print a single frame."""
        self.console.print(
            self.build_frame(location, units, weather, error, provider_name)
        )

    def print_success(self, message: str) -> None:
        """Print success message."""
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def print_error(self, message: str) -> None:
        """Print error message."""
        self.console.print(f"[red]✗[/red] {escape(message)}")
