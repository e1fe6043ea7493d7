"""Configuration command."""

import click
from rich.table import Table

from weathr.cli.context import CliContext
from weathr.core.exceptions import WeathrError
from weathr.weather.models import PrecipitationUnit, TemperatureUnit, WindSpeedUnit


pass_context = click.make_pass_decorator(CliContext)


@click.group()
def config() -> None:
    """Manage location and units."""
    pass


@config.command("set")
@click.option("--lat", type=float, required=True, help="Latitude in degrees")
@click.option("--lon", type=float, required=True, help="Longitude in degrees")
@click.option("--elevation", type=float, default=None, help="Elevation in meters")
@pass_context
def set_location(
    ctx: CliContext,
    lat: float,
    lon: float,
    elevation: float | None,
) -> None:
    """Set the location to show weather for.

    Example: weathr config set --lat 52.52 --lon 13.41
    """
    try:
        ctx.config.set_location(lat, lon, elevation)
    except WeathrError as e:
        ctx.renderer.print_error(f"Failed to save location: {e}")
        raise SystemExit(1)
    ctx.renderer.print_success(
        f"Location saved at ({lat:.4f}, {lon:.4f}) in {ctx.config.config_file}"
    )


@config.command("units")
@click.option(
    "--temperature",
    type=click.Choice([u.value for u in TemperatureUnit]),
    help="Temperature unit",
)
@click.option(
    "--wind-speed",
    type=click.Choice([u.value for u in WindSpeedUnit]),
    help="Wind speed unit",
)
@click.option(
    "--precipitation",
    type=click.Choice([u.value for u in PrecipitationUnit]),
    help="Precipitation unit",
)
@pass_context
def set_units(
    ctx: CliContext,
    temperature: str | None,
    wind_speed: str | None,
    precipitation: str | None,
) -> None:
    """Choose the units readings are shown in.

    Example: weathr config units --temperature fahrenheit --wind-speed mph
    """
    try:
        units = ctx.config.set_units(
            temperature=TemperatureUnit(temperature) if temperature else None,
            wind_speed=WindSpeedUnit(wind_speed) if wind_speed else None,
            precipitation=PrecipitationUnit(precipitation) if precipitation else None,
        )
    except WeathrError as e:
        ctx.renderer.print_error(f"Failed to save units: {e}")
        raise SystemExit(1)
    ctx.renderer.print_success(
        f"Units: {units.temperature.value}, {units.wind_speed.value}, "
        f"{units.precipitation.value}"
    )


@config.command("show")
@pass_context
def show_config(ctx: CliContext) -> None:
    """Show current configuration."""
    ctx.console.print(f"[bold]Config File:[/bold] {ctx.config.config_file}")

    if not ctx.config.exists:
        ctx.renderer.print_warning("No config file yet")
        return

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    location = ctx.config.location
    table.add_row("Latitude", f"{location.latitude:.4f}")
    table.add_row("Longitude", f"{location.longitude:.4f}")
    table.add_row(
        "Elevation",
        f"{location.elevation:.0f}m" if location.elevation is not None else "auto",
    )

    units = ctx.config.units
    table.add_row("Temperature", units.temperature.value)
    table.add_row("Wind speed", units.wind_speed.value)
    table.add_row("Precipitation", units.precipitation.value)
    table.add_row("Refresh", f"{ctx.config.refresh_interval}s")

    ctx.console.print(table)
