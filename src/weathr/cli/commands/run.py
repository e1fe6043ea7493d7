"""Live view command."""

import asyncio

import click

from weathr.cli.context import CliContext
from weathr.services.dashboard import WeatherDashboard
from weathr.weather.models import WeatherLocation


pass_context = click.make_pass_decorator(CliContext)


@click.command()
@click.option(
    "--interval", "-i",
    type=click.IntRange(min=1),
    default=None,
    help="Refresh interval in seconds (default: from config, else 60)",
)
@pass_context
def run(ctx: CliContext, interval: int | None) -> None:
    """Show live weather until 'q' is pressed.

    Examples:
        weathr
        weathr run --interval 120
    """
    location = ctx.require_location()
    refresh_interval = interval or ctx.config.refresh_interval
    asyncio.run(_run_async(ctx, location, refresh_interval))


async def _run_async(
    ctx: CliContext,
    location: WeatherLocation,
    refresh_interval: int,
) -> None:
    """Async implementation of run command."""
    try:
        dashboard = WeatherDashboard(
            client=ctx.get_weather_client(),
            location=location,
            renderer=ctx.renderer,
            refresh_interval=refresh_interval,
        )
        await dashboard.run()
    finally:
        await ctx.cleanup()
