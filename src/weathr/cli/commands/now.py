"""Current conditions command."""

import asyncio

import click

from weathr.cli.context import CliContext
from weathr.core.exceptions import WeatherAPIError
from weathr.weather.models import WeatherLocation


pass_context = click.make_pass_decorator(CliContext)


@click.command()
@pass_context
def now(ctx: CliContext) -> None:
    """Print current conditions once and exit."""
    location = ctx.require_location()
    asyncio.run(_now_async(ctx, location))


async def _now_async(ctx: CliContext, location: WeatherLocation) -> None:
    """Async implementation of now command."""
    try:
        client = ctx.get_weather_client()

        with ctx.console.status("Fetching conditions..."):
            weather = await client.get_current_weather(location)

        ctx.renderer.render_once(
            location,
            client.units,
            weather=weather,
            provider_name=client.provider_name,
        )

    except WeatherAPIError as e:
        ctx.renderer.print_error(f"Failed to fetch weather: {e}")
        raise SystemExit(1)
    finally:
        await ctx.cleanup()
