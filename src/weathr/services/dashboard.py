"""Live dashboard: redraw on a fixed cadence, refresh weather on a timer."""

import asyncio
import logging
import time
from typing import Callable

from rich.console import Group
from rich.live import Live

from weathr.core.exceptions import WeatherAPIError
from weathr.display.keys import KeyReader, is_quit_key
from weathr.display.renderer import DisplayRenderer
from weathr.weather.client import WeatherClient
from weathr.weather.models import WeatherData, WeatherLocation

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 60.0
DEFAULT_POLL_INTERVAL = 0.1


class WeatherDashboard:
    """Keeps the latest weather snapshot on screen until the user quits.

    Only one fetch is ever in flight: a refresh is awaited to completion
    before the loop polls input again. A failed refresh keeps the last good
    snapshot and shows the error instead.
    """

    def __init__(
        self,
        client: WeatherClient,
        location: WeatherLocation,
        renderer: DisplayRenderer,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        key_reader: KeyReader | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the dashboard.

        Args:
            client: Weather client used for every refresh
            location: Location to show
            renderer: Frame renderer
            refresh_interval: Seconds between weather fetches
            poll_interval: Seconds between input checks and redraws
            key_reader: Key input source (stdin if not given)
            clock: Monotonic time source
        """
        self.client = client
        self.location = location
        self.renderer = renderer
        self.refresh_interval = refresh_interval
        self.poll_interval = poll_interval
        self.key_reader = key_reader or KeyReader()
        self._clock = clock

        self.weather: WeatherData | None = None
        self.error: str | None = None
        self.last_refresh: float | None = None
        self.update_count = 0

    def due_for_refresh(self, now: float | None = None) -> bool:
        """Whether the refresh interval has elapsed since the last fetch."""
        if self.last_refresh is None:
            return True
        if now is None:
            now = self._clock()
        return now - self.last_refresh >= self.refresh_interval

    async def refresh(self) -> WeatherData | None:
        """Fetch once and update the shown state.

        Returns:
            The snapshot now on screen (possibly the previous one)
        """
        self.last_refresh = self._clock()
        try:
            self.weather = await self.client.get_current_weather(self.location)
            self.error = None
            self.update_count += 1
            logger.debug(f"Update #{self.update_count}: {self.weather.condition.label}")
        except WeatherAPIError as e:
            logger.warning(f"Weather update failed: {e}")
            self.error = str(e)
        return self.weather

    def frame(self) -> Group:
        """Current frame as a Rich renderable."""
        return self.renderer.build_frame(
            self.location,
            self.client.units,
            weather=self.weather,
            error=self.error,
            provider_name=self.client.provider_name,
        )

    def should_quit(self) -> bool:
        """Drain pending key presses; True if any of them is a quit key."""
        while True:
            key = self.key_reader.read_key()
            if key is None:
                return False
            if is_quit_key(key):
                return True

    async def run(self) -> None:
        """Run until a quit key is pressed.

        Ctrl+C surfaces as ``KeyboardInterrupt`` from ``asyncio.run``.
        """
        with self.key_reader, Live(
            self.frame(),
            console=self.renderer.console,
            screen=True,
            auto_refresh=False,
        ) as live:
            while True:
                if self.due_for_refresh():
                    await self.refresh()
                live.update(self.frame(), refresh=True)

                await asyncio.sleep(self.poll_interval)
                if self.should_quit():
                    logger.debug("Quit key pressed")
                    break
