"""Application services."""

from weathr.services.dashboard import WeatherDashboard

__all__ = ["WeatherDashboard"]
