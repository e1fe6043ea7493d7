"""weathr - current weather conditions in the terminal."""

__version__ = "0.1.0"
