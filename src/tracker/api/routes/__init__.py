"""Route group exports."""

from . import artists, geocode, health

__all__ = ["artists", "geocode", "health"]
