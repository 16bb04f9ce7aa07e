"""
Time of day for the scene.

The EnvironmentLight component holds the normalized time of day and the
lighting derived from it.
"""

from .environment_light import EnvironmentLight, sun_elevation_at, palette_colour

__all__ = [
    "EnvironmentLight",
    "sun_elevation_at",
    "palette_colour",
]
