"""
Environment light component.

Owns the scene's normalized time of day and derives sun/ambient lighting
from it. Time of day runs from 0.0 (midnight) through 0.5 (noon) back
towards 1.0, and is kept in [0, 1).
"""

from __future__ import annotations

import math
import time
from typing import Callable, Optional, Tuple

from engine.scene.entity import Component
from settings import ENVIRONMENT_LIGHT_COMPONENT

Color = Tuple[int, int, int]

# Lighting palettes: (night, dawn/dusk, day)
_SUN_PALETTE: Tuple[Color, Color, Color] = ((0, 0, 0), (255, 170, 110), (255, 250, 235))
_AMBIENT_PALETTE: Tuple[Color, Color, Color] = ((20, 24, 48), (120, 90, 90), (200, 210, 225))

# Sun elevation band used for the dawn/dusk blend.
_TWILIGHT_LOW = -0.25
_TWILIGHT_HIGH = 0.3

_SECONDS_PER_DAY = 24 * 60 * 60


def _lerp_colour(c1: Color, c2: Color, t: float) -> Color:
    t = max(0.0, min(1.0, t))
    return (
        int(round(c1[0] + (c2[0] - c1[0]) * t)),
        int(round(c1[1] + (c2[1] - c1[1]) * t)),
        int(round(c1[2] + (c2[2] - c1[2]) * t)),
    )


def sun_elevation_at(time_of_day: float) -> float:
    """-1.0 at midnight, 0.0 at 06:00/18:00, +1.0 at noon."""
    return -math.cos(2.0 * math.pi * time_of_day)


def palette_colour(elevation: float, night: Color, dawn: Color, day: Color) -> Color:
    """
    Pick a colour for a sun elevation.

    Below the twilight band it is `night`, above it `day`; inside the band
    it blends night -> dawn -> day, with `dawn` exactly at the horizon.
    """
    if elevation <= _TWILIGHT_LOW:
        return night
    if elevation < 0.0:
        return _lerp_colour(night, dawn, (elevation - _TWILIGHT_LOW) / -_TWILIGHT_LOW)
    if elevation < _TWILIGHT_HIGH:
        return _lerp_colour(dawn, day, elevation / _TWILIGHT_HIGH)
    return day


def wall_clock_time_of_day() -> float:
    """Fraction of the local day elapsed since midnight."""
    now = time.localtime()
    seconds = now.tm_hour * 3600 + now.tm_min * 60 + now.tm_sec
    return (seconds % _SECONDS_PER_DAY) / _SECONDS_PER_DAY


class EnvironmentLight(Component):
    """
    Time-of-day state for a scene.

    current_time:
        Normalized time of day in [0, 1).
    fixed_time:
        False: the light follows the local wall clock on every frame.
        True: time is driven from outside (e.g. a DayNightDriver) and the
        light leaves current_time alone.
    """

    type_name = ENVIRONMENT_LIGHT_COMPONENT

    def __init__(
        self,
        current_time: float = 0.0,
        fixed_time: bool = False,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        super().__init__()
        self.current_time: float = current_time
        self.fixed_time: bool = fixed_time
        self._clock = clock or wall_clock_time_of_day

    # ------------------------------------------------------------------
    # Frame hookup
    # ------------------------------------------------------------------

    def on_attached(self) -> None:
        scene = self.entity.scene if self.entity is not None else None
        if scene is not None:
            scene.frame.updated.connect(self.on_frame)

    def on_detached(self) -> None:
        scene = self.entity.scene if self.entity is not None else None
        if scene is not None:
            scene.frame.updated.disconnect(self.on_frame)

    def on_frame(self, frametime: float) -> None:
        if not self.fixed_time:
            self.current_time = self._clock()

    # ------------------------------------------------------------------
    # Derived lighting
    # ------------------------------------------------------------------

    @property
    def sun_elevation(self) -> float:
        return sun_elevation_at(self.current_time)

    @property
    def is_daytime(self) -> bool:
        return self.sun_elevation > 0.0

    @property
    def sun_colour(self) -> Color:
        return palette_colour(self.sun_elevation, *_SUN_PALETTE)

    @property
    def ambient_colour(self) -> Color:
        return palette_colour(self.sun_elevation, *_AMBIENT_PALETTE)

    def get_time_of_day(self) -> str:
        """Get time of day description."""
        hours = self.current_time * 24.0
        if 5 <= hours < 8:
            return "dawn"
        elif 8 <= hours < 18:
            return "day"
        elif 18 <= hours < 21:
            return "dusk"
        else:
            return "night"

    def clock_text(self) -> str:
        """Current time as HH:MM, with 0.0 at midnight."""
        minutes = int(self.current_time * 24 * 60) % (24 * 60)
        return f"{minutes // 60:02d}:{minutes % 60:02d}"
