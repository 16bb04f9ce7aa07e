from __future__ import annotations

import math
from typing import Optional, Tuple

import pygame

from settings import (
    COLOR_BG,
    COLOR_CLOCK_TEXT,
    COLOR_CLOCK_SHADOW,
    SKY_NIGHT,
    SKY_DAWN,
    SKY_DAY,
)
from world.time.environment_light import EnvironmentLight, palette_colour, sun_elevation_at

Color = Tuple[int, int, int]


def sky_colour(time_of_day: float) -> Color:
    """Sky colour for a normalized time of day (0.0 = midnight)."""
    return palette_colour(sun_elevation_at(time_of_day), SKY_NIGHT, SKY_DAWN, SKY_DAY)


def sun_position(width: int, height: int, time_of_day: float) -> Tuple[int, int]:
    """
    Screen position of the sun disc.

    The sun travels a half-circle across the screen between 06:00 and 18:00;
    at night it sits below the horizon line (off the bottom of the screen).
    """
    angle = 2.0 * math.pi * (time_of_day - 0.25)
    cx = width // 2
    horizon = int(height * 0.8)
    x = cx - int(math.cos(angle) * width * 0.45)
    y = horizon - int(math.sin(angle) * height * 0.7)
    return x, y


class SkyRenderer:
    """
    Draws the sky, the sun and an HH:MM readout for an EnvironmentLight.

    With no light attached yet, it draws the plain background only.
    """

    def __init__(self, font: Optional[pygame.font.Font] = None) -> None:
        self.font = font or pygame.font.Font(None, 36)

    def draw(self, surface: pygame.Surface, light: Optional[EnvironmentLight]) -> None:
        if light is None:
            surface.fill(COLOR_BG)
            return

        width, height = surface.get_size()
        t = light.current_time

        surface.fill(sky_colour(t))

        if light.sun_elevation > -0.25:
            pygame.draw.circle(surface, light.sun_colour, sun_position(width, height, t), 28)

        # Ground tinted by the ambient light
        horizon = int(height * 0.8)
        pygame.draw.rect(surface, light.ambient_colour, (0, horizon, width, height - horizon))

        self._draw_clock(surface, light)

    def _draw_clock(self, surface: pygame.Surface, light: EnvironmentLight) -> None:
        label = f"{light.clock_text()}  {light.get_time_of_day()}"
        shadow = self.font.render(label, True, COLOR_CLOCK_SHADOW)
        text = self.font.render(label, True, COLOR_CLOCK_TEXT)
        surface.blit(shadow, (18, 18))
        surface.blit(text, (16, 16))
