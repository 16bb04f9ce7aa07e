# systems/day_night.py

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from engine.error_handler import get_logger
from settings import DAY_LENGTH_SECONDS, ENVIRONMENT_LIGHT_COMPONENT

if TYPE_CHECKING:
    from engine.scene.entity import Entity
    from engine.scene.frame import FrameSignal
    from world.time.environment_light import EnvironmentLight

log = get_logger("day_night")

DEFAULT_SPEED = 1.0 / DAY_LENGTH_SECONDS


def advance_time_of_day(current_time: float, speed: float, frametime: float) -> float:
    """
    Advance a normalized time of day and wrap it back into [0, 1).

    Uses a floored wrap so a long frame (or a resumed session) that pushes
    the value past several whole days still lands in range.
    """
    t = current_time + speed * frametime
    return t - math.floor(t)


class DayNightDriver:
    """
    Advances the EnvironmentLight on its own entity once per frame.

    The light is looked up lazily: it may be attached after the driver is
    bound. Until it shows up every update is a no-op. The first time it is
    found, its time is reset to midnight and it is switched to fixed
    (externally driven) time. That happens once per driver.
    """

    def __init__(self, entity: "Entity", speed: float = DEFAULT_SPEED) -> None:
        self.entity = entity
        self.speed = speed
        self._environment: Optional["EnvironmentLight"] = None
        self._signal: Optional["FrameSignal"] = None

    @property
    def resolved(self) -> bool:
        """Whether the EnvironmentLight has been found. Never reverts to False."""
        return self._environment is not None

    @property
    def environment(self) -> Optional["EnvironmentLight"]:
        """The cached EnvironmentLight, or None until it has been found."""
        return self._environment

    def resolve_environment(self) -> Optional["EnvironmentLight"]:
        """
        Look up the EnvironmentLight on the driver's entity if not cached yet.

        On the first successful lookup the light is reset to midnight and
        switched to fixed time. A missing light is not an error.

        Returns:
            The cached light, or None if it is not attached (yet)
        """
        if self._environment is None:
            environment = self.entity.get_component(ENVIRONMENT_LIGHT_COMPONENT)
            if environment is not None:
                environment.current_time = 0.0
                environment.fixed_time = True
                self._environment = environment
                log.debug("Resolved %s on %r", ENVIRONMENT_LIGHT_COMPONENT, self.entity)
        return self._environment

    def update(self, frametime: float) -> None:
        """
        Advance the light's time of day by one frame.

        Args:
            frametime: Seconds since the previous frame (trusted, not validated)
        """
        environment = self.resolve_environment()
        if environment is None:
            return

        # Day-night cycle goes from 0 to 1.0
        environment.current_time = advance_time_of_day(
            environment.current_time, self.speed, frametime
        )

    # ------------------------------------------------------------------
    # Frame hookup
    # ------------------------------------------------------------------

    def bind(self, signal: "FrameSignal") -> None:
        """
        Connect `update` to a frame signal, replacing any earlier binding.

        Args:
            signal: The frame signal to drive this driver from
        """
        if self._signal is not None and self._signal is not signal:
            self._signal.disconnect(self.update)
        self._signal = signal
        signal.connect(self.update)

    def unbind(self) -> None:
        """Disconnect `update` from the bound frame signal, if any."""
        if self._signal is not None:
            self._signal.disconnect(self.update)
            self._signal = None
