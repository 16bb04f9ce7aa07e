"""
Per-frame update notification.

FrameSignal is a plain list of handlers called in connection order.
FrameClock owns the `updated` signal and feeds it the elapsed time of each
rendered frame, in seconds.
"""

from __future__ import annotations

from typing import Callable, List, Optional

import pygame

from engine.error_handler import log_error

FrameHandler = Callable[[float], None]


class FrameSignal:
    """Synchronous signal carrying the frame time of one frame."""

    def __init__(self) -> None:
        self._handlers: List[FrameHandler] = []

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: FrameHandler) -> bool:
        return handler in self._handlers

    def connect(self, handler: FrameHandler) -> None:
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: FrameHandler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, frametime: float) -> None:
        # Snapshot so handlers can (dis)connect while being notified.
        for handler in list(self._handlers):
            try:
                handler(frametime)
            except Exception as e:
                log_error(e, f"frame_update:{getattr(handler, '__qualname__', handler)!s}")
                raise


class FrameClock:
    """
    Drives a FrameSignal from pygame's clock.

    `tick()` is for the real main loop; `step()` emits a given frame time
    and is what tests and fixed-step hosts use.
    """

    def __init__(self, fps: int = 60, clock: Optional[pygame.time.Clock] = None) -> None:
        self.fps = fps
        self.updated = FrameSignal()
        self.frame_count: int = 0
        self.elapsed: float = 0.0
        self._clock = clock

    def tick(self) -> float:
        """Wait for the next frame, emit `updated` and return the frame time in seconds."""
        if self._clock is None:
            self._clock = pygame.time.Clock()
        frametime = self._clock.tick(self.fps) / 1000.0
        self.step(frametime)
        return frametime

    def step(self, frametime: float) -> None:
        self.frame_count += 1
        self.elapsed += frametime
        self.updated.emit(frametime)
