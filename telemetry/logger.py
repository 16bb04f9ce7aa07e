from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from settings import TELEMETRY_SAMPLE_EVERY_N_FRAMES


def _now_iso() -> str:
    # ISO-ish without importing datetime (fast + good enough for logs)
    return time.strftime("%Y-%m-%dT%H:%M:%S", time.localtime())


@dataclass
class TelemetryLogger:
    """JSON-lines event log: one object per line with a timestamp and event name."""

    path: Optional[Path] = None
    enabled: bool = True
    flush_each_write: bool = False
    sample_every_n_frames: int = TELEMETRY_SAMPLE_EVERY_N_FRAMES
    _frame_counter: int = 0
    _last_time_of_day: Optional[float] = None
    _days_completed: int = 0
    _started_at: float = field(default_factory=time.time)

    def init(self, path: Path) -> None:
        self.path = path
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Touch file (don't overwrite)
        self.path.touch(exist_ok=True)
        self.log("telemetry_init", file=str(self.path))

    def log(self, event: str, **fields: Any) -> None:
        if not self.enabled or self.path is None:
            return

        row: Dict[str, Any] = {
            "t": time.time(),
            "ts": _now_iso(),
            "event": event,
            **fields,
        }

        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(row, ensure_ascii=False) + "\n")
                if self.flush_each_write:
                    f.flush()
        except OSError:
            # Telemetry must never break the frame loop.
            return

    def tick_frame(self) -> int:
        self._frame_counter += 1
        return self._frame_counter

    def should_log_frame(self) -> bool:
        return self.sample_every_n_frames > 0 and (self._frame_counter % self.sample_every_n_frames == 0)

    @property
    def days_completed(self) -> int:
        return self._days_completed

    def observe_time_of_day(self, time_of_day: float) -> bool:
        """
        Track the time of day once per frame.

        Logs a sampled `time_of_day` snapshot every N frames and a
        `day_rollover` event whenever the value wraps past midnight.
        Returns True on a rollover frame.
        """
        frame = self.tick_frame()
        rolled_over = self._last_time_of_day is not None and time_of_day < self._last_time_of_day
        self._last_time_of_day = time_of_day

        if rolled_over:
            self._days_completed += 1
            self.log("day_rollover", frame=frame, days=self._days_completed)
        if self.should_log_frame():
            self.log("time_of_day", frame=frame, value=round(time_of_day, 5))
        return rolled_over


# global singleton (easy import everywhere)
telemetry = TelemetryLogger()
