"""
Configuration system for saving/loading demo and cycle settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Tuple

from settings import (
    WINDOW_WIDTH,
    WINDOW_HEIGHT,
    FPS,
    DAY_LENGTH_SECONDS,
    ATTACH_DELAY_SECONDS,
)
from engine.error_handler import ConfigError, get_logger, log_error

# Config file location
CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
CONFIG_FILE = CONFIG_DIR / "settings.json"

log = get_logger("config")


class DayNightConfig:
    """Manages window and day/night cycle settings."""

    def __init__(self, path: Path = CONFIG_FILE) -> None:
        self.path = path
        self.width: int = WINDOW_WIDTH
        self.height: int = WINDOW_HEIGHT
        self.fps: int = FPS
        self.day_length_seconds: float = DAY_LENGTH_SECONDS
        self.attach_delay_seconds: float = ATTACH_DELAY_SECONDS

    @property
    def speed(self) -> float:
        """Normalized time-of-day units advanced per second of frame time."""
        return 1.0 / self.day_length_seconds

    def get_resolution(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for saving."""
        return {
            "width": self.width,
            "height": self.height,
            "fps": self.fps,
            "day_length_seconds": self.day_length_seconds,
            "attach_delay_seconds": self.attach_delay_seconds,
        }

    def from_dict(self, data: Dict[str, Any]) -> None:
        """
        Load config from dictionary.

        All values are converted before any is applied, so a bad value
        leaves the current config untouched.

        Raises:
            ConfigError: if `data` is not a mapping or a value has the wrong type.
        """
        if not isinstance(data, dict):
            raise ConfigError(
                f"config root must be an object, got {type(data).__name__}",
                user_message="Config file is not a settings object.",
            )
        try:
            width = int(data.get("width", WINDOW_WIDTH))
            height = int(data.get("height", WINDOW_HEIGHT))
            fps = int(data.get("fps", FPS))
            day_length_seconds = float(data.get("day_length_seconds", DAY_LENGTH_SECONDS))
            attach_delay_seconds = float(data.get("attach_delay_seconds", ATTACH_DELAY_SECONDS))
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"invalid config value: {e}",
                user_message="Config file has an invalid value.",
            ) from e

        self.width = width
        self.height = height
        self.fps = fps
        self.day_length_seconds = day_length_seconds
        self.attach_delay_seconds = attach_delay_seconds

    def validate(self) -> None:
        """Raise ConfigError if any value is out of range."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(
                f"invalid resolution {self.width}x{self.height}",
                user_message="Window size must be positive.",
            )
        if self.fps <= 0:
            raise ConfigError(f"invalid fps {self.fps}", user_message="FPS must be positive.")
        if self.day_length_seconds <= 0:
            raise ConfigError(
                f"invalid day_length_seconds {self.day_length_seconds}",
                user_message="Day length must be positive.",
            )
        if self.attach_delay_seconds < 0:
            raise ConfigError(
                f"invalid attach_delay_seconds {self.attach_delay_seconds}",
                user_message="Attach delay cannot be negative.",
            )

    def save(self) -> bool:
        """Save config to file."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=2)
            return True
        except OSError as e:
            log_error(e, "save_config")
            return False

    def load(self) -> bool:
        """Load config from file. Returns False if there is nothing usable to load."""
        if not self.path.exists():
            return False

        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            self.from_dict(data)
        except (OSError, ValueError, ConfigError) as e:
            log_error(e, "load_config")
            return False
        log.debug("Loaded config from %s", self.path)
        return True


# Global config instance
_config = DayNightConfig()


def get_config() -> DayNightConfig:
    """Get the global config instance."""
    return _config


def load_config() -> DayNightConfig:
    """Load, validate and return the config."""
    _config.load()
    _config.validate()
    return _config


def save_config() -> bool:
    """Save the global config."""
    return _config.save()
