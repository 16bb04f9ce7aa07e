"""
Centralized error handling and logging system.

This module provides:
- Centralized error logging to files
- User-friendly error messages
- Custom exception types for scene and config errors
"""
import logging
from pathlib import Path
from typing import Optional
from datetime import datetime

# Setup logging directory
LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
LOG_DIR.mkdir(exist_ok=True)

# Configure logger
logger = logging.getLogger("daynight")
logger.setLevel(logging.DEBUG)

# Prevent duplicate handlers
if not logger.handlers:
    # File handler for detailed logs
    log_file = LOG_DIR / f"daynight_{datetime.now().strftime('%Y%m%d')}.log"
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the "daynight" logger (e.g. "daynight.scene")."""
    return logger.getChild(name)


class DayNightError(Exception):
    """Base exception for day/night host errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class SceneError(DayNightError):
    """Error when entities or components are misused."""
    pass


class ConfigError(DayNightError):
    """Error when a config value fails validation."""
    pass


def log_error(
    error: Exception,
    context: str = "",
) -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "frame_update", "load_config")
    """
    error_type = type(error).__name__
    error_msg = str(error)

    logger.error(
        f"Error in {context}: {error_type}: {error_msg}",
        exc_info=error
    )
