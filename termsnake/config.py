"""
Runtime configuration for termsnake.

Values come from the environment (optionally a .env file) with the
defaults below. Board size and tick rate are command line options; these
settings only tune derived defaults and logging.
"""

import logging
import os
from typing import Optional, Tuple

from dotenv import load_dotenv

from termsnake.errors import ConfigError

load_dotenv()

# The default tick rate lets the snake cross the shorter board dimension in
# this many seconds
DEFAULT_CROSSING_SECONDS = 4.0

# Rows below the board reserved for the status line
STATUS_LINES = 1

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def crossing_seconds() -> float:
    return _get_float("TERMSNAKE_CROSSING_SECONDS", DEFAULT_CROSSING_SECONDS)


def log_file() -> Optional[str]:
    return os.getenv("TERMSNAKE_LOG_FILE") or None


def log_level() -> int:
    name = os.getenv("TERMSNAKE_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"TERMSNAKE_LOG_LEVEL {name!r} is not a logging level")
    return level


def default_ticks_per_second(width: int, height: int, seconds: Optional[float] = None) -> int:
    """
    Tick rate that lets the snake cross the shorter dimension in `seconds`.

    Args:
        width, height: Board interior size
        seconds: Crossing time, defaults to crossing_seconds()

    Returns:
        A tick rate of at least 1.
    """
    if seconds is None:
        seconds = crossing_seconds()
    return max(1, round(min(width, height) / seconds))


def default_board_size(columns: int, rows: int) -> Tuple[int, int]:
    """
    Largest board that fits a terminal of the given size.

    Two columns go to the side borders; two rows go to the top and bottom
    borders and STATUS_LINES more to the status line.
    """
    width = max(1, columns - 2)
    height = max(1, rows - 2 - STATUS_LINES)
    return width, height


def configure_logging() -> None:
    """
    Configure the root logger.

    Curses owns the screen while the game runs, so records only go to a file.
    Without TERMSNAKE_LOG_FILE, logging is silenced.
    """
    path = log_file()
    if path:
        logging.basicConfig(filename=path, level=log_level(), format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.CRITICAL + 1, format=LOG_FORMAT)
