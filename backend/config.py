"""
Runtime settings for the snake drivers.

Values come from the environment (a local .env file is loaded first) and can
be overridden by CLI flags.

Environment variables:
- SNAKE_BOARD_WIDTH / SNAKE_BOARD_HEIGHT: board size (default 51x51)
- SNAKE_TICK_MS: milliseconds between ticks (default 4 frames at 60 fps)
- SNAKE_SEED: seed for cherry placement (default: unseeded)
- SNAKE_FPS: host frame rate (default 60)
- LOG_LEVEL: logging level name (default INFO)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from domain.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH, FRAME_RATE, TICK_RATE

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass
class Settings:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    tick_ms: float = TICK_RATE
    seed: Optional[int] = None
    fps: int = FRAME_RATE
    log_level: str = "INFO"


def _get_int(name: str, default: Optional[int], minimum: Optional[int] = None) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")
    return value


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got '{raw}'")
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}")
    return value


def normalize_log_level(value: str, name: str = "log level") -> str:
    """Uppercase a level name and make sure logging knows it."""
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got '{value}'")
    return level


def validate_settings(settings: Settings) -> Settings:
    """
    Check settings after CLI overrides have been applied.

    Raises:
        ValueError: If a value is out of range
    """
    for name in ("width", "height", "fps"):
        value = getattr(settings, name)
        if value < 1:
            raise ValueError(f"{name} must be at least 1, got {value}")
    if settings.tick_ms < 0:
        raise ValueError(f"tick_ms cannot be negative, got {settings.tick_ms}")
    settings.log_level = normalize_log_level(settings.log_level)
    return settings


def load_settings(dotenv: bool = True) -> Settings:
    """
    Build Settings from the environment.

    Raises:
        ValueError: If a variable is set to something unusable
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    log_level = normalize_log_level(os.getenv("LOG_LEVEL") or "INFO", "LOG_LEVEL")

    settings = Settings(
        width=_get_int("SNAKE_BOARD_WIDTH", DEFAULT_WIDTH, minimum=1),
        height=_get_int("SNAKE_BOARD_HEIGHT", DEFAULT_HEIGHT, minimum=1),
        tick_ms=_get_float("SNAKE_TICK_MS", TICK_RATE),
        seed=_get_int("SNAKE_SEED", None),
        fps=_get_int("SNAKE_FPS", FRAME_RATE, minimum=1),
        log_level=log_level,
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


def configure_logging(level: str, filename: Optional[str] = None) -> None:
    """Set up root logging the same way for every driver."""
    logging.basicConfig(level=normalize_log_level(level), format=LOG_FORMAT, filename=filename)
