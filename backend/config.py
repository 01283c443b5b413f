"""
Runtime configuration for the terminal snake.

Values come from the environment (a local .env file is loaded first). Game
rules such as the spawn interval live in domain/constants.py instead.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_TICK_MS = 100
DEFAULT_LOG_FILE = "snake.log"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    tick_ms: int = DEFAULT_TICK_MS
    seed: Optional[int] = None
    log_file: str = DEFAULT_LOG_FILE
    log_level: str = DEFAULT_LOG_LEVEL
    ascii_glyphs: bool = False

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000.0


def load_settings() -> Settings:
    """Build Settings from SNAKE_* environment variables."""
    tick_ms = _env_int("SNAKE_TICK_MS", DEFAULT_TICK_MS)
    if tick_ms <= 0:
        raise ValueError(f"SNAKE_TICK_MS must be positive, got {tick_ms}")
    return Settings(
        tick_ms=tick_ms,
        seed=_env_int("SNAKE_SEED", None),
        log_file=os.getenv("SNAKE_LOG_FILE", DEFAULT_LOG_FILE),
        log_level=os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        ascii_glyphs=_env_bool("SNAKE_ASCII"),
    )


def configure_logging(settings: Settings, to_file: bool = True) -> None:
    """
    Configure the root logger. In terminal mode curses owns the screen, so
    logs go to settings.log_file; otherwise they go to stderr.
    """
    if to_file:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, filename=settings.log_file)
    else:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
