"""
Runtime configuration, read from the environment (and a .env file).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import MAX_X, MAX_Y, MIN_SPEED

load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_HOST = "127.0.0.1"
DEFAULT_STATIC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass
class GameConfig:
    width: int = MAX_X
    height: int = MAX_Y
    speed: int = MIN_SPEED
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    static_dir: str = DEFAULT_STATIC_DIR

    @classmethod
    def from_env(cls, static_dir: Optional[str] = None) -> "GameConfig":
        """
        Build a config from SNAKE_WIDTH, SNAKE_HEIGHT, SNAKE_SPEED, PORT,
        HOST and STATIC_DIR, falling back to the defaults for anything unset.
        """
        return cls(
            width=_positive_int("SNAKE_WIDTH", MAX_X),
            height=_positive_int("SNAKE_HEIGHT", MAX_Y),
            speed=_positive_int("SNAKE_SPEED", MIN_SPEED),
            port=_positive_int("PORT", DEFAULT_PORT),
            host=os.getenv("HOST") or DEFAULT_HOST,
            static_dir=static_dir or os.getenv("STATIC_DIR") or DEFAULT_STATIC_DIR,
        )
