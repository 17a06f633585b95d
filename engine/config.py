"""
Startup configuration for the snake game.

Values come from the environment (a `.env` file is loaded by the CLI) and can
be overridden by command line flags. Nothing here changes once the game runs.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from domain import constants
from domain.errors import ConfigError


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    width: int = constants.SCREEN_WIDTH
    height: int = constants.SCREEN_HEIGHT
    initial_length: int = constants.INITIAL_LENGTH
    food_count: int = constants.FOOD_COUNT
    segment_size: float = constants.SEGMENT_SIZE
    fps: int = constants.FRAMERATE_LIMIT
    game_over_wait: float = constants.GAME_OVER_WAIT_SECS
    font_path: str = constants.FONT_PATH
    font_size: int = constants.FONT_SIZE
    seed: Optional[int] = None

    @property
    def screen_size(self):
        return (self.width, self.height)

    @classmethod
    def from_env(cls) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        Uses environment variables:
        - SNAKE_WIDTH, SNAKE_HEIGHT: window size in pixels
        - SNAKE_LENGTH: initial number of body segments
        - SNAKE_FOOD_COUNT: food items on the board
        - SNAKE_SEGMENT_SIZE: segment edge length in pixels
        - SNAKE_FPS: frame-rate cap, i.e. steps per second
        - SNAKE_GAME_OVER_WAIT: seconds to keep the window after game over
        - SNAKE_FONT_PATH, SNAKE_FONT_SIZE: readout font
        - SNAKE_SEED: fixed seed for food placement (optional)

        Raises:
            ConfigError: if a value cannot be parsed
        """
        seed = os.getenv("SNAKE_SEED")
        return cls(
            width=_env_int("SNAKE_WIDTH", constants.SCREEN_WIDTH),
            height=_env_int("SNAKE_HEIGHT", constants.SCREEN_HEIGHT),
            initial_length=_env_int("SNAKE_LENGTH", constants.INITIAL_LENGTH),
            food_count=_env_int("SNAKE_FOOD_COUNT", constants.FOOD_COUNT),
            segment_size=_env_float("SNAKE_SEGMENT_SIZE", constants.SEGMENT_SIZE),
            fps=_env_int("SNAKE_FPS", constants.FRAMERATE_LIMIT),
            game_over_wait=_env_float("SNAKE_GAME_OVER_WAIT", constants.GAME_OVER_WAIT_SECS),
            font_path=os.getenv("SNAKE_FONT_PATH") or constants.FONT_PATH,
            font_size=_env_int("SNAKE_FONT_SIZE", constants.FONT_SIZE),
            seed=_env_int("SNAKE_SEED", 0) if seed else None,
        )

    def override(self, **values) -> "GameConfig":
        """Return a copy with every non-None value replaced."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})

    def validate(self) -> "GameConfig":
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Screen size must be positive, got {self.width}x{self.height}")
        if self.segment_size <= 0:
            raise ConfigError(f"Segment size must be positive, got {self.segment_size}")
        if self.segment_size > min(self.width, self.height):
            raise ConfigError(
                f"Segment size {self.segment_size} does not fit a {self.width}x{self.height} board"
            )
        if self.initial_length < 0:
            raise ConfigError(f"Initial length cannot be negative, got {self.initial_length}")
        if self.food_count < 0:
            raise ConfigError(f"Food count cannot be negative, got {self.food_count}")
        if self.fps <= 0:
            raise ConfigError(f"Frame rate must be positive, got {self.fps}")
        if self.game_over_wait < 0:
            raise ConfigError(f"Game over wait cannot be negative, got {self.game_over_wait}")
        return self
