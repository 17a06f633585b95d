"""
Game constants for the snake arcade.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """An immutable (x, y) pair used for both positions and directions."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return self.x != 0 or self.y != 0

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: "Vector2") -> float:
        return (self - other).length()


# Movement directions (screen coordinates, y grows downwards)
UP = Vector2(0, -1)
DOWN = Vector2(0, 1)
LEFT = Vector2(-1, 0)
RIGHT = Vector2(1, 0)
ZERO = Vector2(0, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Key names as reported by the display surface
PAUSE_KEY = "space"
KEY_BINDINGS = {
    "w": UP,
    "a": LEFT,
    "s": DOWN,
    "d": RIGHT,
}

# Colours (RGB)
HEAD_COLOR = (255, 255, 0)
BODY_COLOR = (0, 255, 0)
FOOD_COLOR = (255, 0, 0)
TEXT_COLOR = (255, 255, 255)
BACKGROUND_COLOR = (0, 0, 0)

# Game settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
INITIAL_LENGTH = 15
FOOD_COUNT = 5
SEGMENT_SIZE = 20.0
FRAMERATE_LIMIT = 10
GAME_OVER_WAIT_SECS = 3
FONT_PATH = "Ubuntu-R.ttf"
FONT_SIZE = 16

# Food items never spawn within this many segment sizes of each other
FOOD_SEPARATION = 4.0
MAX_PLACEMENT_ATTEMPTS = 10_000

PAUSED_MESSAGE = "Press [Space] to unpause Snake."


def direction_for_key(key: str) -> Vector2:
    """Map a key name to a direction, ZERO for unbound keys."""
    return KEY_BINDINGS.get(key, ZERO)
