"""
Food spawner: a fixed number of food items on a lattice of segment-sized cells.
"""

import logging
import random
import time
from typing import Iterator, List, Optional, Protocol, Tuple

from .constants import FOOD_COLOR, FOOD_SEPARATION, MAX_PLACEMENT_ATTEMPTS, Vector2
from .shapes import Square
from .snake import Snake

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that returns uniform floats in [0, 1), e.g. random.Random."""

    def random(self) -> float: ...


class FoodCollection:
    """
    Manages the food items on the board.

    Items are placed by rejection sampling on the lattice so that no two items
    are within FOOD_SEPARATION segment sizes of each other.
    """

    def __init__(
        self,
        screen_size: Tuple[int, int],
        size: float,
        count: int,
        rng: Optional[RandomSource] = None,
        max_attempts: int = MAX_PLACEMENT_ATTEMPTS
    ):
        width, height = screen_size
        self.rng = rng if rng is not None else random.Random(time.time_ns())
        self.max_attempts = max_attempts
        self.lattice = (int(width // size), int(height // size))
        self.foods: List[Square] = []
        for _ in range(count):
            item = Square(size, FOOD_COLOR)
            self.foods.append(item)
            self.place_one(item, size)

    def __len__(self) -> int:
        return len(self.foods)

    def __iter__(self) -> Iterator[Square]:
        return iter(self.foods)

    def _random_cell(self, size: float) -> Vector2:
        columns, rows = self.lattice
        x = size * int(self.rng.random() * columns)
        y = size * int(self.rng.random() * rows)
        return Vector2(x, y)

    def _nearest_distance(self, item: Square, candidate: Vector2) -> float:
        """Distance from `candidate` to the closest item other than `item`."""
        distances = [
            other.position.distance_to(candidate)
            for other in self.foods
            if other is not item
        ]
        return min(distances, default=float("inf"))

    def place_one(self, item: Square, size: float) -> None:
        """
        Move `item` to a random lattice cell far enough from every other item.

        If no acceptable cell turns up within `max_attempts` samples, the
        sampled cell farthest from its nearest neighbour is used instead.
        """
        threshold = size * FOOD_SEPARATION
        best, best_distance = None, -1.0
        for _ in range(self.max_attempts):
            candidate = self._random_cell(size)
            distance = self._nearest_distance(item, candidate)
            if distance > threshold:
                item.position = candidate
                return
            if distance > best_distance:
                best, best_distance = candidate, distance

        logger.warning(
            f"No cell farther than {threshold:g}px from other food after "
            f"{self.max_attempts} attempts; using one {best_distance:g}px away"
        )
        item.position = best

    def is_eaten(self, snake: Snake) -> bool:
        """Respawn the first item under the snake's head and report it."""
        for item in self.foods:
            if snake.is_collided_with(item):
                self.place_one(item, snake.size)
                return True
        return False

    def positions(self) -> List[Tuple[float, float]]:
        return [tuple(item.position) for item in self.foods]

    def draw(self, sink) -> None:
        for item in self.foods:
            sink.draw(item)
