"""
Snake entity for the game engine.
"""

from typing import List, Tuple

from .constants import BODY_COLOR, HEAD_COLOR, UP, VALID_MOVES, Vector2
from .history import DirectionHistory
from .shapes import Circle, Shape, Square


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        head: circle leading the snake
        body: list of square segments, body[0] right behind the head, tail last
        history: directions relayed from the head down the body, one entry
            per part (head included)
    """

    def __init__(self, screen_size: Tuple[int, int], size: float, length: int):
        width, height = screen_size
        self.head = Circle(size, HEAD_COLOR, Vector2(width / 2.0, height / 4.0))
        self.body: List[Square] = []
        position = self.head.position
        for _ in range(length):
            position = position + Vector2(0, size)
            self.body.append(Square(size, BODY_COLOR, position))
        self.history = DirectionHistory([UP] * (length + 1), released=UP)

    @property
    def size(self) -> float:
        """Segment edge length, equal to the head's diameter."""
        return self.head.radius * 2.0

    def length(self) -> int:
        return len(self.body)

    def turn(self, direction: Vector2) -> None:
        """Set the direction of the next step; anything but a unit move is ignored."""
        if direction not in VALID_MOVES:
            return
        self.history.override_latest(direction)

    def step(self) -> None:
        """Move every part one segment; each part follows the one ahead of it."""
        self.head.move(self.history.latest * self.size)
        for distance, part in enumerate(self.body, start=1):
            part.move(self.history.steps_back(distance) * self.size)
        self.history.advance(len(self.body) + 1)

    def grow(self) -> None:
        """Append a segment where the tail was before its last move."""
        tail = self.body[-1] if self.body else self.head
        position = tail.position - self.history.released * self.size
        self.body.append(Square(self.size, BODY_COLOR, position))
        self.history.extend_tail()

    def is_collided_with(self, shape: Shape) -> bool:
        return self.head.bounds().intersects(shape.bounds())

    def is_alive(self, screen_size: Tuple[int, int]) -> bool:
        # The first segment always touches the head, so it is skipped.
        for part in self.body[1:]:
            if self.is_collided_with(part):
                return False
        width, height = screen_size
        x, y = self.head.position
        return 0 <= x <= width and 0 <= y <= height

    def positions(self) -> List[Tuple[float, float]]:
        """Head first, then body segments down to the tail."""
        return [tuple(self.head.position)] + [tuple(part.position) for part in self.body]

    def draw(self, sink) -> None:
        for part in self.body:
            sink.draw(part)
        sink.draw(self.head)
