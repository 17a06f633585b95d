"""
Drawable shapes shared by the snake and the food.

Positions are the top-left corner of the shape's bounding box, in pixels.
"""

from dataclasses import dataclass
from typing import Tuple

from .constants import Vector2

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def intersects(self, other: "Bounds") -> bool:
        """
        True when the two boxes overlap with a non-empty area.

        Boxes that only share an edge or a corner do not intersect, so
        neighbouring cells on the lattice never count as a collision.
        """
        return (
            max(self.left, other.left) < min(self.right, other.right)
            and max(self.top, other.top) < min(self.bottom, other.bottom)
        )


class Shape:
    """A positioned shape with a square bounding box of edge `size`."""

    def __init__(self, size: float, color: Color, position: Vector2 = Vector2()):
        self.size = size
        self.color = color
        self.position = position

    def move(self, offset: Vector2) -> None:
        self.position = self.position + offset

    def bounds(self) -> Bounds:
        return Bounds(self.position.x, self.position.y, self.size, self.size)

    def __repr__(self):
        return f"<{self.__class__.__name__} at ({self.position.x:g}, {self.position.y:g}) size={self.size:g}>"


class Square(Shape):
    """Body segments and food items."""


class Circle(Shape):
    """The snake's head."""

    @property
    def radius(self) -> float:
        return self.size / 2.0
