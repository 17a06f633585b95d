"""
Display and input surface used by the game loop.

The loop only talks to this interface; `pygame_surface.PygameSurface` is the
real window, tests use an in-memory fake.
"""

from dataclasses import dataclass
from typing import Any, Optional, Protocol, Tuple, Union

from domain.constants import TEXT_COLOR


@dataclass(frozen=True)
class Closed:
    """The window was closed."""


@dataclass(frozen=True)
class KeyPressed:
    """A key went down; `key` is its lowercase name, e.g. "w" or "space"."""

    key: str


Event = Union[Closed, KeyPressed]


class Text:
    """A line of text drawn with a font loaded by the surface."""

    def __init__(
        self,
        font: Any,
        position: Tuple[float, float],
        color: Tuple[int, int, int] = TEXT_COLOR,
        content: str = ""
    ):
        self.font = font
        self.position = position
        self.color = color
        self.content = content

    def set_string(self, content: str) -> None:
        self.content = content

    def __repr__(self):
        return f"<Text {self.content!r}>"


class Surface(Protocol):
    """Window, input queue and frame clock."""

    size: Tuple[int, int]

    def poll_event(self) -> Optional[Event]: ...

    def clear(self) -> None: ...

    def draw(self, drawable: Any) -> None: ...

    def display(self) -> None:
        """Show the frame and wait out the rest of the frame budget."""
        ...

    def elapsed_seconds(self) -> float: ...

    def restart(self) -> None: ...

    def load_font(self, path: str, size: int) -> Any:
        """Raises ResourceNotFoundError if the font cannot be loaded."""
        ...

    def close(self) -> None: ...
