"""
pygame implementation of the display and input surface.

Draws circles, squares and text, translates pygame events into
`Closed` / `KeyPressed`, and paces frames with pygame's clock.
"""

import logging
import os
from typing import Any, Optional, Tuple

import pygame

from domain.constants import BACKGROUND_COLOR
from domain.errors import ResourceNotFoundError
from domain.shapes import Circle, Shape
from services.surface import Closed, Event, KeyPressed, Text

logger = logging.getLogger(__name__)


class PygameSurface:
    """A pygame window with a frame-rate cap."""

    def __init__(self, width: int, height: int, fps: int, title: str = "Snake"):
        pygame.init()
        self.size: Tuple[int, int] = (width, height)
        self.fps = fps
        self.screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption(title)
        self.frame_clock = pygame.time.Clock()
        self._started_at = pygame.time.get_ticks()
        logger.debug(f"Opened {width}x{height} window capped at {fps} FPS")

    def poll_event(self) -> Optional[Event]:
        """Return the next event we care about, None when the queue is empty."""
        while True:
            event = pygame.event.poll()
            if event.type == pygame.NOEVENT:
                return None
            if event.type == pygame.QUIT:
                return Closed()
            if event.type == pygame.KEYDOWN:
                return KeyPressed(pygame.key.name(event.key))

    def clear(self) -> None:
        self.screen.fill(BACKGROUND_COLOR)

    def draw(self, drawable: Any) -> None:
        if isinstance(drawable, Text):
            rendered = drawable.font.render(drawable.content.expandtabs(8), True, drawable.color)
            self.screen.blit(rendered, drawable.position)
        elif isinstance(drawable, Circle):
            center = (drawable.position.x + drawable.radius, drawable.position.y + drawable.radius)
            pygame.draw.circle(self.screen, drawable.color, center, drawable.radius)
        elif isinstance(drawable, Shape):
            x, y = drawable.position
            rect = pygame.Rect(int(x), int(y), int(drawable.size), int(drawable.size))
            pygame.draw.rect(self.screen, drawable.color, rect)
        else:
            raise TypeError(f"Cannot draw {drawable!r}")

    def display(self) -> None:
        pygame.display.flip()
        self.frame_clock.tick(self.fps)

    def elapsed_seconds(self) -> float:
        return (pygame.time.get_ticks() - self._started_at) / 1000.0

    def restart(self) -> None:
        self._started_at = pygame.time.get_ticks()

    def load_font(self, path: str, size: int) -> Any:
        if not os.path.exists(path):
            raise ResourceNotFoundError(path)
        try:
            return pygame.font.Font(path, size)
        except (OSError, pygame.error) as e:
            raise ResourceNotFoundError(path, str(e)) from e

    def close(self) -> None:
        pygame.quit()
