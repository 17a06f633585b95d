import logging
import random
import time
from typing import Callable, Optional

from config import GameConfig
from domain.constants import PAUSE_KEY, PAUSED_MESSAGE, direction_for_key
from domain.food import FoodCollection, RandomSource
from domain.game_state import GameState, GameStatus
from domain.snake import Snake
from services.surface import Closed, KeyPressed, Surface, Text

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Snake and food
      - Pause state
      - Readout text (length and elapsed time)
      - The per-frame tick: input, step, food, terminal check, render
    """
    def __init__(
        self,
        surface: Surface,
        config: GameConfig,
        rng: Optional[RandomSource] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.surface = surface
        self.config = config
        self.sleep = sleep
        screen = surface.size
        self.snake = Snake(screen, config.segment_size, config.initial_length)
        if rng is None:
            rng = random.Random(config.seed if config.seed is not None else time.time_ns())
        self.foods = FoodCollection(screen, config.segment_size, config.food_count, rng)
        self.status = GameStatus.PAUSED

        # Raises ResourceNotFoundError, the caller decides how to exit
        font = surface.load_font(config.font_path, config.font_size)
        width, height = screen
        self.text = Text(font, (width * 0.60, height * 0.01))

    @property
    def paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    def toggle_pause(self):
        if self.status == GameStatus.OVER:
            return
        self.status = GameStatus.RUNNING if self.paused else GameStatus.PAUSED
        logger.debug(f"Game {self.status.value}")

    def elapsed_seconds(self) -> int:
        return int(self.surface.elapsed_seconds())

    def handle_events(self) -> bool:
        """Drain the input queue. Returns False if the window was closed."""
        while True:
            event = self.surface.poll_event()
            if event is None:
                return True
            if isinstance(event, Closed):
                return False
            if isinstance(event, KeyPressed):
                if event.key == PAUSE_KEY:
                    self.toggle_pause()
                else:
                    self.snake.turn(direction_for_key(event.key))

    def update(self):
        if self.paused:
            self.text.set_string(PAUSED_MESSAGE)
        else:
            self.text.set_string(
                f"Length: {self.snake.length()}\tTime (sec): {self.elapsed_seconds()}"
            )
            self.snake.step()

        if self.foods.is_eaten(self.snake):
            self.snake.grow()
            logger.info(f"Food eaten, length is now {self.snake.length()}")

        if not self.snake.is_alive(self.surface.size):
            self.status = GameStatus.OVER

    def draw(self):
        self.surface.clear()
        self.surface.draw(self.text)
        self.snake.draw(self.surface)
        self.foods.draw(self.surface)
        self.surface.display()

    def tick(self) -> bool:
        """
        Execute one frame:
          1) Handle input (close, pause, turns)
          2) Step the snake unless paused
          3) Grow the snake if it reached food
          4) Check walls and self-collision
          5) Render, unless the game just ended
        Returns False if the window was closed.
        """
        if not self.handle_events():
            return False
        self.update()
        if self.status != GameStatus.OVER:
            self.draw()
        return True

    def wait_out(self):
        """Keep the last frame on screen for the configured wait."""
        self.surface.restart()
        while self.surface.elapsed_seconds() <= self.config.game_over_wait:
            self.sleep(0.05)

    def run(self) -> int:
        logger.info(
            f"Starting game on a {self.surface.size[0]}x{self.surface.size[1]} board "
            f"with length {self.snake.length()} and {len(self.foods)} food items"
        )
        while self.status != GameStatus.OVER:
            if not self.tick():
                logger.info("Window closed")
                return 0

        state = self.get_current_state()
        logger.info(f"Game Over: length {state.length} after {state.elapsed_seconds}s")
        logger.debug("Final board:\n" + state.print_board())
        self.wait_out()
        return 0

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        width, height = self.surface.size
        return GameState(
            status=self.status,
            elapsed_seconds=self.elapsed_seconds(),
            snake_positions=self.snake.positions(),
            food_positions=self.foods.positions(),
            width=width,
            height=height,
            cell_size=self.snake.size
        )


def run_game(config: GameConfig, surface_factory: Optional[Callable[[GameConfig], Surface]] = None) -> int:
    """
    Open a surface, play one game on it and close it again.

    Raises:
        StartupError: if the game could not be constructed (e.g. missing font)
    """
    if surface_factory is None:
        from services.pygame_surface import PygameSurface

        def surface_factory(cfg):
            return PygameSurface(cfg.width, cfg.height, cfg.fps)

    surface = surface_factory(config)
    try:
        game = SnakeGame(surface, config)
        return game.run()
    finally:
        surface.close()
