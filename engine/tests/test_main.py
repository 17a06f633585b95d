"""
Tests for main.py - the per-frame game loop.

A FakeSurface stands in for the pygame window; events are scripted per tick.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig  # noqa: E402
from domain.constants import PAUSED_MESSAGE, Vector2  # noqa: E402
from domain.errors import ResourceNotFoundError  # noqa: E402
from domain.game_state import GameStatus  # noqa: E402
from domain.shapes import Circle, Square  # noqa: E402
from fakes import FakeSurface, SequenceRandom  # noqa: E402
from main import SnakeGame, run_game  # noqa: E402
from services.surface import Closed, KeyPressed, Text  # noqa: E402

SPACE = KeyPressed("space")
CONFIG = GameConfig(initial_length=3, food_count=2, game_over_wait=3)


def make_game(ticks=None, config=CONFIG, **surface_kwargs):
    surface = FakeSurface(ticks=ticks, **surface_kwargs)
    # Food in the top-left and bottom-right corners, away from the snake
    game = SnakeGame(surface, config, rng=SequenceRandom([0.0, 0.0, 0.9, 0.9]), sleep=surface.advance)
    return game, surface


class TestSnakeGameSetup:
    def test_starts_paused(self):
        game, _ = make_game()
        assert game.status == GameStatus.PAUSED
        assert game.paused

    def test_builds_snake_and_food_from_config(self):
        game, _ = make_game()
        assert game.snake.length() == 3
        assert game.snake.head.position == Vector2(400, 150)
        assert game.foods.positions() == [(0, 0), (720, 540)]

    def test_readout_position(self):
        game, _ = make_game()
        assert game.text.position == (480, 6)
        assert game.text.font == ("font", "Ubuntu-R.ttf", 16)

    def test_missing_font_is_fatal(self):
        surface = FakeSurface(missing_fonts={"Ubuntu-R.ttf"})
        with pytest.raises(ResourceNotFoundError) as exc_info:
            SnakeGame(surface, CONFIG, rng=SequenceRandom([0.0, 0.0, 0.9, 0.9]))
        assert exc_info.value.path == "Ubuntu-R.ttf"


class TestSnakeGameTick:
    def test_paused_tick_does_not_move(self):
        game, surface = make_game(ticks=[[]])
        assert game.tick() is True
        assert game.snake.head.position == Vector2(400, 150)
        assert game.text.content == PAUSED_MESSAGE
        assert surface.frames == 1

    def test_unpause_steps_in_the_same_tick(self):
        game, _ = make_game(ticks=[[SPACE]])
        game.tick()
        assert game.status == GameStatus.RUNNING
        assert game.snake.head.position == Vector2(400, 130)
        assert game.text.content == "Length: 3\tTime (sec): 0"

    def test_pause_twice_changes_nothing(self):
        game, _ = make_game(ticks=[[SPACE, SPACE]])
        snake_before = game.snake.positions()
        food_before = game.foods.positions()

        game.tick()

        assert game.status == GameStatus.PAUSED
        assert game.snake.positions() == snake_before
        assert game.foods.positions() == food_before

    def test_direction_keys_turn_the_snake(self):
        game, _ = make_game(ticks=[[SPACE, KeyPressed("d")], [KeyPressed("s")]])
        game.tick()
        assert game.snake.head.position == Vector2(420, 150)
        game.tick()
        assert game.snake.head.position == Vector2(420, 170)

    def test_unbound_keys_are_ignored(self):
        game, _ = make_game(ticks=[[SPACE, KeyPressed("d"), KeyPressed("x")]])
        game.tick()
        assert game.snake.head.position == Vector2(420, 150)

    def test_turn_while_paused_applies_after_unpause(self):
        game, _ = make_game(ticks=[[KeyPressed("a")], [SPACE]])
        game.tick()
        game.tick()
        assert game.snake.head.position == Vector2(380, 150)

    def test_closed_stops_the_loop(self):
        game, surface = make_game(ticks=[[Closed()]])
        assert game.tick() is False
        assert surface.frames == 0

    def test_eating_grows_the_snake(self):
        game, _ = make_game(ticks=[[SPACE]])
        game.foods.foods[0].position = Vector2(400, 130)

        game.tick()

        assert game.snake.length() == 4
        assert len(game.snake.history) == 5
        assert game.snake.body[-1].position == Vector2(400, 210)
        assert game.foods.foods[0].position != Vector2(400, 130)

    def test_food_is_eaten_while_paused(self):
        game, _ = make_game(ticks=[[]])
        game.foods.foods[1].position = Vector2(400, 150)

        game.tick()

        assert game.paused
        assert game.snake.length() == 4

    def test_frame_draws_text_snake_and_food(self):
        game, surface = make_game(ticks=[[]])
        game.tick()

        assert isinstance(surface.drawn[0], Text)
        assert sum(isinstance(d, Circle) for d in surface.drawn) == 1
        # 3 body segments + 2 food items
        assert sum(isinstance(d, Square) for d in surface.drawn) == 5
        assert surface.clears == 1

    def test_death_tick_is_not_rendered(self):
        game, surface = make_game(ticks=[[SPACE]])
        game.snake.head.position = Vector2(400, 10)

        game.tick()

        assert game.status == GameStatus.OVER
        assert surface.frames == 0


class TestSnakeGameRun:
    def test_runs_until_the_wall_then_waits(self):
        game, surface = make_game(ticks=[[SPACE]])

        assert game.run() == 0

        assert game.status == GameStatus.OVER
        # 150px above the head at 20px per step: the 8th step leaves the board
        assert game.snake.head.position == Vector2(400, -10)
        assert surface.frames == 7
        assert surface.time > CONFIG.game_over_wait

    def test_close_exits_immediately(self):
        game, surface = make_game(ticks=[[SPACE], [Closed()]])

        assert game.run() == 0

        assert game.status == GameStatus.RUNNING
        assert game.snake.head.position == Vector2(400, 130)
        assert surface.time < CONFIG.game_over_wait

    def test_toggle_pause_ignored_after_game_over(self):
        game, _ = make_game()
        game.status = GameStatus.OVER
        game.toggle_pause()
        assert game.status == GameStatus.OVER

    def test_current_state_snapshot(self):
        game, _ = make_game(ticks=[[SPACE]])
        game.tick()

        state = game.get_current_state()

        assert state.status == GameStatus.RUNNING
        assert state.length == 3
        assert state.snake_positions[0] == (400, 130)
        assert state.food_positions == [(0, 0), (720, 540)]
        assert state.cell_size == 20.0


class TestRunGame:
    def test_closes_surface_after_game(self):
        surfaces = []

        def factory(config):
            surface = FakeSurface(size=config.screen_size, ticks=[[Closed()]])
            surfaces.append(surface)
            return surface

        assert run_game(CONFIG, surface_factory=factory) == 0
        assert surfaces[0].closed

    def test_missing_font_propagates_and_closes_surface(self):
        surfaces = []

        def factory(config):
            surface = FakeSurface(size=config.screen_size, missing_fonts={config.font_path})
            surfaces.append(surface)
            return surface

        with pytest.raises(ResourceNotFoundError):
            run_game(CONFIG, surface_factory=factory)
        assert surfaces[0].closed
