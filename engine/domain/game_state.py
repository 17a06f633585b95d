"""
GameState entity - a snapshot of the game at a point in time.
"""

from enum import Enum
from typing import List, Tuple


class GameStatus(str, Enum):
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        status: running, paused or over
        elapsed_seconds: whole seconds shown on the readout
        snake_positions: list of (x, y) pixel positions, head first
        food_positions: list of (x, y) pixel positions of all food items
        width, height: board dimensions in pixels
        cell_size: segment size in pixels, the board is drawn in cells of this size
    """

    def __init__(
        self,
        status: GameStatus,
        elapsed_seconds: int,
        snake_positions: List[Tuple[float, float]],
        food_positions: List[Tuple[float, float]],
        width: int,
        height: int,
        cell_size: float
    ):
        self.status = status
        self.elapsed_seconds = elapsed_seconds
        self.snake_positions = snake_positions
        self.food_positions = food_positions
        self.width = width
        self.height = height
        self.cell_size = cell_size

    @property
    def length(self) -> int:
        """Number of body segments (the head is not counted)."""
        return max(len(self.snake_positions) - 1, 0)

    @property
    def paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    @property
    def alive(self) -> bool:
        return self.status != GameStatus.OVER

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        F = food
        S = snake body
        H = snake head
        Positions are snapped down to the cell they start in; parts outside
        the board are left out.
        """
        columns = int(self.width // self.cell_size)
        rows = int(self.height // self.cell_size)
        board = [['.' for _ in range(columns)] for _ in range(rows)]

        def place(position, mark):
            cx = int(position[0] // self.cell_size)
            cy = int(position[1] // self.cell_size)
            if 0 <= cx < columns and 0 <= cy < rows:
                board[cy][cx] = mark

        for position in self.food_positions:
            place(position, 'F')

        # Body first so the head wins when they share a cell
        for position in reversed(self.snake_positions[1:]):
            place(position, 'S')
        if self.snake_positions:
            place(self.snake_positions[0], 'H')

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState status={self.status.value}, length={self.length}, "
            f"elapsed={self.elapsed_seconds}s, foods={len(self.food_positions)}>"
        )
