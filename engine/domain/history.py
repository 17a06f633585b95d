"""
Direction history used to relay the head's movement down the body.
"""

from collections import deque
from typing import Iterable, List

from .constants import Vector2


class DirectionHistory:
    """
    Per-tick record of movement directions, indexed from the most recent end.

    The entry `k` steps back from the most recent one is the direction the
    segment at distance `k` from the head moves by on the next step. The
    newest entry sits at the right end of the deque.

    Attributes:
        released: the last entry dropped from the oldest end, i.e. the
            direction the tail moved by on the previous step
    """

    def __init__(self, directions: Iterable[Vector2], released: Vector2):
        self._directions = deque(directions)
        if not self._directions:
            raise ValueError("DirectionHistory needs at least one direction.")
        self.released = released

    def __len__(self) -> int:
        return len(self._directions)

    @property
    def latest(self) -> Vector2:
        """The direction the head moves by on the next step."""
        return self._directions[-1]

    def steps_back(self, k: int) -> Vector2:
        """Return the direction `k` steps before the most recent one."""
        if not 0 <= k < len(self._directions):
            raise IndexError(f"No direction {k} steps back in a history of {len(self._directions)}.")
        return self._directions[-1 - k]

    def override_latest(self, direction: Vector2) -> None:
        self._directions[-1] = direction

    def advance(self, keep: int) -> None:
        """Repeat the latest direction for the next tick and keep `keep` entries."""
        self._directions.append(self._directions[-1])
        while len(self._directions) > keep:
            self.released = self._directions.popleft()

    def extend_tail(self) -> None:
        """Re-admit the released direction at the oldest end for a new tail."""
        # Only one released entry is kept; a second extend_tail before the
        # next advance reuses it, so the tail extends in a straight line.
        self._directions.appendleft(self.released)

    def as_list(self) -> List[Vector2]:
        """Oldest first."""
        return list(self._directions)
