"""
Shared type definitions for the maze engine.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Cardinal direction between adjacent rooms.

    Declaration order is the canonical exploration order: up, right, down, left.
    """

    UP = "up"  # Decreasing row
    RIGHT = "right"  # Increasing col
    DOWN = "down"  # Increasing row
    LEFT = "left"  # Decreasing col

    @property
    def delta(self) -> tuple[int, int]:
        """(row_delta, col_delta) for one step in this direction."""
        return _DELTAS[self]

    @property
    def reverse(self) -> Direction:
        """The direction pointing back the way we came."""
        return _REVERSES[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

_REVERSES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


def shuffled_directions(rng: random.Random) -> list[Direction]:
    """Return all four directions in a uniformly random order drawn from rng."""
    directions = list(Direction)
    rng.shuffle(directions)
    return directions


class Algorithm(Enum):
    """Path finding implementation selector."""

    ITERATIVE = "iterative"
    RECURSIVE = "recursive"


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True, order=True)
class Coord:
    """A room's (row, col) position. Ordered row-major."""

    row: int
    col: int

    def step(self, direction: Direction) -> Coord:
        """The coordinate one step away; may lie outside the maze."""
        dr, dc = direction.delta
        return Coord(self.row + dr, self.col + dc)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass
class Room:
    """A single cell of the maze.

    Doors are only ever changed while a maze is being generated. The remaining
    flags are scratch state: `visited` belongs to the generator, `on_path` and
    `is_start` to path marking.
    """

    doors: set[Direction] = field(default_factory=set)
    is_exit: bool = False
    visited: bool = False
    on_path: bool = False
    is_start: bool = False

    def clear_path_and_visited(self) -> None:
        self.visited = False
        self.on_path = False
        self.is_start = False


Path = list[Coord]
