"""
Grid model for the maze engine.

A Maze owns a fixed rows x cols array of Rooms. It is deliberately primitive:
doors are added one side at a time and it is the generator's job to keep them
symmetric.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator

from maze_types import Coord, Direction, Room

logger = logging.getLogger(__name__)

RoomVisitor = Callable[[Room], None]


class Maze:
    """A rows x cols grid of rooms with at most one exit."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(
                f"Maze dimensions must be positive\n"
                f"  rows: {rows}\n"
                f"  cols: {cols}"
            )
        self._rows = rows
        self._cols = cols
        self._rooms: list[list[Room]] = [[Room() for _ in range(cols)] for _ in range(rows)]
        self._exit: Coord | None = None

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def exit(self) -> Coord | None:
        """The designated exit room, or None if not yet set."""
        return self._exit

    def in_bounds(self, coord: Coord) -> bool:
        return 0 <= coord.row < self._rows and 0 <= coord.col < self._cols

    def check_bounds(self, coord: Coord, what: str = "coordinate") -> None:
        """Raise ValueError if coord lies outside the maze."""
        if not self.in_bounds(coord):
            raise ValueError(
                f"{what.capitalize()} out of bounds: {coord}\n"
                f"  Maze size: {self._rows}x{self._cols}\n"
                f"  Valid rows: 0..{self._rows - 1}\n"
                f"  Valid cols: 0..{self._cols - 1}"
            )

    def room(self, coord: Coord) -> Room:
        self.check_bounds(coord)
        return self._rooms[coord.row][coord.col]

    def __getitem__(self, coord: Coord) -> Room:
        return self.room(coord)

    def neighbour(self, coord: Coord, direction: Direction) -> Coord | None:
        """The adjacent coordinate in direction, or None at the edge of the maze."""
        next_coord = coord.step(direction)
        return next_coord if self.in_bounds(next_coord) else None

    def set_exit(self, coord: Coord) -> None:
        self.check_bounds(coord, "exit")
        if self._exit is not None and self._exit != coord:
            raise ValueError(
                f"Maze already has an exit\n"
                f"  Existing exit: {self._exit}\n"
                f"  Requested exit: {coord}"
            )
        self._rooms[coord.row][coord.col].is_exit = True
        self._exit = coord

    def add_door(self, coord: Coord, direction: Direction) -> None:
        """Add a door on coord's side only. Adding an existing door is a no-op."""
        self.room(coord).doors.add(direction)

    def has_door(self, coord: Coord, direction: Direction) -> bool:
        return direction in self.room(coord).doors

    def coords(self) -> Iterator[Coord]:
        """Every coordinate in row-major order."""
        for r in range(self._rows):
            for c in range(self._cols):
                yield Coord(r, c)

    def for_each_room(self, visitor: RoomVisitor) -> None:
        """Apply visitor to every room in row-major order."""
        for row in self._rooms:
            for room in row:
                visitor(room)

    def clear_path_and_visited(self) -> None:
        """Reset all transient flags. Doors and the exit are left alone."""
        self.for_each_room(Room.clear_path_and_visited)

    def door_count(self) -> int:
        """Number of undirected door-edges, counting each door pair once."""
        count = 0
        for coord in self.coords():
            room = self._rooms[coord.row][coord.col]
            # Each edge is owned by its upper or left room
            count += Direction.DOWN in room.doors
            count += Direction.RIGHT in room.doors
        return count

    def __repr__(self) -> str:
        return f"Maze(rows={self._rows}, cols={self._cols}, exit={self._exit})"
