"""
ASCII rendering for mazes.

Each row of rooms is drawn as a wall line followed by a room line:

    +---+---+---+
    | X   *   S |
    +   +---+---+
    |           |
    +---+---+---+

A gap in a wall line is an UP door; a gap before a room is a LEFT door.
Room content is X for the exit, S for the path start, * for any other room
on the path and blank otherwise. The plain output is deterministic.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from maze import Maze
from maze_types import Coord, Direction, Room

logger = logging.getLogger(__name__)

CORNER = "+"
HORIZONTAL_WALL = "---"
VERTICAL_WALL = "|"
OPEN = " "


def room_glyph(room: Room) -> str:
    """Single character shown in the middle of a room."""
    if room.is_exit:
        return "X"
    if room.is_start:
        return "S"
    if room.on_path:
        return "*"
    return " "


def _colour_fn(glyph: str) -> Callable[[str], str]:
    match glyph:
        case "X":
            return chalk.red
        case "S":
            return chalk.green
        case "*":
            return chalk.yellow
        case _:
            return lambda s: s


def _wall_line(maze: Maze, row: int) -> str:
    parts: list[str] = []
    for col in range(maze.cols):
        parts.append(CORNER)
        if maze.has_door(Coord(row, col), Direction.UP):
            parts.append(OPEN * len(HORIZONTAL_WALL))
        else:
            parts.append(HORIZONTAL_WALL)
    parts.append(CORNER)
    return "".join(parts)


def _room_line(maze: Maze, row: int, colour: bool) -> str:
    parts: list[str] = []
    for col in range(maze.cols):
        coord = Coord(row, col)
        parts.append(OPEN if maze.has_door(coord, Direction.LEFT) else VERTICAL_WALL)
        glyph = room_glyph(maze[coord])
        content = f" {glyph} "
        if colour:
            content = _colour_fn(glyph)(content)
        parts.append(content)

    last = Coord(row, maze.cols - 1)
    parts.append(OPEN if maze.has_door(last, Direction.RIGHT) else VERTICAL_WALL)
    return "".join(parts)


def render(maze: Maze, colour: bool = False) -> str:
    """
    Render a maze as text.

    Args:
        maze: The maze to draw; only doors and display flags are read
        colour: Colour the exit, start and path glyphs with terminal codes

    Returns:
        Multi-line string without a trailing newline
    """
    lines: list[str] = []
    for row in range(maze.rows):
        lines.append(_wall_line(maze, row))
        lines.append(_room_line(maze, row, colour))

    # Bottom border
    lines.append((CORNER + HORIZONTAL_WALL) * maze.cols + CORNER)

    logger.debug("render: %dx%d maze, %d lines", maze.rows, maze.cols, len(lines))
    return "\n".join(lines)
