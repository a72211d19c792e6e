"""
Randomized depth-first maze generation.

Both generators carve a spanning tree outward from the exit room: every room
is reachable from every other by exactly one path. `generate` recurses once
per room and is bounded by the interpreter's recursion limit;
`generate_iterative` keeps its frames on an explicit stack. Given identically
seeded random sources they carve identical mazes.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator

from maze import Maze
from maze_types import Coord, Direction, shuffled_directions

logger = logging.getLogger(__name__)


def _new_maze(rows: int, cols: int, exit_coord: Coord) -> Maze:
    maze = Maze(rows, cols)
    maze.set_exit(exit_coord)
    return maze


def _carve(maze: Maze, current: Coord, direction: Direction) -> Coord | None:
    """Open a door pair from current toward direction if the neighbour is unvisited.

    Returns the neighbour to explore next, or None if it can't be entered.
    """
    next_coord = maze.neighbour(current, direction)
    if next_coord is None or maze[next_coord].visited:
        return None

    maze.add_door(current, direction)
    maze.add_door(next_coord, direction.reverse)
    return next_coord


def generate(
    rows: int,
    cols: int,
    exit_coord: Coord,
    rng: random.Random | None = None,
) -> Maze:
    """
    Generate a rows x cols maze using recursive exploration and backtracking.

    Args:
        rows: Number of rows in the maze
        cols: Number of columns in the maze
        exit_coord: The exit room; carving starts here
        rng: Random source used to shuffle directions. A fresh unseeded
             random.Random is used when omitted.

    Returns:
        A maze whose doors form a spanning tree, with the exit set and all
        transient flags cleared
    """
    if rng is None:
        rng = random.Random()
    maze = _new_maze(rows, cols, exit_coord)
    logger.debug("generate: %dx%d, exit=%s", rows, cols, exit_coord)

    def carve_from(current: Coord) -> None:
        maze[current].visited = True
        for direction in shuffled_directions(rng):
            next_coord = _carve(maze, current, direction)
            if next_coord is not None:
                carve_from(next_coord)

    carve_from(exit_coord)
    maze.clear_path_and_visited()
    return maze


def generate_iterative(
    rows: int,
    cols: int,
    exit_coord: Coord,
    rng: random.Random | None = None,
) -> Maze:
    """
    Generate a maze like `generate`, using an explicit stack instead of recursion.

    Each stack frame holds a room and the directions it has yet to try. The
    directions are shuffled when a room is first entered, so the random source
    is consumed in the same order as the recursive version.
    """
    if rng is None:
        rng = random.Random()
    maze = _new_maze(rows, cols, exit_coord)
    logger.debug("generate_iterative: %dx%d, exit=%s", rows, cols, exit_coord)

    def enter(coord: Coord) -> tuple[Coord, Iterator[Direction]]:
        maze[coord].visited = True
        return (coord, iter(shuffled_directions(rng)))

    stack = [enter(exit_coord)]
    max_depth = 1
    while stack:
        current, remaining = stack[-1]
        for direction in remaining:
            next_coord = _carve(maze, current, direction)
            if next_coord is not None:
                stack.append(enter(next_coord))
                max_depth = max(max_depth, len(stack))
                break
        else:
            # All four directions tried, backtrack
            stack.pop()

    logger.debug("generate_iterative: max stack depth %d", max_depth)
    maze.clear_path_and_visited()
    return maze
