"""
Depth-first path finding from a start room to the exit.

Two interchangeable implementations are provided. On a maze produced by the
generator the path between two rooms is unique, so both always return the
same path. Neither touches the maze's room flags; visited rooms are tracked
in a local set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from maze import Maze
from maze_types import Algorithm, Coord, Direction, Path

logger = logging.getLogger(__name__)


def _doored_neighbours(maze: Maze, coord: Coord) -> list[Coord]:
    """Neighbours reachable through a door, in canonical direction order."""
    neighbours = []
    for direction in Direction:
        if not maze.has_door(coord, direction):
            continue
        next_coord = maze.neighbour(coord, direction)
        if next_coord is not None:
            neighbours.append(next_coord)
    return neighbours


@dataclass
class _Frontier:
    """Stack entry: rooms still to explore and the path to their predecessor."""

    path: Path
    coords: list[Coord] = field(default_factory=list)


def find_path_iterative(maze: Maze, start: Coord, exit_coord: Coord) -> Path:
    """
    Find a path from start to exit_coord using DFS with an explicit stack.

    Args:
        maze: The maze to explore
        start: The start room
        exit_coord: The room to reach

    Returns:
        Coordinates from start to exit_coord inclusive, or [] if unreachable
    """
    maze.check_bounds(start, "start")
    maze.check_bounds(exit_coord, "exit")

    visited: set[Coord] = set()
    stack = [_Frontier([], [start])]
    while stack:
        entry = stack.pop()
        for coord in entry.coords:
            if coord in visited:
                continue
            visited.add(coord)

            if coord == exit_coord:
                logger.debug("find_path_iterative: found exit after visiting %d rooms", len(visited))
                return entry.path + [coord]

            stack.append(_Frontier(entry.path + [coord], _doored_neighbours(maze, coord)))

    logger.info("find_path_iterative: no path from %s to %s", start, exit_coord)
    return []


def find_path_recursive(maze: Maze, start: Coord, exit_coord: Coord) -> Path:
    """
    Find a path from start to exit_coord using recursive DFS.

    Recursion depth grows with path length, so very large mazes can exceed
    the interpreter's recursion limit; use find_path_iterative for those.
    """
    maze.check_bounds(start, "start")
    maze.check_bounds(exit_coord, "exit")

    visited: set[Coord] = set()

    def search(current: Coord) -> Path:
        if current in visited:
            return []  # Backtrack
        visited.add(current)

        if current == exit_coord:
            return [current]

        for next_coord in _doored_neighbours(maze, current):
            path = search(next_coord)
            if path:
                path.insert(0, current)
                return path

        return []

    path = search(start)
    if not path:
        logger.info("find_path_recursive: no path from %s to %s", start, exit_coord)
    return path


def find_path(
    maze: Maze,
    start: Coord,
    exit_coord: Coord,
    algorithm: Algorithm = Algorithm.ITERATIVE,
) -> Path:
    """Find a path from start to exit_coord with the selected algorithm."""
    match algorithm:
        case Algorithm.ITERATIVE:
            return find_path_iterative(maze, start, exit_coord)
        case Algorithm.RECURSIVE:
            return find_path_recursive(maze, start, exit_coord)
    assert False, f"unreachable: unknown algorithm {algorithm}"


def mark_path(maze: Maze, path: Path) -> None:
    """
    Paint a path onto the maze for rendering.

    Sets is_start on the first room and on_path on every room. Other flags
    are left as they are; call maze.clear_path_and_visited() first when
    reusing a maze.

    Raises:
        AssertionError: If the path is empty or does not end at the maze's exit
    """
    if not path or path[-1] != maze.exit:
        raise AssertionError(
            f"Path must end at the maze exit\n"
            f"  Exit: {maze.exit}\n"
            f"  Path end: {path[-1] if path else 'empty path'}"
        )

    maze[path[0]].is_start = True
    for coord in path:
        maze[coord].on_path = True


def path_directions(path: Path) -> list[Direction]:
    """The direction taken at each step along a path of adjacent rooms."""
    by_delta = {direction.delta: direction for direction in Direction}
    directions: list[Direction] = []
    for current, next_coord in zip(path, path[1:]):
        delta = (next_coord.row - current.row, next_coord.col - current.col)
        if delta not in by_delta:
            raise ValueError(f"Rooms {current} and {next_coord} are not adjacent")
        directions.append(by_delta[delta])
    return directions
