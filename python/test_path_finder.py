"""Tests for path finding and path marking."""

import random

import pytest

from maze import Maze
from maze_generator import generate
from maze_types import Algorithm, Coord, Direction
from path_finder import (
    find_path,
    find_path_iterative,
    find_path_recursive,
    mark_path,
    path_directions,
)

FINDERS = [find_path_iterative, find_path_recursive]


def corridor(cols: int) -> Maze:
    """A 1 x cols maze with every wall opened and the exit at the right end."""
    maze = Maze(1, cols)
    for col in range(cols - 1):
        maze.add_door(Coord(0, col), Direction.RIGHT)
        maze.add_door(Coord(0, col + 1), Direction.LEFT)
    maze.set_exit(Coord(0, cols - 1))
    return maze


def assert_valid_path(maze: Maze, path: list[Coord], start: Coord, exit_coord: Coord) -> None:
    """Path runs from start to exit through doors between adjacent rooms."""
    assert path[0] == start
    assert path[-1] == exit_coord
    for current, direction in zip(path, path_directions(path)):
        assert maze.has_door(current, direction)
    assert len(set(path)) == len(path)


class TestFindPathScenarios:
    """Concrete start/exit scenarios."""

    @pytest.mark.parametrize("finder", FINDERS)
    def test_single_room(self, finder) -> None:
        """In a 1x1 maze the path is just the one room."""
        maze = generate(1, 1, Coord(0, 0))
        assert finder(maze, Coord(0, 0), Coord(0, 0)) == [Coord(0, 0)]

    @pytest.mark.parametrize("finder", FINDERS)
    def test_corridor(self, finder) -> None:
        """A hand-built corridor has one obvious path."""
        maze = corridor(4)
        assert finder(maze, Coord(0, 0), Coord(0, 3)) == [Coord(0, c) for c in range(4)]

    @pytest.mark.parametrize("finder", FINDERS)
    def test_every_start_in_3x4(self, finder) -> None:
        """From every room of a 3x4 maze there's a path to the exit."""
        exit_coord = Coord(0, 0)
        maze = generate(3, 4, exit_coord)
        for start in maze.coords():
            path = finder(maze, start, exit_coord)
            assert path, f"no path from {start}"
            assert_valid_path(maze, path, start, exit_coord)

    @pytest.mark.parametrize("finder", FINDERS)
    def test_disconnected_returns_empty(self, finder) -> None:
        """A maze with no doors has no path between distinct rooms."""
        maze = Maze(2, 2)
        maze.set_exit(Coord(1, 1))
        assert finder(maze, Coord(0, 0), Coord(1, 1)) == []

    @pytest.mark.parametrize("finder", FINDERS)
    def test_does_not_touch_flags(self, finder) -> None:
        """Searching leaves room flags alone."""
        maze = generate(5, 5, Coord(4, 4), random.Random(11))
        finder(maze, Coord(0, 0), Coord(4, 4))
        for coord in maze.coords():
            room = maze[coord]
            assert not (room.visited or room.on_path or room.is_start)

    @pytest.mark.parametrize("finder", FINDERS)
    def test_start_out_of_bounds(self, finder) -> None:
        maze = generate(3, 4, Coord(0, 0))
        with pytest.raises(ValueError, match="Start out of bounds"):
            finder(maze, Coord(3, 0), Coord(0, 0))

    @pytest.mark.parametrize("finder", FINDERS)
    def test_exit_out_of_bounds(self, finder) -> None:
        maze = generate(3, 4, Coord(0, 0))
        with pytest.raises(ValueError, match="Exit out of bounds"):
            finder(maze, Coord(0, 0), Coord(0, 4))


class TestFindPathAgreement:
    """The two implementations must return identical paths."""

    @pytest.mark.parametrize(
        "rows,cols,exit_coord",
        [
            (3, 4, Coord(0, 0)),
            (3, 4, Coord(2, 3)),
            (3, 4, Coord(1, 2)),
            (10, 10, Coord(0, 9)),
            (10, 10, Coord(9, 0)),
            (10, 10, Coord(4, 7)),
        ],
    )
    def test_agree_for_all_starts(self, rows: int, cols: int, exit_coord: Coord) -> None:
        maze = generate(rows, cols, exit_coord, random.Random(rows * 100 + cols))
        for start in maze.coords():
            iterative = find_path_iterative(maze, start, exit_coord)
            recursive = find_path_recursive(maze, start, exit_coord)
            assert iterative == recursive
            assert_valid_path(maze, iterative, start, exit_coord)

    def test_opposite_corner(self) -> None:
        """The driver's default pairing: start mirrored from the exit."""
        rows, cols = 10, 10
        for exit_coord in [Coord(0, 0), Coord(1, 8), Coord(8, 1), Coord(9, 9)]:
            start = Coord(rows - 1 - exit_coord.row, cols - 1 - exit_coord.col)
            maze = generate(rows, cols, exit_coord)
            assert find_path_iterative(maze, start, exit_coord) == find_path_recursive(
                maze, start, exit_coord
            )


class TestFindPathDispatch:
    """Tests for find_path's algorithm selection."""

    def test_default_is_iterative(self) -> None:
        maze = corridor(3)
        assert find_path(maze, Coord(0, 0), Coord(0, 2)) == [Coord(0, 0), Coord(0, 1), Coord(0, 2)]

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_each_algorithm(self, algorithm: Algorithm) -> None:
        maze = generate(4, 4, Coord(3, 3), random.Random(5))
        expected = find_path_iterative(maze, Coord(0, 0), Coord(3, 3))
        assert find_path(maze, Coord(0, 0), Coord(3, 3), algorithm) == expected

    def test_algorithm_from_name(self) -> None:
        assert Algorithm("recursive") is Algorithm.RECURSIVE
        with pytest.raises(ValueError):
            Algorithm("breadth-first")


class TestMarkPath:
    """Tests for mark_path."""

    def test_marks_start_and_path(self) -> None:
        maze = corridor(3)
        path = find_path(maze, Coord(0, 0), Coord(0, 2))
        mark_path(maze, path)

        assert maze[Coord(0, 0)].is_start
        assert not maze[Coord(0, 1)].is_start
        assert all(maze[c].on_path for c in path)

    def test_marks_nothing_else(self) -> None:
        maze = generate(4, 5, Coord(0, 0), random.Random(9))
        path = find_path(maze, Coord(3, 4), Coord(0, 0))
        mark_path(maze, path)
        on_path = {c for c in maze.coords() if maze[c].on_path}
        assert on_path == set(path)

    def test_single_room_path(self) -> None:
        """Start and exit can be the same room."""
        maze = generate(1, 1, Coord(0, 0))
        mark_path(maze, [Coord(0, 0)])
        room = maze[Coord(0, 0)]
        assert room.is_start and room.on_path and room.is_exit

    def test_rejects_path_not_ending_at_exit(self) -> None:
        maze = corridor(3)
        with pytest.raises(AssertionError, match="must end at the maze exit"):
            mark_path(maze, [Coord(0, 0), Coord(0, 1)])

    def test_rejects_empty_path(self) -> None:
        maze = corridor(3)
        with pytest.raises(AssertionError):
            mark_path(maze, [])

    def test_does_not_clear_previous_marks(self) -> None:
        """Marking twice accumulates; clearing is the caller's job."""
        maze = corridor(3)
        mark_path(maze, [Coord(0, 1), Coord(0, 2)])
        mark_path(maze, [Coord(0, 2)])
        assert maze[Coord(0, 1)].is_start
        assert maze[Coord(0, 2)].is_start


class TestPathDirections:
    """Tests for converting a coordinate path to doors taken."""

    def test_directions(self) -> None:
        path = [Coord(1, 1), Coord(0, 1), Coord(0, 2), Coord(1, 2), Coord(1, 1)]
        assert path_directions(path) == [
            Direction.UP,
            Direction.RIGHT,
            Direction.DOWN,
            Direction.LEFT,
        ]

    def test_short_paths(self) -> None:
        assert path_directions([]) == []
        assert path_directions([Coord(0, 0)]) == []

    def test_non_adjacent(self) -> None:
        with pytest.raises(ValueError, match="not adjacent"):
            path_directions([Coord(0, 0), Coord(1, 1)])
