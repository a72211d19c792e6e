#!/usr/bin/env python3
"""
Maze demonstration driver.

Generates a maze with the given exit, finds and marks the path from the given
start, and prints the result.

Usage: demo.py EXIT_ROW EXIT_COLUMN START_ROW START_COLUMN [ALGORITHM]
"""

from __future__ import annotations

import logging
import random
import sys

import config
from ascii_render import render
from maze_generator import generate
from maze_types import Algorithm, Coord
from path_finder import find_path, mark_path, path_directions

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: {prog} EXIT_ROW EXIT_COLUMN START_ROW START_COLUMN [ALGORITHM]\n"
    "    EXIT_ROW is in 0..{max_row}\n"
    "    EXIT_COLUMN is in 0..{max_col}\n"
    "    START_ROW is in 0..{max_row}\n"
    "    START_COLUMN is in 0..{max_col}\n"
    "    ALGORITHM is one of: {algorithms} (default {default})\n"
)


def usage(prog: str) -> str:
    return USAGE.format(
        prog=prog,
        max_row=config.ROWS - 1,
        max_col=config.COLUMNS - 1,
        algorithms=", ".join(a.value for a in Algorithm),
        default=config.DEFAULT_ALGORITHM,
    )


def parse_index(value: str, limit: int, name: str) -> int:
    """Parse a non-negative integer below limit."""
    try:
        index = int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'") from None
    if not 0 <= index < limit:
        raise ValueError(f"{name} must be in 0..{limit - 1}, got {index}")
    return index


def parse_args(args: list[str]) -> tuple[Coord, Coord, Algorithm]:
    """
    Parse the driver's positional arguments.

    Returns:
        Tuple of (exit, start, algorithm)

    Raises:
        ValueError: On a missing, malformed or out-of-range argument
    """
    if len(args) not in (4, 5):
        raise ValueError(f"expected 4 or 5 arguments, got {len(args)}")

    exit_coord = Coord(
        parse_index(args[0], config.ROWS, "EXIT_ROW"),
        parse_index(args[1], config.COLUMNS, "EXIT_COLUMN"),
    )
    start = Coord(
        parse_index(args[2], config.ROWS, "START_ROW"),
        parse_index(args[3], config.COLUMNS, "START_COLUMN"),
    )
    algorithm_name = args[4] if len(args) == 5 else config.DEFAULT_ALGORITHM
    try:
        algorithm = Algorithm(algorithm_name)
    except ValueError:
        raise ValueError(f"unknown algorithm '{algorithm_name}'") from None

    return exit_coord, start, algorithm


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    prog = argv[0] if argv else "demo.py"

    try:
        exit_coord, start, algorithm = parse_args(argv[1:])
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        print(usage(prog), file=sys.stderr, end="")
        return 1

    rng = random.Random(config.MAZE_SEED)
    maze = generate(config.ROWS, config.COLUMNS, exit_coord, rng)
    path = find_path(maze, start, exit_coord, algorithm)
    logger.info("path length %d using %s search", len(path), algorithm.value)

    # Unreachable for a generated maze; a spanning tree connects every room
    if path:
        mark_path(maze, path)
    else:
        logger.warning("no path from %s to %s", start, exit_coord)

    print(f"size: {config.ROWS}X{config.COLUMNS}")
    print(f"exit: {exit_coord}")
    print(f"start: {start}")
    print(f"algorithm: {algorithm.value}")
    print(f"path: {' '.join(str(coord) for coord in path)}")
    print(f"directions: {' '.join(d.value for d in path_directions(path))}")
    print("maze:")
    print(render(maze, colour=config.COLOUR_OUTPUT))
    return 0


def run() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    sys.exit(main())


if __name__ == "__main__":
    run()
