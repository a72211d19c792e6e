#!/usr/bin/env python3
"""
N-queens placement by recursive backtracking.

A queen is placed on each row in turn; for every column of the current row we
recurse into the next row, backtracking when no column leaves the board valid.
"""

from __future__ import annotations

import logging
import sys

import config

logger = logging.getLogger(__name__)


class Board:
    """An n x n board holding at most one queen per row."""

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"Board size must be positive, got {n}")
        self.n = n
        self._queens: list[int | None] = [None] * n  # Column per row

    @classmethod
    def solve(cls, n: int = config.NQUEENS_DEFAULT_N) -> Board | None:
        """Return a board with n non-attacking queens, or None if impossible."""
        board = cls(n)
        if board._solve(0):
            return board
        logger.info("solve: no solution for n=%d", n)
        return None

    def _solve(self, row: int) -> bool:
        for col in range(self.n):
            self._queens[row] = col
            if self.is_valid():
                if row == self.n - 1:
                    return True  # Placed the last queen
                if self._solve(row + 1):
                    return True
            self._queens[row] = None  # Backtrack, try the next column
        return False

    def get(self, row: int, col: int) -> bool:
        """True iff the square holds a queen."""
        return self._queens[row] == col

    @property
    def queens(self) -> list[tuple[int, int]]:
        """(row, col) of every placed queen."""
        return [(r, c) for r, c in enumerate(self._queens) if c is not None]

    def is_valid(self) -> bool:
        """True iff no two placed queens share a column or a diagonal."""
        cols: set[int] = set()
        diagonals: set[int] = set()
        anti_diagonals: set[int] = set()
        for r, c in self.queens:
            if c in cols or (r - c) in diagonals or (r + c) in anti_diagonals:
                return False
            cols.add(c)
            diagonals.add(r - c)
            anti_diagonals.add(r + c)
        return True

    def __str__(self) -> str:
        return "\n".join(
            " ".join("1" if self.get(r, c) else "0" for c in range(self.n))
            for r in range(self.n)
        )


USAGE = "Usage: {prog} [N]\n    N - the board size (default {default})\n"


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv if argv is None else argv
    prog = argv[0] if argv else "nqueens.py"

    try:
        n = int(argv[1]) if len(argv) > 1 else config.NQUEENS_DEFAULT_N
    except ValueError:
        n = 0
    if n < 1 or len(argv) > 2:
        print(USAGE.format(prog=prog, default=config.NQUEENS_DEFAULT_N), file=sys.stderr, end="")
        return 1

    board = Board.solve(n)
    if board is None:
        print(f"No solution for {n} queens", file=sys.stderr)
        return 1

    print(board)
    return 0


def run() -> None:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    sys.exit(main())


if __name__ == "__main__":
    run()
