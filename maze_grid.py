"""Grid model for the maze: visited cells and open passages."""
from typing import Iterator, Tuple

import numpy as np

Cell = Tuple[int, int]  # (row, column)


class MazeError(Exception):
    """Base class for maze errors."""


class OutOfRange(MazeError, IndexError):
    """Cell reference outside the grid."""


class InvalidAdjacency(MazeError, ValueError):
    """Passage requested between cells that do not share an edge."""


class MazeConfigError(MazeError, ValueError):
    """Invalid maze or game configuration."""


class MazeGrid:
    """Boolean matrices describing one maze.

    ``verticals[r, c]`` is True when there is no wall between ``(r, c)`` and
    ``(r, c + 1)``; ``horizontals[r, c]`` is True when there is no wall
    between ``(r, c)`` and ``(r + 1, c)``.
    """

    def __init__(self, rows: int, columns: int):
        if not isinstance(rows, (int, np.integer)) or not isinstance(
            columns, (int, np.integer)
        ):
            raise MazeConfigError("rows and columns must be integers")
        if rows <= 0 or columns <= 0:
            raise MazeConfigError(
                f"rows and columns must be positive (got {rows}x{columns})"
            )
        self.rows = int(rows)
        self.columns = int(columns)
        self.visited = np.zeros((self.rows, self.columns), dtype=bool)
        self.verticals = np.zeros((self.rows, self.columns - 1), dtype=bool)
        self.horizontals = np.zeros((self.rows - 1, self.columns), dtype=bool)

    @property
    def cell_count(self) -> int:
        return self.rows * self.columns

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise OutOfRange(
                f"cell ({row}, {col}) outside {self.rows}x{self.columns} grid"
            )

    def is_visited(self, row: int, col: int) -> bool:
        self._check(row, col)
        return bool(self.visited[row, col])

    def mark_visited(self, row: int, col: int) -> None:
        self._check(row, col)
        self.visited[row, col] = True

    def _passage_index(self, a: Cell, b: Cell) -> Tuple[np.ndarray, int, int]:
        """Return the matrix and index holding the edge between ``a`` and ``b``."""
        self._check(*a)
        self._check(*b)
        (r1, c1), (r2, c2) = a, b
        dr, dc = r2 - r1, c2 - c1
        if dr == 0 and abs(dc) == 1:
            return self.verticals, r1, min(c1, c2)
        if dc == 0 and abs(dr) == 1:
            return self.horizontals, min(r1, r2), c1
        raise InvalidAdjacency(f"cells {a} and {b} are not adjacent")

    def open_passage(self, a: Cell, b: Cell) -> None:
        matrix, r, c = self._passage_index(a, b)
        matrix[r, c] = True

    def is_open(self, a: Cell, b: Cell) -> bool:
        matrix, r, c = self._passage_index(a, b)
        return bool(matrix[r, c])

    def open_neighbors(self, row: int, col: int) -> Iterator[Cell]:
        """Yield cells reachable from ``(row, col)`` through one open passage."""
        self._check(row, col)
        if row > 0 and self.horizontals[row - 1, col]:
            yield row - 1, col
        if col < self.columns - 1 and self.verticals[row, col]:
            yield row, col + 1
        if row < self.rows - 1 and self.horizontals[row, col]:
            yield row + 1, col
        if col > 0 and self.verticals[row, col - 1]:
            yield row, col - 1

    def passage_count(self) -> int:
        return int(self.verticals.sum() + self.horizontals.sum())

    def closed_count(self) -> int:
        return self.verticals.size + self.horizontals.size - self.passage_count()
