"""Maze generator using a randomized depth-first search.
"""
from collections import deque
from typing import List, Optional, Set, Tuple

import numpy as np

from maze_grid import Cell, MazeGrid, OutOfRange

# candidate order before shuffling: up, right, down, left
DIRECTIONS: List[Tuple[int, int]] = [(-1, 0), (0, 1), (1, 0), (0, -1)]


def random_cell(rows: int, columns: int, rng: np.random.Generator) -> Cell:
    """Pick a cell uniformly at random."""
    return int(rng.integers(0, rows)), int(rng.integers(0, columns))


def _shuffled_neighbors(cell: Cell, rng: np.random.Generator) -> List[Cell]:
    row, col = cell
    return [
        (row + DIRECTIONS[i][0], col + DIRECTIONS[i][1])
        for i in rng.permutation(len(DIRECTIONS))
    ]


def carve_passages(grid: MazeGrid, start: Cell, rng: np.random.Generator) -> MazeGrid:
    """Carve a spanning tree into ``grid`` starting at ``start``.

    Each stack frame holds a cell and the neighbour candidates it has not
    tried yet, so the visiting order is the same as the recursive backtracker
    without being limited by the interpreter's recursion depth.
    """
    if not grid.in_bounds(*start):
        raise OutOfRange(f"start cell {start} outside {grid.rows}x{grid.columns} grid")

    grid.mark_visited(*start)
    stack: List[Tuple[Cell, List[Cell]]] = [(start, _shuffled_neighbors(start, rng))]
    while stack:
        cell, candidates = stack[-1]
        if not candidates:
            stack.pop()
            continue
        nxt = candidates.pop(0)
        if not grid.in_bounds(*nxt) or grid.is_visited(*nxt):
            continue
        grid.open_passage(cell, nxt)
        grid.mark_visited(*nxt)
        stack.append((nxt, _shuffled_neighbors(nxt, rng)))
    return grid


def generate_maze(
    rows: int,
    columns: int,
    rng: np.random.Generator | None = None,
    start: Optional[Cell] = None,
    seed: Optional[int] = None,
) -> MazeGrid:
    """Generate a perfect maze of ``rows`` x ``columns`` cells.

    Parameters
    ----------
    rows, columns : int
        Grid dimensions, both positive.
    rng : numpy.random.Generator, optional
        Source of randomness. Only ``permutation`` and ``integers`` are used.
    start : tuple[int, int], optional
        Cell the walk starts from; random when omitted.
    seed : int, optional
        Seed for a fresh ``default_rng`` when ``rng`` is not given.

    Returns
    -------
    MazeGrid
        Grid whose open passages form a spanning tree over all cells.
    """
    grid = MazeGrid(rows, columns)
    if rng is None:
        rng = np.random.default_rng(seed)
    if start is None:
        start = random_cell(grid.rows, grid.columns, rng)
    return carve_passages(grid, start, rng)


def reachable_cells(grid: MazeGrid, start: Cell = (0, 0)) -> Set[Cell]:
    """Return every cell reachable from ``start`` through open passages."""
    if not grid.in_bounds(*start):
        raise OutOfRange(f"start cell {start} outside {grid.rows}x{grid.columns} grid")
    seen = {start}
    queue: deque[Cell] = deque([start])
    while queue:
        cell = queue.popleft()
        for nxt in grid.open_neighbors(*cell):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def is_connected(grid: MazeGrid) -> bool:
    """Return True if all cells are mutually reachable."""
    return len(reachable_cells(grid)) == grid.cell_count


def is_perfect(grid: MazeGrid) -> bool:
    """Connected with exactly one passage less than the number of cells."""
    return grid.passage_count() == grid.cell_count - 1 and is_connected(grid)


def render_ascii(grid: MazeGrid) -> str:
    lines = ["+" + "---+" * grid.columns]
    for r in range(grid.rows):
        row = "|"
        for c in range(grid.columns):
            east_open = c < grid.columns - 1 and grid.verticals[r, c]
            row += "    " if east_open else "   |"
        lines.append(row)
        floor = "+"
        for c in range(grid.columns):
            south_open = r < grid.rows - 1 and grid.horizontals[r, c]
            floor += "   +" if south_open else "---+"
        lines.append(floor)
    return "\n".join(lines)


def print_maze(grid: MazeGrid) -> None:
    print(render_ascii(grid))


if __name__ == "__main__":
    g = generate_maze(10, 14)
    print_maze(g)
