import sys

import numpy as np
import pytest

from maze_generator import (
    generate_maze,
    is_connected,
    is_perfect,
    reachable_cells,
    render_ascii,
)
from maze_grid import MazeConfigError, OutOfRange


class ScriptedRng:
    """Stand-in random source returning fixed permutations."""

    def __init__(self, orders, cells=()):
        self.orders = list(orders)
        self.cells = list(cells)
        self.permutation_calls = 0

    def permutation(self, n):
        order = self.orders[self.permutation_calls % len(self.orders)]
        self.permutation_calls += 1
        assert sorted(order) == list(range(n))
        return np.array(order)

    def integers(self, low, high):
        value = self.cells.pop(0)
        assert low <= value < high
        return value


def _edge_count(grid):
    return int(grid.verticals.sum() + grid.horizontals.sum())


@pytest.mark.parametrize(
    "rows, columns, seed",
    [(10, 14, 0), (5, 5, 1), (1, 8, 2), (8, 1, 3), (2, 3, 4), (17, 23, 5)],
)
def test_generated_maze_is_a_spanning_tree(rows, columns, seed):
    grid = generate_maze(rows, columns, seed=seed)

    assert _edge_count(grid) == rows * columns - 1
    assert is_connected(grid)
    assert is_perfect(grid)
    assert grid.visited.all()


def test_every_cell_reaches_every_other():
    grid = generate_maze(6, 7, seed=11)
    for r in range(grid.rows):
        for c in range(grid.columns):
            assert len(reachable_cells(grid, (r, c))) == 42


def test_same_seed_and_start_give_identical_mazes():
    a = generate_maze(12, 9, start=(3, 4), seed=1234)
    b = generate_maze(12, 9, start=(3, 4), seed=1234)

    assert np.array_equal(a.verticals, b.verticals)
    assert np.array_equal(a.horizontals, b.horizontals)


def test_shared_rng_gives_identical_mazes():
    a = generate_maze(8, 8, rng=np.random.default_rng(7))
    b = generate_maze(8, 8, rng=np.random.default_rng(7))

    assert np.array_equal(a.verticals, b.verticals)
    assert np.array_equal(a.horizontals, b.horizontals)


def test_single_cell_maze_has_no_passages():
    grid = generate_maze(1, 1, seed=0)

    assert grid.verticals.size == 0
    assert grid.horizontals.size == 0
    assert grid.passage_count() == 0
    assert is_connected(grid)


def test_corridor_opens_every_edge():
    grid = generate_maze(1, 6, seed=3)

    assert grid.verticals.all()
    assert grid.horizontals.size == 0


def test_two_by_two_with_fixed_permutations():
    # right, down, left, up for every cell
    rng = ScriptedRng([[1, 2, 3, 0]])
    grid = generate_maze(2, 2, rng=rng, start=(0, 0))

    assert grid.verticals.tolist() == [[True], [True]]
    assert grid.horizontals.tolist() == [[False, True]]
    assert grid.passage_count() == 3
    assert rng.permutation_calls == 4


def test_random_start_uses_integers_then_permutation():
    # up, right, down, left: from (1, 1) the walk goes up, left, then down
    rng = ScriptedRng([[0, 1, 2, 3]], cells=[1, 1])
    grid = generate_maze(2, 2, rng=rng)

    assert rng.cells == []
    assert grid.horizontals.tolist() == [[True, True]]
    assert grid.verticals.tolist() == [[True], [False]]


def test_start_outside_grid_fails():
    with pytest.raises(OutOfRange):
        generate_maze(3, 3, start=(3, 0), seed=0)


def test_zero_dimension_is_rejected():
    with pytest.raises(MazeConfigError):
        generate_maze(0, 5, seed=0)


def test_large_maze_does_not_hit_recursion_limit():
    rows = columns = 120
    assert rows * columns > sys.getrecursionlimit()
    grid = generate_maze(rows, columns, start=(0, 0), seed=42)

    assert grid.passage_count() == rows * columns - 1
    assert is_connected(grid)


def test_render_ascii_shape():
    grid = generate_maze(3, 4, seed=0)
    lines = render_ascii(grid).splitlines()

    assert len(lines) == 2 * 3 + 1
    assert all(len(line) == 4 * 4 + 1 for line in lines)
    assert lines[0] == "+---+---+---+---+"
    assert lines[-1] == "+---+---+---+---+"
