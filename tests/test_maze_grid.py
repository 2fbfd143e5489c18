import pytest

from maze_grid import InvalidAdjacency, MazeConfigError, MazeGrid, OutOfRange


def test_new_grid_is_closed_and_unvisited():
    grid = MazeGrid(3, 4)

    assert grid.visited.shape == (3, 4)
    assert grid.verticals.shape == (3, 3)
    assert grid.horizontals.shape == (2, 4)
    assert not grid.visited.any()
    assert grid.passage_count() == 0
    assert grid.closed_count() == 3 * 3 + 2 * 4


@pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2), (2.5, 2)])
def test_bad_dimensions_fail_at_construction(rows, columns):
    with pytest.raises(MazeConfigError):
        MazeGrid(rows, columns)


def test_mark_visited_is_idempotent():
    grid = MazeGrid(2, 2)
    grid.mark_visited(1, 0)
    grid.mark_visited(1, 0)

    assert grid.is_visited(1, 0)
    assert not grid.is_visited(0, 0)
    assert grid.visited.sum() == 1


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_out_of_range_access(cell):
    grid = MazeGrid(2, 3)
    with pytest.raises(OutOfRange):
        grid.is_visited(*cell)
    with pytest.raises(OutOfRange):
        grid.mark_visited(*cell)


def test_open_passage_picks_matrix_from_offset():
    grid = MazeGrid(3, 3)
    grid.open_passage((1, 1), (1, 2))
    grid.open_passage((1, 1), (0, 1))
    grid.open_passage((2, 0), (2, 1))

    assert grid.verticals[1, 1]
    assert grid.horizontals[0, 1]
    assert grid.verticals[2, 0]
    assert grid.passage_count() == 3
    assert grid.is_open((1, 2), (1, 1))
    assert not grid.is_open((1, 1), (2, 1))


@pytest.mark.parametrize(
    "a, b", [((0, 0), (1, 1)), ((0, 0), (0, 2)), ((1, 1), (1, 1))]
)
def test_open_passage_rejects_non_adjacent(a, b):
    grid = MazeGrid(3, 3)
    with pytest.raises(InvalidAdjacency):
        grid.open_passage(a, b)
    assert grid.passage_count() == 0


def test_open_passage_rejects_cells_outside():
    grid = MazeGrid(2, 2)
    with pytest.raises(OutOfRange):
        grid.open_passage((1, 1), (1, 2))


def test_open_neighbors_follow_passages():
    grid = MazeGrid(3, 3)
    grid.open_passage((1, 1), (0, 1))
    grid.open_passage((1, 1), (1, 0))

    assert set(grid.open_neighbors(1, 1)) == {(0, 1), (1, 0)}
    assert list(grid.open_neighbors(0, 1)) == [(1, 1)]
    assert list(grid.open_neighbors(2, 2)) == []
