import pytest

from gridpath.alt import LandmarkTable, alt
from gridpath.bfs import bfs
from gridpath.grid import Grid

WALLED = Grid([
    [0, 0, 0],
    [1, 1, 0],
    [0, 0, 0],
])


def _assert_valid_path(grid, path, src, dst):
    assert path[0] == src
    assert path[-1] == dst
    for cell in path:
        assert grid.is_open(cell)
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_heuristic_on_empty_grid_is_manhattan():
    table = LandmarkTable(Grid.empty(8, 8))
    assert table.heuristic((0, 0), (7, 7)) == 14


def test_heuristic_uses_landmarks_around_wall():
    table = LandmarkTable(WALLED)
    assert table.heuristic((2, 0), (0, 0)) == 6


def test_heuristic_zero_at_destination():
    table = LandmarkTable(WALLED)
    for cell in [(0, 0), (0, 2), (2, 0), (2, 2)]:
        assert table.heuristic(cell, cell) == 0


def test_heuristic_never_overestimates():
    grid = Grid([
        [0, 0, 0, 0, 0],
        [0, 1, 1, 1, 0],
        [0, 0, 0, 1, 0],
        [1, 1, 0, 1, 0],
        [0, 0, 0, 0, 0],
    ])
    table = LandmarkTable(grid)
    dst = (2, 2)
    for row in range(grid.rows):
        for col in range(grid.cols):
            cell = (row, col)
            if not grid.is_open(cell):
                continue
            exact = len(bfs(grid, cell, dst)) - 1
            assert table.heuristic(cell, dst) <= exact


def test_empty_grid_shortest_path():
    grid = Grid.empty(8, 8)
    path = alt(grid, (1, 0), (6, 7))
    _assert_valid_path(grid, path, (1, 0), (6, 7))
    assert len(path) == len(bfs(grid, (1, 0), (6, 7)))


def test_walled_grid_path():
    path = alt(WALLED, (2, 0), (0, 0))
    assert path == [(2, 0), (2, 1), (2, 2), (1, 2), (0, 2), (0, 1), (0, 0)]


def test_same_cell_returns_none():
    assert alt(Grid.empty(3, 3), (1, 1), (1, 1)) is None


def test_disconnected_returns_none():
    grid = Grid([
        [0, 1, 0],
        [0, 1, 0],
    ])
    assert alt(grid, (0, 0), (1, 2)) is None


@pytest.mark.parametrize("src, dst", [((0, -1), (1, 1)), ((0, 0), (0, 3))])
def test_out_of_range_returns_none(src, dst):
    assert alt(Grid.empty(3, 3), src, dst) is None


def test_blocked_endpoint_returns_none():
    assert alt(WALLED, (1, 0), (0, 0)) is None
    assert alt(WALLED, (0, 0), (1, 1)) is None