import pytest

from gridpath.bfs import bfs
from gridpath.floyd_warshall import floyd_warshall
from gridpath.grid import Grid


def _assert_valid_path(grid, path, src, dst):
    assert path[0] == src
    assert path[-1] == dst
    for cell in path:
        assert grid.is_open(cell)
    for (r1, c1), (r2, c2) in zip(path, path[1:]):
        assert abs(r1 - r2) + abs(c1 - c2) == 1


def test_empty_grid_shortest_path():
    grid = Grid.empty(8, 8)
    path = floyd_warshall(grid, (1, 0), (6, 7))
    _assert_valid_path(grid, path, (1, 0), (6, 7))
    assert len(path) == len(bfs(grid, (1, 0), (6, 7)))


def test_single_row():
    grid = Grid.empty(1, 3)
    assert floyd_warshall(grid, (0, 0), (0, 2)) == [(0, 0), (0, 1), (0, 2)]


def test_path_goes_through_gap():
    grid = Grid([
        [0, 0, 0, 0],
        [1, 1, 0, 1],
        [0, 0, 0, 0],
    ])
    path = floyd_warshall(grid, (0, 0), (2, 0))
    _assert_valid_path(grid, path, (0, 0), (2, 0))
    assert (1, 2) in path
    assert len(path) == len(bfs(grid, (0, 0), (2, 0)))


def test_same_cell_gives_empty_path():
    grid = Grid.empty(3, 3)
    assert floyd_warshall(grid, (1, 1), (1, 1)) == []


def test_disconnected_returns_none():
    grid = Grid([
        [0, 1, 0],
        [0, 1, 0],
    ])
    assert floyd_warshall(grid, (0, 0), (0, 2)) is None


@pytest.mark.parametrize("src, dst", [((-1, 0), (1, 1)), ((0, 0), (3, 0))])
def test_out_of_range_returns_none(src, dst):
    assert floyd_warshall(Grid.empty(3, 3), src, dst) is None


def test_blocked_endpoint_returns_none():
    grid = Grid([[0, 1], [0, 0]])
    assert floyd_warshall(grid, (0, 0), (0, 1)) is None
    assert floyd_warshall(grid, (0, 1), (1, 1)) is None