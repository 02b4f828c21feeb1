import pytest

from gridpath.grid import Grid, format_path, render_map


def test_empty_grid_is_all_open():
    grid = Grid.empty(3, 4)
    assert grid.rows == 3
    assert grid.cols == 4
    assert all(grid.is_open((r, c)) for r in range(3) for c in range(4))


def test_in_range_bounds():
    grid = Grid.empty(2, 3)
    assert grid.in_range((0, 0))
    assert grid.in_range((1, 2))
    assert not grid.in_range((2, 0))
    assert not grid.in_range((0, 3))
    assert not grid.in_range((-1, 0))


def test_is_open_respects_blocked_and_range():
    grid = Grid([[0, 1], [0, 0]])
    assert grid.is_open((0, 0))
    assert not grid.is_open((0, 1))
    assert not grid.is_open((5, 5))


def test_neighbours_order_left_right_down_up():
    grid = Grid.empty(3, 3)
    assert list(grid.neighbours((1, 1))) == [(1, 0), (1, 2), (2, 1), (0, 1)]


def test_neighbours_skip_blocked_and_outside():
    grid = Grid([[0, 1], [0, 0]])
    result = list(grid.neighbours((0, 0)))
    assert result == [(1, 0)]


def test_accepts():
    grid = Grid([[0, 1], [0, 0]])
    assert grid.accepts((0, 0), (1, 1))
    assert not grid.accepts((0, 0), (0, 1))
    assert not grid.accepts((9, 0), (1, 1))


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        Grid([[0, 0], [0]])


def test_empty_rows_rejected():
    with pytest.raises(ValueError):
        Grid([])


def test_render_map_marks_path_and_blocks():
    grid = Grid([[0, 1], [0, 0]])
    assert render_map(grid, [(0, 0), (1, 0), (1, 1)]) == "*1\n**"


def test_render_map_without_path_shows_values():
    grid = Grid([[0, 1], [1, 0]])
    lines = render_map(grid, []).split("\n")
    assert lines == ["01", "10"]


def test_format_path():
    assert format_path([(1, 0), (2, 0)]) == "(1, 0)\n(2, 0)"
    assert format_path([]) == ""