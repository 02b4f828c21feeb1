"""Rectangular grids of open and blocked cells, plus text rendering of paths."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

Cell = tuple[int, int]

# Left, right, down, up: the order in which neighbours are visited.
_STEPS: tuple[Cell, ...] = ((0, -1), (0, 1), (1, 0), (-1, 0))


@dataclass(frozen=True, init=False)
class Grid:
    """A grid where a cell holding 0 is open and any other value is blocked."""

    cells: tuple[tuple[int, ...], ...]

    def __init__(self, cells: Iterable[Iterable[int]]) -> None:
        rows = tuple(tuple(int(value) for value in row) for row in cells)
        if not rows or not rows[0]:
            raise ValueError("grid must have at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("grid rows must all have the same length")
        object.__setattr__(self, "cells", rows)

    @classmethod
    def empty(cls, rows: int, cols: int) -> Grid:
        """Return a grid of the given size with every cell open."""
        return cls([[0] * cols for _ in range(rows)])

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    def in_range(self, cell: Cell) -> bool:
        row, col = cell
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_open(self, cell: Cell) -> bool:
        """True if the cell lies inside the grid and is not blocked."""
        if not self.in_range(cell):
            return False
        row, col = cell
        return self.cells[row][col] == 0

    def neighbours(self, cell: Cell) -> Iterator[Cell]:
        """Yield the open cells next to ``cell``: left, right, down, up."""
        row, col = cell
        for d_row, d_col in _STEPS:
            nxt = (row + d_row, col + d_col)
            if self.is_open(nxt):
                yield nxt

    def accepts(self, src: Cell, dst: Cell) -> bool:
        """True if both endpoints are inside the grid and open."""
        return self.is_open(src) and self.is_open(dst)


def render_map(grid: Grid, path: Iterable[Cell]) -> str:
    """Draw the grid with every cell of ``path`` shown as ``*``."""
    marked = set(path)
    return "\n".join(
        "".join(
            "*" if (r, c) in marked else str(value)
            for c, value in enumerate(row)
        )
        for r, row in enumerate(grid.cells)
    )


def format_path(path: Sequence[Cell]) -> str:
    """List the path's coordinates one per line as ``(row, col)``."""
    return "\n".join(f"({row}, {col})" for row, col in path)