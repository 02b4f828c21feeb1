"""Bidirectional A* search between two cells of a grid."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count

from gridpath.grid import Cell, Grid

# Up, down, right, left.
_STEPS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


@dataclass
class _Frontier:
    """One direction of the search: grows from ``origin`` towards ``goal``."""

    origin: Cell
    goal: Cell
    g: dict[Cell, int] = field(default_factory=dict)
    f: dict[Cell, int] = field(default_factory=dict)
    parents: dict[Cell, Cell] = field(default_factory=dict)
    closed: set[Cell] = field(default_factory=set)
    heap: list[tuple[int, int, Cell]] = field(default_factory=list)
    _order: count = field(default_factory=count)

    def __post_init__(self) -> None:
        self.g[self.origin] = 0
        self.f[self.origin] = 0
        self.parents[self.origin] = self.origin
        self.heap.append((0, next(self._order), self.origin))

    def pop(self) -> Cell:
        _, _, cell = heapq.heappop(self.heap)
        self.closed.add(cell)
        return cell

    def expand(self, grid: Grid, cell: Cell) -> None:
        row, col = cell
        for d_row, d_col in _STEPS:
            nxt = (row + d_row, col + d_col)
            if not grid.is_open(nxt) or nxt in self.closed:
                continue
            ng = self.g[cell] + 1
            nf = ng + _manhattan(nxt, self.goal)
            if nxt not in self.f or self.f[nxt] > nf:
                self.f[nxt] = nf
                self.g[nxt] = ng
                self.parents[nxt] = cell
                heapq.heappush(self.heap, (nf, next(self._order), nxt))

    def chain(self, cell: Cell) -> list[Cell]:
        """Cells from ``cell`` back to the origin of this frontier."""
        cells = [cell]
        while self.parents[cells[-1]] != cells[-1]:
            cells.append(self.parents[cells[-1]])
        return cells


def bidirectional_astar(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return a path from ``src`` to ``dst`` found by searching from both ends.

    The path is the forward half (``src`` to the meeting cell) followed by the
    backward half (the meeting cell to ``dst``), so the meeting cell is listed
    twice. None is returned when there is no path, when either endpoint is
    outside the grid or blocked, and when ``src`` equals ``dst``.
    """
    if not grid.accepts(src, dst) or src == dst:
        return None

    forward = _Frontier(src, dst)
    backward = _Frontier(dst, src)

    while forward.heap and backward.heap:
        for side, other in ((forward, backward), (backward, forward)):
            cell = side.pop()
            if cell in other.closed:
                return forward.chain(cell)[::-1] + backward.chain(cell)
            side.expand(grid, cell)
    return None