"""Bidirectional Dijkstra search between two cells of a grid."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count

from gridpath.grid import Cell, Grid

# Up, down, right, left.
_STEPS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


@dataclass
class _Frontier:
    """One direction of the search, growing outwards from ``origin``."""

    origin: Cell
    dist: dict[Cell, int] = field(default_factory=dict)
    parents: dict[Cell, Cell] = field(default_factory=dict)
    visited: set[Cell] = field(default_factory=set)
    heap: list[tuple[int, int, Cell]] = field(default_factory=list)
    _order: count = field(default_factory=count)

    def __post_init__(self) -> None:
        self.dist[self.origin] = 0
        self.heap.append((0, next(self._order), self.origin))

    def pop(self) -> Cell:
        _, _, cell = heapq.heappop(self.heap)
        return cell

    def settle(self, grid: Grid, cell: Cell) -> bool:
        """Visit ``cell`` and relax its neighbours; False if already visited."""
        if cell in self.visited:
            return False
        self.visited.add(cell)
        row, col = cell
        for d_row, d_col in _STEPS:
            nxt = (row + d_row, col + d_col)
            if not grid.is_open(nxt) or nxt in self.visited:
                continue
            new_dist = self.dist[cell] + 1
            if nxt not in self.dist or new_dist < self.dist[nxt]:
                self.dist[nxt] = new_dist
                self.parents[nxt] = cell
                heapq.heappush(self.heap, (new_dist, next(self._order), nxt))
        return True

    def chain(self, cell: Cell) -> list[Cell]:
        """Cells from ``cell`` back to the origin of this frontier."""
        cells = [cell]
        while cells[-1] != self.origin:
            cells.append(self.parents[cells[-1]])
        return cells


def bidirectional_dijkstra(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return a shortest path from ``src`` to ``dst`` searched from both ends.

    The path is the forward half (``src`` to the meeting cell) followed by the
    backward half (the meeting cell to ``dst``), so the meeting cell is listed
    twice. None is returned when there is no path, when either endpoint is
    outside the grid or blocked, and when ``src`` equals ``dst``.
    """
    if not grid.accepts(src, dst) or src == dst:
        return None

    forward = _Frontier(src)
    backward = _Frontier(dst)
    best: int | None = None
    meeting: Cell | None = None

    while forward.heap and backward.heap:
        for side, other in ((forward, backward), (backward, forward)):
            cell = side.pop()
            if cell in other.visited:
                total = forward.dist[cell] + backward.dist[cell]
                if best is None or total < best:
                    best, meeting = total, cell
            if not side.settle(grid, cell):
                break

    if meeting is None:
        return None
    return forward.chain(meeting)[::-1] + backward.chain(meeting)