"""Dijkstra's shortest-path search on a grid with unit step costs."""

from __future__ import annotations

import heapq
from itertools import count

from gridpath.grid import Cell, Grid

# Up, down, right, left.
_STEPS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _trace_back(parents: dict[Cell, Cell], dst: Cell) -> list[Cell]:
    cells = [dst]
    while cells[-1] in parents:
        cells.append(parents[cells[-1]])
    return cells


def dijkstra(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return a shortest path listed from ``dst`` back to ``src``, or None."""
    if not grid.accepts(src, dst):
        return None
    dist: dict[Cell, int] = {src: 0}
    parents: dict[Cell, Cell] = {}
    visited: set[Cell] = set()
    order = count()
    heap: list[tuple[int, int, Cell]] = [(0, next(order), src)]
    while heap:
        _, _, cell = heapq.heappop(heap)
        if cell == dst:
            return _trace_back(parents, dst)
        if cell in visited:
            continue
        visited.add(cell)
        row, col = cell
        for d_row, d_col in _STEPS:
            nxt = (row + d_row, col + d_col)
            if not grid.is_open(nxt) or nxt in visited:
                continue
            new_dist = dist[cell] + 1
            if nxt not in dist or new_dist < dist[nxt]:
                dist[nxt] = new_dist
                parents[nxt] = cell
                heapq.heappush(heap, (new_dist, next(order), nxt))
    return None