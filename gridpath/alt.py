"""A* search guided by landmark distances (the ALT technique) on a grid."""

from __future__ import annotations

import heapq
from collections import deque
from itertools import count

from gridpath.grid import Cell, Grid

# Distance given to cells that a landmark cannot reach.
_UNREACHED = 2**31 - 1


def _distances_from(grid: Grid, origin: Cell) -> dict[Cell, int]:
    dist = {origin: 0}
    queue = deque([origin])
    while queue:
        cell = queue.popleft()
        for nxt in grid.neighbours(cell):
            if nxt not in dist:
                dist[nxt] = dist[cell] + 1
                queue.append(nxt)
    return dist


class LandmarkTable:
    """Breadth-first distances from the four corners of a grid."""

    def __init__(self, grid: Grid) -> None:
        last_row, last_col = grid.rows - 1, grid.cols - 1
        self.landmarks: tuple[Cell, ...] = (
            (0, 0),
            (0, last_col),
            (last_row, 0),
            (last_row, last_col),
        )
        self._tables = [_distances_from(grid, mark) for mark in self.landmarks]

    def heuristic(self, cell: Cell, dst: Cell) -> int:
        """Lower bound on the steps from ``cell`` to ``dst``.

        The larger of the Manhattan distance and the best landmark bound.
        """
        bound = max(
            abs(table.get(dst, _UNREACHED) - table.get(cell, _UNREACHED))
            for table in self._tables
        )
        manhattan = abs(cell[0] - dst[0]) + abs(cell[1] - dst[1])
        return max(bound, manhattan)


def _trace(parents: dict[Cell, Cell], dst: Cell) -> list[Cell]:
    cells = [dst]
    while parents[cells[-1]] != cells[-1]:
        cells.append(parents[cells[-1]])
    cells.reverse()
    return cells


def alt(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return a shortest path from ``src`` to ``dst``, or None.

    None is also returned when ``src`` and ``dst`` are the same cell.
    """
    if not grid.accepts(src, dst) or src == dst:
        return None

    table = LandmarkTable(grid)
    g_score: dict[Cell, int] = {src: 0}
    parents: dict[Cell, Cell] = {src: src}
    closed: set[Cell] = set()
    order = count()
    heap: list[tuple[int, int, int, Cell]] = [
        (table.heuristic(src, dst), next(order), 0, src)
    ]

    while heap:
        _, _, g, cell = heapq.heappop(heap)
        if cell in closed:
            continue
        closed.add(cell)
        if cell == dst:
            return _trace(parents, dst)
        for nxt in grid.neighbours(cell):
            if nxt in closed:
                continue
            tentative = g + 1
            if tentative < g_score.get(nxt, _UNREACHED):
                g_score[nxt] = tentative
                parents[nxt] = cell
                f = tentative + table.heuristic(nxt, dst)
                heapq.heappush(heap, (f, next(order), tentative, nxt))
    return None