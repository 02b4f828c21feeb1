"""Breadth-first search between two cells of a grid."""

from __future__ import annotations

from collections import deque

from gridpath.grid import Cell, Grid


def _trace(parents: dict[Cell, Cell], dst: Cell) -> list[Cell]:
    cells = [dst]
    while parents[cells[-1]] != cells[-1]:
        cells.append(parents[cells[-1]])
    cells.reverse()
    return cells


def bfs(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return a shortest path from ``src`` to ``dst``, or None if there is none."""
    if not grid.accepts(src, dst):
        return None
    parents: dict[Cell, Cell] = {src: src}
    queue = deque([src])
    while queue:
        current = queue.popleft()
        if current == dst:
            return _trace(parents, dst)
        for nxt in grid.neighbours(current):
            if nxt not in parents:
                parents[nxt] = current
                queue.append(nxt)
    return None