"""Bellman-Ford shortest-path search on a grid with unit step costs."""

from __future__ import annotations

from gridpath.grid import Cell, Grid

# Up, down, right, left.
_STEPS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _edges(grid: Grid) -> list[tuple[Cell, Cell]]:
    edges = []
    for row in range(grid.rows):
        for col in range(grid.cols):
            cell = (row, col)
            if not grid.is_open(cell):
                continue
            for d_row, d_col in _STEPS:
                nxt = (row + d_row, col + d_col)
                if grid.is_open(nxt):
                    edges.append((cell, nxt))
    return edges


def bellman_ford(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return a shortest path listed from ``dst`` back to ``src``, or None."""
    if not grid.accepts(src, dst):
        return None
    edges = _edges(grid)
    dist: dict[Cell, int] = {src: 0}
    parents: dict[Cell, Cell] = {}
    for _ in range(grid.rows * grid.cols - 1):
        changed = False
        for start, end in edges:
            if start not in dist:
                continue
            candidate = dist[start] + 1
            if end not in dist or candidate < dist[end]:
                dist[end] = candidate
                parents[end] = start
                changed = True
        if not changed:
            break
    if dst not in dist:
        return None
    cells = [dst]
    while cells[-1] in parents:
        cells.append(parents[cells[-1]])
    return cells