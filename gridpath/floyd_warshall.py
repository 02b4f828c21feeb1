"""Floyd-Warshall all-pairs shortest paths, used to join two cells of a grid."""

from __future__ import annotations

import math

from gridpath.grid import Cell, Grid

# Up, down, right, left.
_STEPS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _open_cells(grid: Grid) -> list[Cell]:
    return [
        (row, col)
        for row in range(grid.rows)
        for col in range(grid.cols)
        if grid.is_open((row, col))
    ]


def floyd_warshall(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return a shortest path from ``src`` to ``dst``, or None if there is none.

    When ``src`` and ``dst`` are the same cell the search succeeds but has no
    step to follow, so the returned path is empty.
    """
    if not grid.accepts(src, dst):
        return None

    cells = _open_cells(grid)
    index = {cell: i for i, cell in enumerate(cells)}
    dist = [[math.inf] * len(cells) for _ in cells]
    step: list[list[Cell | None]] = [[None] * len(cells) for _ in cells]

    for cell, i in index.items():
        dist[i][i] = 0
        row, col = cell
        for d_row, d_col in _STEPS:
            nxt = (row + d_row, col + d_col)
            j = index.get(nxt)
            if j is not None:
                dist[i][j] = 1
                step[i][j] = nxt

    for k, dist_k in enumerate(dist):
        for dist_i, step_i in zip(dist, step):
            through = dist_i[k]
            if through == math.inf:
                continue
            first_step = step_i[k]
            for j, tail in enumerate(dist_k):
                if tail == math.inf:
                    continue
                if through + tail < dist_i[j]:
                    dist_i[j] = through + tail
                    step_i[j] = first_step

    target = index[dst]
    if dist[index[src]][target] == math.inf:
        return None
    if step[index[src]][target] is None:
        return []

    path = []
    current = src
    while current != dst:
        path.append(current)
        nxt = step[index[current]][target]
        assert nxt is not None
        current = nxt
    path.append(dst)
    return path