"""Depth-first search with backtracking between two cells of a grid."""

from __future__ import annotations

from collections.abc import Iterator

from gridpath.grid import Cell, Grid


def dfs(grid: Grid, src: Cell, dst: Cell) -> list[Cell] | None:
    """Return the first simple path found from ``src`` to ``dst``, or None.

    Neighbours are tried left, right, down, up; a dead end is undone and the
    search continues from the previous cell.
    """
    if not grid.accepts(src, dst):
        return None
    path = [src]
    if src == dst:
        return path
    on_path = {src}
    pending: list[Iterator[Cell]] = [grid.neighbours(src)]
    while pending:
        for nxt in pending[-1]:
            if nxt in on_path:
                continue
            path.append(nxt)
            if nxt == dst:
                return path
            on_path.add(nxt)
            pending.append(grid.neighbours(nxt))
            break
        else:
            pending.pop()
            on_path.discard(path.pop())
    return None