"""Command-line front end: run one search on a grid and report the result."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from gridpath.alt import alt
from gridpath.bellman_ford import bellman_ford
from gridpath.bfs import bfs
from gridpath.bidirectional_astar import bidirectional_astar
from gridpath.bidirectional_dijkstra import bidirectional_dijkstra
from gridpath.dfs import dfs
from gridpath.dijkstra import dijkstra
from gridpath.floyd_warshall import floyd_warshall
from gridpath.grid import Cell, Grid, format_path, render_map

Search = Callable[[Grid, Cell, Cell], "list[Cell] | None"]


@dataclass(frozen=True)
class _Algorithm:
    label: str
    search: Search


ALGORITHMS: dict[str, _Algorithm] = {
    "alt": _Algorithm("ALT", alt),
    "bfs": _Algorithm("BFS", bfs),
    "bellman-ford": _Algorithm("Bellman-Ford", bellman_ford),
    "bidirectional-astar": _Algorithm("Bidirectional A*", bidirectional_astar),
    "bidirectional-dijkstra": _Algorithm(
        "Bidirectional Dijkstra", bidirectional_dijkstra
    ),
    "dfs": _Algorithm("DFS", dfs),
    "dijkstra": _Algorithm("Dijkstra", dijkstra),
    "floyd-warshall": _Algorithm("Floyd-Warshall", floyd_warshall),
}


def run(name: str, grid: Grid, src: Cell, dst: Cell) -> str:
    """Run the named search and return the report text, timing included.

    Raises ValueError for an unknown algorithm name.
    """
    try:
        algorithm = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown algorithm: {name!r}") from None

    start = time.perf_counter()
    path = algorithm.search(grid, src, dst)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    parts: list[str] = []
    if path is None:
        parts.append("Failed to find path.\n")
    else:
        parts.append("\nPath Map:\n")
        parts.append(render_map(grid, path) + "\n")
        parts.append("\nPath Coordinates:\n")
        coords = format_path(path)
        if coords:
            parts.append(coords + "\n")
    parts.append(
        f"\n{algorithm.label} Algorithm Execution Time: "
        f"{elapsed_ms:.3f} milliseconds\n"
    )
    return "".join(parts)


def _cell(text: str) -> Cell:
    try:
        row_text, col_text = text.split(",")
        return int(row_text), int(col_text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected a cell as ROW,COL, got {text!r}"
        ) from None


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="Find a path between two cells of a grid.",
    )
    parser.add_argument("algorithm", choices=sorted(ALGORITHMS))
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--cols", type=int, default=8)
    parser.add_argument("--src", type=_cell, default=(1, 0), metavar="ROW,COL")
    parser.add_argument("--dst", type=_cell, default=(6, 7), metavar="ROW,COL")
    parser.add_argument(
        "--blocked",
        type=_cell,
        action="append",
        default=[],
        metavar="ROW,COL",
        help="mark a cell as blocked; may be given more than once",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen search and print its report."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.rows < 1 or args.cols < 1:
        parser.error("the grid needs at least one row and one column")

    blocked = set(args.blocked)
    grid = Grid(
        [
            [1 if (row, col) in blocked else 0 for col in range(args.cols)]
            for row in range(args.rows)
        ]
    )
    print(run(args.algorithm, grid, args.src, args.dst), end="")
    return 0