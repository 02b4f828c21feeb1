# gridpath

Path finding on small rectangular grids. A grid is made of cells that are
either open (value `0`) or blocked (any other value); moves go one step up,
down, left or right. The package offers several classic search algorithms
over the same grid model, so their results and running times can be
compared side by side:

| Function                  | Module                            | Algorithm                          |
|---------------------------|-----------------------------------|------------------------------------|
| `bfs`                     | `gridpath.bfs`                    | Breadth-first search               |
| `dfs`                     | `gridpath.dfs`                    | Depth-first search (backtracking)  |
| `dijkstra`                | `gridpath.dijkstra`               | Dijkstra with a binary heap        |
| `bellman_ford`            | `gridpath.bellman_ford`           | Bellman–Ford edge relaxation       |
| `floyd_warshall`          | `gridpath.floyd_warshall`         | All-pairs Floyd–Warshall           |
| `alt`                     | `gridpath.alt`                    | A* with landmark (ALT) heuristic   |
| `bidirectional_astar`     | `gridpath.bidirectional_astar`    | Bidirectional A*                   |
| `bidirectional_dijkstra`  | `gridpath.bidirectional_dijkstra` | Bidirectional Dijkstra             |

Every search takes the same three arguments — a grid, a source cell and a
destination cell — where a cell is a `(row, column)` tuple. Each returns a
list of cells, or `None` when there is no path or when either end point lies
outside the grid or is blocked.

## What each search returns

The searches do not all shape their result the same way:

- `bfs`, `alt` and `floyd_warshall` list a shortest path from the source to
  the destination, both ends included.
- `dijkstra` and `bellman_ford` list a shortest path the other way round,
  from the destination back to the source.
- `dfs` lists the first simple path it finds from source to destination,
  trying neighbours left, right, down, up; it is not necessarily shortest.
- `bidirectional_astar` and `bidirectional_dijkstra` list the forward half
  (source to the meeting cell) followed by the backward half (meeting cell
  to destination), so the meeting cell appears twice.

When the source and the destination are the same cell: `alt`,
`bidirectional_astar` and `bidirectional_dijkstra` return `None`;
`floyd_warshall` returns an empty list; `bfs`, `dfs`, `dijkstra` and
`bellman_ford` return a one-cell path.

## Installation

```
pip install .
```

Python 3.10 or later is required; the package has no runtime dependencies.

## Library use

```python
from gridpath.grid import Grid, render_map, format_path
from gridpath.bfs import bfs

grid = Grid.empty(8, 8)
path = bfs(grid, (1, 0), (6, 7))

print(render_map(grid, path))   # the grid with path cells marked '*'
print(format_path(path))        # one "(row, col)" line per cell
```

`Grid(cells)` takes rows of integers; it raises `ValueError` if the grid is
empty or its rows differ in length. `Grid.empty(rows, cols)` builds an
all-open grid. A grid answers the questions every algorithm asks of it:

- `grid.rows` and `grid.cols` give its size,
- `grid.in_range(cell)` tells whether a cell lies inside it,
- `grid.is_open(cell)` tells whether a cell is inside and free to walk on,
- `grid.neighbours(cell)` yields the open cells one step away
  (left, right, down, up),
- `grid.accepts(src, dst)` checks that both end points are usable.

The ALT search precomputes breadth-first distances from the four corners of
the grid; `LandmarkTable(grid).heuristic(cell, dst)` in `gridpath.alt`
returns the resulting bound, which is never smaller than the Manhattan
distance.

To run one algorithm by name and time it from code, use
`gridpath.cli.run(name, grid, src, dst)`. It returns the report text (path
map, path coordinates and execution time in milliseconds, or
`Failed to find path.`) and raises `ValueError` for an unknown name.

## Command line

Installing the package provides the `gridpath` command:

```
gridpath bfs
gridpath dijkstra --rows 8 --cols 8 --src 1,0 --dst 6,7 --blocked 3,3 --blocked 3,4
```

The first argument chooses the algorithm: `alt`, `bellman-ford`, `bfs`,
`bidirectional-astar`, `bidirectional-dijkstra`, `dfs`, `dijkstra` or
`floyd-warshall`. Options:

- `--rows`, `--cols` — grid size (default 8 by 8),
- `--src`, `--dst` — end points as `ROW,COL` (defaults `1,0` and `6,7`),
- `--blocked ROW,COL` — mark a cell as blocked; may be repeated.

The command prints the path map, the path coordinates and how long the
search took.

## Limits

Grids exist only in memory: the package does not read grids from files, and
on the command line blocked cells are given one by one with `--blocked`.
Every step costs one; there are no weighted cells and no diagonal moves.

## Tests

```
pip install ".[test]"
pytest
```