[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridpath"
version = "0.1.0"
description = "Shortest-path and path-finding algorithms on 4-connected grids of open and blocked cells"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pathfinding",
    "grid",
    "bfs",
    "dfs",
    "dijkstra",
    "bellman-ford",
    "floyd-warshall",
    "a-star",
    "alt",
    "bidirectional-search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridpath = "gridpath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gridpath"]

[tool.hatch.build.targets.sdist]
include = ["gridpath", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
