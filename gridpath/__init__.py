"""Path-finding algorithms on 4-connected grids of open and blocked cells."""

__version__ = "0.1.0"