"""A* shortest paths on 4-connected occupancy grids."""

from .core.grid import Coord, Grid, load_grid, parse_grid
from .errors import InvalidEndpointError, InvalidGridError, PathfindingError
from .search.astar import SearchResult, SearchStats, find_path, search

__all__ = [
    "Coord",
    "Grid",
    "InvalidEndpointError",
    "InvalidGridError",
    "PathfindingError",
    "SearchResult",
    "SearchStats",
    "find_path",
    "load_grid",
    "parse_grid",
    "search",
]
