"""Exception types raised by the pathfinder."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base error for pathfinding input problems."""


class InvalidGridError(PathfindingError, ValueError):
    """Raised when a grid is empty, ragged or holds non-integer cells."""


class InvalidEndpointError(PathfindingError, ValueError):
    """Raised when a start or goal coordinate cannot be searched from."""


__all__ = ["PathfindingError", "InvalidGridError", "InvalidEndpointError"]
