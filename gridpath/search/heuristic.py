"""Distance estimates for grid search."""

from __future__ import annotations

from ..core.grid import Coord


def manhattan(a: Coord, b: Coord) -> int:
    """Return the Manhattan distance between ``a`` and ``b``.

    Admissible and consistent for a 4-neighbour grid with unit step costs,
    so A* using it returns shortest paths.
    """

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


__all__ = ["manhattan"]
