"""Orthogonal neighbour generation on an occupancy grid."""

from __future__ import annotations

from typing import List, Tuple

from ..core.grid import Coord, Grid


# Up, down, left, right. The order fixes tie-breaking downstream.
DIRECTIONS: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def neighbors(coord: Coord, grid: Grid) -> List[Coord]:
    """Return the walkable in-bounds cells one step away from ``coord``."""

    row, col = coord
    result: List[Coord] = []
    for dr, dc in DIRECTIONS:
        candidate = (row + dr, col + dc)
        if grid.is_walkable(candidate):
            result.append(candidate)
    return result


__all__ = ["DIRECTIONS", "neighbors"]
