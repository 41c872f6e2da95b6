"""A* shortest path search on a 4-connected occupancy grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from heapq import heappop, heappush
from itertools import count
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

from ..config import CONFIG, ENDPOINT_POLICIES, TIE_BREAKS
from ..core.grid import Coord, Grid, as_coord
from ..errors import InvalidEndpointError
from .heuristic import manhattan
from .neighbors import neighbors

logger = logging.getLogger(__name__)

# Cost of one orthogonal step
STEP_COST = 1


@dataclass(eq=False)
class SearchNode:
    """One discovered cell together with its best known route from start."""

    coord: Coord
    g: int
    h: int
    parent: Optional["SearchNode"] = None

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchStats:
    """Counters collected during a single search."""

    expanded: int = 0
    pushed: int = 0
    stale_skipped: int = 0
    discovered: int = 0


@dataclass
class SearchResult:
    """Path from start to goal (empty if unreachable) and search counters."""

    path: List[Coord]
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def steps(self) -> int:
        """Number of moves along ``path``; ``-1`` when no path exists."""
        return len(self.path) - 1


def _reconstruct(node: Optional[SearchNode]) -> List[Coord]:
    path: List[Coord] = []
    while node is not None:
        path.append(node.coord)
        node = node.parent
    path.reverse()
    return path


def _endpoint_problem(grid: Grid, coord: Coord, name: str) -> Optional[str]:
    if not grid.in_bounds(coord):
        return f"{name} {coord} is outside grid of shape {grid.shape}"
    if not grid.is_walkable(coord):
        return f"{name} {coord} is on a blocked cell"
    return None


def search(
    grid: Grid | Sequence[Sequence[int]],
    start: Coord,
    goal: Coord,
    *,
    endpoint_policy: str | None = None,
    tie_break: str | None = None,
) -> SearchResult:
    """Run A* from ``start`` to ``goal`` and return a :class:`SearchResult`.

    ``endpoint_policy`` decides what happens when ``start`` or ``goal`` is
    out of bounds or blocked: ``"reject"`` raises
    :class:`InvalidEndpointError`, ``"unreachable"`` returns an empty path.
    ``tie_break`` orders nodes of equal ``f``: ``"insertion"`` pops the
    earliest pushed first, ``"coordinate"`` pops the lowest ``(row, col)``
    first. Both default to the loaded configuration.
    """

    policy = endpoint_policy or CONFIG.search.endpoint_policy
    order = tie_break or CONFIG.search.tie_break
    if policy not in ENDPOINT_POLICIES:
        raise ValueError(f"unknown endpoint policy {policy!r}")
    if order not in TIE_BREAKS:
        raise ValueError(f"unknown tie break {order!r}")

    if not isinstance(grid, Grid):
        grid = Grid(grid)
    start = as_coord(start, "start")
    goal = as_coord(goal, "goal")

    stats = SearchStats()
    for coord, name in ((start, "start"), (goal, "goal")):
        problem = _endpoint_problem(grid, coord, name)
        if problem is None:
            continue
        if policy == "reject":
            raise InvalidEndpointError(problem)
        logger.warning("[A*] %s; treating goal as unreachable", problem)
        return SearchResult([], stats)

    logger.debug("[A*] search start=%s goal=%s grid=%s", start, goal, grid.shape)

    # Heap entries: (f, secondary key, insertion counter, node)
    open_set: List[Tuple[int, Any, int, SearchNode]] = []
    registry: Dict[Coord, SearchNode] = {}
    seq = count()

    def push(node: SearchNode) -> None:
        secondary = node.coord if order == "coordinate" else 0
        heappush(open_set, (node.f, secondary, next(seq), node))
        registry[node.coord] = node
        stats.pushed += 1

    push(SearchNode(start, 0, manhattan(start, goal)))

    while open_set:
        _, _, _, current = heappop(open_set)

        if registry[current.coord] is not current:
            stats.stale_skipped += 1
            continue

        if current.coord == goal:
            path = _reconstruct(current)
            stats.discovered = len(registry)
            logger.debug(
                "[A*] path found: steps=%d expanded=%d pushed=%d",
                len(path) - 1,
                stats.expanded,
                stats.pushed,
            )
            return SearchResult(path, stats)

        stats.expanded += 1
        tentative_g = current.g + STEP_COST
        for nb in neighbors(current.coord, grid):
            known = registry.get(nb)
            if known is not None and tentative_g >= known.g:
                continue
            push(SearchNode(nb, tentative_g, manhattan(nb, goal), current))

    stats.discovered = len(registry)
    logger.debug(
        "[A*] no path from %s to %s: expanded=%d", start, goal, stats.expanded
    )
    return SearchResult([], stats)


def find_path(
    grid: Grid | Sequence[Sequence[int]], start: Coord, goal: Coord
) -> List[Coord]:
    """Return the shortest path from ``start`` to ``goal`` using A*.

    The path includes both ends. An empty list means ``goal`` cannot be
    reached from ``start``.
    """

    return search(grid, start, goal).path


__all__ = ["SearchNode", "SearchResult", "SearchStats", "find_path", "search"]
