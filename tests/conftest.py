# tests/conftest.py
from collections import deque
import random
from typing import Callable, List, Optional

import pytest

from gridpath.core.grid import Coord, Grid


def _bfs_steps(grid: Grid, start: Coord, goal: Coord) -> Optional[int]:
    """Shortest step count by breadth-first search, ``None`` if unreachable."""
    if not grid.is_walkable(start) or not grid.is_walkable(goal):
        return None
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        (r, c), dist = queue.popleft()
        if (r, c) == goal:
            return dist
        for nxt in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if nxt not in seen and grid.is_walkable(nxt):
                seen.add(nxt)
                queue.append((nxt, dist + 1))
    return None


@pytest.fixture
def bfs_steps() -> Callable[[Grid, Coord, Coord], Optional[int]]:
    return _bfs_steps


@pytest.fixture
def random_grid() -> Callable[..., Grid]:
    """Factory for seeded random grids with roughly ``density`` blocked cells."""

    def make(seed: int, rows: int = 12, cols: int = 12, density: float = 0.3) -> Grid:
        rng = random.Random(seed)
        cells: List[List[int]] = [
            [1 if rng.random() < density else 0 for _ in range(cols)]
            for _ in range(rows)
        ]
        return Grid(cells)

    return make
