"""Immutable occupancy grid and grid file loading."""

from __future__ import annotations

import numbers
from pathlib import Path
from typing import Any, Iterator, List, Sequence, Tuple

import yaml

from ..errors import InvalidEndpointError, InvalidGridError


Coord = Tuple[int, int]

WALKABLE = 0

# Glyphs accepted in compact text rows
_GLYPHS = {".": 0, "#": 1}

_YAML_SUFFIXES = {".yaml", ".yml"}


class Grid:
    """Rectangular grid of integer cells where ``0`` is walkable.

    Cells are addressed as ``(row, col)``. The grid copies its input into a
    tuple of tuples so it cannot change while a search is running.
    """

    __slots__ = ("_cells", "_rows", "_cols")

    def __init__(self, rows: Sequence[Sequence[Any]]) -> None:
        if isinstance(rows, Grid):
            cells = rows._cells
        else:
            cells = _freeze(rows)
        self._cells: Tuple[Tuple[int, ...], ...] = cells
        self._rows = len(cells)
        self._cols = len(cells[0])

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return (self._rows, self._cols)

    # ------------------------------------------------------------------
    # Cell queries
    # ------------------------------------------------------------------
    def in_bounds(self, coord: Coord) -> bool:
        """Return ``True`` if ``coord`` lies inside the grid."""
        row, col = coord
        return 0 <= row < self._rows and 0 <= col < self._cols

    def is_walkable(self, coord: Coord) -> bool:
        """Return ``True`` if ``coord`` is in bounds and its cell is ``0``."""
        if not self.in_bounds(coord):
            return False
        row, col = coord
        return self._cells[row][col] == WALKABLE

    def __getitem__(self, coord: Coord) -> int:
        row, col = coord
        if not self.in_bounds(coord):
            raise IndexError(f"{coord} is outside grid of shape {self.shape}")
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return iter(self._cells)

    def __len__(self) -> int:
        return self._rows

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Grid):
            return self._cells == other._cells
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, cols={self._cols})"

    def to_lists(self) -> List[List[int]]:
        """Return a mutable copy of the cells."""
        return [list(row) for row in self._cells]


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _freeze(rows: Sequence[Sequence[Any]]) -> Tuple[Tuple[int, ...], ...]:
    if rows is None or isinstance(rows, (str, bytes)):
        raise InvalidGridError("grid must be a sequence of rows")
    try:
        raw_rows = list(rows)
    except TypeError as exc:
        raise InvalidGridError("grid must be a sequence of rows") from exc
    if not raw_rows:
        raise InvalidGridError("grid has no rows")

    frozen: List[Tuple[int, ...]] = []
    width = None
    for r, row in enumerate(raw_rows):
        if isinstance(row, (str, bytes)):
            raise InvalidGridError(f"row {r} is not a sequence of integers")
        try:
            values = list(row)
        except TypeError as exc:
            raise InvalidGridError(f"row {r} is not a sequence of integers") from exc
        if width is None:
            width = len(values)
            if width == 0:
                raise InvalidGridError("grid has no columns")
        elif len(values) != width:
            raise InvalidGridError(
                f"row {r} has {len(values)} cells, expected {width}"
            )
        for c, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidGridError(
                    f"cell ({r}, {c}) is {value!r}, expected an integer"
                )
        frozen.append(tuple(int(v) for v in values))
    return tuple(frozen)


def as_coord(value: Any, name: str = "coordinate") -> Coord:
    """Return ``value`` as a ``(row, col)`` tuple of ints.

    Raises :class:`InvalidEndpointError` if ``value`` is not a pair of
    integers.
    """

    try:
        row, col = value
    except (TypeError, ValueError) as exc:
        raise InvalidEndpointError(
            f"{name} must be a (row, col) pair, got {value!r}"
        ) from exc
    if not all(isinstance(v, numbers.Integral) and not isinstance(v, bool) for v in (row, col)):
        raise InvalidEndpointError(
            f"{name} must hold integers, got {value!r}"
        )
    return (int(row), int(col))


def _parse_row(line: str, lineno: int) -> List[int]:
    tokens = line.split()
    if len(tokens) > 1:
        try:
            return [int(tok) for tok in tokens]
        except ValueError as exc:
            raise InvalidGridError(
                f"line {lineno}: expected whitespace separated integers"
            ) from exc

    token = tokens[0]
    if token.startswith("-") and token[1:].isdecimal():
        return [int(token)]

    row: List[int] = []
    for ch in token:
        if ch in _GLYPHS:
            row.append(_GLYPHS[ch])
        elif ch.isdecimal():
            row.append(int(ch))
        else:
            raise InvalidGridError(f"line {lineno}: unknown cell glyph {ch!r}")
    return row


def parse_grid(text: str) -> Grid:
    """Parse ``text`` into a :class:`Grid`.

    Each non-blank line is one row. A row is either whitespace separated
    integers (``0 1 0``) or a compact run of glyphs (``.#.`` or ``010``).
    A lone token is read as compact glyphs, so ``10`` is two cells; the one
    exception is a negative integer such as ``-1``, which is a single cell.
    Single-column grids holding multi-digit values need the YAML format.
    Lines starting with ``;`` are ignored.
    """

    rows: List[List[int]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith(";"):
            continue
        rows.append(_parse_row(line, lineno))
    return Grid(rows)


def load_grid(path: str | Path) -> Grid:
    """Load a grid from ``path``.

    YAML files hold either a list of rows or a mapping with a ``grid`` key.
    Any other file is read as text via :func:`parse_grid`.
    """

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidGridError(f"{p}: not a UTF-8 text file") from exc
    if p.suffix.lower() not in _YAML_SUFFIXES:
        return parse_grid(text)

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidGridError(f"{p}: invalid YAML: {exc}") from exc
    if isinstance(data, dict):
        data = data.get("grid")
    if not isinstance(data, list):
        raise InvalidGridError(f"{p}: expected a list of rows or a 'grid' key")
    return Grid(data)


__all__ = ["Coord", "Grid", "WALKABLE", "as_coord", "load_grid", "parse_grid"]
