"""ASCII terminal renderer for grids and found paths."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from ...core.grid import Coord, Grid


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_FREE = (".", "white")
_BLOCKED = ("#", "blue")
_START = ("S", "green")
_GOAL = ("G", "red")


class TerminalView:
    """Draw a grid with an optional path overlaid."""

    def __init__(self, colour: bool = True, path_glyph: str = "*") -> None:
        self.colour = colour
        self.path_glyph = (path_glyph or "*")[:1]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def format(self, grid: Grid, path: Sequence[Coord] = ()) -> str:
        """Return ``grid`` as text, one line per row."""

        overlay = _path_overlay(path, self.path_glyph)
        lines: list[str] = []
        for r, row in enumerate(grid):
            cells: list[str] = []
            for c, value in enumerate(row):
                glyph, colour = overlay.get((r, c)) or (_FREE if value == 0 else _BLOCKED)
                if self.colour:
                    cells.append(f"{_COLOURS[colour]}{glyph}")
                else:
                    cells.append(glyph)
            if self.colour:
                cells.append(_COLOURS["reset"])
            lines.append("".join(cells))
        return "\n".join(lines)

    def render(
        self,
        grid: Grid,
        path: Sequence[Coord] = (),
        stream: TextIO | None = None,
    ) -> None:
        """Write :meth:`format` output to ``stream`` (stdout by default)."""

        out = stream if stream is not None else sys.stdout
        out.write(self.format(grid, path) + "\n")
        out.flush()


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def _path_overlay(path: Iterable[Coord], glyph: str) -> dict[Coord, tuple[str, str]]:
    cells = list(path)
    overlay: dict[Coord, tuple[str, str]] = {}
    for coord in cells[1:-1]:
        overlay[tuple(coord)] = (glyph, "yellow")
    if cells:
        overlay[tuple(cells[0])] = _START
        overlay[tuple(cells[-1])] = _GOAL
    return overlay


__all__ = ["TerminalView"]
