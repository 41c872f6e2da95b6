"""Argument parsing for the gridpath command line."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

from ...core.grid import Coord


_COORD_RE = re.compile(r"^\(?\s*(-?\d+)\s*[, ]\s*(-?\d+)\s*\)?$")


def parse_coord(text: str) -> Coord:
    """Return a ``(row, col)`` tuple from ``"r,c"``, ``"r c"`` or ``"(r, c)"``."""

    match = _COORD_RE.match(text.strip())
    if match is None:
        raise argparse.ArgumentTypeError(
            f"expected a coordinate like 2,3 but got {text!r}"
        )
    return (int(match.group(1)), int(match.group(2)))


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser used by :func:`gridpath.main.main`."""

    parser = argparse.ArgumentParser(
        prog="gridpath",
        description="Find a shortest 4-connected path on an occupancy grid with A*.",
    )
    parser.add_argument("grid", type=Path, help="grid file (text rows or YAML)")
    parser.add_argument("--start", type=parse_coord, required=True, help="start cell as row,col")
    parser.add_argument("--goal", type=parse_coord, required=True, help="goal cell as row,col")
    parser.add_argument("--config", type=Path, default=None, help="path to a config.yaml")
    parser.add_argument("--no-colour", "--no-color", dest="colour", action="store_false", default=None,
                        help="disable ANSI colours")
    parser.add_argument("--stats", action="store_true", help="print search counters")
    return parser


__all__ = ["build_parser", "parse_coord"]
