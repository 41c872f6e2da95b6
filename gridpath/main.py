"""Command line entry point: load a grid, search it and print the route."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence
import logging
import sys

from .config import CONFIG_PATH, Config, load_config
from .core.grid import load_grid
from .errors import PathfindingError
from .search.astar import search
from .utils.cli.command_parser import build_parser
from .utils.cli.terminal_view import TerminalView

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_INVALID = 2


def configure_logging(cfg: Config) -> None:
    """Apply the root and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def _resolve_config_path(path: Path | None) -> Path:
    if path is not None:
        return path
    local = Path("config.yaml")
    return local if local.is_file() else CONFIG_PATH


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(_resolve_config_path(args.config))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID
    configure_logging(cfg)

    try:
        grid = load_grid(args.grid)
        result = search(
            grid,
            args.start,
            args.goal,
            endpoint_policy=cfg.search.endpoint_policy,
            tie_break=cfg.search.tie_break,
        )
    except OSError as exc:
        logger.error("Could not read grid file %s: %s", args.grid, exc)
        return EXIT_INVALID
    except PathfindingError as exc:
        logger.error("%s", exc)
        return EXIT_INVALID

    colour = cfg.render.colour if args.colour is None else args.colour
    view = TerminalView(colour=colour, path_glyph=cfg.render.path_glyph)
    view.render(grid, result.path)

    if result.found:
        print(" -> ".join(f"({r}, {c})" for r, c in result.path))
        print(f"steps: {result.steps}")
    else:
        print(f"no path from {args.start} to {args.goal}")

    if args.stats:
        s = result.stats
        print(
            f"expanded: {s.expanded}  pushed: {s.pushed}  "
            f"stale skipped: {s.stale_skipped}  discovered: {s.discovered}"
        )

    return EXIT_FOUND if result.found else EXIT_NO_PATH


if __name__ == "__main__":
    sys.exit(main())
