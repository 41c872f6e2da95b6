"""Simple configuration loader for gridpath."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"

ENDPOINT_POLICIES = ("reject", "unreachable")
TIE_BREAKS = ("insertion", "coordinate")


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    endpoint_policy: str = "reject"
    tie_break: str = "insertion"


@dataclass
class LoggingConfig:
    """Root and per-module log levels."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class RenderConfig:
    """Options for the terminal grid view."""

    colour: bool = True
    path_glyph: str = "*"


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    render: RenderConfig = field(default_factory=RenderConfig)


def _choice(value: Any, allowed: tuple[str, ...], key: str) -> str:
    text = str(value).lower()
    if text not in allowed:
        raise ValueError(
            f"{key} must be one of {', '.join(allowed)}; got {value!r}"
        )
    return text


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"{name} section must be a mapping")
    return section


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = _section(data, "search")
    search = SearchConfig(
        endpoint_policy=_choice(
            search_data.get("endpoint_policy", "reject"),
            ENDPOINT_POLICIES,
            "search.endpoint_policy",
        ),
        tie_break=_choice(
            search_data.get("tie_break", "insertion"),
            TIE_BREAKS,
            "search.tie_break",
        ),
    )

    logging_data = _section(data, "logging")
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v) for k, v in _section(logging_data, "module_levels").items()
        },
    )

    render_data = _section(data, "render")
    glyph = str(render_data.get("path_glyph", "*")) or "*"
    render = RenderConfig(
        colour=bool(render_data.get("colour", render_data.get("color", True))),
        path_glyph=glyph[:1],
    )

    return Config(search=search, logging=log_cfg, render=render)


def load_config(path: str | Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if not path.is_file():
        return _parse_config({})
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"{path}: invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: config must be a mapping")
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "LoggingConfig",
    "RenderConfig",
    "SearchConfig",
    "load_config",
]
