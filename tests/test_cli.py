import argparse
import logging
from pathlib import Path

import pytest

from gridpath import main as gridpath_main
from gridpath.config import Config, LoggingConfig
from gridpath.utils.cli.command_parser import build_parser, parse_coord


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text)
    return path


@pytest.fixture(autouse=True)
def _keep_test_logging(request, monkeypatch):
    # basicConfig(force=True) would drop the pytest capture handlers.
    if request.node.name.startswith("test_configure_logging"):
        return
    monkeypatch.setattr(gridpath_main, "configure_logging", lambda cfg: None)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    return _write(tmp_path, "config.yaml", "render:\n  colour: false\n")


@pytest.mark.parametrize("text", ["2,3", "2, 3", "2 3", "(2, 3)", " (2,3) "])
def test_parse_coord_formats(text):
    assert parse_coord(text) == (2, 3)


@pytest.mark.parametrize("text", ["", "2", "a,b", "1,2,3", "1;2"])
def test_parse_coord_invalid(text):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_coord(text)


def test_parser_requires_start_and_goal():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["grid.txt", "--start", "0,0"])


def test_parser_colour_flag_defaults_to_config():
    args = build_parser().parse_args(["g.txt", "--start", "0,0", "--goal", "1,1"])
    assert args.colour is None
    args = build_parser().parse_args(["g.txt", "--start", "0,0", "--goal", "1,1", "--no-color"])
    assert args.colour is False


def test_main_prints_path(tmp_path: Path, config_file: Path, capsys):
    grid = _write(tmp_path, "g.txt", "...\n.#.\n...\n")
    code = gridpath_main.main(
        [str(grid), "--start", "0,0", "--goal", "2,2", "--config", str(config_file)]
    )
    out = capsys.readouterr().out
    assert code == gridpath_main.EXIT_FOUND
    assert out.splitlines()[:3] == ["S..", "*#.", "**G"]
    assert "(0, 0) -> (1, 0) -> (2, 0) -> (2, 1) -> (2, 2)" in out
    assert "steps: 4" in out


def test_main_reports_no_path(tmp_path: Path, config_file: Path, capsys):
    grid = _write(tmp_path, "g.txt", ".#\n#.\n")
    code = gridpath_main.main(
        [str(grid), "--start", "0,0", "--goal", "1,1", "--config", str(config_file), "--stats"]
    )
    out = capsys.readouterr().out
    assert code == gridpath_main.EXIT_NO_PATH
    assert "no path from (0, 0) to (1, 1)" in out
    assert "expanded: 1" in out


def test_main_rejects_blocked_goal(tmp_path: Path, config_file: Path, caplog):
    grid = _write(tmp_path, "g.txt", ".#\n..\n")
    code = gridpath_main.main(
        [str(grid), "--start", "0,0", "--goal", "0,1", "--config", str(config_file)]
    )
    assert code == gridpath_main.EXIT_INVALID
    assert "blocked" in caplog.text


def test_main_unreachable_policy_from_config(tmp_path: Path, capsys):
    cfg = _write(
        tmp_path,
        "config.yaml",
        "search:\n  endpoint_policy: unreachable\nrender:\n  colour: false\n",
    )
    grid = _write(tmp_path, "g.txt", ".#\n..\n")
    code = gridpath_main.main([str(grid), "--start", "0,0", "--goal", "5,5", "--config", str(cfg)])
    assert code == gridpath_main.EXIT_NO_PATH
    assert "no path" in capsys.readouterr().out


def test_main_missing_grid_file(tmp_path: Path, config_file: Path):
    code = gridpath_main.main(
        [str(tmp_path / "nope.txt"), "--start", "0,0", "--goal", "0,0", "--config", str(config_file)]
    )
    assert code == gridpath_main.EXIT_INVALID


def test_main_malformed_grid_file(tmp_path: Path, config_file: Path):
    grid = _write(tmp_path, "g.txt", "..\n.\n")
    code = gridpath_main.main(
        [str(grid), "--start", "0,0", "--goal", "0,0", "--config", str(config_file)]
    )
    assert code == gridpath_main.EXIT_INVALID


def test_main_invalid_config(tmp_path: Path, capsys):
    cfg = _write(tmp_path, "config.yaml", "search:\n  tie_break: random\n")
    grid = _write(tmp_path, "g.txt", "..\n")
    code = gridpath_main.main([str(grid), "--start", "0,0", "--goal", "0,1", "--config", str(cfg)])
    assert code == gridpath_main.EXIT_INVALID
    assert "search.tie_break" in capsys.readouterr().err


@pytest.mark.parametrize("body", ["search: [unclosed\n", "- a\n"])
def test_main_malformed_config(tmp_path: Path, capsys, body: str):
    cfg = _write(tmp_path, "config.yaml", body)
    grid = _write(tmp_path, "g.txt", "..\n")
    code = gridpath_main.main([str(grid), "--start", "0,0", "--goal", "0,1", "--config", str(cfg)])
    assert code == gridpath_main.EXIT_INVALID
    assert capsys.readouterr().err.startswith("error: ")


def test_main_non_utf8_grid_file(tmp_path: Path, config_file: Path, caplog):
    grid = tmp_path / "g.txt"
    grid.write_bytes(b"\xff\xfe\x00")
    code = gridpath_main.main(
        [str(grid), "--start", "0,0", "--goal", "0,0", "--config", str(config_file)]
    )
    assert code == gridpath_main.EXIT_INVALID
    assert "not a UTF-8 text file" in caplog.text


def test_bundled_maze_yaml(config_file: Path, capsys):
    grid = Path(__file__).resolve().parents[1] / "grids" / "maze.yaml"
    code = gridpath_main.main([str(grid), "--start", "0,0", "--goal", "4,3", "--config", str(config_file)])
    assert code == gridpath_main.EXIT_FOUND
    assert "steps: 11" in capsys.readouterr().out


def test_configure_logging_applies_module_levels(monkeypatch, caplog):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    cfg = Config(
        logging=LoggingConfig(
            global_level="WARNING",
            module_levels={"gridpath.test_module": "DEBUG", "gridpath.other": "LOUD"},
        )
    )
    with caplog.at_level(logging.WARNING, logger="gridpath.main"):
        gridpath_main.configure_logging(cfg)
    assert calls[0]["level"] == logging.WARNING
    assert calls[0]["force"] is True
    assert logging.getLogger("gridpath.test_module").level == logging.DEBUG
    assert "Invalid log level 'LOUD'" in caplog.text
