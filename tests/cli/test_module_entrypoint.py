"""`python -m graphsuite` dispatches to the same CLI as the console script."""

from __future__ import annotations

import runpy
from pathlib import Path
from unittest.mock import patch

import pytest

from graphsuite.graph.io import save_graph
from graphsuite.logging import reset_logging


def run_module(*argv: str) -> None:
    with patch("sys.argv", ["graphsuite", *argv]):
        runpy.run_module("graphsuite", run_name="__main__")


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    reset_logging()


def test_shortest_path_via_module(tmp_path: Path, cities, capsys) -> None:
    g, ids = cities
    path = tmp_path / "cities.yaml"
    save_graph(g, path)
    run_module("shortest-path", str(path), str(ids["Most"]), str(ids["Plzen"]))
    assert "Distance: 194" in capsys.readouterr().out


def test_module_error_exit_code(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        run_module("mst", str(tmp_path / "missing.json"))
    assert exc_info.value.code == 1


def test_module_without_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        run_module()
    assert exc_info.value.code == 0
    assert "max-flow" in capsys.readouterr().out
