"""Tests for running wgraph as a module (`python -m wgraph`)."""

from __future__ import annotations

import runpy
from pathlib import Path
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["wgraph", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("wgraph", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_runs_summary(tmp_path: Path, capsys) -> None:
    graph_file = tmp_path / "pair.txt"
    graph_file.write_text("2 1\n1 2 9\n")
    with patch("sys.argv", ["wgraph", "--quiet", str(graph_file), "1", "2"]):
        runpy.run_module("wgraph", run_name="__main__")
    assert "pair MST= 9 SP= 9 Path: 1 2 Time:" in capsys.readouterr().out
