"""Tests for the command line interface."""

import json

from typer.testing import CliRunner

from unobot.cli import app
from unobot.storage import STATS_KEY

runner = CliRunner()


def test_stats_shows_record(tmp_path) -> None:
    path = tmp_path / "stats.json"
    path.write_text(json.dumps({STATS_KEY: {"wins": 2, "losses": 5}}))
    result = runner.invoke(app, ["stats", "--stats-file", str(path)])
    assert result.exit_code == 0
    assert "Wins: 2" in result.output
    assert "Losses: 5" in result.output


def test_stats_reset(tmp_path) -> None:
    path = tmp_path / "stats.json"
    path.write_text(json.dumps({STATS_KEY: {"wins": 2, "losses": 5}}))
    result = runner.invoke(app, ["stats", "--reset", "--stats-file", str(path)])
    assert result.exit_code == 0
    assert "Stats reset." in result.output
    assert json.loads(path.read_text())[STATS_KEY] == {"wins": 0, "losses": 0}


def test_simulate(tmp_path) -> None:
    result = runner.invoke(app, ["simulate", "--games", "2", "--seed", "4"])
    assert result.exit_code == 0
    assert "Simulation results:" in result.output
    assert "Average turns:" in result.output


def test_play_quit_at_once(tmp_path) -> None:
    path = tmp_path / "stats.json"
    result = runner.invoke(
        app,
        ["play", "--seed", "1", "--bot-delay", "0", "--stats-file", str(path)],
        input="q\n",
    )
    assert result.exit_code == 0
    assert "Your hand" in result.output
    assert "Record: 0 wins, 0 losses" in result.output
    assert not path.exists()


def test_play_rejects_blank_name() -> None:
    result = runner.invoke(app, ["play", "--name", " ", "--no-save"], input="q\n")
    assert result.exit_code != 0
