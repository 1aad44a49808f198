"""Tests for the command line entry point."""

import pytest

from snake_arcade import __main__ as cli
from snake_arcade import config, game


@pytest.fixture
def runs(monkeypatch):
    calls = []
    monkeypatch.setattr(game, "main", lambda *args: calls.append(args) or 0)
    return calls


def test_defaults_come_from_config(runs):
    assert cli.main([]) == 0
    assert runs == [(config.GRID_SIZE, config.CELL_SIZE, config.TICK_MS, None)]


def test_flags_forwarded(runs):
    cli.main(["--grid-size", "12", "--cell-size", "30", "--tick-ms", "80", "--seed", "5", "--log-level", "DEBUG"])
    assert runs == [(12, 30, 80, 5)]


@pytest.mark.parametrize(
    "argv",
    [["--grid-size", "2"], ["--cell-size", "0"], ["--tick-ms", "-5"], ["--log-level", "LOUD"]],
)
def test_bad_arguments_exit(argv, runs):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2
    assert runs == []
