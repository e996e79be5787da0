from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

import kk.cli as cli
from kk.store import Store

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path: Path):
    for name in ("KK_DB_PATH", "KK_HIGHLIGHT_COLOR", "EDITOR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(cli, "console", Console(width=200))
    monkeypatch.chdir(tmp_path)


def test_no_command_launches_board(monkeypatch, tmp_path: Path):
    launched = []
    monkeypatch.setattr(cli, "_interactive_board", lambda s: launched.append(s))

    result = runner.invoke(cli.app, ["-d", str(tmp_path / "b.db"), "-c", "cyan"])

    assert result.exit_code == 0, result.output
    assert len(launched) == 1
    assert launched[0].KK_DB_PATH == tmp_path / "b.db"
    assert launched[0].KK_HIGHLIGHT_COLOR == "cyan"


def test_invalid_colour_exits_with_error(monkeypatch):
    monkeypatch.setattr(cli, "_interactive_board", lambda s: pytest.fail("should not launch"))

    result = runner.invoke(cli.app, ["--highlight-color", "not-a-colour"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_boards_lists_metas(tmp_path: Path):
    db = tmp_path / "b.db"
    store = Store.open(db)
    store.create_board("Home", ["Todo"])
    store.create_board("Work", ["Todo", "Done"])
    store.close()

    result = runner.invoke(cli.app, ["--database-path", str(db), "boards"])

    assert result.exit_code == 0, result.output
    assert "Home" in result.output
    assert "Work" in result.output
    assert "Todo, Done" in result.output


def test_boards_when_empty(tmp_path: Path):
    result = runner.invoke(cli.app, ["-d", str(tmp_path / "empty.db"), "boards"])

    assert result.exit_code == 0, result.output
    assert "No boards yet" in result.output


def test_status_shows_configuration(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("EDITOR", "nano")

    result = runner.invoke(cli.app, ["-d", str(tmp_path / "b.db"), "status"])

    assert result.exit_code == 0, result.output
    assert "Configuration" in result.output
    assert "nano" in result.output
