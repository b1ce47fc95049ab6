from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from graphpoet.cli import app

DATA = Path(__file__).parent / "data"
MUGAR = str(DATA / "mugar-omni-theater.txt")


@pytest.fixture(autouse=True)
def isolated_cwd(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("GRAPHPOET_CORPUS", "GRAPHPOET_ENCODING", "GRAPHPOET_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_poem_from_arguments() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["poem", "--corpus", MUGAR, "Test", "the", "system."])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Test of the system."


def test_poem_from_stdin() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["poem", "--corpus", MUGAR], input="Test the system.\n\nTest.\n")
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["Test of the system.", "", "Test."]


def test_poem_uses_configured_corpus(monkeypatch) -> None:
    monkeypatch.setenv("GRAPHPOET_CORPUS", MUGAR)
    runner = CliRunner()
    result = runner.invoke(app, ["poem", "Test", "the", "system."])
    assert result.exit_code == 0
    assert "Test of the system." in result.stdout


def test_poem_without_corpus() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["poem", "Test"])
    assert result.exit_code == 2
    assert "no corpus" in result.output


def test_poem_missing_corpus(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["poem", "--corpus", str(tmp_path / "missing.txt"), "Test"])
    assert result.exit_code == 1
    assert "Cannot read corpus" in result.output


def test_bad_config_file(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--config", str(tmp_path / "missing.yaml"), "poem", "--corpus", MUGAR, "x"])
    assert result.exit_code == 2
    assert "Config file not found" in result.output


def test_graph_table(tmp_path: Path) -> None:
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("a b a b c\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["graph", "--corpus", str(corpus)])
    assert result.exit_code == 0
    rows = [line.split() for line in result.stdout.splitlines() if line.count("│") >= 3]
    cells = [[cell for cell in row if cell != "│"] for row in rows]
    assert ["a", "b", "2"] in cells
    assert ["b", "a", "1"] in cells
    assert ["b", "c", "1"] in cells


def test_graph_limit_and_plain(tmp_path: Path) -> None:
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("a b a b c\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["graph", "--corpus", str(corpus), "--limit", "1"])
    assert result.exit_code == 0
    assert " 2 " in result.stdout
    assert " c " not in result.stdout

    result = runner.invoke(app, ["graph", "--corpus", str(corpus), "--plain"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "Affinity graph:",
        "a -> {b: 2}",
        "b -> {a: 1, c: 1}",
        "c -> {}",
    ]


def test_poem_uses_default_config_in_cwd(tmp_path: Path) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "default.yaml").write_text(f"corpus:\n  path: {MUGAR!r}\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["poem", "Test", "the", "system."])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Test of the system."
