from __future__ import annotations

from typer.testing import CliRunner

from chance.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "generate" in result.stdout
    assert "methods" in result.stdout


def test_generate_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["generate", "--help"])
    assert "--seed" in result.stdout
    assert "--count" in result.stdout
    assert "--opt" in result.stdout
    assert "--config" in result.stdout
    assert "--json" in result.stdout
