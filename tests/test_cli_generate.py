from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from chance.cli import app

runner = CliRunner()


def test_generate_seeded_natural() -> None:
    result = runner.invoke(
        app, ["generate", "natural", "--seed", "42", "--opt", "min=1", "--opt", "max=10"]
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "4"


def test_generate_env_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("CHANCE_SEED", "42")
    result = runner.invoke(app, ["generate", "natural", "--opt", "min=1", "--opt", "max=10"])
    assert result.stdout.strip() == "4"


def test_generate_count_and_json() -> None:
    result = runner.invoke(app, ["generate", "guid", "--seed", "1", "--count", "3"])
    assert result.exit_code == 0
    assert len(result.stdout.strip().splitlines()) == 3

    result = runner.invoke(app, ["generate", "d6", "--seed", "1", "-n", "4", "--json"])
    values = json.loads(result.stdout)
    assert len(values) == 4 and all(1 <= v <= 6 for v in values)


def test_generate_positional_args() -> None:
    result = runner.invoke(app, ["generate", "pad", "--arg", "5", "--arg", "3"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "005"


def test_generate_is_reproducible() -> None:
    args = ["generate", "name", "--seed", "abc", "--seed", "7", "-n", "5"]
    assert runner.invoke(app, args).stdout == runner.invoke(app, args).stdout


def test_unknown_generator_is_usage_error() -> None:
    result = runner.invoke(app, ["generate", "unicorn"])
    assert result.exit_code == 2


def test_bad_option_is_usage_error() -> None:
    result = runner.invoke(app, ["generate", "natural", "--opt", "colour=blue"])
    assert result.exit_code == 2
    result = runner.invoke(app, ["generate", "natural", "--opt", "nokey"])
    assert result.exit_code == 2


def test_generator_error_exit_code() -> None:
    result = runner.invoke(app, ["generate", "natural", "--opt", "min=5", "--opt", "max=1"])
    assert result.exit_code == 5


def test_config_error_exit_code(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown: 1\n")
    result = runner.invoke(app, ["generate", "natural", "--config", str(cfg_file)])
    assert result.exit_code == 4


def test_config_seed(tmp_path: Path, monkeypatch: Any) -> None:
    monkeypatch.delenv("CHANCE_SEED", raising=False)
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("seed:\n  value: 42\ncli:\n  count: 2\n")
    result = runner.invoke(
        app, ["generate", "natural", "--config", str(cfg_file), "--opt", "min=1", "--opt", "max=10"]
    )
    assert result.stdout.splitlines()[0] == "4"
    assert len(result.stdout.splitlines()) == 2


def test_methods_lists_generators() -> None:
    result = runner.invoke(app, ["methods"])
    assert result.exit_code == 0
    names = result.stdout.split()
    assert "guid" in names and "cc" in names
    assert "mixin" not in names
