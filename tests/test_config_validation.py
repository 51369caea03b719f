from pathlib import Path

import pytest
from pydantic import ValidationError

from chance.config import load_config


def test_invalid_duplicates_factor(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unique:\n  max_duplicates_factor: 0\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_invalid_log_level(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("logging:\n  level: LOUD\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_partial_override_keeps_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("normal:\n  pool_attempts: 5\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.normal.pool_attempts == 5
    assert cfg.unique.max_duplicates_factor == 50
