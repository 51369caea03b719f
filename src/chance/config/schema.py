"""Typed configuration schema and loader for the chance package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, conint

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Seed used by :meth:`chance.Chance.from_config`."""

    value: Union[int, str, None] = None
    env: str = "CHANCE_SEED"

    model_config = ConfigDict(extra="forbid")


class UniqueSettings(BaseModel):
    """Retry budget for ``Chance.unique``: ``count * max_duplicates_factor``."""

    max_duplicates_factor: conint(ge=1) = 50

    model_config = ConfigDict(extra="forbid")


class NormalSettings(BaseModel):
    """Retry budget for ``Chance.normal_pool``."""

    pool_attempts: conint(ge=1) = 100

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Package logger level and format."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    model_config = ConfigDict(extra="forbid")


class CLISettings(BaseModel):
    """Defaults for the command line interface."""

    count: conint(ge=1) = 1

    model_config = ConfigDict(extra="forbid")


class ChanceConfig(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1) = 1
    seed: SeedSettings = Field(default_factory=SeedSettings)
    unique: UniqueSettings = Field(default_factory=UniqueSettings)
    normal: NormalSettings = Field(default_factory=NormalSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLISettings = Field(default_factory=CLISettings)

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _parse_seed(raw: str) -> int | str:
    try:
        return int(raw)
    except ValueError:
        return raw


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ChanceConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed.env``.  Numeric environment seeds
    are parsed as integers, anything else is kept as a string component.
    """

    with (
        importlib_resources.files("chance.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ChanceConfig.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.env
    if environ.get(seed_env):
        cfg.seed.value = _parse_seed(environ[seed_env])

    return cfg


__all__ = [
    "ChanceConfig",
    "SeedSettings",
    "UniqueSettings",
    "NormalSettings",
    "LoggingSettings",
    "CLISettings",
    "deep_merge_dicts",
    "load_config",
]
