"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. Environment variable seed referenced by ``seed.env``
"""

from .schema import ChanceConfig, LoggingSettings, load_config

__all__ = ["ChanceConfig", "LoggingSettings", "load_config"]
