"""Logging utilities.

Centralizes logger configuration for the package.  ``get_logger`` is
idempotent: calling it repeatedly for the same name never stacks handlers.
Level and format come from :class:`chance.config.LoggingSettings` when a
configuration is supplied, otherwise from the package defaults.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - used for type hints only
    from chance.config import LoggingSettings

__all__ = ["DEFAULT_FORMAT", "configure", "get_logger"]

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_ROOT = "chance"


def configure(settings: LoggingSettings | None = None) -> logging.Logger:
    """Attach a single stream handler to the package root logger."""

    level_name = settings.level if settings is not None else "WARNING"
    fmt = settings.format if settings is not None else DEFAULT_FORMAT

    root = logging.getLogger(_ROOT)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
    else:
        for handler in root.handlers:
            handler.setFormatter(logging.Formatter(fmt))
    root.setLevel(getattr(logging, level_name.upper(), logging.WARNING))
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""

    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
