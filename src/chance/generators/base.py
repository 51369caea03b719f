"""Shared state and helpers for the generator mixins."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from chance.utils.errors import ChanceRangeError

__all__ = ["GeneratorBase", "check_range", "format_number"]


def check_range(failed: bool, message: str) -> None:
    """Raise :class:`ChanceRangeError` with ``message`` when ``failed``."""

    if failed:
        raise ChanceRangeError(message)


def format_number(value: float | int) -> str:
    """Render a number the way it reads in generated text.

    ``3.0`` becomes ``3`` and small magnitudes stay positional (``0.00001``
    rather than ``1e-05``).
    """

    if isinstance(value, float) and math.isfinite(value):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


class GeneratorBase:
    """Attributes every mixin may rely on; provided by :class:`chance.Chance`."""

    _max_duplicates_factor: int = 50
    _normal_pool_attempts: int = 100

    def random(self) -> float:  # pragma: no cover - overridden
        raise NotImplementedError

    def get(self, name: str) -> Any:  # pragma: no cover - overridden
        raise NotImplementedError
