"""Seed combination helpers.

A :class:`~chance.Chance` instance may be seeded with several components,
e.g. ``Chance("user", 42)``.  Each string component is reduced to an integer
with a small polynomial hash over its UTF-16 code units; numbers are used
as-is.  Components are then folded with positional weights so that
``Chance(1, 2)`` and ``Chance(2, 1)`` differ::

    seed = sum((count - index) * seedling for index, seedling in ...)

Shifts in the hash use 32-bit two's complement arithmetic while the running
sum itself is not truncated.  The twister finally reduces the combined seed
modulo 2**32 (see :func:`to_uint32`).
"""

from __future__ import annotations

import math
from typing import Iterable, Union

from chance.utils.errors import InvalidArgumentError

__all__ = ["SeedComponent", "combine_seed", "hash_component", "to_int32", "to_uint32"]

SeedComponent = Union[int, float, str]

_MASK32 = 0xFFFFFFFF


def to_uint32(value: int | float) -> int:
    """Coerce ``value`` to an unsigned 32-bit integer (truncate, then wrap)."""

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        value = math.trunc(value)
    return int(value) & _MASK32


def to_int32(value: int | float) -> int:
    """Coerce ``value`` to a signed 32-bit integer."""

    unsigned = to_uint32(value)
    return unsigned - 0x100000000 if unsigned & 0x80000000 else unsigned


def _code_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def hash_component(text: str) -> int:
    """Return the polynomial hash of ``text``.

    ``hash = code + (hash << 6) + (hash << 16) - hash`` for each code unit.
    """

    value = 0
    for code in _code_units(text):
        value = code + to_int32(to_int32(value) << 6) + to_int32(to_int32(value) << 16) - value
    return value


def combine_seed(components: Iterable[SeedComponent]) -> int | float:
    """Fold seed components into a single numeric seed."""

    items = list(components)
    count = len(items)
    seed: int | float = 0
    for index, item in enumerate(items):
        if isinstance(item, str):
            seedling: int | float = hash_component(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            seedling = item
        else:
            raise InvalidArgumentError(
                f"seed components must be str, int or float, got {type(item).__name__}"
            )
        seed += (count - index) * seedling
    return seed
