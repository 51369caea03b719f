"""Dice, normally distributed values and broadcast call signs."""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Sequence
from typing import Any

from chance.utils.errors import ExhaustionError, InvalidArgumentError
from chance.utils.logging import get_logger

from .base import check_range
from .helpers import HelpersMixin

__all__ = ["MiscMixin"]

LOG = get_logger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


class MiscMixin(HelpersMixin):
    def d4(self) -> int:
        return self.natural(min=1, max=4)

    def d6(self) -> int:
        return self.natural(min=1, max=6)

    def d8(self) -> int:
        return self.natural(min=1, max=8)

    def d10(self) -> int:
        return self.natural(min=1, max=10)

    def d12(self) -> int:
        return self.natural(min=1, max=12)

    def d20(self) -> int:
        return self.natural(min=1, max=20)

    def d30(self) -> int:
        return self.natural(min=1, max=30)

    def d100(self) -> int:
        return self.natural(min=1, max=100)

    def rpg(self, thrown: str | None = None, total: bool = False) -> Any:
        """Roll dice written as ``"<count>d<sides>"``, e.g. ``rpg("3d6")``.

        Returns the list of rolls, or their sum with ``total``.
        """

        check_range(not thrown, "A type of die roll must be included")
        parts = str(thrown).lower().split("d")
        if len(parts) != 2:
            raise InvalidArgumentError(f"Invalid format provided: {thrown!r}")
        count = _leading_int(parts[0])
        sides = _leading_int(parts[1])
        if not count or not sides or count < 0 or sides < 0:
            raise InvalidArgumentError(f"Invalid format provided: {thrown!r}")

        rolls = [0] * count
        for i in range(count - 1, -1, -1):
            rolls[i] = self.natural(min=1, max=sides)
        return sum(rolls) if total else rolls

    def normal(
        self,
        mean: float = 0,
        dev: float = 1,
        pool: Sequence[Any] | None = None,
    ) -> Any:
        """Gaussian sample via the Marsaglia polar method.

        With a non-empty ``pool`` the sample is rounded to an index into it, see
        :meth:`normal_pool`.
        """

        check_range(
            pool is not None and (isinstance(pool, str) or not isinstance(pool, Sequence)),
            "The pool option must be a valid array.",
        )
        check_range(
            not isinstance(mean, numbers.Real) or not isinstance(dev, numbers.Real),
            "Mean (mean) and standard deviation (dev) must be numbers.",
        )
        if pool:
            return self.normal_pool(pool, mean=mean, dev=dev)

        while True:
            u = self.random() * 2 - 1
            v = self.random() * 2 - 1
            s = u * u + v * v
            if 0 < s < 1:
                break
        norm = u * math.sqrt(-2 * math.log(s) / s)
        return dev * norm + mean

    def normal_pool(self, pool: Sequence[Any], mean: float = 0, dev: float = 1) -> Any:
        """Pick ``pool[round(normal(mean, dev))]``, resampling out-of-range indices."""

        attempts = self._normal_pool_attempts
        for _ in range(attempts):
            index = math.floor(self.normal(mean=mean, dev=dev) + 0.5)
            if 0 <= index < len(pool):
                return pool[index]
        LOG.debug("normal_pool() found no index in range after %d attempts", attempts)
        raise ExhaustionError(
            "Your pool is too small for the given mean and standard deviation. "
            "Please adjust.",
            attempts=attempts,
        )

    def radio(self, side: str = "?") -> str:
        """US broadcast call sign: K west of the Mississippi, W east of it."""

        side = side.lower()
        if side in ("east", "e"):
            first = "W"
        elif side in ("west", "w"):
            first = "K"
        else:
            first = self.character(pool="KW")
        return first + "".join(self.character(alpha=True, casing="upper") for _ in range(3))

    def tv(self, side: str = "?") -> str:
        return self.radio(side=side)
