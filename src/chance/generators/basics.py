"""Uniform sampling layer: booleans, integers, floats, characters, strings.

Everything above this layer draws through these methods.  Integer sampling is
``floor(random() * (max - min + 1) + min)`` evaluated in binary64 floating
point, and the default bounds are ``±2**53``, the largest range in which every
integer is exactly representable as a float.
"""

from __future__ import annotations

import math
import string as _string

from chance.utils.errors import InvalidArgumentError

from .base import GeneratorBase, check_range

__all__ = [
    "BasicsMixin",
    "CHARS_LOWER",
    "CHARS_UPPER",
    "HEX_POOL",
    "MAX_INT",
    "MIN_INT",
    "NUMBERS",
    "SYMBOLS",
]

MAX_INT = 2**53
MIN_INT = -MAX_INT
CHARS_LOWER = _string.ascii_lowercase
CHARS_UPPER = _string.ascii_uppercase
NUMBERS = _string.digits
HEX_POOL = NUMBERS + "abcdef"
SYMBOLS = "!@#$%^&*()[]"


class BasicsMixin(GeneratorBase):
    """Primitive generators built directly on ``random()``."""

    def bool(self, likelihood: float = 50) -> bool:
        """Return ``True`` with ``likelihood`` percent probability."""

        check_range(
            likelihood < 0 or likelihood > 100,
            "Likelihood accepts values from 0 to 100.",
        )
        return self.random() * 100 < likelihood

    def integer(self, min: float = MIN_INT, max: float = MAX_INT) -> int:
        """Return an integer in ``[min, max]``."""

        check_range(min > max, "Min cannot be greater than Max.")
        return math.floor(self.random() * (max - min + 1) + min)

    def natural(
        self,
        min: float = 0,
        max: float = MAX_INT,
        numerals: int | None = None,
    ) -> int:
        """Return a non-negative integer in ``[min, max]``.

        ``numerals=n`` restricts the result to exactly ``n`` digits.
        """

        if numerals is not None:
            check_range(numerals < 1, "Numerals cannot be less than one.")
            min = 10 ** (numerals - 1)
            max = 10**numerals - 1
        check_range(min < 0, "Min cannot be less than zero.")
        return self.integer(min=min, max=max)

    def floating(
        self,
        min: float | None = None,
        max: float | None = None,
        fixed: int | None = 4,
        precision: int | None = None,
    ) -> float:
        """Return a float in ``[min, max]`` with ``fixed`` decimal digits.

        The bounds are scaled by ``10**fixed``, an integer is drawn in the
        scaled range and divided back.  ``precision`` (significant digits) is
        not supported and only accepted so that combining it with ``fixed``
        is reported.
        """

        check_range(
            fixed is not None and precision is not None,
            "Cannot specify both fixed and precision.",
        )
        if fixed is None:
            raise InvalidArgumentError("floating() requires 'fixed'; 'precision' is not supported")

        scale = 10**fixed
        bound = MAX_INT / scale
        check_range(
            bool(fixed) and min is not None and min < -bound,
            f"Min specified is out of range with fixed. Min should be, at least, {-bound}",
        )
        check_range(
            bool(fixed) and max is not None and max > bound,
            f"Max specified is out of range with fixed. Max should be, at most, {bound}",
        )
        lo = -bound if min is None else min
        hi = bound if max is None else max

        num = self.integer(min=float(lo) * scale, max=float(hi) * scale)
        return float(f"{num / scale:.{fixed}f}")

    def character(
        self,
        pool: str | None = None,
        alpha: bool = False,
        casing: str | None = None,
        symbols: bool = False,
    ) -> str:
        """Return one character drawn from ``pool`` or a default pool."""

        check_range(alpha and symbols, "Cannot specify both alpha and symbols.")

        if casing == "lower":
            letters = CHARS_LOWER
        elif casing == "upper":
            letters = CHARS_UPPER
        else:
            letters = CHARS_LOWER + CHARS_UPPER

        if pool:
            chosen = pool
        elif alpha:
            chosen = letters
        elif symbols:
            chosen = SYMBOLS
        else:
            chosen = letters + NUMBERS + SYMBOLS
        return chosen[self.natural(max=len(chosen) - 1)]

    def string(
        self,
        pool: str | None = None,
        length: int | None = None,
        alpha: bool = False,
        casing: str | None = None,
        symbols: bool = False,
    ) -> str:
        """Return ``length`` characters; ``length`` defaults to 5..20.

        The default length is always drawn, even when ``length`` is given.
        """

        default_length = self.natural(min=5, max=20)
        if length is None:
            length = default_length
        check_range(length < 0, "Length cannot be less than zero.")
        return "".join(
            self.character(pool=pool, alpha=alpha, casing=casing, symbols=symbols)
            for _ in range(length)
        )

    def letter(self, casing: str = "lower") -> str:
        value = self.character(pool=CHARS_LOWER)
        return value.upper() if casing == "upper" else value

    @staticmethod
    def capitalize(word: str) -> str:
        return word[:1].upper() + word[1:]
