"""32-bit Mersenne Twister (MT19937).

The generator is seeded with the classic single-integer ``init_genrand``
routine, so its output matches the reference C implementation (and
``std::mt19937``) for the same 32-bit seed.  It is the only object that owns
twister state; everything else draws through :meth:`MersenneTwister.random`.

Not suitable for cryptographic use.
"""

from __future__ import annotations

import secrets

from .seed import to_uint32

__all__ = ["MersenneTwister"]

_N = 624
_M = 397
_MATRIX_A = 0x9908B0DF
_UPPER_MASK = 0x80000000
_LOWER_MASK = 0x7FFFFFFF
_MASK32 = 0xFFFFFFFF
_TWO_POW_32 = 4294967296.0


class MersenneTwister:
    """MT19937 word generator with period 2**19937 - 1."""

    def __init__(self, seed: int | float | None = None) -> None:
        if seed is None:
            seed = secrets.randbelow(10**13)
        self._state = [0] * _N
        self._index = _N + 1
        self._init_genrand(to_uint32(seed))

    def _init_genrand(self, seed32: int) -> None:
        state = self._state
        state[0] = seed32
        for i in range(1, _N):
            prev = state[i - 1]
            state[i] = (1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32
        self._index = _N

    def _twist(self) -> None:
        state = self._state
        for i in range(_N):
            y = (state[i] & _UPPER_MASK) | (state[(i + 1) % _N] & _LOWER_MASK)
            value = state[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            state[i] = value
        self._index = 0

    def next_uint32(self) -> int:
        """Return the next tempered word in ``[0, 2**32)``."""

        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def next_float(self) -> float:
        """Return a float in ``[0.0, 1.0)`` built from a single word."""

        return self.next_uint32() / _TWO_POW_32

    random = next_float
