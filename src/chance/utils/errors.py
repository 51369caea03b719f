"""Typed exceptions raised by the generators.

Three kinds are distinguished: range violations (bad bounds or option
combinations), invalid arguments (wrong types, unsupported option values)
and exhaustion (a bounded search gave up).  All derive from
:class:`ChanceError` so callers can catch the family at once.
"""


class ChanceError(Exception):
    """Base class for generator errors."""


class ChanceRangeError(ChanceError, ValueError):
    """Raised when bounds or counts are out of range."""


class InvalidArgumentError(ChanceError, TypeError):
    """Raised for wrong argument types or unsupported option values."""


class ExhaustionError(ChanceRangeError):
    """Raised when a retry-bounded generator cannot produce enough values."""

    def __init__(self, message: str, *, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts
