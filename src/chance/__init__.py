"""Seeded pseudo-random data generation.

>>> from chance import Chance
>>> Chance(42).natural(min=1, max=10)
4
"""

from .generator import Chance
from .utils.errors import ChanceError, ChanceRangeError, ExhaustionError, InvalidArgumentError

__version__ = "0.1.0"

__all__ = [
    "Chance",
    "ChanceError",
    "ChanceRangeError",
    "ExhaustionError",
    "InvalidArgumentError",
    "__version__",
]
