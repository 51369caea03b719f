"""Composite helpers: repetition, uniqueness, shuffling, picking, weighting."""

from __future__ import annotations

import copy
import numbers
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, TypeVar

from chance.utils.errors import ExhaustionError, InvalidArgumentError
from chance.utils.logging import get_logger

from .basics import BasicsMixin
from .base import check_range

__all__ = ["HelpersMixin"]

T = TypeVar("T")

LOG = get_logger(__name__)


class HelpersMixin(BasicsMixin):
    """Generators that combine other generators or draw from sequences."""

    def n(self, fn: Callable[..., T], count: int = 1, *args: Any, **kwargs: Any) -> list[T]:
        """Call ``fn`` ``count`` times and collect the results in order."""

        if not callable(fn):
            raise InvalidArgumentError("The first argument must be a function.")
        return [fn(*args, **kwargs) for _ in range(max(0, count))]

    def unique(
        self,
        fn: Callable[..., T],
        count: int,
        *args: Any,
        comparator: Callable[[list[T], T], bool] | None = None,
        **kwargs: Any,
    ) -> list[T]:
        """Return ``count`` distinct results of ``fn``.

        ``comparator(collected, candidate)`` reports whether ``candidate`` is
        a duplicate; membership is used by default.  Arguments are deep-copied
        for every call so ``fn`` cannot leak state between attempts.  Raises
        :class:`ExhaustionError` once ``count * max_duplicates_factor``
        consecutive duplicates have been drawn.
        """

        if not callable(fn):
            raise InvalidArgumentError("The first argument must be a function.")
        if comparator is None:
            comparator = _contains

        result: list[T] = []
        limit = count * self._max_duplicates_factor
        misses = 0
        attempts = 0
        while len(result) < count:
            value = fn(*copy.deepcopy(args), **copy.deepcopy(kwargs))
            attempts += 1
            if not comparator(result, value):
                result.append(value)
                misses = 0
            misses += 1
            if misses > limit:
                LOG.debug("unique() gave up after %d attempts", attempts)
                raise ExhaustionError(
                    "num is likely too large for sample set", attempts=attempts
                )
        return result

    def shuffle(self, seq: Sequence[T]) -> list[T]:
        """Return a shuffled copy of ``seq``; the input is left untouched."""

        remaining = list(seq)
        shuffled: list[T] = []
        for _ in range(len(remaining)):
            shuffled.append(remaining.pop(self.natural(max=len(remaining) - 1)))
        return shuffled

    def pick(self, seq: Sequence[T], count: int | None = None) -> Any:
        """Return one element, or a list of ``count`` distinct positions."""

        check_range(len(seq) == 0, "Cannot pick() from an empty array")
        check_range(count is not None and count < 0, "Count must be a positive number")
        if not count or count == 1:
            return seq[self.natural(max=len(seq) - 1)]
        return self.shuffle(seq)[:count]

    def pickone(self, seq: Sequence[T]) -> T:
        check_range(len(seq) == 0, "Cannot pickone() from an empty array")
        return seq[self.natural(max=len(seq) - 1)]

    def pickset(self, seq: Sequence[T], count: int = 1) -> list[T]:
        if count == 0:
            return []
        check_range(len(seq) == 0, "Cannot pickset() from an empty array")
        check_range(count < 0, "Count must be a positive number")
        if count == 1:
            return [self.pickone(seq)]
        return self.shuffle(seq)[:count]

    def weighted(
        self,
        seq: Sequence[T],
        weights: Sequence[float],
        trim: bool = False,
    ) -> T:
        """Pick from ``seq`` with probability proportional to ``weights``.

        Non-positive weights are never selected.  With ``trim`` the chosen
        entry is removed from both ``seq`` and ``weights`` in place.
        """

        check_range(len(seq) != len(weights), "Length of array and weights must match")

        positive_total = 0.0
        for weight in weights:
            check_range(
                not isinstance(weight, numbers.Real) or weight != weight,
                "All weights must be numbers",
            )
            if weight > 0:
                positive_total += weight
        check_range(positive_total == 0, "No valid entries in array weights")

        selected = self.random() * positive_total
        running = 0.0
        last_good = -1
        chosen = -1
        for idx, weight in enumerate(weights):
            running += weight
            if weight > 0:
                if selected <= running:
                    chosen = idx
                    break
                last_good = idx
            if idx == len(weights) - 1:
                chosen = last_good

        value = seq[chosen]
        if trim:
            if not isinstance(seq, MutableSequence) or not isinstance(weights, MutableSequence):
                raise InvalidArgumentError("trim requires mutable sequences")
            del seq[chosen]
            del weights[chosen]
        return value

    @staticmethod
    def pad(number: Any, width: int, pad: str = "0") -> str:
        """Left-pad ``str(number)`` with ``pad`` up to ``width`` characters."""

        text = str(number)
        pad = pad or "0"
        if len(text) >= width:
            return text
        return pad * (width - len(text)) + text


def _contains(collected: list[Any], value: Any) -> bool:
    return value in collected
