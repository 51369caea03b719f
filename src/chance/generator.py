"""The :class:`Chance` generator façade.

A :class:`Chance` instance owns exactly one draw source: a
:class:`~chance.engine.MersenneTwister` seeded from the constructor
arguments, or a caller-supplied ``() -> float`` callable.  Every generator
method is composed from the mixins in :mod:`chance.generators` and draws only
through :meth:`Chance.random`, so two instances built from the same seed
components return identical sequences for identical call sequences.

Instances are not thread-safe: share one per thread, or give each thread its
own seed.
"""

from __future__ import annotations

import functools
import inspect
import secrets
from collections.abc import Callable, Mapping
from typing import Any

from chance.config import ChanceConfig, load_config
from chance.data import DataTables
from chance.engine import MersenneTwister, combine_seed
from chance.generators.finance import FinanceMixin
from chance.generators.identity import IdentityMixin
from chance.generators.location import LocationMixin
from chance.generators.misc import MiscMixin
from chance.generators.web import WebMixin
from chance.utils.errors import InvalidArgumentError
from chance.utils.logging import get_logger

__all__ = ["Chance"]

LOG = get_logger(__name__)

_INFRASTRUCTURE = frozenset({"from_config", "generator_names", "get", "mixin", "random", "set"})


class Chance(IdentityMixin, WebMixin, LocationMixin, FinanceMixin, MiscMixin):
    """Seeded random data generator.

    ``Chance()`` seeds itself from the operating system.  ``Chance(*parts)``
    combines integers, floats and strings into one seed.  A single callable
    argument (or ``random_source=``) replaces the twister entirely and is
    called for every draw.
    """

    def __init__(
        self,
        *seed: Any,
        random_source: Callable[[], float] | None = None,
        config: ChanceConfig | None = None,
    ) -> None:
        cfg = config or ChanceConfig()
        self._max_duplicates_factor = cfg.unique.max_duplicates_factor
        self._normal_pool_attempts = cfg.normal.pool_attempts
        self._data = DataTables()
        self._mixins: dict[str, Callable[..., Any]] = {}

        if random_source is None and len(seed) == 1 and callable(seed[0]):
            random_source = seed[0]
            seed = ()

        self._twister: MersenneTwister | None
        if random_source is not None:
            if seed:
                raise InvalidArgumentError("seed components cannot be combined with random_source")
            self.seed: int | float | None = None
            self._twister = None
            self._source = random_source
            LOG.debug("using caller-supplied random source %r", random_source)
            return

        if not seed or (len(seed) == 1 and seed[0] is None):
            self.seed = secrets.randbelow(10**13)
            LOG.debug("self-seeded with %d", self.seed)
        else:
            self.seed = combine_seed(seed)
        self._twister = MersenneTwister(self.seed)
        self._source = self._twister.random

    @classmethod
    def from_config(cls, cfg: ChanceConfig | None = None) -> "Chance":
        """Build an instance seeded from ``cfg.seed.value`` (or self-seeded)."""

        cfg = cfg or load_config()
        if cfg.seed.value is None:
            return cls(config=cfg)
        return cls(cfg.seed.value, config=cfg)

    def __repr__(self) -> str:
        if self._twister is None:
            return "Chance(random_source=...)"
        return f"Chance(seed={self.seed!r})"

    def random(self) -> float:
        """Return the next draw in ``[0, 1)``."""

        return self._source()

    # -- Data tables ---------------------------------------------------------

    def get(self, name: str) -> Any:
        """Return a private copy of the data table ``name``."""

        return self._data.get(name)

    def set(self, name: str | Mapping[str, Any], values: Any = None) -> None:
        """Override one table, or several from a mapping, for this instance only."""

        self._data.set(name, values)
        LOG.debug("overrode data tables: %s", name if isinstance(name, str) else sorted(name))

    # -- Extension -----------------------------------------------------------

    def mixin(self, functions: Mapping[str, Callable[..., Any]]) -> "Chance":
        """Register extra generators callable as ``instance.<name>(...)``.

        Each function receives this instance as its first argument.  Built-in
        generator names cannot be replaced.
        """

        for name, fn in functions.items():
            if not callable(fn):
                raise InvalidArgumentError(f"mixin {name!r} is not callable")
            if hasattr(type(self), name):
                raise InvalidArgumentError(f"mixin {name!r} would shadow a built-in generator")
            self._mixins[name] = fn
            LOG.debug("registered mixin %s", name)
        return self

    def __getattr__(self, name: str) -> Any:
        mixins = self.__dict__.get("_mixins", {})
        if name in mixins:
            return functools.partial(mixins[name], self)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    @classmethod
    def generator_names(cls) -> list[str]:
        """Sorted names of all public generator methods."""

        return sorted(
            name
            for name, member in inspect.getmembers(cls)
            if not name.startswith("_")
            and name not in _INFRASTRUCTURE
            and callable(member)
        )
