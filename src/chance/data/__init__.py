"""Keyed static data tables.

:data:`DEFAULT_TABLES` maps table names to the canonical read-only
collections defined in the sibling modules.  A :class:`DataTables` registry
layers per-instance overrides on top of them: ``get`` always hands out a
deep copy so callers may freely mutate what they receive (several generators
trim or splice their pools), and ``set`` replaces tables for the owning
registry only.  Canonical tables are never mutated at runtime.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Dict

from chance.utils.errors import InvalidArgumentError

from . import finance, misc, names, places

__all__ = ["DEFAULT_TABLES", "DataTables"]

DEFAULT_TABLES: Dict[str, Any] = {
    "firstNames": names.FIRST_NAMES,
    "lastNames": names.LAST_NAMES,
    "nationalities": names.NATIONALITIES,
    "countries": places.COUNTRIES,
    "us_states_and_dc": places.US_STATES_AND_DC,
    "territories": places.TERRITORIES,
    "armed_forces": places.ARMED_FORCES,
    "country_regions": places.COUNTRY_REGIONS,
    "provinces": places.PROVINCES,
    "counties": places.COUNTIES,
    "street_suffixes": places.STREET_SUFFIXES,
    "timezones": places.TIMEZONES,
    "cc_types": finance.CC_TYPES,
    "currency_types": finance.CURRENCY_TYPES,
    "months": misc.MONTHS,
    "tlds": misc.TLDS,
    "colorNames": misc.COLOR_NAMES,
}


class DataTables:
    """Per-instance view over the canonical tables with override support.

    Not thread-safe: ``set`` mutates the registry in place.
    """

    def __init__(self, base: Mapping[str, Any] | None = None) -> None:
        self._base: Mapping[str, Any] = DEFAULT_TABLES if base is None else base
        self._overrides: Dict[str, Any] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._overrides or name in self._base

    def names(self) -> list[str]:
        """Return the sorted names of all available tables."""

        return sorted(set(self._base) | set(self._overrides))

    def get(self, name: str) -> Any:
        """Return a deep copy of table ``name``."""

        if name in self._overrides:
            return copy.deepcopy(self._overrides[name])
        if name in self._base:
            return copy.deepcopy(self._base[name])
        raise InvalidArgumentError(f"Unknown data table: {name!r}")

    def set(self, name: str | Mapping[str, Any], values: Any = None) -> None:
        """Replace one table, or merge a mapping of tables, for this registry."""

        if isinstance(name, str):
            self._overrides[name] = copy.deepcopy(values)
            return
        if not isinstance(name, Mapping):
            raise InvalidArgumentError("set() expects a table name or a mapping of tables")
        for key, value in name.items():
            self._overrides[str(key)] = copy.deepcopy(value)
