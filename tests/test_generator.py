from __future__ import annotations

import pytest

from chance import Chance, ChanceRangeError, InvalidArgumentError
from chance.config import ChanceConfig


def test_golden_natural() -> None:
    assert Chance(42).natural(min=1, max=10) == 4


def test_same_seed_same_outputs() -> None:
    def batch(c: Chance) -> list[object]:
        return [c.name(), c.email(), c.cc(), c.guid(), c.date(), c.paragraph()]

    assert batch(Chance(2024)) == batch(Chance(2024))


def test_callable_random_source() -> None:
    c = Chance(lambda: 0.5)
    assert c.seed is None
    assert c.integer(min=1, max=10) == 6
    assert Chance(random_source=lambda: 0.0).pickone(["x", "y"]) == "x"


def test_random_source_rejects_seed() -> None:
    with pytest.raises(InvalidArgumentError):
        Chance(1, random_source=lambda: 0.5)


def test_none_self_seeds() -> None:
    assert Chance(None).seed is not None


def test_get_returns_private_copy() -> None:
    c = Chance(1)
    months = c.get("months")
    months.clear()
    assert len(c.get("months")) == 12


def test_set_is_per_instance() -> None:
    a = Chance(1)
    b = Chance(1)
    a.set("tlds", ["test"])
    assert a.tld() == "test"
    assert b.get("tlds") != ["test"]


def test_set_mapping() -> None:
    c = Chance(1)
    c.set({"lastNames": {"en": ["Zed"]}})
    assert c.last() == "Zed"


def test_unknown_table() -> None:
    with pytest.raises(InvalidArgumentError):
        Chance(1).get("nope")


def test_mixin() -> None:
    c = Chance(5)
    c.mixin({"user": lambda ch, domain="example.com": ch.word() + "@" + domain})
    assert c.user().endswith("@example.com")
    assert c.user(domain="x.org").endswith("@x.org")


def test_mixin_cannot_shadow_builtin() -> None:
    with pytest.raises(InvalidArgumentError):
        Chance(5).mixin({"name": lambda ch: "x"})


def test_mixin_is_per_instance() -> None:
    Chance(5).mixin({"only_here": lambda ch: 1})
    with pytest.raises(AttributeError):
        Chance(5).only_here()


def test_from_config_uses_seed() -> None:
    cfg = ChanceConfig.model_validate({"seed": {"value": 42}})
    assert Chance.from_config(cfg).natural(min=1, max=10) == 4


def test_config_controls_unique_budget() -> None:
    cfg = ChanceConfig.model_validate({"unique": {"max_duplicates_factor": 1}})
    c = Chance(1, config=cfg)
    with pytest.raises(ChanceRangeError):
        c.unique(lambda: 1, 2)


def test_generator_names() -> None:
    names = Chance.generator_names()
    assert "natural" in names
    assert "guid" in names
    assert "get" not in names
    assert "random" not in names
    assert all(not name.startswith("_") for name in names)
