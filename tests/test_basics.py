from __future__ import annotations

import pytest

from chance import Chance, ChanceRangeError, InvalidArgumentError
from chance.generators.basics import MAX_INT


@pytest.fixture()
def chance() -> Chance:
    return Chance(99)


def test_integer_range(chance: Chance) -> None:
    values = [chance.integer(min=-5, max=5) for _ in range(10000)]
    assert min(values) >= -5 and max(values) <= 5
    assert set(values) == set(range(-5, 6))


def test_integer_range_wide_bounds(chance: Chance) -> None:
    values = [chance.integer(min=-(10**12), max=10**12) for _ in range(10000)]
    assert all(-(10**12) <= v <= 10**12 for v in values)
    assert min(values) < 0 < max(values)


def test_natural_and_floating_stay_in_range(chance: Chance) -> None:
    for _ in range(10000):
        assert 3 <= chance.natural(min=3, max=MAX_INT) <= MAX_INT
        assert -1.5 <= chance.floating(min=-1.5, max=2.25, fixed=2) <= 2.25


def test_integer_bounds_checked(chance: Chance) -> None:
    with pytest.raises(ChanceRangeError):
        chance.integer(min=10, max=1)


def test_integer_uses_floor_formula() -> None:
    assert Chance(lambda: 0.999999).integer(min=0, max=9) == 9
    assert Chance(lambda: 0.0).integer(min=-3, max=3) == -3


def test_natural_rejects_negative_min(chance: Chance) -> None:
    with pytest.raises(ChanceRangeError):
        chance.natural(min=-1)


def test_natural_default_bounds(chance: Chance) -> None:
    assert 0 <= chance.natural() <= MAX_INT


def test_natural_numerals(chance: Chance) -> None:
    for _ in range(50):
        assert len(str(chance.natural(numerals=3))) == 3
    with pytest.raises(ChanceRangeError):
        chance.natural(numerals=0)


def test_bool_likelihood(chance: Chance) -> None:
    assert not any(chance.bool(likelihood=0) for _ in range(100))
    assert all(chance.bool(likelihood=100) for _ in range(100))
    with pytest.raises(ChanceRangeError):
        chance.bool(likelihood=101)


def test_floating_fixed(chance: Chance) -> None:
    for _ in range(200):
        value = chance.floating(min=0, max=100, fixed=2)
        assert 0 <= value <= 100
        assert value == round(value, 2)


def test_floating_scaling() -> None:
    # integer(0, 100) at 0.5 is 50, scaled back by 10**2
    assert Chance(lambda: 0.5).floating(min=0, max=1, fixed=2) == 0.5


def test_floating_rejects_fixed_and_precision(chance: Chance) -> None:
    with pytest.raises(ChanceRangeError):
        chance.floating(fixed=2, precision=3)
    with pytest.raises(InvalidArgumentError):
        chance.floating(fixed=None, precision=3)


def test_floating_out_of_range_with_fixed(chance: Chance) -> None:
    with pytest.raises(ChanceRangeError):
        chance.floating(min=-(2**53), fixed=4)


def test_character_pool(chance: Chance) -> None:
    assert {chance.character(pool="xyz") for _ in range(100)} <= set("xyz")


def test_character_alpha_and_symbols_conflict(chance: Chance) -> None:
    with pytest.raises(ChanceRangeError):
        chance.character(alpha=True, symbols=True)


def test_character_casing(chance: Chance) -> None:
    chars = {chance.character(alpha=True, casing="upper") for _ in range(200)}
    assert all(ch.isupper() for ch in chars)


def test_string_length(chance: Chance) -> None:
    assert len(chance.string(length=12)) == 12
    assert 5 <= len(chance.string()) <= 20
    assert chance.string(length=0) == ""
    with pytest.raises(ChanceRangeError):
        chance.string(length=-1)


def test_string_always_draws_default_length() -> None:
    a = Chance(3)
    b = Chance(3)
    a.string(length=4)
    b.natural(min=5, max=20)
    for _ in range(4):
        b.character()
    assert a.natural() == b.natural()


def test_letter_and_capitalize(chance: Chance) -> None:
    assert chance.letter().islower()
    assert chance.letter(casing="upper").isupper()
    assert chance.capitalize("hello") == "Hello"
    assert chance.capitalize("") == ""
