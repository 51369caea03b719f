from __future__ import annotations

import pytest

from chance import Chance, InvalidArgumentError
from chance.engine import combine_seed, hash_component, to_uint32
from chance.engine.seed import to_int32


def test_hash_component() -> None:
    assert hash_component("") == 0
    assert hash_component("a") == 97
    assert hash_component("ab") == 6363201


def test_single_numeric_component_is_identity() -> None:
    assert combine_seed([42]) == 42
    assert combine_seed([1.5]) == 1.5


def test_positional_weights() -> None:
    assert combine_seed(["a", 1]) == 2 * 97 + 1
    assert combine_seed([1, 2]) != combine_seed([2, 1])


def test_rejects_other_types() -> None:
    with pytest.raises(InvalidArgumentError):
        combine_seed([object()])  # type: ignore[list-item]
    with pytest.raises(InvalidArgumentError):
        combine_seed([True])


def test_uint32_coercion() -> None:
    assert to_uint32(-1) == 0xFFFFFFFF
    assert to_uint32(2**32 + 5) == 5
    assert to_uint32(3.9) == 3
    assert to_uint32(float("nan")) == 0
    assert to_int32(0xFFFFFFFF) == -1


def test_determinism() -> None:
    a = Chance("alpha", 7)
    b = Chance("alpha", 7)
    assert [a.natural() for _ in range(5)] == [b.natural() for _ in range(5)]


def test_component_sensitivity() -> None:
    assert Chance("alpha").natural() != Chance("beta").natural()


def test_seed_attribute() -> None:
    assert Chance(42).seed == 42
    assert isinstance(Chance().seed, int)
