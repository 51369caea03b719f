"""Smoke tests for package import and version."""

import chance


def test_import_package() -> None:
    assert isinstance(chance.Chance(1), chance.Chance)


def test_version() -> None:
    assert chance.__version__ == "0.1.0"


def test_error_hierarchy() -> None:
    assert issubclass(chance.ChanceRangeError, ValueError)
    assert issubclass(chance.InvalidArgumentError, TypeError)
    assert issubclass(chance.ExhaustionError, chance.ChanceRangeError)
    for exc in (chance.ChanceRangeError, chance.InvalidArgumentError, chance.ExhaustionError):
        assert issubclass(exc, chance.ChanceError)
