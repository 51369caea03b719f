from __future__ import annotations

import re
from datetime import datetime
from typing import Any

import pytest

from chance import Chance, InvalidArgumentError
from chance.generators import dates


@pytest.fixture()
def chance(monkeypatch: Any) -> Chance:
    monkeypatch.setattr(dates, "now", lambda: datetime(2024, 6, 15, 12, 0, 0))
    return Chance(1999)


def test_cc_passes_luhn(chance: Chance) -> None:
    for _ in range(50):
        assert chance.luhn_check(chance.cc())


def test_cc_issuer_shape(chance: Chance) -> None:
    visa = chance.cc(type="visa")
    assert visa.startswith("4") and len(visa) == 16
    amex = chance.cc(type="American Express")
    assert amex.startswith("34") and len(amex) == 15


def test_cc_type(chance: Chance) -> None:
    names = {card["name"] for card in chance.cc_types()}
    assert chance.cc_type() in names
    assert chance.cc_type(name="mc", raw=True)["prefix"] == "51"
    with pytest.raises(InvalidArgumentError):
        chance.cc_type(name="Monopoly Money")


def test_luhn_helpers(chance: Chance) -> None:
    assert chance.luhn_calculate("411111111111111") == 1
    assert chance.luhn_check("4111111111111111")


def test_currency(chance: Chance) -> None:
    codes = {row["code"] for row in chance.currency_types()}
    assert chance.currency()["code"] in codes
    for _ in range(25):
        first, second = chance.currency_pair()
        assert first["code"] != second["code"]
    assert re.fullmatch(r"[A-Z]{3}/[A-Z]{3}", chance.currency_pair(as_string=True))


def test_dollar(chance: Chance) -> None:
    for _ in range(50):
        assert re.fullmatch(r"\$\d{1,5}\.\d{2}", chance.dollar())
    assert re.fullmatch(r"-\$\d+\.\d{2}", chance.dollar(min=-100, max=-1))


def test_euro(chance: Chance) -> None:
    for _ in range(50):
        value = chance.euro(min=1000, max=9999)
        assert re.fullmatch(r"\d,\d{3}(\.\d{1,2})?€", value)
    assert re.fullmatch(r"-\d{1,2}(\.\d{1,2})?€", chance.euro(min=-50, max=-1))


def test_exp_month_future(chance: Chance) -> None:
    for _ in range(50):
        assert int(chance.exp_month(future=True)) > 6
    assert re.fullmatch(r"\d{2}", chance.exp_month())


def test_exp_year(chance: Chance) -> None:
    for _ in range(50):
        assert 2024 <= int(chance.exp_year()) <= 2034


def test_exp_never_in_past(chance: Chance) -> None:
    for _ in range(100):
        raw = chance.exp(raw=True)
        if raw["year"] == "2024":
            assert int(raw["month"]) > 6
    assert re.fullmatch(r"\d{2}/\d{4}", chance.exp())


def test_euro_keeps_sign() -> None:
    assert Chance(lambda: 0.0).euro(min=-12.5, max=0) == "-12.5€"
