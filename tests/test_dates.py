from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Any

import pytest

from chance import Chance, ChanceRangeError
from chance.generators import dates

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture()
def chance(monkeypatch: Any) -> Chance:
    monkeypatch.setattr(dates, "now", lambda: FIXED_NOW)
    return Chance(1234)


def test_build_datetime_rolls_over() -> None:
    assert dates.build_datetime(2023, 2, 30) == datetime(2023, 3, 2)
    assert dates.build_datetime(2023, 13, 1) == datetime(2024, 1, 1)
    assert dates.build_datetime(2023, 1, 1, 25) == datetime(2023, 1, 2, 1)


def test_month_single(chance: Chance) -> None:
    assert chance.month(min=1, max=1) == "January"
    assert chance.month(min=12, max=12, raw=True)["numeric"] == "12"
    with pytest.raises(ChanceRangeError):
        chance.month(min=0)
    with pytest.raises(ChanceRangeError):
        chance.month(min=5, max=4)


def test_year_defaults_to_next_century(chance: Chance) -> None:
    for _ in range(50):
        assert 2024 <= int(chance.year()) <= 2124
    assert chance.year(min=1990, max=1990) == "1990"


def test_clock_fields(chance: Chance) -> None:
    for _ in range(100):
        assert 1 <= chance.hour() <= 12
        assert 0 <= chance.hour(twentyfour=True) <= 23
        assert 0 <= chance.minute() <= 59
        assert 0 <= chance.second() <= 59
        assert 0 <= chance.millisecond() <= 999
    with pytest.raises(ChanceRangeError):
        chance.hour(max=13)
    with pytest.raises(ChanceRangeError):
        chance.minute(max=60)


def test_date_components(chance: Chance) -> None:
    value = chance.date(year=2020, month=2, day=29, hour=3, minute=4, second=5, millisecond=6)
    assert value == datetime(2020, 2, 29, 3, 4, 5, 6000)


def test_date_month_limits_day(chance: Chance) -> None:
    for _ in range(50):
        assert chance.date(year=2023, month=4).month == 4


def test_date_min_max(chance: Chance) -> None:
    lo = datetime(2000, 1, 1)
    hi = datetime(2000, 1, 2)
    for _ in range(50):
        assert lo <= chance.date(min=lo, max=hi) <= hi
    with pytest.raises(ChanceRangeError):
        chance.date(min=hi, max=lo)


def test_date_string(chance: Chance) -> None:
    assert chance.date(year=2021, month=3, day=9, string=True) == "3/9/2021"
    assert chance.date(year=2021, month=3, day=9, string=True, american=False) == "9/3/2021"
    assert re.fullmatch(r"\d{1,2}/\d{1,2}/\d{4}", chance.date(string=True))


def test_hammertime(chance: Chance) -> None:
    lo = datetime(2001, 1, 1)
    millis = chance.hammertime(min=lo, max=lo + timedelta(hours=1))
    assert dates.to_millis(lo) <= millis <= dates.to_millis(lo) + 3_600_000


def test_timestamp(chance: Chance) -> None:
    for _ in range(50):
        assert 1 <= chance.timestamp() <= FIXED_NOW.timestamp()


def test_weekday(chance: Chance) -> None:
    assert {chance.weekday(weekday_only=True) for _ in range(100)} <= {
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday"
    }


def test_ampm_and_timezone(chance: Chance) -> None:
    assert chance.ampm() in {"am", "pm"}
    assert {"name", "abbr", "offset", "isdst", "text", "utc"} <= set(chance.timezone())
