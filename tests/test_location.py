from __future__ import annotations

import re

import pytest

from chance import Chance, InvalidArgumentError
from chance.generators.base import format_number
from chance.generators.location import GEOHASH_POOL


@pytest.fixture()
def chance() -> Chance:
    return Chance(4242)


def test_address_and_street(chance: Chance) -> None:
    suffixes = {row["name"] for row in chance.street_suffixes()}
    address = chance.address()
    number, rest = address.split(" ", 1)
    assert 5 <= int(number) <= 2000
    assert rest.rsplit(" ", 1)[1] in suffixes
    abbreviations = {row["abbreviation"] for row in chance.street_suffixes()}
    assert chance.street(short_suffix=True).rsplit(" ", 1)[1] in abbreviations


def test_italian_street_puts_suffix_first(chance: Chance) -> None:
    suffixes = {row["name"] for row in chance.street_suffixes(country="it")}
    street = chance.street(country="it")
    assert any(street.startswith(suffix + " ") for suffix in suffixes)


def test_city(chance: Chance) -> None:
    assert chance.city()[0].isupper()


def test_zip_and_postal(chance: Chance) -> None:
    assert re.fullmatch(r"\d{5}", chance.zip())
    assert re.fullmatch(r"\d{5}-\d{4}", chance.zip(plusfour=True))
    assert re.fullmatch(r"[A-Z]\d[A-Z] \d[A-Z]\d", chance.postal())


def test_regions(chance: Chance) -> None:
    assert len(chance.state()) == 2
    assert len(chance.states()) == 51
    assert len(chance.states(territories=True, armed_forces=True)) > 51
    assert chance.state(country="it", full=True) in {r["name"] for r in chance.states(country="it")}
    assert chance.province() in {p["abbreviation"] for p in chance.provinces()}
    assert chance.province(country="it", full=True) in {
        p["name"] for p in chance.provinces(country="it")
    }
    assert chance.county() in {c["name"] for c in chance.counties()}
    with pytest.raises(InvalidArgumentError):
        chance.provinces(country="zz")
    with pytest.raises(InvalidArgumentError):
        chance.county(country="us")


def test_country(chance: Chance) -> None:
    abbreviations = {c["abbreviation"] for c in chance.countries()}
    names = {c["name"] for c in chance.countries()}
    assert chance.country() in abbreviations
    assert chance.country(full=True) in names


def test_coordinates(chance: Chance) -> None:
    for _ in range(50):
        assert -90 <= chance.latitude() <= 90
        assert -180 <= chance.longitude() <= 180
        assert 0 <= chance.altitude() <= 8848
        assert -10994 <= chance.depth() <= 0
    lat, lon = chance.coordinates().split(", ")
    assert -90 <= float(lat) <= 90 and -180 <= float(lon) <= 180


def test_geohash(chance: Chance) -> None:
    value = chance.geohash()
    assert len(value) == 7 and set(value) <= set(GEOHASH_POOL)


def test_areacode(chance: Chance) -> None:
    assert re.fullmatch(r"\([2-9][0-8]\d\)", chance.areacode())
    assert re.fullmatch(r"[2-9][0-8]\d", chance.areacode(parens=False))


def test_phone_formats(chance: Chance) -> None:
    assert re.fullmatch(r"\([2-9]\d{2}\) [2-9]\d{2}-\d{4}", chance.phone())
    assert re.fullmatch(r"0[1-9][\d ]+", chance.phone(country="uk"))
    assert re.fullmatch(r"07\d{9}", chance.phone(country="uk", mobile=True, formatted=False))
    assert re.fullmatch(r"0\d( \d{2}){4}", chance.phone(country="fr"))
    assert re.fullmatch(r"0[67]\d{8}", chance.phone(country="fr", mobile=True, formatted=False))
    assert re.fullmatch(r"\(\d{2}\) 9\d{4}-\d{4}", chance.phone(country="br", mobile=True))


@pytest.mark.parametrize("country", ["us", "uk", "fr", "br"])
def test_unformatted_phone_is_digits(chance: Chance, country: str) -> None:
    for _ in range(20):
        assert chance.phone(country=country, formatted=False).isdigit()


def test_phone_unknown_country(chance: Chance) -> None:
    with pytest.raises(InvalidArgumentError):
        chance.phone(country="de")


def test_coordinates_render_small_values_positionally() -> None:
    chance = Chance(lambda: 0.5 + 0.5 / 18000000)
    assert chance.coordinates() == "0.00001, 0.00001"


@pytest.mark.parametrize(
    ("value", "text"),
    [(3.0, "3"), (-12.5, "-12.5"), (1e-05, "0.00001"), (-4.2e-07, "-0.00000042"), (7, "7")],
)
def test_format_number(value: float, text: str) -> None:
    assert format_number(value) == text
