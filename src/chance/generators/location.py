"""Addresses, administrative regions, coordinates and phone numbers."""

from __future__ import annotations

from typing import Any

from chance.utils.errors import InvalidArgumentError

from .base import format_number
from .basics import NUMBERS
from .text import TextMixin

__all__ = ["LocationMixin"]

GEOHASH_POOL = "0123456789bcdefghjkmnpqrstuvwxyz"

_UK_MOBILE_PREFIXES = ["4", "5", "7", "8", "9"]
_FR_AREAS: dict[str, list[str]] = {
    "01": ["30", "34", "39", "40", "41", "42", "43", "44", "45", "46", "47", "48", "49", "53",
           "55", "56", "58", "60", "64", "69", "70", "72", "73", "74", "75", "76", "77", "78",
           "79", "80", "81", "82", "83"],
    "02": ["14", "18", "22", "23", "28", "29", "30", "31", "32", "33", "34", "35", "36", "37",
           "38", "40", "41", "43", "44", "45", "46", "47", "48", "49", "50", "51", "52", "53",
           "54", "56", "57", "61", "62", "69", "72", "76", "77", "78", "85", "90", "96", "97",
           "98", "99"],
    "03": ["10", "20", "21", "22", "23", "24", "25", "26", "27", "28", "29", "39", "44", "45",
           "51", "52", "54", "55", "57", "58", "59", "60", "61", "62", "63", "64", "65", "66",
           "67", "68", "69", "70", "71", "72", "73", "80", "81", "82", "83", "84", "85", "86",
           "87", "88", "89", "90"],
    "04": ["11", "13", "15", "20", "22", "26", "27", "30", "32", "34", "37", "42", "43", "44",
           "50", "56", "57", "63", "66", "67", "68", "69", "70", "71", "72", "73", "74", "75",
           "76", "77", "78", "79", "80", "81", "82", "83", "84", "85", "86", "88", "89", "90",
           "91", "92", "93", "94", "95", "97", "98"],
    "05": ["08", "16", "17", "19", "24", "31", "32", "33", "34", "35", "40", "45", "46", "47",
           "49", "53", "55", "56", "57", "58", "59", "61", "62", "63", "64", "65", "67", "79",
           "81", "82", "86", "87", "90", "94"],
}
_BR_AREA_CODES = [
    "11", "12", "13", "14", "15", "16", "17", "18", "19", "21", "22", "24", "27", "28",
    "31", "32", "33", "34", "35", "37", "38", "41", "42", "43", "44", "45", "46", "47",
    "48", "49", "51", "53", "54", "55", "61", "62", "63", "64", "65", "66", "67", "68",
    "69", "71", "73", "74", "75", "77", "79", "81", "82", "83", "84", "85", "86", "87",
    "88", "89", "91", "92", "93", "94", "95", "96", "97", "98", "99",
]


def _for_country(tables: dict[str, Any], country: str, what: str) -> Any:
    try:
        return tables[country.lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"no {what} for country {country!r}; expected one of {sorted(tables)}"
        ) from None


class LocationMixin(TextMixin):
    def address(self, short_suffix: bool = False, country: str = "us", syllables: int = 2) -> str:
        number = self.natural(min=5, max=2000)
        return f"{number} {self.street(country=country, syllables=syllables, short_suffix=short_suffix)}"

    def street(self, country: str = "us", syllables: int = 2, short_suffix: bool = False) -> str:
        """Street name with a suffix; Italian streets put the suffix first."""

        if country.lower() == "it":
            name = self.capitalize(self.word(syllables=2))
            suffix = self.street_suffix(country=country)
            return f"{suffix['abbreviation'] if short_suffix else suffix['name']} {name}"
        name = self.capitalize(self.word(syllables=syllables))
        suffix = self.street_suffix(country=country)
        return f"{name} {suffix['abbreviation'] if short_suffix else suffix['name']}"

    def street_suffixes(self, country: str = "us") -> list[dict[str, str]]:
        return _for_country(self.get("street_suffixes"), country, "street suffixes")

    def street_suffix(self, country: str = "us") -> dict[str, str]:
        return self.pick(self.street_suffixes(country=country))

    def city(self) -> str:
        return self.capitalize(self.word(syllables=3))

    def zip(self, plusfour: bool = False) -> str:
        digits = [str(d) for d in self.n(self.natural, 5, max=9)]
        if plusfour:
            digits.append("-")
            digits.extend(str(d) for d in self.n(self.natural, 4, max=9))
        return "".join(digits)

    def postal(self) -> str:
        """Canadian postal code such as ``K1A 0B1``."""

        district = self.character(pool="XVTSRPNKLMHJGECBA")
        fsa = f"{district}{self.natural(max=9)}{self.character(alpha=True, casing='upper')}"
        ldu = (
            f"{self.natural(max=9)}{self.character(alpha=True, casing='upper')}"
            f"{self.natural(max=9)}"
        )
        return f"{fsa} {ldu}"

    def countries(self) -> list[dict[str, str]]:
        return self.get("countries")

    def country(self, full: bool = False) -> str:
        chosen = self.pick(self.countries())
        return chosen["name"] if full else chosen["abbreviation"]

    def counties(self, country: str = "uk") -> list[dict[str, str]]:
        return _for_country(self.get("counties"), country, "counties")

    def county(self, country: str = "uk") -> str:
        return self.pick(self.counties(country=country))["name"]

    def provinces(self, country: str = "ca") -> list[dict[str, Any]]:
        return _for_country(self.get("provinces"), country, "provinces")

    def province(self, country: str = "ca", full: bool = False) -> str:
        chosen = self.pick(self.provinces(country=country))
        return chosen["name"] if full else chosen["abbreviation"]

    def states(
        self,
        country: str = "us",
        us_states_and_dc: bool = True,
        territories: bool = False,
        armed_forces: bool = False,
    ) -> list[dict[str, str]]:
        """US states (optionally with territories and military codes) or Italian regions."""

        if country.lower() == "us":
            states: list[dict[str, str]] = []
            if us_states_and_dc:
                states.extend(self.get("us_states_and_dc"))
            if territories:
                states.extend(self.get("territories"))
            if armed_forces:
                states.extend(self.get("armed_forces"))
            return states
        return _for_country(self.get("country_regions"), country, "states")

    def state(
        self,
        country: str = "us",
        full: bool = False,
        us_states_and_dc: bool = True,
        territories: bool = False,
        armed_forces: bool = False,
    ) -> str:
        chosen = self.pick(
            self.states(
                country=country,
                us_states_and_dc=us_states_and_dc,
                territories=territories,
                armed_forces=armed_forces,
            )
        )
        return chosen["name"] if full else chosen["abbreviation"]

    def latitude(self, min: float = -90, max: float = 90, fixed: int = 5) -> float:
        return self.floating(min=min, max=max, fixed=fixed)

    def longitude(self, min: float = -180, max: float = 180, fixed: int = 5) -> float:
        return self.floating(min=min, max=max, fixed=fixed)

    def coordinates(self, fixed: int = 5) -> str:
        latitude = self.latitude(fixed=fixed)
        longitude = self.longitude(fixed=fixed)
        return f"{format_number(latitude)}, {format_number(longitude)}"

    def altitude(self, max: float = 8848, fixed: int = 5) -> float:
        """Metres above sea level, up to the summit of Everest."""

        return self.floating(min=0, max=max, fixed=fixed)

    def depth(self, min: float = -10994, fixed: int = 5) -> float:
        """Metres below sea level, down to the Challenger Deep."""

        return self.floating(min=min, max=0, fixed=fixed)

    def geohash(self, length: int = 7) -> str:
        return self.string(length=length, pool=GEOHASH_POOL)

    def areacode(self, parens: bool = True) -> str:
        """North American area code; never starts with 0 or 1."""

        code = f"{self.natural(min=2, max=9)}{self.natural(min=0, max=8)}{self.natural(min=0, max=9)}"
        return f"({code})" if parens else code

    def phone(
        self,
        country: str = "us",
        formatted: bool = True,
        mobile: bool = False,
        parens: bool = True,
    ) -> str:
        """Phone number for ``us``, ``uk``, ``fr`` or ``br``.

        Unformatted numbers contain digits only.
        """

        if not formatted:
            parens = False
        key = country.lower()
        if key == "us":
            area = self.areacode(parens=parens)
            exchange = f"{self.natural(min=2, max=9)}{self.natural(max=9)}{self.natural(max=9)}"
            subscriber = str(self.natural(min=1000, max=9999))
            if formatted:
                return f"{area} {exchange}-{subscriber}"
            return area + exchange + subscriber
        if key == "uk":
            number = self._uk_number(mobile)
            return number if formatted else number.replace(" ", "")
        if key == "fr":
            number = self._fr_number(mobile)
            if formatted:
                return " ".join(number[i : i + 2] for i in range(0, len(number), 2))
            return number
        if key == "br":
            area = self.pick(_BR_AREA_CODES)
            if mobile:
                prefix = "9" + self.string(pool=NUMBERS, length=4)
            else:
                prefix = str(self.natural(min=2000, max=5999))
            line = self.string(pool=NUMBERS, length=4)
            if formatted:
                return f"({area}) {prefix}-{line}"
            return area + prefix + line
        raise InvalidArgumentError(f"unsupported phone country {country!r}; expected us, uk, fr or br")

    def _uk_number(self, mobile: bool) -> str:
        # every candidate is built (and draws) before one is chosen
        if mobile:
            candidates = [
                ("07" + self.pick(_UK_MOBILE_PREFIXES), [2, 6]),
                ("07624 ", [6]),
            ]
        else:
            candidates = [
                ("01" + self.character(pool="234569") + "1 ", [3, 4]),
                ("020 " + self.character(pool="378"), [3, 4]),
                ("023 " + self.character(pool="89"), [3, 4]),
                ("024 7", [3, 4]),
                ("028 " + self.pick(["25", "28", "37", "71", "82", "90", "92", "95"]), [2, 4]),
                ("012" + self.pick(["04", "08", "54", "76", "97", "98"]) + " ", [6]),
                ("013" + self.pick(["63", "64", "84", "86"]) + " ", [6]),
                ("014" + self.pick(["04", "20", "60", "61", "80", "88"]) + " ", [6]),
                ("015" + self.pick(["24", "27", "62", "66"]) + " ", [6]),
                ("016" + self.pick(["06", "29", "35", "47", "59", "95"]) + " ", [6]),
                ("017" + self.pick(["26", "44", "50", "68"]) + " ", [6]),
                ("018" + self.pick(["27", "37", "84", "97"]) + " ", [6]),
                ("019" + self.pick(["00", "05", "35", "46", "49", "63", "95"]) + " ", [6]),
            ]
        area, sections = self.pick(candidates)
        return area + " ".join(self.string(pool=NUMBERS, length=size) for size in sections)

    def _fr_number(self, mobile: bool) -> str:
        if mobile:
            return self.pick(["06", "07"]) + self.string(pool=NUMBERS, length=8)
        candidates = [
            zone + self.pick(areas) + self.string(pool=NUMBERS, length=6)
            for zone, areas in _FR_AREAS.items()
        ]
        candidates.append("09" + self.string(pool=NUMBERS, length=8))
        return self.pick(candidates)
