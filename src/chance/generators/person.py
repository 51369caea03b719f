"""People: ages, birthdays, genders, names and nationalities."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from chance.utils.errors import InvalidArgumentError

from . import dates
from .dates import DatesMixin
from .text import TextMixin

__all__ = ["AGE_RANGES", "NAME_SUFFIXES", "PersonMixin"]

AGE_RANGES: dict[str, tuple[int, int]] = {
    "child": (0, 12),
    "teen": (13, 19),
    "adult": (18, 65),
    "senior": (65, 100),
    "all": (0, 100),
}

NAME_SUFFIXES: list[dict[str, str]] = [
    {"name": "Doctor of Osteopathic Medicine", "abbreviation": "D.O."},
    {"name": "Doctor of Philosophy", "abbreviation": "Ph.D."},
    {"name": "Esquire", "abbreviation": "Esq."},
    {"name": "Junior", "abbreviation": "Jr."},
    {"name": "Juris Doctor", "abbreviation": "J.D."},
    {"name": "Master of Arts", "abbreviation": "M.A."},
    {"name": "Master of Business Administration", "abbreviation": "M.B.A."},
    {"name": "Master of Science", "abbreviation": "M.S."},
    {"name": "Medical Doctor", "abbreviation": "M.D."},
    {"name": "Senior", "abbreviation": "Sr."},
    {"name": "The Third", "abbreviation": "III"},
    {"name": "The Fourth", "abbreviation": "IV"},
    {"name": "Bachelor of Engineering", "abbreviation": "B.E"},
    {"name": "Bachelor of Technology", "abbreviation": "B.TECH"},
]


def _years_before(moment: datetime, years: int) -> datetime:
    return dates.build_datetime(
        moment.year - years,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        moment.microsecond // 1000,
    )


class PersonMixin(TextMixin, DatesMixin):
    def age(self, type: str | None = None) -> int:
        """Return an age drawn from a named bracket (``adult`` by default)."""

        bracket = type or "adult"
        try:
            lo, hi = AGE_RANGES[bracket]
        except KeyError:
            raise InvalidArgumentError(
                f"unknown age type {bracket!r}; expected one of {sorted(AGE_RANGES)}"
            ) from None
        return self.natural(min=lo, max=hi)

    def birthday(
        self,
        type: str | None = None,
        year: int | None = None,
        min: datetime | None = None,
        max: datetime | None = None,
        american: bool = True,
        string: bool = False,
    ) -> datetime | str:
        """Return a birth date for someone of a random ``age(type)``.

        With an age ``type`` the date falls within the year ending today
        ``age`` years ago; otherwise only the birth year is fixed.
        """

        age = self.age(type=type)
        today = dates.now()
        if type:
            return self.date(
                min=min or _years_before(today, age + 1),
                max=max or _years_before(today, age),
                american=american,
                string=string,
            )
        return self.date(
            year=year if year is not None else today.year - age,
            american=american,
            string=string,
        )

    def gender(self, extra_genders: list[str] | tuple[str, ...] = ()) -> str:
        return self.pick(["Male", "Female", *extra_genders])

    def first(self, gender: str | None = None, nationality: str = "en") -> str:
        """Return a first name for ``gender`` (drawn when omitted)."""

        drawn = self.gender()
        return self.pick(self._first_names(gender or drawn, nationality))

    def last(self, nationality: str = "en") -> str:
        table = self.get("lastNames")
        try:
            pool = table[nationality.lower()]
        except KeyError:
            raise InvalidArgumentError(f"no last names for nationality {nationality!r}") from None
        return self.pick(pool)

    def name(
        self,
        middle: bool = False,
        middle_initial: bool = False,
        prefix: bool = False,
        suffix: bool = False,
        gender: str | None = None,
        nationality: str = "en",
    ) -> str:
        """Return ``first [middle] last`` with optional prefix and suffix.

        Each first name draws its own gender unless ``gender`` is given; the
        prefix is taken from the set for ``gender``, or from all of them.
        """

        first = self.first(gender=gender, nationality=nationality)
        last = self.last(nationality=nationality)

        if middle:
            text = f"{first} {self.first(gender=gender, nationality=nationality)} {last}"
        elif middle_initial:
            text = f"{first} {self.character(alpha=True, casing='upper')}. {last}"
        else:
            text = f"{first} {last}"

        if prefix:
            text = f"{self.name_prefix(gender=gender or 'all')} {text}"
        if suffix:
            text = f"{text} {self.name_suffix()}"
        return text

    def name_prefixes(self, gender: str = "all") -> list[dict[str, str]]:
        key = gender.lower()
        prefixes = [{"name": "Doctor", "abbreviation": "Dr."}]
        if key in ("male", "all"):
            prefixes.append({"name": "Mister", "abbreviation": "Mr."})
        if key in ("female", "all"):
            prefixes.append({"name": "Miss", "abbreviation": "Miss"})
            prefixes.append({"name": "Misses", "abbreviation": "Mrs."})
        return prefixes

    def name_prefix(self, gender: str = "all", full: bool = False) -> str:
        chosen = self.pick(self.name_prefixes(gender))
        return chosen["name"] if full else chosen["abbreviation"]

    def name_suffixes(self) -> list[dict[str, str]]:
        return [dict(row) for row in NAME_SUFFIXES]

    def name_suffix(self, full: bool = False) -> str:
        chosen = self.pick(self.name_suffixes())
        return chosen["name"] if full else chosen["abbreviation"]

    def nationality(self) -> str:
        return self.pick(self.get("nationalities"))["name"]

    def _first_names(self, gender: str, nationality: str) -> Any:
        table = self.get("firstNames")
        try:
            return table[gender.lower()][nationality.lower()]
        except KeyError:
            raise InvalidArgumentError(
                f"no first names for gender {gender!r} and nationality {nationality!r}"
            ) from None
