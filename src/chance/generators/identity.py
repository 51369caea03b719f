"""National identifiers with valid check digits.

The digit arithmetic lives in :mod:`chance.rules`; this module only draws
the random payload and formats the result.
"""

from __future__ import annotations

from datetime import date

from chance.rules import (
    cnpj_check_digits,
    codice_fiscale,
    cpf_check_digits,
    israel_id_check_digit,
    luhn_calculate,
    nip_check_digit,
    passport_mrz,
    pesel_check_digit,
    regon_check_digit,
)

from . import dates
from .basics import NUMBERS
from .person import PersonMixin

__all__ = ["IdentityMixin"]

_CF_CITY_LETTERS = list("ABCDEFGHILMZ")


def _yymmdd(value: date) -> str:
    return f"{value.year % 100:02d}{value.month:02d}{value.day:02d}"


class IdentityMixin(PersonMixin):
    def ssn(self, ssn_four: bool = False, dashes: bool = True) -> str:
        """US social security number, or just its last four digits."""

        pool = "1234567890"
        dash = "-" if dashes else ""
        if ssn_four:
            return self.string(pool=pool, length=4)
        return (
            self.string(pool=pool, length=3)
            + dash
            + self.string(pool=pool, length=2)
            + dash
            + self.string(pool=pool, length=4)
        )

    def cpf(self, formatted: bool = True) -> str:
        """Brazilian individual taxpayer number."""

        digits = "".join(str(d) for d in self.n(self.natural, 9, max=9))
        d1, d2 = cpf_check_digits(digits)
        if not formatted:
            return f"{digits}{d1}{d2}"
        return f"{digits[0:3]}.{digits[3:6]}.{digits[6:9]}-{d1}{d2}"

    def cnpj(self, formatted: bool = True) -> str:
        """Brazilian company number; the branch is always ``0001``."""

        digits = "".join(str(d) for d in self.n(self.natural, 8, max=9)) + "0001"
        d1, d2 = cnpj_check_digits(digits)
        if not formatted:
            return f"{digits}{d1}{d2}"
        return f"{digits[0:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{d1}{d2}"

    def pl_pesel(self) -> str:
        body = self.pad(self.natural(min=1, max=9999999999), 10)
        return body + str(pesel_check_digit(body))

    def pl_nip(self) -> str:
        # a check value of 10 has no digit; such numbers are never issued
        while True:
            body = self.pad(self.natural(min=1, max=999999999), 9)
            check = nip_check_digit(body)
            if check != 10:
                return body + str(check)

    def pl_regon(self) -> str:
        body = self.pad(self.natural(min=1, max=99999999), 8)
        return body + str(regon_check_digit(body))

    def israel_id(self) -> str:
        body = self.string(pool=NUMBERS, length=8)
        return body + str(israel_id_check_digit(body))

    def it_vat(self) -> str:
        """Italian VAT number: serial, province office code and Luhn digit."""

        serial = self.natural(min=1, max=1800000)
        office = self.pick(self.get("provinces")["it"])["code"]
        body = self.pad(serial, 7) + self.pad(office, 3)
        return body + str(luhn_calculate(body))

    def cf(
        self,
        first: str | None = None,
        last: str | None = None,
        gender: str | None = None,
        birthday: date | None = None,
        city: str | None = None,
    ) -> str:
        """Italian fiscal code; missing personal data is generated."""

        gender = gender or self.gender()
        first = first or self.first(gender=gender, nationality="it")
        last = last or self.last(nationality="it")
        if birthday is None:
            birthday = self.birthday()
        city = city or self.pickone(_CF_CITY_LETTERS) + self.pad(self.natural(max=999), 3)
        return codice_fiscale(first, last, birthday, gender, city).upper()

    def mrz(
        self,
        first: str | None = None,
        last: str | None = None,
        passport_number: str | int | None = None,
        dob: date | str | None = None,
        expiry: date | str | None = None,
        gender: str | None = None,
        issuer: str = "GBR",
        nationality: str = "GBR",
    ) -> str:
        """Two-line passport machine readable zone, concatenated (88 chars).

        Every default is drawn, in order, even when overridden.
        """

        drawn_first = self.first()
        drawn_last = self.last()
        drawn_number = self.integer(min=100000000, max=999999999)
        drawn_dob = self.birthday(type="adult")
        today = dates.now()
        drawn_expiry = f"{(today.year + 5) % 100:02d}{today.month:02d}{today.day:02d}"
        drawn_gender = "F" if self.gender() == "Female" else "M"

        if isinstance(dob, date):
            dob = _yymmdd(dob)
        if isinstance(expiry, date):
            expiry = _yymmdd(expiry)
        if gender is not None:
            gender = {"female": "F", "male": "M"}.get(gender.lower(), gender)

        return passport_mrz(
            first=first or drawn_first,
            last=last or drawn_last,
            passport_number=passport_number or drawn_number,
            dob=dob or _yymmdd(drawn_dob),
            expiry=expiry or drawn_expiry,
            gender=gender or drawn_gender,
            issuer=issuer,
            nationality=nationality,
        )
