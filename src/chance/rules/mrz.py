"""Machine readable zone for TD3 (passport) documents.

Two 44 character lines joined without a separator.  Line 1 holds the
document type, issuing state and the name field; line 2 holds the passport
number, nationality, birth date, sex, expiry, the optional personal number
field and their check digits, ending with the composite check digit.
"""

from __future__ import annotations

from chance.utils.errors import InvalidArgumentError

__all__ = ["mrz_check_digit", "passport_mrz"]

_WEIGHTS = (7, 3, 1)
_NAME_FIELD = 39


def _char_value(ch: str) -> int:
    if ch == "<":
        return 0
    if ch.isdigit():
        return int(ch)
    return ord(ch.upper()) - ord("A") + 10


def mrz_check_digit(field: str | int) -> int:
    """Return the 7-3-1 weighted check digit of ``field``."""

    text = str(field)
    return sum(_char_value(ch) * _WEIGHTS[idx % 3] for idx, ch in enumerate(text)) % 10


def _name_field(first: str, last: str) -> str:
    raw = f"{last.upper()}<<{first.upper()}".replace(" ", "<").replace("-", "<")
    return raw[:_NAME_FIELD].ljust(_NAME_FIELD, "<")


def passport_mrz(
    *,
    first: str,
    last: str,
    passport_number: str | int,
    dob: str,
    expiry: str,
    gender: str,
    issuer: str = "GBR",
    nationality: str = "GBR",
    personal_number: str = "",
) -> str:
    """Return the 88 character MRZ of a passport.

    ``dob`` and ``expiry`` are ``YYMMDD`` strings, ``gender`` is ``M``, ``F``
    or ``<``.
    """

    if len(gender) != 1:
        raise InvalidArgumentError(f"MRZ sex field must be one character, got {gender!r}.")
    for label, value in (("dob", dob), ("expiry", expiry)):
        if len(value) != 6 or not value.isdigit():
            raise InvalidArgumentError(f"MRZ {label} must be a YYMMDD string, got {value!r}.")

    issuer = issuer.upper()[:3].ljust(3, "<")
    nationality = nationality.upper()[:3].ljust(3, "<")
    line1 = f"P<{issuer}{_name_field(first, last)}"

    number = str(passport_number)[:9].ljust(9, "<")
    personal = personal_number[:14].ljust(14, "<")
    line2 = (
        f"{number}{mrz_check_digit(number)}"
        f"{nationality}"
        f"{dob}{mrz_check_digit(dob)}"
        f"{gender}"
        f"{expiry}{mrz_check_digit(expiry)}"
        f"{personal}{mrz_check_digit(personal)}"
    )
    composite = line2[0:10] + line2[13:20] + line2[21:43]
    line2 += str(mrz_check_digit(composite))
    return line1 + line2
