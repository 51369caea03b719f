"""Italian fiscal code (codice fiscale) assembly.

Layout of the 16 characters::

    SSS NNN YY M DD CCCC K
    |   |   |  | |  |    +-- check character
    |   |   |  | |  +------- cadastral code of the birthplace
    |   |   |  | +---------- day of birth, +40 for women
    |   |   |  +------------ month letter
    |   |   +--------------- last two digits of the birth year
    |   +------------------- first name code
    +----------------------- surname code

Name codes take consonants first, then vowels, then ``X`` padding.  A first
name with more than three consonants uses the first, third and fourth.
Inputs are not validated: accented or foreign letters simply fall through
the consonant and vowel filters.
"""

from __future__ import annotations

from datetime import date

__all__ = ["MONTH_LETTERS", "check_character", "codice_fiscale", "date_code", "name_code"]

MONTH_LETTERS = "ABCDEHLMPRST"

_VOWELS = "AEIOU"
_CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"

_ODD_VALUES = {
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15, "7": 17, "8": 19, "9": 21,
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15, "H": 17, "I": 19, "J": 21,
    "K": 2, "L": 4, "M": 18, "N": 20, "O": 11, "P": 3, "Q": 6, "R": 8, "S": 12, "T": 14,
    "U": 16, "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
}


def _even_value(ch: str) -> int:
    if ch.isdigit():
        return int(ch)
    return ord(ch) - ord("A")


def name_code(name: str, *, is_surname: bool) -> str:
    """Return the three letter code for a surname or first name."""

    upper = name.upper()
    consonants = [ch for ch in upper if ch in _CONSONANTS]
    vowels = [ch for ch in upper if ch in _VOWELS]
    if not is_surname and len(consonants) > 3:
        consonants = [consonants[0], consonants[2], consonants[3]]
    return "".join(consonants + vowels + ["X", "X", "X"])[:3]


def date_code(birthday: date, gender: str) -> str:
    """Return ``YYMDD`` with the day shifted by 40 for women."""

    day = birthday.day + (40 if gender.lower() == "female" else 0)
    return f"{birthday.year % 100:02d}{MONTH_LETTERS[birthday.month - 1]}{day:02d}"


def check_character(partial: str) -> str:
    """Return the check character for the first 15 characters of a code."""

    total = 0
    for idx, ch in enumerate(partial.upper()[:15]):
        # positions are 1-based in the published tables: index 0 is "odd"
        total += _ODD_VALUES[ch] if idx % 2 == 0 else _even_value(ch)
    return chr(ord("A") + total % 26)


def codice_fiscale(first: str, last: str, birthday: date, gender: str, city: str) -> str:
    """Assemble a complete fiscal code."""

    partial = (
        name_code(last, is_surname=True)
        + name_code(first, is_surname=False)
        + date_code(birthday, gender)
        + city.upper()
    )
    return partial + check_character(partial)
