"""Weighted-sum check digits for card and national identification numbers.

Every function accepts the payload as a string of decimal digits (or an
``int``) and returns the check digit(s) only.  Inputs are not validated for
plausibility: non-digit characters raise ``ValueError`` from ``int`` like any
other malformed number would.
"""

from __future__ import annotations

from typing import List, Sequence

__all__ = [
    "cnpj_check_digits",
    "cpf_check_digits",
    "israel_id_check_digit",
    "luhn_calculate",
    "luhn_check",
    "nip_check_digit",
    "pesel_check_digit",
    "regon_check_digit",
]


def _digits(number: str | int) -> List[int]:
    return [int(ch) for ch in str(number)]


def _weighted(digits: Sequence[int], weights: Sequence[int]) -> int:
    return sum(d * w for d, w in zip(digits, weights, strict=False))


# ---------------------------------------------------------------------------
# Luhn


def luhn_calculate(number: str | int) -> int:
    """Return the Luhn check digit to append to ``number``.

    Starting from the rightmost payload digit every second digit is doubled
    (minus 9 when above 9); the check digit is ``(sum * 9) % 10``.
    """

    total = 0
    for idx, digit in enumerate(reversed(_digits(number))):
        if idx % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (total * 9) % 10


def luhn_check(number: str | int) -> bool:
    """Return ``True`` when the trailing digit of ``number`` is its Luhn digit."""

    text = str(number)
    if len(text) < 2:
        return False
    return int(text[-1]) == luhn_calculate(text[:-1])


# ---------------------------------------------------------------------------
# Brazil


def cpf_check_digits(nine: str | int) -> tuple[int, int]:
    """Return both CPF verification digits for a nine digit base."""

    digits = _digits(nine)
    d1 = 11 - _weighted(digits, range(10, 1, -1)) % 11
    if d1 >= 10:
        d1 = 0
    d2 = 11 - _weighted(digits + [d1], range(11, 1, -1)) % 11
    if d2 >= 10:
        d2 = 0
    return d1, d2


_CNPJ_W1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
_CNPJ_W2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def cnpj_check_digits(twelve: str | int) -> tuple[int, int]:
    """Return both CNPJ verification digits for a twelve digit base.

    The base is the eight digit company root followed by the four digit
    branch number (``0001`` for the head office).
    """

    digits = _digits(str(twelve).zfill(12))
    r1 = _weighted(digits, _CNPJ_W1) % 11
    d1 = 0 if r1 < 2 else 11 - r1
    r2 = _weighted(digits + [d1], _CNPJ_W2) % 11
    d2 = 0 if r2 < 2 else 11 - r2
    return d1, d2


# ---------------------------------------------------------------------------
# Poland


def pesel_check_digit(ten: str | int) -> int:
    total = _weighted(_digits(ten), (1, 3, 7, 9, 1, 3, 7, 9, 1, 3)) % 10
    return 0 if total == 0 else 10 - total


def nip_check_digit(nine: str | int) -> int:
    """Return the NIP check value; ``10`` means the base is unusable."""

    return _weighted(_digits(nine), (6, 5, 7, 2, 3, 4, 5, 6, 7)) % 11


def regon_check_digit(eight: str | int) -> int:
    check = _weighted(_digits(eight), (8, 9, 2, 3, 4, 5, 6, 7)) % 11
    return 0 if check == 10 else check


# ---------------------------------------------------------------------------
# Israel


def israel_id_check_digit(eight: str | int) -> int:
    """Return the ninth digit of an Israeli identity number."""

    total = 0
    for idx, digit in enumerate(_digits(eight)):
        product = digit * (1 if idx % 2 == 0 else 2)
        total += product // 10 + product % 10
    return (10 - total % 10) % 10
