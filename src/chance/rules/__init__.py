"""Check-digit and transliteration algorithms.

Everything here is a pure function of its inputs and never draws random
numbers.  Generators in :mod:`chance.generators` produce the random payload
and delegate the externally defined parts (check digits, name codes) here.
"""

from .checksums import (
    cnpj_check_digits,
    cpf_check_digits,
    israel_id_check_digit,
    luhn_calculate,
    luhn_check,
    pesel_check_digit,
    nip_check_digit,
    regon_check_digit,
)
from .codice_fiscale import codice_fiscale
from .mrz import mrz_check_digit, passport_mrz

__all__ = [
    "cnpj_check_digits",
    "codice_fiscale",
    "cpf_check_digits",
    "israel_id_check_digit",
    "luhn_calculate",
    "luhn_check",
    "mrz_check_digit",
    "nip_check_digit",
    "passport_mrz",
    "pesel_check_digit",
    "regon_check_digit",
]
