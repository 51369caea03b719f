from __future__ import annotations

from datetime import date

import pytest

from chance import InvalidArgumentError
from chance.rules import (
    cnpj_check_digits,
    codice_fiscale,
    cpf_check_digits,
    israel_id_check_digit,
    luhn_calculate,
    luhn_check,
    mrz_check_digit,
    nip_check_digit,
    passport_mrz,
    pesel_check_digit,
    regon_check_digit,
)
from chance.rules.codice_fiscale import check_character, name_code


def test_luhn() -> None:
    assert luhn_calculate("411111111111111") == 1
    assert luhn_check("4111111111111111")
    assert not luhn_check("4111111111111112")
    assert not luhn_check("4")


def test_brazil() -> None:
    assert cpf_check_digits("111444777") == (3, 5)
    assert cnpj_check_digits("112223330001") == (8, 1)


def test_poland() -> None:
    assert pesel_check_digit("4405140135") == 9
    assert nip_check_digit("123456321") == 8
    assert regon_check_digit("12345678") == 5


def test_israel() -> None:
    assert israel_id_check_digit("00000001") == 8


def test_codice_fiscale() -> None:
    assert name_code("Rossi", is_surname=True) == "RSS"
    assert name_code("Mario", is_surname=False) == "MRA"
    assert name_code("Gianfranco", is_surname=False) == "GFR"
    assert name_code("Fo", is_surname=True) == "FOX"
    assert check_character("RSSMRA85T10A562") == "S"
    assert codice_fiscale("Mario", "Rossi", date(1985, 12, 10), "Male", "A562") == "RSSMRA85T10A562S"


def test_codice_fiscale_female_day_offset() -> None:
    code = codice_fiscale("Maria", "Rossi", date(1985, 12, 10), "Female", "A562")
    assert code[9:11] == "50"


def test_mrz_check_digit() -> None:
    assert mrz_check_digit("L898902C3") == 6
    assert mrz_check_digit("740812") == 2
    assert mrz_check_digit("120415") == 9


def test_passport_mrz_reference() -> None:
    mrz = passport_mrz(
        first="Anna Maria",
        last="Eriksson",
        passport_number="L898902C3",
        dob="740812",
        expiry="120415",
        gender="F",
        issuer="UTO",
        nationality="UTO",
        personal_number="ZE184226B",
    )
    assert mrz[:44] == "P<UTOERIKSSON<<ANNA<MARIA<<<<<<<<<<<<<<<<<<<"
    assert mrz[44:] == "L898902C36UTO7408122F1204159ZE184226B<<<<<10"


@pytest.mark.parametrize(
    "overrides",
    [{"gender": "Other"}, {"gender": ""}, {"dob": "1974-08-12"}, {"expiry": "12041"}],
)
def test_passport_mrz_rejects_malformed_fields(overrides: dict[str, str]) -> None:
    fields = {
        "first": "Anna",
        "last": "Eriksson",
        "passport_number": "L898902C3",
        "dob": "740812",
        "expiry": "120415",
        "gender": "F",
    }
    fields.update(overrides)
    with pytest.raises(InvalidArgumentError):
        passport_mrz(**fields)
