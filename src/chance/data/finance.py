"""Credit card issuer rules and ISO 4217 currencies."""

from __future__ import annotations

from typing import Any, Dict, List

__all__ = ["CC_TYPES", "CURRENCY_TYPES"]

# ``prefix`` is the issuer identification prefix, ``length`` the full card
# number length including the Luhn check digit.
CC_TYPES: List[Dict[str, Any]] = [
    {"name": "American Express", "short_name": "amex", "prefix": "34", "length": 15},
    {"name": "Bankcard", "short_name": "bankcard", "prefix": "5610", "length": 16},
    {"name": "China UnionPay", "short_name": "chinaunion", "prefix": "62", "length": 16},
    {"name": "Diners Club Carte Blanche", "short_name": "dccarte", "prefix": "300", "length": 14},
    {"name": "Diners Club enRoute", "short_name": "dcenroute", "prefix": "2014", "length": 15},
    {"name": "Diners Club International", "short_name": "dcintl", "prefix": "36", "length": 14},
    {"name": "Diners Club United States & Canada", "short_name": "dcusc", "prefix": "54",
     "length": 16},
    {"name": "Discover Card", "short_name": "discover", "prefix": "6011", "length": 16},
    {"name": "InstaPayment", "short_name": "instapay", "prefix": "637", "length": 16},
    {"name": "JCB", "short_name": "jcb", "prefix": "3528", "length": 16},
    {"name": "Laser", "short_name": "laser", "prefix": "6304", "length": 16},
    {"name": "Maestro", "short_name": "maestro", "prefix": "5018", "length": 16},
    {"name": "Mastercard", "short_name": "mc", "prefix": "51", "length": 16},
    {"name": "Solo", "short_name": "solo", "prefix": "6334", "length": 16},
    {"name": "Switch", "short_name": "switch", "prefix": "4903", "length": 16},
    {"name": "Visa", "short_name": "visa", "prefix": "4", "length": 16},
    {"name": "Visa Electron", "short_name": "electron", "prefix": "4026", "length": 16},
]

CURRENCY_TYPES: List[Dict[str, str]] = [
    {"code": code, "name": name}
    for code, name in (
        line.split(" ", 1)
        for line in """
AED United Arab Emirates Dirham
AFN Afghanistan Afghani
ALL Albania Lek
AMD Armenia Dram
ARS Argentina Peso
AUD Australia Dollar
BGN Bulgaria Lev
BRL Brazil Real
CAD Canada Dollar
CHF Switzerland Franc
CLP Chile Peso
CNY China Yuan Renminbi
COP Colombia Peso
CZK Czech Republic Koruna
DKK Denmark Krone
EGP Egypt Pound
EUR Euro Member Countries
GBP United Kingdom Pound
HKD Hong Kong Dollar
HUF Hungary Forint
IDR Indonesia Rupiah
ILS Israel Shekel
INR India Rupee
ISK Iceland Krona
JPY Japan Yen
KES Kenya Shilling
KRW Korea (South) Won
MAD Morocco Dirham
MXN Mexico Peso
MYR Malaysia Ringgit
NGN Nigeria Naira
NOK Norway Krone
NZD New Zealand Dollar
PEN Peru Sol
PHP Philippines Peso
PKR Pakistan Rupee
PLN Poland Zloty
RON Romania New Leu
RUB Russia Ruble
SAR Saudi Arabia Riyal
SEK Sweden Krona
SGD Singapore Dollar
THB Thailand Baht
TRY Turkey Lira
TWD Taiwan New Dollar
UAH Ukraine Hryvnia
USD United States Dollar
VND Viet Nam Dong
ZAR South Africa Rand
""".strip().splitlines()
    )
]
