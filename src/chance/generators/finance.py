"""Payment cards, currencies, money amounts and card expiry dates."""

from __future__ import annotations

from typing import Any

from chance.rules import luhn_calculate as _luhn_calculate
from chance.rules import luhn_check as _luhn_check
from chance.utils.errors import InvalidArgumentError

from . import dates
from .dates import DatesMixin

__all__ = ["FinanceMixin"]


def _same_code(collected: list[dict[str, str]], candidate: dict[str, str]) -> bool:
    return any(item["code"] == candidate["code"] for item in collected)


class FinanceMixin(DatesMixin):
    def cc_types(self) -> list[dict[str, Any]]:
        return self.get("cc_types")

    def cc_type(self, name: str | None = None, raw: bool = False) -> Any:
        """Return a card issuer by full or short name, or a random one."""

        types = self.cc_types()
        if name:
            for card in types:
                if name in (card["name"], card["short_name"]):
                    break
            else:
                raise InvalidArgumentError(
                    f"Credit card type {name!r} is not supported"
                )
        else:
            card = self.pick(types)
        return card if raw else card["name"]

    def cc(self, type: str | None = None) -> str:
        """Card number with the issuer prefix, length and a valid Luhn digit."""

        card = self.cc_type(name=type, raw=True)
        prefix = card["prefix"]
        remaining = card["length"] - len(prefix) - 1
        body = prefix + "".join(str(d) for d in self.n(self.integer, remaining, min=0, max=9))
        return body + str(_luhn_calculate(body))

    @staticmethod
    def luhn_check(number: str | int) -> bool:
        return _luhn_check(number)

    @staticmethod
    def luhn_calculate(number: str | int) -> int:
        return _luhn_calculate(number)

    def currency_types(self) -> list[dict[str, str]]:
        return self.get("currency_types")

    def currency(self) -> dict[str, str]:
        return self.pick(self.currency_types())

    def currency_pair(self, as_string: bool = False) -> Any:
        """Two currencies with different codes, or ``"USD/EUR"`` with ``as_string``."""

        pair = self.unique(self.currency, 2, comparator=_same_code)
        if as_string:
            return f"{pair[0]['code']}/{pair[1]['code']}"
        return pair

    def dollar(self, min: float = 0, max: float = 10000) -> str:
        value = self.floating(min=min, max=max, fixed=2)
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):.2f}"

    def euro(self, min: float = 0, max: float = 10000) -> str:
        """Amount with thousands separators and a trailing ``€``, e.g. ``-1,234.5€``."""

        amount = float(self.dollar(min=min, max=max).replace("$", ""))
        text = f"{amount:,.2f}".rstrip("0").rstrip(".")
        return text + "€"

    def exp(self, raw: bool = False) -> Any:
        """Card expiry as ``MM/YYYY``; never in the past."""

        year = self.exp_year()
        if year == str(dates.now().year):
            month = self.exp_month(future=True)
        else:
            month = self.exp_month()
        if raw:
            return {"month": month, "year": year}
        return f"{month}/{year}"

    def exp_month(self, future: bool = False) -> str:
        """Zero-padded month; with ``future`` strictly after the current month."""

        current = dates.now().month
        if future and current != 12:
            while True:
                month = self.month(raw=True)["numeric"]
                if int(month) > current:
                    return month
        return self.month(raw=True)["numeric"]

    def exp_year(self) -> str:
        return self.year(max=dates.now().year + 10)
