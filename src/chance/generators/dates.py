"""Calendar generators.

Defaults that depend on the current date (``year``, ``timestamp``,
``exp_month`` and friends) read the clock through :func:`now` so tests can
pin it with ``monkeypatch.setattr(dates, "now", ...)``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Any

from chance.utils.errors import ChanceRangeError

from .base import check_range
from .helpers import HelpersMixin

__all__ = ["DatesMixin", "now"]

_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
_WEEKEND = ["Saturday", "Sunday"]


def now() -> datetime:
    """Return the current local time."""

    return datetime.now()


def to_millis(value: datetime) -> int:
    """Milliseconds since the Unix epoch; naive values are local time."""

    return round(value.timestamp() * 1000)


def from_millis(millis: int, tz: tzinfo | None = None) -> datetime:
    try:
        return datetime.fromtimestamp(millis / 1000, tz=tz)
    except (OverflowError, OSError, ValueError) as exc:
        raise ChanceRangeError(f"timestamp {millis} ms is out of range") from exc


def build_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millisecond: int = 0,
) -> datetime:
    """Assemble a datetime, rolling overflowing fields into the next unit.

    ``build_datetime(2023, 2, 30)`` is 2 March 2023 rather than an error.
    """

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        start = datetime(year, month, 1)
        return start + timedelta(
            days=day - 1,
            hours=hour,
            minutes=minute,
            seconds=second,
            milliseconds=millisecond,
        )
    except (OverflowError, ValueError) as exc:
        raise ChanceRangeError(f"date out of range: {exc}") from exc


def _max_millis() -> int:
    return to_millis(datetime(9999, 12, 31, 23, 59, 59, 999000))


class DatesMixin(HelpersMixin):
    def ampm(self) -> str:
        return "am" if self.bool() else "pm"

    def date(
        self,
        min: datetime | None = None,
        max: datetime | None = None,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        millisecond: int | None = None,
        american: bool = True,
        string: bool = False,
    ) -> datetime | str:
        """Return a random datetime, or a ``m/d/yyyy`` string.

        With ``min``/``max`` the value is uniform over that millisecond range
        (unbounded ends default to 1 ms after the epoch and the last
        representable millisecond).  Otherwise every component is drawn, in
        the order month, year, day, hour, minute, second, millisecond, and the
        explicit components override the drawn ones.  ``month`` is 1-based.
        """

        if min is not None or max is not None:
            lo = to_millis(min) if min is not None else 1
            hi = to_millis(max) if max is not None else _max_millis()
            check_range(lo > hi, "min cannot be greater than max.")
            anchor = min if min is not None else max
            value = from_millis(self.integer(min=lo, max=hi), tz=anchor.tzinfo)
        else:
            drawn_month = self.month(raw=True)
            days = drawn_month["days"]
            if month is not None:
                days = self.months()[(month - 1) % 12]["days"]
            drawn = {
                "year": int(self.year()),
                "month": int(drawn_month["numeric"]),
                "day": self.natural(min=1, max=days),
                "hour": self.hour(twentyfour=True),
                "minute": self.minute(),
                "second": self.second(),
                "millisecond": self.millisecond(),
            }
            given = {
                "year": year,
                "month": month,
                "day": day,
                "hour": hour,
                "minute": minute,
                "second": second,
                "millisecond": millisecond,
            }
            for key, explicit in given.items():
                if explicit is not None:
                    drawn[key] = explicit
            value = build_datetime(**drawn)

        if string:
            if american:
                return f"{value.month}/{value.day}/{value.year}"
            return f"{value.day}/{value.month}/{value.year}"
        return value

    def hammertime(self, **options: Any) -> int:
        """Return a random date as milliseconds since the epoch."""

        options.pop("string", None)
        return to_millis(self.date(**options))

    def hour(
        self,
        twentyfour: bool = False,
        min: int | None = None,
        max: int | None = None,
    ) -> int:
        lo = min if min is not None else (0 if twentyfour else 1)
        hi = max if max is not None else (23 if twentyfour else 12)
        check_range(lo < 0, "Min cannot be less than 0.")
        check_range(twentyfour and hi > 23, "Max cannot be greater than 23 for twentyfour option.")
        check_range(not twentyfour and hi > 12, "Max cannot be greater than 12.")
        check_range(lo > hi, "Min cannot be greater than Max.")
        return self.natural(min=lo, max=hi)

    def minute(self, min: int = 0, max: int = 59) -> int:
        check_range(min < 0, "Min cannot be less than 0.")
        check_range(max > 59, "Max cannot be greater than 59.")
        check_range(min > max, "Min cannot be greater than Max.")
        return self.natural(min=min, max=max)

    def second(self, min: int = 0, max: int = 59) -> int:
        check_range(min < 0, "Min cannot be less than 0.")
        check_range(max > 59, "Max cannot be greater than 59.")
        check_range(min > max, "Min cannot be greater than Max.")
        return self.natural(min=min, max=max)

    def millisecond(self) -> int:
        return self.natural(max=999)

    def month(self, min: int = 1, max: int = 12, raw: bool = False) -> Any:
        """Return a month name, or its full table row with ``raw``."""

        check_range(min < 1, "Min cannot be less than 1.")
        check_range(max > 12, "Max cannot be greater than 12.")
        check_range(min > max, "Min cannot be greater than Max.")
        chosen = self.pick(self.months()[min - 1 : max])
        return chosen if raw else chosen["name"]

    def months(self) -> list[dict[str, Any]]:
        return self.get("months")

    def timestamp(self) -> int:
        """Seconds since the epoch, between 1 and now."""

        return self.natural(min=1, max=int(now().timestamp()))

    def weekday(self, weekday_only: bool = False) -> str:
        days = list(_WEEKDAYS)
        if not weekday_only:
            days.extend(_WEEKEND)
        return self.pickone(days)

    def year(self, min: int | None = None, max: int | None = None) -> str:
        """Return a year as a string, from this year up to a century ahead."""

        lo = min if min is not None else now().year
        hi = max if max is not None else lo + 100
        return str(self.natural(min=lo, max=hi))

    def timezone(self) -> dict[str, Any]:
        return self.pick(self.get("timezones"))
