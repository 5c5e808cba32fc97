"""Historical daily rate table with a bounded, weekend-aware lookup."""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from datetime import date, datetime
from types import MappingProxyType
from typing import Final

from fx_converter.errors import (
    EmptyTableError,
    FutureDateError,
    NonPositiveRateError,
    RateNotFoundError,
)
from fx_converter.utils.dates import (
    ONE_DAY,
    parse_date,
    previous_weekday,
    to_calendar_day,
    utc_today,
)

__all__ = ["LOOKBACK_DAYS", "DailyRates", "same_rate", "validate_rates"]

LOOKBACK_DAYS: Final[int] = 7


class DailyRates(Mapping[date, float]):
    """Read-only mapping of calendar day to rate.

    Converting A to B divides by the rate and converting B to A multiplies by
    it, so with a rate of ``2.0`` an amount of 100 in A corresponds to 50 in B.
    """

    __slots__ = ("_rates",)

    def __init__(self, rates: Mapping[date | datetime | str, float] | None = None) -> None:
        normalised: dict[date, float] = {}
        for raw_date, raw_rate in (rates or {}).items():
            day = parse_date(raw_date)
            rate = float(raw_rate)
            previous = normalised.get(day)
            if previous is not None and not same_rate(previous, rate):
                raise ValueError(f"conflicting rates for {day.isoformat()}: {previous} and {rate}")
            normalised[day] = rate
        self._rates: Mapping[date, float] = MappingProxyType(normalised)

    def __getitem__(self, key: date) -> float:
        return self._rates[key]

    def __iter__(self) -> Iterator[date]:
        return iter(self._rates)

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._rates)!r})"

    def get_rate(self, day: date | datetime) -> float:
        """Return the rate that applies on ``day``.

        Weekends are first rolled back to the preceding Friday. From that
        anchor the table is searched for the anchor itself and the
        :data:`LOOKBACK_DAYS` days before it, newest first.

        Raises:
            RateNotFoundError: none of the searched days has a rate. The error
                names the requested day, not the anchor.
        """

        requested = to_calendar_day(day)
        candidate = previous_weekday(requested)
        for _ in range(LOOKBACK_DAYS + 1):
            rate = self._rates.get(candidate)
            if rate is not None:
                return rate
            candidate -= ONE_DAY
        raise RateNotFoundError(requested)


def validate_rates(rates: Mapping[date, float], *, now: date | datetime | None = None) -> None:
    """Check the invariants of a rate table.

    Entries are visited in ascending date order and, for each one, the date is
    checked before the rate.

    Raises:
        EmptyTableError: the table has no entries.
        FutureDateError: an entry is dated after ``now`` (UTC today by default).
        NonPositiveRateError: an entry's rate is zero, negative or NaN.
    """

    if len(rates) == 0:
        raise EmptyTableError()

    today = to_calendar_day(now) if now is not None else utc_today()
    for rate_date in sorted(rates):
        rate = rates[rate_date]
        if rate_date > today:
            raise FutureDateError(rate_date, rate)
        if math.isnan(rate) or rate <= 0:
            raise NonPositiveRateError(rate_date, rate)


def same_rate(left: float, right: float) -> bool:
    """Equality that also treats two NaN rates as the same value."""

    return left == right or (math.isnan(left) and math.isnan(right))
