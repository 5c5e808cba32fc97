"""Directional conversion between currency A and currency B."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol

from fx_converter.rates import DailyRates, validate_rates

__all__ = ["Converter", "RateConverter", "new_converter"]


class RateConverter(Protocol):
    """Contract for anything able to convert amounts on a given day."""

    def a_to_b(self, day: date | datetime, amount: float) -> float:
        ...  # pragma: no cover - protocol definition

    def b_to_a(self, day: date | datetime, amount: float) -> float:
        ...  # pragma: no cover - protocol definition


@dataclass(frozen=True, slots=True)
class Converter:
    """Convert amounts with the rate that applies on the requested day."""

    rates: DailyRates

    def a_to_b(self, day: date | datetime, amount: float) -> float:
        """Convert currency A to currency B (``amount / rate``)."""

        return float(amount) / self.rates.get_rate(day)

    def b_to_a(self, day: date | datetime, amount: float) -> float:
        """Convert currency B to currency A (``amount * rate``)."""

        return float(amount) * self.rates.get_rate(day)


def new_converter(
    rates: Mapping[date | datetime | str, float] | None = None,
    *,
    now: date | datetime | None = None,
) -> Converter:
    """Validate ``rates`` and return a ready-to-use :class:`Converter`.

    When ``rates`` is omitted the bundled reference dataset is used. Nothing is
    returned if validation fails; the validation error propagates instead.
    """

    if rates is None:
        from fx_converter.data import default_rates

        table = default_rates()
    elif isinstance(rates, DailyRates):
        table = rates
    else:
        table = DailyRates(rates)

    validate_rates(table, now=now)
    return Converter(rates=table)
