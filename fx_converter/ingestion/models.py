"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(slots=True)
class RateRecord:
    """A single daily observation extracted from a reference dataset."""

    rate_date: date
    rate: float
    currency: str = "USD"
    base_currency: str = "EUR"
