"""Turn reference dataset files into the mapping the converter accepts."""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Iterable

from fx_converter.ingestion.models import RateRecord
from fx_converter.ingestion.rate_csv import ECBHistoryParser, RateCSVParser
from fx_converter.ingestion.sdmx import SDMXRatesParser
from fx_converter.rates import same_rate

__all__ = ["load_rates", "records_to_mapping"]


def records_to_mapping(records: Iterable[RateRecord]) -> dict[date, float]:
    """Collapse records into ``{rate_date: rate}``.

    Raises:
        ValueError: the records cover more than one currency pair, or repeat a
            date with a different rate.
    """

    rows = list(records)
    pairs = {(record.currency, record.base_currency) for record in rows}
    if len(pairs) > 1:
        listed = ", ".join(f"{cur}/{base}" for cur, base in sorted(pairs))
        raise ValueError(f"expected a single currency pair, got {listed}")

    mapping: dict[date, float] = {}
    for record in rows:
        previous = mapping.get(record.rate_date)
        if previous is not None and not same_rate(previous, record.rate):
            raise ValueError(
                f"conflicting rates for {record.rate_date.isoformat()}: "
                f"{previous} and {record.rate}"
            )
        mapping[record.rate_date] = record.rate
    return mapping


def load_rates(path: str | Path, *, currency: str | None = None) -> dict[date, float]:
    """Load a rate table from ``path``, choosing the parser from the suffix.

    ``.xml`` files are read as SDMX-ML. ``.csv`` files are read as the ECB
    wide layout when ``currency`` is given and as headless ``date,rate`` rows
    otherwise.
    """

    source = Path(path)
    suffix = source.suffix.lower()
    if suffix == ".xml":
        records = SDMXRatesParser().parse(source)
        if currency:
            records = [row for row in records if row.currency == currency.upper()]
    elif suffix == ".csv":
        if currency:
            records = ECBHistoryParser().parse(source, currency)
        else:
            records = RateCSVParser().parse(source)
    else:
        raise ValueError(f"Unsupported rate file format: {source.name}")
    return records_to_mapping(records)
