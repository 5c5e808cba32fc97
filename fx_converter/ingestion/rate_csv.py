"""CSV readers for daily rate tables."""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

import pandas as pd

from fx_converter.ingestion.models import RateRecord
from fx_converter.utils.logger import get_logger

LOGGER = get_logger(__name__)

ECB_DATE_COLUMN = "Date"


class RateCSVParser:
    """Parse headless ``date,rate`` CSV files."""

    def __init__(
        self,
        *,
        date_format: str = "%Y-%m-%d",
        currency: str = "USD",
        base_currency: str = "EUR",
    ) -> None:
        self.date_format = date_format
        self.currency = currency
        self.base_currency = base_currency

    def parse(self, csv_path: str | Path) -> list[RateRecord]:
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(path)

        rows: list[RateRecord] = []
        with path.open("r", newline="", encoding="utf-8") as handle:
            for line_no, row in enumerate(csv.reader(handle), start=1):
                if not row or not any(cell.strip() for cell in row):
                    continue
                if len(row) < 2:
                    raise ValueError(f"{path}:{line_no}: expected 'date,rate', got {row!r}")
                try:
                    rate_date = datetime.strptime(row[0].strip(), self.date_format).date()
                    rate = float(row[1])
                except ValueError as exc:
                    raise ValueError(f"{path}:{line_no}: {exc}") from exc
                rows.append(
                    RateRecord(
                        rate_date=rate_date,
                        rate=rate,
                        currency=self.currency,
                        base_currency=self.base_currency,
                    )
                )
        return rows


class ECBHistoryParser:
    """Parse the ECB ``eurofxref-hist.csv`` wide layout (one column per currency)."""

    def __init__(self, *, base_currency: str = "EUR") -> None:
        self.base_currency = base_currency

    def parse(self, csv_path: str | Path, currency: str) -> list[RateRecord]:
        path = Path(csv_path)
        if not path.exists():
            raise FileNotFoundError(path)

        frame = pd.read_csv(path, na_values=["N/A"], skipinitialspace=True)
        frame.columns = [str(column).strip() for column in frame.columns]
        column = currency.strip().upper()
        if ECB_DATE_COLUMN not in frame.columns:
            raise ValueError(f"{path}: missing '{ECB_DATE_COLUMN}' column")
        if column not in frame.columns:
            raise ValueError(f"{path}: no rates for currency {column}")

        working = frame[[ECB_DATE_COLUMN, column]].copy()
        working[ECB_DATE_COLUMN] = pd.to_datetime(
            working[ECB_DATE_COLUMN], format="%Y-%m-%d", errors="coerce"
        )
        working[column] = pd.to_numeric(working[column], errors="coerce")
        dropped = int(working.isna().any(axis=1).sum())
        if dropped:
            LOGGER.warning("Dropping %s incomplete %s rows from %s", dropped, column, path)
        working = working.dropna().sort_values(ECB_DATE_COLUMN)

        return [
            RateRecord(
                rate_date=timestamp.date(),
                rate=float(rate),
                currency=column,
                base_currency=self.base_currency,
            )
            for timestamp, rate in zip(working[ECB_DATE_COLUMN], working[column])
        ]


__all__ = ["RateCSVParser", "ECBHistoryParser"]
