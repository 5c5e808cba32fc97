from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from fx_converter.ingestion.rate_csv import ECBHistoryParser, RateCSVParser


def test_headless_csv_is_parsed(tmp_path: Path) -> None:
    csv_path = tmp_path / "rates.csv"
    csv_path.write_text("2023-01-05,1.0601\n\n2023-01-06, 1.05\n", encoding="utf-8")

    records = RateCSVParser().parse(csv_path)

    assert [(row.rate_date, row.rate) for row in records] == [
        (date(2023, 1, 5), 1.0601),
        (date(2023, 1, 6), 1.05),
    ]
    assert records[0].currency == "USD"


def test_headless_csv_supports_custom_date_format(tmp_path: Path) -> None:
    csv_path = tmp_path / "rates.csv"
    csv_path.write_text("06.01.2023,1.05\n", encoding="utf-8")

    records = RateCSVParser(date_format="%d.%m.%Y").parse(csv_path)

    assert records[0].rate_date == date(2023, 1, 6)


@pytest.mark.parametrize("content", ["2023-01-05\n", "2023-01-05,abc\n", "Date,Rate\n"])
def test_headless_csv_rejects_malformed_rows(tmp_path: Path, content: str) -> None:
    csv_path = tmp_path / "rates.csv"
    csv_path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match="rates.csv:1"):
        RateCSVParser().parse(csv_path)


def test_headless_csv_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        RateCSVParser().parse(tmp_path / "missing.csv")


@pytest.fixture()
def ecb_history(tmp_path: Path) -> Path:
    csv_path = tmp_path / "eurofxref-hist.csv"
    csv_path.write_text(
        "Date,USD,JPY,\n"
        "2023-01-06,1.0500,141.24,\n"
        "2023-01-05,1.0601,N/A,\n",
        encoding="utf-8",
    )
    return csv_path


def test_ecb_history_selects_currency_column(ecb_history: Path) -> None:
    records = ECBHistoryParser().parse(ecb_history, "usd")

    assert [(row.rate_date, row.rate) for row in records] == [
        (date(2023, 1, 5), 1.0601),
        (date(2023, 1, 6), 1.05),
    ]
    assert {(row.currency, row.base_currency) for row in records} == {("USD", "EUR")}


def test_ecb_history_drops_missing_values(ecb_history: Path) -> None:
    records = ECBHistoryParser().parse(ecb_history, "JPY")

    assert [(row.rate_date, row.rate) for row in records] == [(date(2023, 1, 6), 141.24)]


def test_ecb_history_unknown_currency(ecb_history: Path) -> None:
    with pytest.raises(ValueError, match="no rates for currency CHF"):
        ECBHistoryParser().parse(ecb_history, "CHF")


def test_ecb_history_requires_date_column(tmp_path: Path) -> None:
    csv_path = tmp_path / "bad.csv"
    csv_path.write_text("Day,USD\n2023-01-06,1.05\n", encoding="utf-8")

    with pytest.raises(ValueError, match="missing 'Date' column"):
        ECBHistoryParser().parse(csv_path, "USD")
