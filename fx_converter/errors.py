"""Exceptions raised by the rate table, the converter and the CLI."""

from __future__ import annotations

from datetime import date

from fx_converter.utils.dates import format_date
from fx_converter.utils.formatting import format_number

__all__ = [
    "ConverterError",
    "EmptyTableError",
    "FutureDateError",
    "NonPositiveRateError",
    "RateNotFoundError",
    "RowProcessingError",
]


class ConverterError(Exception):
    """Base class for every error raised by fx_converter."""


class EmptyTableError(ConverterError, ValueError):
    """No rates were supplied or loaded."""

    def __init__(self) -> None:
        super().__init__("rates shall not be empty")


class _InvalidRateError(ConverterError, ValueError):
    _prefix = "invalid rate"

    def __init__(self, rate_date: date, rate: float) -> None:
        self.rate_date = rate_date
        self.rate = rate
        super().__init__(
            f"{self._prefix}, got: date={format_date(rate_date)}, rate={format_number(rate)}"
        )


class FutureDateError(_InvalidRateError):
    """A rate is dated after the moment the table was validated."""

    _prefix = "historical rates are expected only"


class NonPositiveRateError(_InvalidRateError):
    """A rate is zero, negative or not a number."""

    _prefix = "rate shall be positive"


class RateNotFoundError(ConverterError, LookupError):
    """No rate exists within the lookback window of the requested date."""

    def __init__(self, requested_date: date) -> None:
        self.requested_date = requested_date
        super().__init__(f"no rate found for {format_date(requested_date)}")


class RowProcessingError(ConverterError):
    """A row of the CSV input could not be read, parsed, converted or written."""

    def __init__(self, message: str, row_index: int) -> None:
        self.row_index = row_index
        super().__init__(message)
