"""Public interface for the fx_converter package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Any

from fx_converter.converter import Converter, RateConverter, new_converter
from fx_converter.errors import (
    ConverterError,
    EmptyTableError,
    FutureDateError,
    NonPositiveRateError,
    RateNotFoundError,
    RowProcessingError,
)
from fx_converter.rates import LOOKBACK_DAYS, DailyRates, validate_rates

__all__ = [
    "__version__",
    "Converter",
    "ConverterError",
    "DailyRates",
    "EmptyTableError",
    "FutureDateError",
    "LOOKBACK_DAYS",
    "NonPositiveRateError",
    "RateConverter",
    "RateNotFoundError",
    "RowProcessingError",
    "default_rates",
    "load_rates",
    "new_converter",
    "validate_rates",
]

try:
    __version__ = importlib_metadata.version("fx-converter")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    """Lazily expose loader helpers so importing the core stays light."""

    if name == "default_rates":
        from fx_converter.data import default_rates as _default_rates

        return _default_rates
    if name == "load_rates":
        from fx_converter.ingestion.loader import load_rates as _load_rates

        return _load_rates
    raise AttributeError(f"module 'fx_converter' has no attribute {name}")
