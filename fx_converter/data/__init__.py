"""Helpers for working with the bundled reference rates."""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Final, Optional

from fx_converter.ingestion.loader import records_to_mapping
from fx_converter.ingestion.sdmx import SDMXRatesParser
from fx_converter.rates import DailyRates

__all__ = ["DEFAULT_RATES_PATH", "bundled_rates_path", "default_rates"]

# Resolved next to this module so the dataset is found irrespective of the
# working directory, including installs into site-packages.
DEFAULT_RATES_PATH: Final[Path] = Path(__file__).resolve().with_name("usd_eur_daily.xml")

_DEFAULT_RATES: Optional[DailyRates] = None
_DEFAULT_RATES_LOCK = threading.Lock()


def bundled_rates_path() -> Path:
    """Return the absolute path to the packaged SDMX-ML dataset."""

    return DEFAULT_RATES_PATH


def default_rates() -> DailyRates:
    """Return the process-wide table parsed from the bundled dataset.

    The file is parsed on first call only; later calls return the same object.
    """

    global _DEFAULT_RATES
    if _DEFAULT_RATES is None:
        with _DEFAULT_RATES_LOCK:
            if _DEFAULT_RATES is None:
                _DEFAULT_RATES = DailyRates(
                    records_to_mapping(SDMXRatesParser().parse(DEFAULT_RATES_PATH))
                )
    return _DEFAULT_RATES
