"""Parse ECB SDMX-ML exchange rate exports into ``RateRecord`` rows."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from bs4 import BeautifulSoup

from fx_converter.ingestion.models import RateRecord
from fx_converter.utils.dates import parse_date
from fx_converter.utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class SDMXRatesParser:
    """Read ``DataSet/Series/Obs`` observations from an SDMX-ML document.

    Only the ``TIME_PERIOD`` and ``OBS_VALUE`` attributes of each ``Obs`` are
    used. ``CURRENCY`` and ``CURRENCY_DENOM`` are taken from the enclosing
    ``Series`` when present, otherwise the parser defaults apply.
    """

    default_currency: str = "USD"
    default_base_currency: str = "EUR"

    def parse(self, source: str | Path | bytes) -> list[RateRecord]:
        markup = self._read(source)
        soup = BeautifulSoup(markup, "xml")

        # Namespace prefixes are not part of the tag name, so "Series" also
        # matches prefixed elements such as "generic:Series".
        series_tags = soup.find_all("Series")
        if not series_tags:
            raise ValueError("SDMX document does not contain any Series element")

        records: list[RateRecord] = []
        for series in series_tags:
            currency = str(series.get("CURRENCY") or self.default_currency).upper()
            base_currency = str(series.get("CURRENCY_DENOM") or self.default_base_currency).upper()
            for obs in series.find_all("Obs"):
                rate_date = self._coerce_date(obs.get("TIME_PERIOD"))
                rate = self._coerce_rate(obs.get("OBS_VALUE"))
                if rate_date is None or rate is None:
                    LOGGER.warning(
                        "Ignoring SDMX observation %s=%s for %s",
                        obs.get("TIME_PERIOD"),
                        obs.get("OBS_VALUE"),
                        currency,
                    )
                    continue
                records.append(
                    RateRecord(
                        rate_date=rate_date,
                        rate=rate,
                        currency=currency,
                        base_currency=base_currency,
                    )
                )
        return records

    @staticmethod
    def _read(source: str | Path | bytes) -> bytes:
        if isinstance(source, bytes):
            return source
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(path)
        return path.read_bytes()

    @staticmethod
    def _coerce_date(value: object) -> date | None:
        if not value:
            return None
        try:
            return parse_date(str(value))
        except ValueError:
            return None

    @staticmethod
    def _coerce_rate(value: object) -> float | None:
        if value in (None, ""):
            return None
        try:
            rate = float(str(value))
        except ValueError:
            return None
        return None if math.isnan(rate) else rate


__all__ = ["SDMXRatesParser"]
