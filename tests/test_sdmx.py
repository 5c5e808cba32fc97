import tempfile
import unittest
from datetime import date
from pathlib import Path

from fx_converter.ingestion.models import RateRecord
from fx_converter.ingestion.sdmx import SDMXRatesParser

SAMPLE = b"""<?xml version="1.0" encoding="UTF-8"?>
<message:StructureSpecificData xmlns:message="http://www.sdmx.org/resources/sdmxml/schemas/v2_1/message">
<message:Header><message:ID>EXR</message:ID></message:Header>
<message:DataSet>
<Series FREQ="D" CURRENCY="JPY" CURRENCY_DENOM="EUR">
<Obs TIME_PERIOD="2023-01-05" OBS_VALUE="140.6" OBS_STATUS="A"/>
<Obs TIME_PERIOD="2023-01-06" OBS_VALUE="NaN" OBS_STATUS="H"/>
<Obs TIME_PERIOD="not-a-date" OBS_VALUE="141.0"/>
<Obs TIME_PERIOD="2023-01-09" OBS_VALUE="142.07"/>
</Series>
</message:DataSet>
</message:StructureSpecificData>
"""


class SDMXRatesParserTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.parser = SDMXRatesParser()

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()

    def test_parse_file(self) -> None:
        path = Path(self.tmp_dir.name) / "jpy.xml"
        path.write_bytes(SAMPLE)

        records = self.parser.parse(path)

        self.assertEqual(
            records,
            [
                RateRecord(rate_date=date(2023, 1, 5), rate=140.6, currency="JPY"),
                RateRecord(rate_date=date(2023, 1, 9), rate=142.07, currency="JPY"),
            ],
        )

    def test_parse_bytes(self) -> None:
        records = self.parser.parse(SAMPLE)
        self.assertEqual({record.base_currency for record in records}, {"EUR"})

    def test_series_without_currency_uses_defaults(self) -> None:
        markup = (
            b"<DataSet><Series>"
            b"<Obs TIME_PERIOD='2023-01-05' OBS_VALUE='1.06'/>"
            b"</Series></DataSet>"
        )
        records = SDMXRatesParser(default_currency="GBP").parse(markup)
        self.assertEqual(records[0].currency, "GBP")
        self.assertEqual(records[0].base_currency, "EUR")

    def test_prefixed_series_elements(self) -> None:
        markup = (
            b'<message:GenericData xmlns:message="urn:message" xmlns:generic="urn:generic">'
            b'<generic:Series CURRENCY="CHF" CURRENCY_DENOM="EUR">'
            b'<generic:Obs TIME_PERIOD="2023-01-06" OBS_VALUE="0.9876"/>'
            b"</generic:Series></message:GenericData>"
        )
        records = self.parser.parse(markup)
        self.assertEqual(
            records,
            [RateRecord(rate_date=date(2023, 1, 6), rate=0.9876, currency="CHF")],
        )

    def test_attribute_names_are_case_sensitive(self) -> None:
        markup = (
            b"<DataSet><Series>"
            b"<Obs time_period='2023-01-05' obs_value='1.06'/>"
            b"</Series></DataSet>"
        )
        self.assertEqual(self.parser.parse(markup), [])

    def test_document_without_series(self) -> None:
        with self.assertRaises(ValueError):
            self.parser.parse(b"<DataSet></DataSet>")

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            self.parser.parse(Path(self.tmp_dir.name) / "missing.xml")


if __name__ == "__main__":  # pragma: no cover - manual debugging helper
    unittest.main()
