"""Convert headless ``date,amount`` CSV rows with historical daily rates."""

from __future__ import annotations

import argparse
import csv
import sys
from contextlib import ExitStack
from datetime import date
from typing import Callable, Iterator, Sequence, TextIO

from fx_converter.converter import RateConverter, new_converter
from fx_converter.errors import ConverterError, RowProcessingError
from fx_converter.ingestion.loader import load_rates
from fx_converter.utils.dates import parse_date
from fx_converter.utils.formatting import format_number
from fx_converter.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["build_parser", "parse_args", "convert_rows", "run", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fx-convert", description=__doc__)
    parser.add_argument(
        "-i",
        "--input",
        dest="input_path",
        default="",
        help="Path to input headless csv with the structure col0:date, col1:amount. "
        "If empty, stdin will be read.",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        default="",
        help="Path to output csv. If empty, result will be printed to stdout.",
    )
    parser.add_argument(
        "--b2a",
        dest="b2a",
        action="store_true",
        help="Convert currency B to currency A instead of A to B.",
    )
    parser.add_argument(
        "--rates",
        dest="rates_path",
        default="",
        help="Optional rate table (.xml SDMX-ML or .csv) used instead of the bundled dataset",
    )
    parser.add_argument(
        "--currency",
        dest="currency",
        default=None,
        help="Currency column to read when --rates points at an ECB eurofxref-hist.csv file",
    )
    parser.add_argument(
        "--skip-errors",
        dest="skip_errors",
        action="store_true",
        help="Log and skip rows that cannot be read, parsed or converted instead of aborting",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def convert_rows(
    source: TextIO,
    target: TextIO,
    converter: RateConverter,
    *,
    b2a: bool = False,
    skip_errors: bool = False,
) -> int:
    """Convert every row of ``source`` and write it to ``target``.

    Returns the number of rows written. Blank lines are ignored and do not
    count towards the row index used in error messages.
    """

    reader = csv.reader(source)
    writer = csv.writer(target, lineterminator="\n")
    conversion = converter.b_to_a if b2a else converter.a_to_b

    written = 0
    row_index = 0
    while True:
        try:
            row = _read_row(reader, row_index)
            if row is None:
                break
            if not row:
                continue
            converted = _convert_row(row, row_index, conversion)
        except RowProcessingError as exc:
            if not skip_errors:
                raise
            LOGGER.warning("Skipping row %s: %s", row_index, exc)
        else:
            writer.writerow(converted)
            written += 1
        row_index += 1
    return written


def _read_row(reader: Iterator[list[str]], row_index: int) -> list[str] | None:
    """Return the next row, an empty list for a blank line, or ``None`` at the end."""

    try:
        row = next(reader)
    except StopIteration:
        return None
    except csv.Error as exc:
        raise RowProcessingError(f"error reading csv row {row_index}", row_index) from exc
    if row and len(row) < 2:
        raise RowProcessingError(f"error reading csv row {row_index}", row_index)
    return row


def _convert_row(
    row: list[str], row_index: int, conversion: Callable[[date, float], float]
) -> list[str]:
    date_raw = row[0]
    try:
        day = parse_date(date_raw)
    except ValueError as exc:
        raise RowProcessingError(f"error parsing date in the row {row_index}", row_index) from exc
    try:
        amount = float(row[1])
    except ValueError as exc:
        raise RowProcessingError(f"error parsing amount in the row {row_index}", row_index) from exc
    try:
        amount_out = conversion(day, amount)
    except ConverterError as exc:
        raise RowProcessingError(
            f"conversion error in the row {row_index}. {exc}", row_index
        ) from exc
    return [date_raw, format_number(amount_out)]


def run(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    converter: RateConverter | None = None,
) -> int:
    """Execute the CLI and return its exit status."""

    args = parse_args(argv)
    try:
        if converter is None:
            rates = load_rates(args.rates_path, currency=args.currency) if args.rates_path else None
            converter = new_converter(rates)
        with ExitStack() as stack:
            source = (
                stack.enter_context(open(args.input_path, "r", newline="", encoding="utf-8"))
                if args.input_path
                else stdin or sys.stdin
            )
            target = (
                stack.enter_context(open(args.output_path, "w", newline="", encoding="utf-8"))
                if args.output_path
                else stdout or sys.stdout
            )
            written = convert_rows(
                source,
                target,
                converter,
                b2a=args.b2a,
                skip_errors=args.skip_errors,
            )
    except (ConverterError, OSError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 1
    LOGGER.debug("Converted %s rows", written)
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    raise SystemExit(run(argv))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
