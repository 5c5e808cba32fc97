"""Calendar-day helpers shared by the rate table and the loaders."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Final

ISO_DATE_FORMAT: Final[str] = "%Y-%m-%d"
ONE_DAY: Final[timedelta] = timedelta(days=1)


def parse_date(value: str | date) -> date:
    """Parse a date string in ISO format to :class:`date`."""

    if isinstance(value, datetime):
        return to_calendar_day(value)
    if isinstance(value, date):
        return value
    return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()


def to_calendar_day(value: date | datetime) -> date:
    """Drop the time of day, reading aware datetimes in UTC.

    Naive datetimes are assumed to already be expressed in UTC.
    """

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"expected a date or datetime, got {type(value).__name__}")


def is_weekend(day: date) -> bool:
    """Saturdays and Sundays never carry a published rate."""

    return day.weekday() >= 5


def previous_weekday(day: date) -> date:
    """Return ``day`` itself or the closest earlier Monday-Friday date."""

    while is_weekend(day):
        day -= ONE_DAY
    return day


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def format_date(day: date) -> str:
    return day.strftime(ISO_DATE_FORMAT)
