"""Date parsing and calendar month utilities."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def _start_of_period(period: str, today: date) -> Optional[date]:
    if period == "week":
        return today - timedelta(days=today.weekday())
    if period == "month":
        return today.replace(day=1)
    if period == "year":
        return today.replace(month=1, day=1)
    return None


_FILL_A = datetime(2000, 1, 1)
_FILL_B = datetime(2001, 2, 2)

_PREVIOUS = {
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "year": relativedelta(years=1),
}


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Besides anything dateutil understands ("2024-01-15", "January 15, 2024"),
    a few relative words are accepted:

    - "today", "yesterday", "tomorrow"
    - "this week|month|year": first day of the current period
    - "last week|month|year": first day of the previous period

    Raises:
        ValueError: If date string cannot be parsed, or leaves out the
            year, month or day ("Jan", "2024", "monday")
    """
    text = date_str.strip().lower()
    today = date.today()

    offsets = {"today": 0, "yesterday": -1, "tomorrow": 1}
    if text in offsets:
        return today + timedelta(days=offsets[text])

    qualifier, _, period = text.partition(" ")
    if qualifier in ("this", "last"):
        start = _start_of_period(period, today)
        if start is not None:
            return start if qualifier == "this" else start - _PREVIOUS[period]

    try:
        # dateutil fills missing parts from ``default``; two different
        # defaults only agree when year, month and day were all given.
        first = date_parser.parse(text, default=_FILL_A).date()
        second = date_parser.parse(text, default=_FILL_B).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}") from e
    if first != second:
        raise ValueError(f"Could not parse date '{date_str}': year, month and day are required")
    return first


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last calendar day of the month containing ``day``."""
    start = day.replace(day=1)
    end = start + relativedelta(months=1) - timedelta(days=1)
    return start, end


def shift_months(day: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``day``'s month."""
    return day.replace(day=1) + relativedelta(months=months)


def month_key(day: date) -> str:
    """Return the ``YYYY-MM`` bucket key for a date."""
    return day.strftime("%Y-%m")


def trailing_month_range(month_count: int, today: Optional[date] = None) -> tuple[date, date]:
    """Get the date range covering ``month_count`` months ending with the current month.

    Args:
        month_count: Number of calendar months, at least 1
        today: Reference date (defaults to today)

    Returns:
        Tuple of (first day of the earliest month, last day of the current month)
    """
    if month_count < 1:
        raise ValueError(f"Month count must be at least 1, got {month_count}")
    if today is None:
        today = date.today()
    _, end = month_bounds(today)
    start = shift_months(today, -(month_count - 1))
    return start, end
