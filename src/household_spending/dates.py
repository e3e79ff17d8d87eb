"""Calendar helpers for ``YYYY-MM`` month keys."""

from __future__ import annotations

import calendar
import re
from datetime import date, timedelta

from household_spending.models import MonthKey

_MONTH_KEY = re.compile(r"^(\d{4})-(\d{2})$")

# English names regardless of process locale (calendar.month_name is localised).
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_month(month: MonthKey) -> tuple[int, int]:
    """Split a month key into ``(year, month)``.

    Raises:
        ValueError: If the key is not a zero-padded ``YYYY-MM`` string.
    """
    match = _MONTH_KEY.match(month)
    if match is None:
        raise ValueError(f"Invalid month key {month!r}, expected YYYY-MM")
    year, month_num = int(match.group(1)), int(match.group(2))
    if not 1 <= month_num <= 12:
        raise ValueError(f"Invalid month key {month!r}, month out of range")
    return year, month_num


def make_month_key(year: int, month: int) -> MonthKey:
    return f"{year:04d}-{month:02d}"


def month_key(value: date) -> MonthKey:
    """Month key containing ``value``."""
    return make_month_key(value.year, value.month)


def date_key(value: date) -> str:
    """``YYYY-MM-DD`` rendering of ``value``."""
    return value.isoformat()


def days_in_month(month: MonthKey) -> int:
    year, month_num = parse_month(month)
    return calendar.monthrange(year, month_num)[1]


def month_bounds(month: MonthKey) -> tuple[date, date]:
    """First and last calendar day of ``month`` (both inclusive)."""
    year, month_num = parse_month(month)
    last_day = calendar.monthrange(year, month_num)[1]
    return date(year, month_num, 1), date(year, month_num, last_day)


def month_days(month: MonthKey) -> list[date]:
    """Every calendar day of ``month`` in order."""
    start, end = month_bounds(month)
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def shift_month(month: MonthKey, delta: int) -> MonthKey:
    """Move ``delta`` months forward (or backward when negative)."""
    year, month_num = parse_month(month)
    index = year * 12 + (month_num - 1) + delta
    return make_month_key(index // 12, index % 12 + 1)


def previous_month(month: MonthKey) -> MonthKey:
    return shift_month(month, -1)


def next_month(month: MonthKey) -> MonthKey:
    return shift_month(month, 1)


def month_range(start: MonthKey, end: MonthKey) -> list[MonthKey]:
    """Inclusive ascending list of months from ``start`` to ``end``."""
    start_year, start_month = parse_month(start)
    end_year, end_month = parse_month(end)
    count = (end_year - start_year) * 12 + (end_month - start_month) + 1
    return [shift_month(start, offset) for offset in range(max(0, count))]


def trailing_months(month: MonthKey, count: int) -> list[MonthKey]:
    """The ``count`` months ending with ``month``, oldest first."""
    if count <= 0:
        return []
    return month_range(shift_month(month, -(count - 1)), month)


def current_month(today: date | None = None) -> MonthKey:
    return month_key(today or date.today())


def month_label(month: MonthKey) -> str:
    """Short month abbreviation, e.g. ``"Jan"``."""
    _, month_num = parse_month(month)
    return MONTH_NAMES[month_num - 1][:3]


def format_month_display(month: MonthKey) -> str:
    """Full month name and year, e.g. ``"October 2025"``."""
    year, month_num = parse_month(month)
    return f"{MONTH_NAMES[month_num - 1]} {year}"


def format_expense_date(value: date) -> str:
    """Short month and day for expense lists, e.g. ``"Oct 15"``."""
    return f"{MONTH_NAMES[value.month - 1][:3]} {value.day}"
