"""Calendar helpers for tenure: date parsing, day counts and whole-month counts."""

from __future__ import annotations

import re
from calendar import monthrange
from dataclasses import dataclass
from datetime import date

from leave_tracker.exceptions import InvalidDateError
from leave_tracker.models.enums import DateErrorReason

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True)
class TenureComponents:
    """Elapsed time split into whole years, months and days (display only)."""

    years: int
    months: int
    days: int


def parse_date(date_str: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a calendar date.

    Raises InvalidDateError with reason MALFORMED when the text does not have
    the expected shape, or OUT_OF_RANGE when it names a day that does not
    exist (e.g. 2023-02-30).
    """
    match = _ISO_DATE_RE.fullmatch(date_str) if isinstance(date_str, str) else None
    if match is None:
        raise InvalidDateError(str(date_str), DateErrorReason.MALFORMED)

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDateError(date_str, DateErrorReason.OUT_OF_RANGE) from None


def diff_in_days(start: date, end: date) -> int:
    """Whole days from start to end, clamped to 0 if end precedes start."""
    return max(0, (end - start).days)


def get_full_months_between(start: date, end: date) -> int:
    """Whole calendar months elapsed from start to end.

    A month only counts once end's day-of-month reaches start's
    day-of-month. Shared by accrual and the eligibility rule so both agree
    on what one full month is.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return max(0, months)


def _days_in_previous_month(today: date) -> int:
    if today.month == 1:
        return monthrange(today.year - 1, 12)[1]
    return monthrange(today.year, today.month - 1)[1]


def get_tenure_components(hire_date: date, today: date) -> TenureComponents:
    """Break the time since hire_date into years, months and days.

    Borrowing a month adds the length of the month before today's month.
    A hire date in the future yields all zeros.
    """
    if today < hire_date:
        return TenureComponents(years=0, months=0, days=0)

    years = today.year - hire_date.year
    months = today.month - hire_date.month
    days = today.day - hire_date.day

    if days < 0:
        months -= 1
        days += _days_in_previous_month(today)

    if months < 0:
        years -= 1
        months += 12

    return TenureComponents(years=years, months=months, days=days)
