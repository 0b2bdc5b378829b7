"""Calendar arithmetic with month-length and leap-year correction."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def as_date(value: date) -> date:
    """Drop the time of day from datetimes; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_days(base_date: date, days: int) -> date:
    return as_date(base_date) + timedelta(days=days)


def add_months(base_date: date, months: int) -> date:
    """Add months to a date while clamping invalid day numbers."""
    base_date = as_date(base_date)
    month_index = (base_date.month - 1) + months
    year = base_date.year + month_index // 12
    month = month_index % 12 + 1
    max_day = days_in_month(year, month)
    return date(year, month, min(base_date.day, max_day))


def add_years(base_date: date, years: int) -> date:
    """Add years to a date; Feb 29 lands on Feb 28 in non-leap years."""
    base_date = as_date(base_date)
    target_year = base_date.year + years
    if base_date.month == 2 and base_date.day == 29 and not is_leap_year(target_year):
        return date(target_year, 2, 28)
    return base_date.replace(year=target_year)


def inclusive_days(start_date: date, end_date: date) -> int:
    """Count calendar days from start_date to end_date, both ends included."""
    start_date, end_date = as_date(start_date), as_date(end_date)
    if start_date > end_date:
        return 0
    return (end_date - start_date).days + 1


def month_start(value: date) -> date:
    return as_date(value).replace(day=1)


def month_end(value: date) -> date:
    value = as_date(value)
    return value.replace(day=days_in_month(value.year, value.month))


def months_between(start_date: date, end_date: date) -> int:
    """Whole calendar months from start_date's month to end_date's month."""
    start_date, end_date = as_date(start_date), as_date(end_date)
    return (end_date.year - start_date.year) * 12 + (end_date.month - start_date.month)


def daterange(start_date: date, end_date: date):
    """Yield each date from start_date to end_date inclusive."""
    day = as_date(start_date)
    end_date = as_date(end_date)
    while day <= end_date:
        yield day
        day += timedelta(days=1)
