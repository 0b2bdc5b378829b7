"""Business-day policy: weekdays that are not in the caller's holiday list."""

from __future__ import annotations

from datetime import date
from typing import Optional

from billing_dates.engine.calendar_math import add_days, as_date, daterange
from billing_dates.schemas import DateCalculationOptions

# date.weekday() values
SATURDAY = 5
SUNDAY = 6


def is_weekend(value: date) -> bool:
    return as_date(value).weekday() in (SATURDAY, SUNDAY)


def is_holiday(value: date, options: Optional[DateCalculationOptions] = None) -> bool:
    """True when the date matches an entry in options.holiday_list by calendar day."""
    if options is None or not options.holiday_list:
        return False
    return as_date(value) in set(options.holiday_list)


def is_business_day(value: date, options: Optional[DateCalculationOptions] = None) -> bool:
    if is_weekend(value):
        return False
    if options is not None and options.exclude_holidays and is_holiday(value, options):
        return False
    return True


def get_next_business_day(value: date, options: Optional[DateCalculationOptions] = None) -> date:
    """First business day strictly after the given date."""
    next_day = add_days(value, 1)
    while not is_business_day(next_day, options):
        next_day = add_days(next_day, 1)
    return next_day


def get_previous_business_day(value: date, options: Optional[DateCalculationOptions] = None) -> date:
    """Last business day strictly before the given date."""
    previous_day = add_days(value, -1)
    while not is_business_day(previous_day, options):
        previous_day = add_days(previous_day, -1)
    return previous_day


def add_business_days(start_date: date, days: int, options: Optional[DateCalculationOptions] = None) -> date:
    """
    Walk forward the given number of business days from start_date.

    Each step moves one calendar day, then keeps moving while the landing
    day is not a business day. The start date itself is never counted.
    """
    result = as_date(start_date)
    for _ in range(days):
        result = add_days(result, 1)
        while not is_business_day(result, options):
            result = add_days(result, 1)
    return result


def count_business_days(start_date: date, end_date: date, options: Optional[DateCalculationOptions] = None) -> int:
    """Number of business days in the inclusive range [start_date, end_date]."""
    return sum(1 for day in daterange(start_date, end_date) if is_business_day(day, options))
