from datetime import date, datetime

from billing_dates.engine.calendar_math import (
    add_days,
    add_months,
    add_years,
    as_date,
    days_in_month,
    inclusive_days,
    is_leap_year,
    month_end,
    month_start,
    months_between,
)


def test_leap_year_rule():
    assert is_leap_year(2024)
    assert is_leap_year(2000)
    assert not is_leap_year(1900)
    assert not is_leap_year(2023)


def test_add_days_rolls_over_year():
    assert add_days(date(2023, 12, 31), 1) == date(2024, 1, 1)
    assert add_days(date(2024, 3, 1), -1) == date(2024, 2, 29)


def test_add_months_clamps_to_month_end():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert add_months(date(2023, 11, 15), 3) == date(2024, 2, 15)


def test_add_years_handles_leap_day():
    assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)
    assert add_years(date(2024, 2, 29), 4) == date(2028, 2, 29)
    assert add_years(date(2023, 6, 30), 1) == date(2024, 6, 30)


def test_inclusive_days():
    assert inclusive_days(date(2024, 1, 1), date(2024, 1, 1)) == 1
    assert inclusive_days(date(2024, 1, 1), date(2024, 1, 31)) == 31
    assert inclusive_days(date(2024, 1, 31), date(2024, 1, 1)) == 0


def test_month_boundaries():
    assert month_start(date(2024, 2, 17)) == date(2024, 2, 1)
    assert month_end(date(2024, 2, 17)) == date(2024, 2, 29)
    assert days_in_month(2023, 2) == 28
    assert months_between(date(2023, 12, 15), date(2024, 2, 1)) == 2


def test_datetimes_lose_time_of_day():
    assert as_date(datetime(2024, 1, 15, 23, 59)) == date(2024, 1, 15)
    assert add_days(datetime(2024, 1, 15, 8, 0), 1) == date(2024, 1, 16)
