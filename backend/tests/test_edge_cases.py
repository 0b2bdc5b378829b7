"""Leap years, month ends, year boundaries and large inputs across the engine."""

from datetime import date

from billing_dates import (
    BillingCycleConfig,
    BillingCycleType,
    calculate_billing_period,
    calculate_next_billing_date,
    generate_date_sequence,
)


def test_leap_day_annual_billing():
    leap_day = date(2024, 2, 29)
    config = BillingCycleConfig(type=BillingCycleType.ANNUALLY, interval=1)
    result = calculate_next_billing_date(leap_day, leap_day, config)
    assert result.next_billing_date == date(2025, 2, 28)


def test_thirtieth_day_billing_in_february():
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=1, day_of_month=30)
    result = calculate_next_billing_date(date(2024, 2, 15), date(2024, 1, 30), config)
    assert result.next_billing_date == date(2024, 2, 29)


def test_monthly_billing_across_year_boundary():
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=1)
    result = calculate_next_billing_date(date(2024, 1, 20), date(2023, 12, 15), config)
    assert result.next_billing_date == date(2024, 1, 15)
    assert result.is_overdue


def test_quarterly_billing_across_year_boundary():
    config = BillingCycleConfig(type=BillingCycleType.QUARTERLY, interval=1)
    result = calculate_next_billing_date(date(2024, 1, 15), date(2023, 12, 1), config)
    assert result.next_billing_date == date(2024, 3, 1)
    assert result.cycle_number == 1


def test_very_old_dates():
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=1)
    result = calculate_next_billing_date(date(1900, 1, 15), date(1900, 1, 1), config)
    assert result.next_billing_date == date(1900, 2, 1)


def test_far_future_dates():
    day = date(2099, 12, 31)
    config = BillingCycleConfig(type=BillingCycleType.ANNUALLY, interval=1)
    result = calculate_next_billing_date(day, day, config)
    assert result.next_billing_date == date(2100, 12, 31)


def test_large_monthly_interval():
    day = date(2024, 1, 1)
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=24)
    result = calculate_next_billing_date(day, day, config)
    assert result.next_billing_date == date(2026, 1, 1)


def test_large_daily_interval_in_leap_year():
    day = date(2024, 1, 1)
    config = BillingCycleConfig(type=BillingCycleType.DAILY, interval=365)
    result = calculate_next_billing_date(day, day, config)
    assert result.next_billing_date == date(2024, 12, 31)


def test_leap_year_february_period():
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=1)
    assert calculate_billing_period(date(2024, 2, 1), config).day_count == 29
    assert calculate_billing_period(date(2023, 2, 1), config).day_count == 28


def test_long_daily_sequence():
    config = BillingCycleConfig(type=BillingCycleType.DAILY, interval=1)
    result = generate_date_sequence(date(2020, 1, 1), date(2025, 1, 1), config)
    assert len(result) == 1828
    assert result[-1] == date(2025, 1, 1)
