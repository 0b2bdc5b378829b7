from datetime import date

import pytest

from billing_dates.engine.periods import calculate_billing_period
from billing_dates.errors import UnsupportedBillingCycleType
from billing_dates.schemas import BillingCycleConfig, BillingCycleType


def test_daily_period_is_a_single_day():
    billing_date = date(2024, 1, 15)
    result = calculate_billing_period(billing_date, BillingCycleConfig(type=BillingCycleType.DAILY))
    assert result.period_start == billing_date
    assert result.period_end == billing_date
    assert result.day_count == 1
    assert not result.is_partial_period
    assert result.prorated_ratio is None


def test_weekly_period_spans_interval():
    config = BillingCycleConfig(type=BillingCycleType.WEEKLY, interval=2)
    result = calculate_billing_period(date(2024, 1, 1), config)
    assert result.period_end == date(2024, 1, 14)
    assert result.day_count == 14
    assert not result.is_partial_period


def test_monthly_period():
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=1)
    result = calculate_billing_period(date(2024, 1, 1), config)
    assert result.period_start == date(2024, 1, 1)
    assert result.period_end == date(2024, 1, 31)
    assert result.day_count == 31
    # 31 days differs from the nominal 30
    assert result.is_partial_period
    assert result.prorated_ratio == pytest.approx(1 / 31)


def test_thirty_day_month_is_a_full_period():
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=1)
    result = calculate_billing_period(date(2024, 4, 1), config)
    assert result.day_count == 30
    assert not result.is_partial_period
    assert result.prorated_ratio is None


def test_leap_february_period():
    config = BillingCycleConfig(type=BillingCycleType.MONTHLY, interval=1)
    result = calculate_billing_period(date(2024, 2, 1), config)
    assert result.period_end == date(2024, 2, 29)
    assert result.day_count == 29


def test_quarterly_period():
    config = BillingCycleConfig(type=BillingCycleType.QUARTERLY, interval=1)
    result = calculate_billing_period(date(2024, 1, 1), config)
    assert result.period_end == date(2024, 3, 31)
    assert result.day_count == 91


def test_annual_periods():
    config = BillingCycleConfig(type=BillingCycleType.ANNUALLY, interval=1)

    common = calculate_billing_period(date(2023, 1, 1), config)
    assert common.period_end == date(2023, 12, 31)
    assert common.day_count == 365
    assert not common.is_partial_period

    leap = calculate_billing_period(date(2024, 1, 1), config)
    assert leap.day_count == 366
    assert leap.is_partial_period


def test_semi_annual_period_is_rejected():
    config = BillingCycleConfig(type=BillingCycleType.SEMI_ANNUALLY, interval=1)
    with pytest.raises(UnsupportedBillingCycleType):
        calculate_billing_period(date(2024, 1, 1), config)
