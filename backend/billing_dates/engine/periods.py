"""Billing period windows anchored at a billing date."""

from __future__ import annotations

import logging
from datetime import date

from billing_dates.engine.calendar_math import add_days, as_date, inclusive_days
from billing_dates.engine.cycles import get_cycle_strategy
from billing_dates.schemas import BillingCycleConfig, BillingCycleType, BillingPeriodResult

logger = logging.getLogger(__name__)


def calculate_billing_period(billing_date: date, config: BillingCycleConfig) -> BillingPeriodResult:
    """
    Compute the inclusive period that starts on billing_date.

    A period is partial when its real length differs from the nominal
    length of the cycle (1, 7, 30, 90 or 365 days per interval).
    """
    strategy = get_cycle_strategy(config.type)
    billing_date = as_date(billing_date)
    is_daily = strategy.cycle_type is BillingCycleType.DAILY

    period_start = billing_date
    if is_daily:
        period_end = billing_date
    else:
        period_end = add_days(strategy.advance(billing_date, config.interval), -1)

    day_count = inclusive_days(period_start, period_end)
    expected_days = strategy.nominal_days * (1 if is_daily else config.interval)
    is_partial = not is_daily and day_count != expected_days

    prorated_ratio = None
    if is_partial:
        prorated_ratio = inclusive_days(period_start, billing_date) / day_count if day_count > 0 else 0.0

    logger.debug(
        f"Billing period for {billing_date} ({strategy.cycle_type.value}): "
        f"{period_start}..{period_end}, {day_count} days, partial={is_partial}"
    )
    return BillingPeriodResult(
        period_start=period_start,
        period_end=period_end,
        billing_date=billing_date,
        day_count=day_count,
        is_partial_period=is_partial,
        prorated_ratio=prorated_ratio,
    )
