"""Next billing date calculation for a subscription's billing cycle."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from billing_dates.engine.adjustments import adjust_date
from billing_dates.engine.calendar_math import as_date, inclusive_days
from billing_dates.engine.cycles import get_cycle_strategy
from billing_dates.engine.periods import calculate_billing_period
from billing_dates.schemas import (
    BillingCycleConfig,
    BillingCycleType,
    DateCalculationOptions,
    NextBillingDateResult,
)

logger = logging.getLogger(__name__)


def _prorated_days(last_billing: date, current: date, config: BillingCycleConfig) -> int:
    """Overlap between the period anchored at the last charge and the one anchored today."""
    billed = calculate_billing_period(last_billing, config)
    usage = calculate_billing_period(current, config)
    start = max(billed.period_start, usage.period_start)
    end = min(billed.period_end, usage.period_end)
    return inclusive_days(start, end)


def calculate_next_billing_date(
    current_date: date,
    last_billing_date: date,
    config: BillingCycleConfig,
    options: Optional[DateCalculationOptions] = None,
) -> NextBillingDateResult:
    """
    Work out when the next charge is due.

    Args:
        current_date: Date the calculation is evaluated on
        last_billing_date: Date of the most recent charge
        config: Billing cycle configuration
        options: Holiday data used by BUSINESS_DAY adjustment

    Returns:
        NextBillingDateResult; days_until_billing is negative when overdue
    """
    strategy = get_cycle_strategy(config.type)
    current = as_date(current_date)
    last_billing = as_date(last_billing_date)

    next_billing = strategy.next_date(current, last_billing, config)
    cycle_number = max(1, strategy.cycle_number(current, last_billing, config.interval))

    if config.adjustment:
        next_billing = adjust_date(next_billing, config.adjustment, options)

    days_until = (next_billing - current).days

    # Mid-cycle evaluation against a fixed billing day means a partial period
    is_prorated = (
        strategy.cycle_type is BillingCycleType.MONTHLY
        and bool(config.day_of_month)
        and current.day != config.day_of_month
    )
    prorated_days = _prorated_days(last_billing, current, config) if is_prorated else 0

    logger.debug(
        f"Next {strategy.cycle_type.value} billing after {last_billing} evaluated on {current}: "
        f"{next_billing} (cycle {cycle_number}, {days_until} days)"
    )
    return NextBillingDateResult(
        next_billing_date=next_billing,
        days_until_billing=days_until,
        cycle_number=cycle_number,
        is_overdue=days_until < 0,
        is_prorated=is_prorated,
        prorated_days=prorated_days,
    )
