"""
Billing cycle strategies.

Each supported BillingCycleType owns its rules for stepping a date forward
by N cycles, locating the next billing date, and numbering the current
cycle. SEMI_ANNUALLY and CUSTOM have no strategy and are rejected.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Callable, Dict

from billing_dates.engine.calendar_math import (
    add_days,
    add_months,
    add_years,
    as_date,
    days_in_month,
    months_between,
)
from billing_dates.errors import UnsupportedBillingCycleType
from billing_dates.schemas import BillingCycleConfig, BillingCycleType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CycleStrategy:
    """Date rules for one billing cycle type."""

    cycle_type: BillingCycleType
    advance: Callable[[date, int], date]
    next_date: Callable[[date, date, BillingCycleConfig], date]
    cycle_number: Callable[[date, date, int], int]
    nominal_days: int


# ── Stepping ─────────────────────────────────────────────────────────────────

def _advance_daily(day: date, interval: int) -> date:
    return add_days(day, interval)


def _advance_weekly(day: date, interval: int) -> date:
    return add_days(day, 7 * interval)


def _advance_monthly(day: date, interval: int) -> date:
    return add_months(day, interval)


def _advance_quarterly(day: date, interval: int) -> date:
    return add_months(day, 3 * interval)


def _advance_annually(day: date, interval: int) -> date:
    return add_years(day, interval)


# ── Next billing date ────────────────────────────────────────────────────────

def _next_from_last(advance):
    def next_date(current: date, last_billing: date, config: BillingCycleConfig) -> date:
        return advance(last_billing, config.interval)
    return next_date


def _day_in_month(year: int, month: int, day_of_month: int) -> date:
    return date(year, month, max(1, min(day_of_month, days_in_month(year, month))))


def _next_monthly(current: date, last_billing: date, config: BillingCycleConfig) -> date:
    if not config.day_of_month:
        return _advance_monthly(last_billing, config.interval)

    candidate = _day_in_month(current.year, current.month, config.day_of_month)
    if candidate <= current:
        following = add_months(date(current.year, current.month, 1), config.interval)
        candidate = _day_in_month(following.year, following.month, config.day_of_month)
    return candidate


def _next_annually(current: date, last_billing: date, config: BillingCycleConfig) -> date:
    candidate = _advance_annually(last_billing, config.interval)
    while candidate <= current:
        candidate = _advance_annually(candidate, config.interval)
    return candidate


# ── Cycle numbering ──────────────────────────────────────────────────────────

def _daily_cycle(current: date, last_billing: date, interval: int) -> int:
    return (current - last_billing).days // interval + 1


def _weekly_cycle(current: date, last_billing: date, interval: int) -> int:
    return (current - last_billing).days // (7 * interval) + 1


def _monthly_cycle(current: date, last_billing: date, interval: int) -> int:
    return months_between(last_billing, current) // interval + 1


def _quarterly_cycle(current: date, last_billing: date, interval: int) -> int:
    years = current.year - last_billing.year
    months = current.month - last_billing.month
    return math.floor(years * 4 + months / 3) + 1


def _annual_cycle(current: date, last_billing: date, interval: int) -> int:
    return (current.year - last_billing.year) // interval + 1


CYCLE_STRATEGIES: Dict[BillingCycleType, CycleStrategy] = {
    BillingCycleType.DAILY: CycleStrategy(
        cycle_type=BillingCycleType.DAILY,
        advance=_advance_daily,
        next_date=_next_from_last(_advance_daily),
        cycle_number=_daily_cycle,
        nominal_days=1,
    ),
    BillingCycleType.WEEKLY: CycleStrategy(
        cycle_type=BillingCycleType.WEEKLY,
        advance=_advance_weekly,
        next_date=_next_from_last(_advance_weekly),
        cycle_number=_weekly_cycle,
        nominal_days=7,
    ),
    BillingCycleType.MONTHLY: CycleStrategy(
        cycle_type=BillingCycleType.MONTHLY,
        advance=_advance_monthly,
        next_date=_next_monthly,
        cycle_number=_monthly_cycle,
        nominal_days=30,
    ),
    BillingCycleType.QUARTERLY: CycleStrategy(
        cycle_type=BillingCycleType.QUARTERLY,
        advance=_advance_quarterly,
        next_date=_next_from_last(_advance_quarterly),
        cycle_number=_quarterly_cycle,
        nominal_days=90,
    ),
    BillingCycleType.ANNUALLY: CycleStrategy(
        cycle_type=BillingCycleType.ANNUALLY,
        advance=_advance_annually,
        next_date=_next_annually,
        cycle_number=_annual_cycle,
        nominal_days=365,
    ),
}


def get_cycle_strategy(cycle_type) -> CycleStrategy:
    """Look up the strategy for a cycle type, rejecting types without one."""
    try:
        strategy = CYCLE_STRATEGIES.get(BillingCycleType(cycle_type))
    except ValueError:
        strategy = None
    if strategy is None:
        value = getattr(cycle_type, "value", cycle_type)
        logger.warning(f"Rejected billing cycle type {value!r}")
        raise UnsupportedBillingCycleType(value)
    return strategy


def advance_cycle(day: date, config: BillingCycleConfig, cycles: int = 1) -> date:
    """Step a date forward by the given number of billing cycles."""
    strategy = get_cycle_strategy(config.type)
    return strategy.advance(as_date(day), config.interval * cycles)
