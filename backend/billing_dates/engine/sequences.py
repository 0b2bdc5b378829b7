"""Billing date sequences between two boundaries."""

from __future__ import annotations

from datetime import date
from typing import Iterator, List, Optional

from billing_dates.engine.adjustments import adjust_date
from billing_dates.engine.calendar_math import as_date
from billing_dates.engine.cycles import get_cycle_strategy
from billing_dates.schemas import BillingCycleConfig, DateCalculationOptions


def iter_date_sequence(
    start_date: date,
    end_date: date,
    config: BillingCycleConfig,
    options: Optional[DateCalculationOptions] = None,
) -> Iterator[date]:
    """
    Yield billing dates from start_date until the cursor passes end_date.

    The cursor steps one cycle at a time from the previous unadjusted date,
    so month-end clamping carries forward. Adjustment only affects the
    yielded value.
    """
    strategy = get_cycle_strategy(config.type)
    return _walk(strategy, as_date(start_date), as_date(end_date), config, options)


def _walk(strategy, cursor, end_date, config, options):
    while cursor <= end_date:
        if config.adjustment:
            yield adjust_date(cursor, config.adjustment, options)
        else:
            yield cursor
        cursor = strategy.advance(cursor, config.interval)


def generate_date_sequence(
    start_date: date,
    end_date: date,
    config: BillingCycleConfig,
    options: Optional[DateCalculationOptions] = None,
) -> List[date]:
    return list(iter_date_sequence(start_date, end_date, config, options))
