"""Date adjustment policy applied after a billing date is computed."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from billing_dates.engine.business_days import SATURDAY, SUNDAY, get_next_business_day
from billing_dates.engine.calendar_math import add_days, as_date, month_end, month_start
from billing_dates.errors import UnsupportedAdjustmentType
from billing_dates.schemas import DateAdjustmentType, DateCalculationOptions, coerce_enum

logger = logging.getLogger(__name__)


def skip_weekend(value: date) -> date:
    """Move Saturday and Sunday onto the following Monday."""
    value = as_date(value)
    if value.weekday() == SATURDAY:
        return add_days(value, 2)
    if value.weekday() == SUNDAY:
        return add_days(value, 1)
    return value


_ADJUSTERS = {
    DateAdjustmentType.NONE: lambda value, options: as_date(value),
    DateAdjustmentType.BUSINESS_DAY: get_next_business_day,
    DateAdjustmentType.MONTH_END: lambda value, options: month_end(value),
    DateAdjustmentType.MONTH_START: lambda value, options: month_start(value),
    DateAdjustmentType.WEEKEND_SKIP: lambda value, options: skip_weekend(value),
}


def adjust_date(
    value: date,
    adjustment_type: DateAdjustmentType,
    options: Optional[DateCalculationOptions] = None,
) -> date:
    """
    Apply an adjustment to a date.

    BUSINESS_DAY always moves forward to the next business day, even when
    the date already is one.
    """
    try:
        adjustment_type = coerce_enum(DateAdjustmentType, adjustment_type, UnsupportedAdjustmentType)
    except UnsupportedAdjustmentType:
        logger.warning(f"Rejected date adjustment type {adjustment_type!r}")
        raise
    return _ADJUSTERS[adjustment_type](value, options)
