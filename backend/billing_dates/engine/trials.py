"""Trial period end dates."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from billing_dates.engine.business_days import add_business_days
from billing_dates.engine.calendar_math import add_days, add_months, as_date
from billing_dates.errors import UnsupportedTrialPeriodUnit
from billing_dates.schemas import DateCalculationOptions, TrialPeriodConfig, TrialPeriodUnit, coerce_enum

logger = logging.getLogger(__name__)


_UNIT_STEPS = {
    TrialPeriodUnit.DAYS: lambda start, duration: add_days(start, duration),
    TrialPeriodUnit.WEEKS: lambda start, duration: add_days(start, duration * 7),
    TrialPeriodUnit.MONTHS: lambda start, duration: add_months(start, duration),
}


def calculate_trial_end_date(
    start_date: date,
    config: TrialPeriodConfig,
    options: Optional[DateCalculationOptions] = None,
) -> date:
    """
    Compute the date a trial ends.

    With business_days_only the result is duration business days after
    start_date regardless of unit or include_start_date; holidays count
    only when options exclude them.
    """
    try:
        unit = coerce_enum(TrialPeriodUnit, config.unit, UnsupportedTrialPeriodUnit)
    except UnsupportedTrialPeriodUnit:
        logger.warning(f"Rejected trial period unit {config.unit!r}")
        raise

    start = as_date(start_date)
    end_date = _UNIT_STEPS[unit](start, config.duration)

    if not config.include_start_date:
        end_date = add_days(end_date, -1)

    if config.business_days_only:
        end_date = add_business_days(start, config.duration, options)

    logger.debug(f"Trial of {config.duration} {unit.value} from {start} ends {end_date}")
    return end_date
