"""Billing cycle, trial period and proration date calculations."""

from billing_dates.engine.adjustments import adjust_date
from billing_dates.engine.business_days import (
    add_business_days,
    count_business_days,
    get_next_business_day,
    get_previous_business_day,
    is_business_day,
    is_holiday,
)
from billing_dates.engine.calendar_math import add_days, add_months, add_years, inclusive_days, is_leap_year
from billing_dates.engine.cycles import advance_cycle
from billing_dates.engine.next_billing import calculate_next_billing_date
from billing_dates.engine.periods import calculate_billing_period
from billing_dates.engine.proration import calculate_prorated_amount
from billing_dates.engine.sequences import generate_date_sequence, iter_date_sequence
from billing_dates.engine.trials import calculate_trial_end_date
from billing_dates.errors import (
    DateCalculationError,
    UnsupportedAdjustmentType,
    UnsupportedBillingCycleType,
    UnsupportedTrialPeriodUnit,
)
from billing_dates.schemas import (
    BillingCycleConfig,
    BillingCycleType,
    BillingPeriodResult,
    DateAdjustmentType,
    DateCalculationOptions,
    NextBillingDateResult,
    ProratedAmountResult,
    TrialPeriodConfig,
    TrialPeriodUnit,
)
