"""Pydantic schemas for billing cycle, trial and proration calculations."""

import enum
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from billing_dates.errors import (
    UnsupportedAdjustmentType,
    UnsupportedBillingCycleType,
    UnsupportedTrialPeriodUnit,
)


class BillingCycleType(str, enum.Enum):
    """Recurring interval at which a subscription is charged."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMI_ANNUALLY = "SEMI_ANNUALLY"
    ANNUALLY = "ANNUALLY"
    CUSTOM = "CUSTOM"


class DateAdjustmentType(str, enum.Enum):
    """Post-processing applied to a computed billing date."""

    NONE = "NONE"
    BUSINESS_DAY = "BUSINESS_DAY"
    MONTH_END = "MONTH_END"
    MONTH_START = "MONTH_START"
    WEEKEND_SKIP = "WEEKEND_SKIP"


class TrialPeriodUnit(str, enum.Enum):
    """Unit a trial duration is expressed in."""

    DAYS = "DAYS"
    WEEKS = "WEEKS"
    MONTHS = "MONTHS"


def coerce_enum(enum_cls, value, error_cls):
    """Return value as a member of enum_cls, raising error_cls when it is not one."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise error_cls(value) from None


def _calendar_date(value):
    if isinstance(value, datetime):
        return value.date()
    return value


# --- Configuration Schemas ---


class BillingCycleConfig(BaseModel):
    """How often a subscription bills and how billing dates are adjusted."""

    type: BillingCycleType
    interval: int = Field(default=1, ge=1, description="Number of cycles between charges")
    day_of_month: Optional[int] = Field(default=None, description="Target day of month for MONTHLY cycles")
    day_of_week: Optional[int] = Field(default=None, description="Target weekday for WEEKLY cycles (0=Sunday)")
    adjustment: Optional[DateAdjustmentType] = None
    timezone: Optional[str] = None

    class Config:
        frozen = True

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value):
        return coerce_enum(BillingCycleType, value, UnsupportedBillingCycleType)

    @field_validator("adjustment", mode="before")
    @classmethod
    def _check_adjustment(cls, value):
        if value is None:
            return None
        return coerce_enum(DateAdjustmentType, value, UnsupportedAdjustmentType)


class TrialPeriodConfig(BaseModel):
    """Length of a free trial and how its end date is counted."""

    duration: int = Field(gt=0)
    unit: TrialPeriodUnit
    include_start_date: bool = True
    business_days_only: bool = False

    class Config:
        frozen = True

    @field_validator("unit", mode="before")
    @classmethod
    def _check_unit(cls, value):
        return coerce_enum(TrialPeriodUnit, value, UnsupportedTrialPeriodUnit)


class DateCalculationOptions(BaseModel):
    """Holiday data and flags supplied by the caller for a single calculation."""

    timezone: Optional[str] = None
    business_days_only: bool = False
    exclude_holidays: bool = False
    holiday_list: list[date] = Field(default_factory=list)
    adjust_to_business_day: bool = False

    class Config:
        frozen = True

    @field_validator("holiday_list", mode="before")
    @classmethod
    def _strip_time(cls, value):
        if value is None:
            return []
        return [_calendar_date(item) for item in value]


# --- Result Schemas ---


class NextBillingDateResult(BaseModel):
    next_billing_date: date
    days_until_billing: int
    cycle_number: int = Field(ge=1)
    is_overdue: bool
    is_prorated: bool = False
    prorated_days: int = 0

    class Config:
        frozen = True


class BillingPeriodResult(BaseModel):
    period_start: date
    period_end: date
    billing_date: date
    day_count: int
    is_partial_period: bool
    prorated_ratio: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    class Config:
        frozen = True


class ProratedAmountResult(BaseModel):
    prorated_amount: Decimal = Field(ge=0)
    total_days: int = Field(ge=0)
    used_days: int = Field(ge=0)
    ratio: float = Field(ge=0.0, le=1.0)

    class Config:
        frozen = True
