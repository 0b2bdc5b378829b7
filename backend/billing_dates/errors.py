"""Errors raised for malformed billing, trial and adjustment configuration."""


class DateCalculationError(Exception):
    """Base class for date calculation failures."""

    label = "value"

    def __init__(self, value):
        self.value = value
        super().__init__(f"Unsupported {self.label}: {value}")


class UnsupportedBillingCycleType(DateCalculationError):
    """Raised when a billing cycle type has no cycle rule."""

    label = "billing cycle type"


class UnsupportedTrialPeriodUnit(DateCalculationError):
    """Raised when a trial period unit is not DAYS, WEEKS or MONTHS."""

    label = "trial period unit"


class UnsupportedAdjustmentType(DateCalculationError):
    """Raised when a date adjustment type is not recognized."""

    label = "date adjustment type"
