"""Day-ratio proration of a full-period amount."""

from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from billing_dates.config import settings
from billing_dates.engine.calendar_math import as_date, inclusive_days
from billing_dates.schemas import ProratedAmountResult

logger = logging.getLogger(__name__)

Amount = Union[Decimal, int, float, str]


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def calculate_prorated_amount(
    full_amount: Amount,
    period_start: date,
    period_end: date,
    usage_start: date,
    usage_end: date,
    decimal_places: Optional[int] = None,
) -> ProratedAmountResult:
    """
    Charge for the part of a billing period that was actually used.

    The usage window is clipped to the period; days are counted inclusively
    on both ends and the amount is rounded half-up. Negative amounts are
    rejected; credits are prorated by the caller on the absolute value.
    """
    amount = _to_decimal(full_amount)
    if amount < 0:
        logger.warning(f"Rejected negative full amount {full_amount!r}")
        raise ValueError(f"full_amount must not be negative: {full_amount}")

    if decimal_places is None:
        decimal_places = settings.amount_decimal_places
    quantum = Decimal(1).scaleb(-decimal_places)

    period_start, period_end = as_date(period_start), as_date(period_end)
    total_days = inclusive_days(period_start, period_end)

    actual_start = max(period_start, as_date(usage_start))
    actual_end = min(period_end, as_date(usage_end))

    if actual_start > actual_end:
        return ProratedAmountResult(
            prorated_amount=Decimal("0").quantize(quantum),
            total_days=total_days,
            used_days=0,
            ratio=0.0,
        )

    used_days = inclusive_days(actual_start, actual_end)
    if total_days == 0:
        ratio = Decimal(1)
    else:
        ratio = Decimal(used_days) / Decimal(total_days)

    prorated = (amount * ratio).quantize(quantum, rounding=ROUND_HALF_UP)

    logger.debug(f"Prorated {full_amount} over {used_days}/{total_days} days: {prorated}")
    return ProratedAmountResult(
        prorated_amount=prorated,
        total_days=total_days,
        used_days=used_days,
        ratio=float(ratio),
    )
