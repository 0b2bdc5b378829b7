"""Utilities for loading holiday calendars into calculation options."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from billing_dates.config import settings
from billing_dates.schemas import DateCalculationOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Holiday:
    day: date
    name: str = ""


def load_holiday_calendar(csv_path: Path) -> list[Holiday]:
    """Read a CSV with a `date` column (YYYY-MM-DD) and an optional `name` column."""
    if not csv_path.exists():
        raise FileNotFoundError(f"Holiday calendar CSV not found: {csv_path}")

    holidays: list[Holiday] = []
    with csv_path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            raw_date = (row.get("date") or "").strip()
            name = (row.get("name") or "").strip()
            if not raw_date:
                continue
            try:
                day = date.fromisoformat(raw_date)
            except ValueError:
                logger.warning(f"Skipping holiday row with invalid date {raw_date!r} in {csv_path}")
                continue
            holidays.append(Holiday(day=day, name=name))

    return holidays


def holiday_dates(holidays: Iterable[Holiday]) -> list[date]:
    """Unique holiday dates in calendar order."""
    return sorted({holiday.day for holiday in holidays})


def default_calculation_options(csv_path: Optional[Path] = None) -> DateCalculationOptions:
    """Build options from the configured holiday calendar, if any."""
    path = csv_path or settings.holiday_calendar_path
    if path is None:
        return DateCalculationOptions()

    holidays = load_holiday_calendar(Path(path))
    logger.info(f"Loaded {len(holidays)} holidays from {path}")
    return DateCalculationOptions(
        exclude_holidays=settings.exclude_holidays,
        holiday_list=holiday_dates(holidays),
    )
