"""Engine configuration settings."""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Holiday calendar
    holiday_calendar_path: Optional[Path] = None
    exclude_holidays: bool = True

    # Proration
    amount_decimal_places: int = 2

    class Config:
        env_prefix = "BILLING_DATES_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
