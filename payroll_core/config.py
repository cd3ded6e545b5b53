"""Application configuration via environment variables."""

import json
from decimal import Decimal
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (settings store)
    DATABASE_URL: str = "sqlite+aiosqlite:///./payroll.db"

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = '["http://localhost:3000"]'

    # Payroll defaults
    TEMPLATE_TOLERANCE_PCT: Decimal = Decimal("0.1")
    STANDARD_DEDUCTION: Decimal = Decimal("50000")
    DEFAULT_WORKING_DAYS_PER_MONTH: int = 22
    DEFAULT_WORKING_HOURS_PER_DAY: Decimal = Decimal("9")
    DEFAULT_OVERTIME_MULTIPLIER: Decimal = Decimal("1.5")

    # Full & Final settlement
    NOTICE_PERIOD_DAYS: int = 30
    GRATUITY_MIN_YEARS: int = 5

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS_ORIGINS JSON string into a list."""
        try:
            return json.loads(self.CORS_ORIGINS)
        except (json.JSONDecodeError, TypeError):
            return ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
