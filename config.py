"""
Application configuration
Read from environment variables prefixed with HOTEL_
"""
from decimal import Decimal
from functools import lru_cache
from typing import Dict

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.value_objects import RateTable


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_prefix="HOTEL_")

    # Property
    HOTEL_NAME: str = "Five Star Grand Hotel"
    HOTEL_ADDRESS: str = "100 Zhongxiao E Rd, Xinyi District, Taipei"
    CURRENCY: str = "TWD"

    # Pricing policy
    PEAK_SEASON_SURCHARGE: Decimal = Decimal("0.20")
    LOYALTY_DISCOUNT: Decimal = Decimal("0.10")

    # Compensation policy
    DEFAULT_BASE_SALARY: Decimal = Decimal("30000")
    TIER_BONUSES: Dict[str, Decimal] = {
        "junior": Decimal("0"),
        "senior": Decimal("15000"),
        "manager": Decimal("30000"),
        "director": Decimal("50000"),
    }

    LOG_LEVEL: str = "INFO"
    SEED_DEMO_DATA: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


def build_rate_table(settings: Settings) -> RateTable:
    """Freeze the pricing part of the settings into a RateTable"""
    return RateTable(
        tier_bonuses=settings.TIER_BONUSES,
        peak_season_surcharge=settings.PEAK_SEASON_SURCHARGE,
        loyalty_discount=settings.LOYALTY_DISCOUNT
    )
