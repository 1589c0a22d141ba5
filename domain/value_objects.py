"""Domain Value Objects"""
from pydantic import BaseModel, Field, validator
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, List

from domain.exceptions import InvalidArgumentError


class Money(BaseModel):
    """Value Object for monetary amounts"""
    amount: Decimal = Field(gt=0)
    currency: str = "TWD"

    class Config:
        frozen = True


class RateTable(BaseModel):
    """Bonus per staff tier plus the seasonal surcharge and loyalty discount"""
    tier_bonuses: Dict[str, Decimal] = {}
    peak_season_surcharge: Decimal = Field(ge=0)
    loyalty_discount: Decimal = Field(ge=0, le=1)

    @validator('tier_bonuses')
    def normalise_tiers(cls, v):
        return {tier.strip().lower(): Decimal(bonus) for tier, bonus in v.items()}

    def bonus_for(self, tier: str) -> Decimal:
        """Bonus for a tier label, zero when the tier is unknown"""
        return self.tier_bonuses.get(tier.strip().lower(), Decimal("0"))

    class Config:
        frozen = True


class StayInterval(BaseModel):
    """Check-in moment and the check-out it was booked for"""
    checked_in_at: datetime
    scheduled_check_out_at: datetime
    nights: int = Field(ge=1)
    peak_season: bool = False

    @staticmethod
    def starting(checked_in_at: datetime, nights: int, peak_season: bool = False) -> "StayInterval":
        return StayInterval(
            checked_in_at=checked_in_at,
            scheduled_check_out_at=checked_in_at + timedelta(days=nights),
            nights=nights,
            peak_season=peak_season
        )

    def elapsed_days(self, now: datetime) -> int:
        """Whole days since check-in, never less than one"""
        return max(1, (now - self.checked_in_at) // timedelta(days=1))

    class Config:
        frozen = True


class CleaningTasks(BaseModel):
    """Independent housekeeping task flags; any subset may be set"""
    deep_clean: bool = False
    change_sheets: bool = False
    vacuum: bool = False
    clean_bathroom: bool = False
    restock: bool = False

    @staticmethod
    def full_service() -> "CleaningTasks":
        return CleaningTasks(
            deep_clean=True,
            change_sheets=True,
            vacuum=True,
            clean_bathroom=True,
            restock=True
        )

    def performed(self) -> List[str]:
        return [name for name, flag in self.model_dump().items() if flag]

    class Config:
        frozen = True


class MealOrder(BaseModel):
    """A dish prepared by the kitchen"""
    dish_name: str
    quantity: int

    @staticmethod
    def create(dish_name: str, quantity: int) -> "MealOrder":
        """Create meal order with validation"""
        if not dish_name or not dish_name.strip():
            raise InvalidArgumentError("Dish name cannot be empty")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidArgumentError("Quantity must be a positive integer")
        return MealOrder(dish_name=dish_name.strip(), quantity=quantity)

    class Config:
        frozen = True
