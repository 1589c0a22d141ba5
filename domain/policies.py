"""Domain Policies - pricing and compensation rules"""
from decimal import Decimal
from typing import Union

from domain.exceptions import InvalidArgumentError
from domain.value_objects import RateTable

Number = Union[Decimal, int, str]


class PricingPolicy:
    """Stateless cost, discount and salary computations over a RateTable.

    Nothing here reads or writes room or guest state; every method is a pure
    function of its arguments and the rate table it was built with.
    """

    def __init__(self, rate_table: RateTable):
        self.rate_table = rate_table

    def room_cost(self, nightly_rate: Number, nights: int, is_peak_season: bool = False) -> Decimal:
        """nightly_rate * nights, plus the peak surcharge when in season"""
        self.validate_nights(nights)

        cost = Decimal(nightly_rate) * nights
        if is_peak_season:
            cost *= 1 + self.rate_table.peak_season_surcharge
        return cost

    def loyalty_discount(self, amount: Number, is_loyal_member: bool) -> Decimal:
        """Apply the loyalty discount to members only"""
        amount = Decimal(amount)
        if is_loyal_member:
            return amount * (1 - self.rate_table.loyalty_discount)
        return amount

    def bonus(self, tier: str) -> Decimal:
        return self.rate_table.bonus_for(tier)

    def staff_compensation(self, base_salary: Number, tier: str) -> Decimal:
        """Base salary plus the tier bonus.

        Unrecognised tiers earn no bonus rather than failing.
        """
        return Decimal(base_salary) + self.bonus(tier)

    # ==================== VALIDATION ====================
    @staticmethod
    def validate_nights(nights: int) -> None:
        if isinstance(nights, bool) or not isinstance(nights, int):
            raise InvalidArgumentError("Nights must be a whole number")
        if nights < 1:
            raise InvalidArgumentError("Minimum stay is 1 night")
