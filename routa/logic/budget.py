# routa/logic/budget.py

from typing import Dict

from routa.core.errors import InvalidInput
from routa.models.plan import Budget, BudgetTier

# Daily cost per person for each tier, in USD.
TIER_DAILY_COSTS: Dict[BudgetTier, Budget] = {
    BudgetTier.ECONOMY: Budget(
        accommodation=50, food=35, transportation=15, activities=27, shopping=16, other=7
    ),
    BudgetTier.STANDARD: Budget(
        accommodation=150, food=65, transportation=35, activities=50, shopping=35, other=15
    ),
    BudgetTier.LUXURY: Budget(
        accommodation=830, food=170, transportation=100, activities=135, shopping=100, other=30
    ),
}


def require_positive(name: str, value: int) -> int:
    # bool is an int subclass; True must not pass as a duration of one day
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidInput(f"{name} must be a positive integer, got {value!r}")
    return value


def parse_tier(tier) -> BudgetTier:
    try:
        return BudgetTier(tier)
    except ValueError:
        raise InvalidInput(f"Unknown budget tier {tier!r}") from None


def estimate_budget(tier: BudgetTier, duration: int, party_size: int = 1) -> Budget:
    """
    Whole-trip budget for `party_size` people over `duration` days.
    Every category of the tier's daily rate is multiplied by duration * party_size.
    """
    require_positive("duration", duration)
    require_positive("party_size", party_size)
    return TIER_DAILY_COSTS[parse_tier(tier)].scaled(duration * party_size)


def daily_budget_per_person(budget: Budget, duration: int, party_size: int = 1) -> float:
    require_positive("duration", duration)
    require_positive("party_size", party_size)
    return budget.total / duration / party_size
