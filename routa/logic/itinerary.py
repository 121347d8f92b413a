# routa/logic/itinerary.py

import logging
import random
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional, Sequence

from routa.core.errors import RouteGenerationFailed
from routa.logic.budget import estimate_budget, parse_tier, require_positive
from routa.models.catalog import Accommodation, Destination, Place, Restaurant
from routa.models.plan import Budget, BudgetTier, DayPlan, Meal, MealType, TravelPlan

logger = logging.getLogger(__name__)

PLACES_PER_DAY = 2

# Share of the day's food allotment spent on each meal; must sum to 1.
MEAL_COST_SHARES: Dict[MealType, float] = {
    MealType.BREAKFAST: 0.25,
    MealType.LUNCH: 0.35,
    MealType.DINNER: 0.40,
}


def _new_id() -> str:
    return str(uuid.uuid4())


def pick_accommodation(options: Sequence[Accommodation], tier: BudgetTier) -> Optional[Accommodation]:
    """
    Economy stays in the cheapest option, luxury in the most expensive one and
    standard in the median-priced one. Returns None when there is nothing to pick.
    """
    if not options:
        return None
    by_price = sorted(options, key=lambda a: (a.price_per_night, a.id))
    if tier == BudgetTier.ECONOMY:
        return by_price[0]
    if tier == BudgetTier.LUXURY:
        return by_price[-1]
    return by_price[(len(by_price) - 1) // 2]


def _pick_places(places: Sequence[Place], count: int, rng: random.Random) -> List[Place]:
    # sample() never repeats an element, so a day has no duplicate place
    return rng.sample(list(places), min(count, len(places)))


def _assign_meals(restaurants: Sequence[Restaurant], daily_food: float, rng: random.Random) -> List[Meal]:
    return [
        Meal(
            id=_new_id(),
            type=meal_type,
            restaurant=rng.choice(restaurants),
            estimated_cost=daily_food * share,
        )
        for meal_type, share in MEAL_COST_SHARES.items()
    ]


def build_day_plans(
    places: Sequence[Place],
    restaurants: Sequence[Restaurant],
    accommodation: Optional[Accommodation],
    budget: Budget,
    days: int,
    rng: random.Random,
    start_date: date,
    places_per_day: int = PLACES_PER_DAY,
) -> List[DayPlan]:
    """
    Lay out `days` day plans. Each day gets a random handful of places, one
    restaurant per meal and the same accommodation for the whole trip.
    A day's estimated cost is an even share of the trip total, not the sum of
    that day's meals and lodging.
    """
    daily_food = budget.food / days
    daily_cost = budget.total / days

    day_plans: List[DayPlan] = []
    for day_idx in range(1, days + 1):
        day_plans.append(
            DayPlan(
                id=_new_id(),
                day_number=day_idx,
                date=start_date + timedelta(days=day_idx - 1),
                places=_pick_places(places, places_per_day, rng),
                meals=_assign_meals(restaurants, daily_food, rng),
                accommodation=accommodation,
                estimated_cost=daily_cost,
            )
        )
    return day_plans


def synthesize_plan(
    destination: Destination,
    places: Sequence[Place],
    restaurants: Sequence[Restaurant],
    accommodations: Sequence[Accommodation],
    tier: BudgetTier,
    duration: int,
    rng: Optional[random.Random] = None,
    start_date: Optional[date] = None,
    now: Optional[datetime] = None,
    places_per_day: int = PLACES_PER_DAY,
) -> TravelPlan:
    """
    Generate a single-person plan for `destination`.

    Raises RouteGenerationFailed when the catalog has no places or no restaurants
    for the destination. A missing accommodation list leaves days without lodging.
    """
    require_positive("duration", duration)
    tier = parse_tier(tier)
    if not places:
        raise RouteGenerationFailed(f"No places available for '{destination.id}'")
    if not restaurants:
        raise RouteGenerationFailed(f"No restaurants available for '{destination.id}'")

    rng = rng or random.Random()
    budget = estimate_budget(tier, duration, party_size=1)
    accommodation = pick_accommodation(accommodations, tier)
    if accommodation is None:
        logger.warning("No accommodation listed for %s, days will have no lodging", destination.id)

    day_plans = build_day_plans(
        places,
        restaurants,
        accommodation,
        budget,
        duration,
        rng,
        start_date or date.today(),
        places_per_day=places_per_day,
    )

    plan = TravelPlan(
        id=_new_id(),
        destination_id=destination.id,
        budget_tier=tier,
        duration=duration,
        total_budget=budget,
        daily_itinerary=day_plans,
        created_at=now or datetime.now(timezone.utc),
    )
    logger.info(
        "Generated %d-day %s plan %s for %s (total %.2f)",
        duration, tier.value, plan.id, destination.id, budget.total,
    )
    return plan
