# File: routa/services/plan_service.py

import asyncio
import logging
import random
from datetime import date
from typing import List, Optional

from routa.core.config import Settings, settings as default_settings
from routa.db.supabase_client import get_supabase_client
from routa.logic.budget import daily_budget_per_person, estimate_budget, parse_tier, require_positive
from routa.logic.itinerary import synthesize_plan
from routa.logic.scaling import scale_for_party
from routa.models.plan import BudgetTier, TravelPlan
from routa.models.schemas import BudgetEstimate, DestinationComparison
from routa.services.comparison import compare_destinations
from routa.services.data_loader import CsvCatalog
from routa.services.route_store import InMemoryRouteStore, SupabaseRouteStore
from routa.services.supabase_catalog import SupabaseCatalog

logger = logging.getLogger(__name__)


class RoutePlanner:
    """
    Generates, scales and stores travel plans for one catalog and one route store.

    There is no module-level instance; the API builds one through `build_planner`.
    """

    def __init__(self, catalog, store, rng: Optional[random.Random] = None, config: Settings = default_settings):
        self.catalog = catalog
        self.store = store
        self.config = config
        self.rng = rng or random.Random(config.RANDOM_SEED)

    def estimate_budget(self, tier: BudgetTier, duration: int, party_size: int = 1) -> BudgetEstimate:
        tier = parse_tier(tier)
        budget = estimate_budget(tier, duration, party_size)
        return BudgetEstimate(
            budget_tier=tier,
            duration=duration,
            number_of_people=party_size,
            budget=budget,
            daily_per_person=daily_budget_per_person(budget, duration, party_size),
        )

    async def generate_route(
        self,
        destination_id: str,
        tier: BudgetTier,
        duration: int,
        number_of_people: int = 1,
        start_date: Optional[date] = None,
    ) -> TravelPlan:
        """
        Build a plan for `destination_id`, then scale its budget for the party.

        The plan is assembled only after every catalog read has finished, so a
        cancelled call never leaves a partial plan behind.
        """
        require_positive("duration", duration)
        require_positive("number_of_people", number_of_people)
        tier = parse_tier(tier)

        logger.info(
            "Generating route for destination=%s tier=%s duration=%d people=%d",
            destination_id, tier.value, duration, number_of_people,
        )
        destination = await self.catalog.fetch_destination(destination_id)
        places, restaurants, accommodations = await asyncio.gather(
            self.catalog.fetch_places(destination_id),
            self.catalog.fetch_restaurants(destination_id),
            self.catalog.fetch_accommodations(destination_id),
        )

        plan = synthesize_plan(
            destination,
            places,
            restaurants,
            accommodations,
            tier,
            duration,
            rng=self.rng,
            start_date=start_date,
            places_per_day=self.config.PLACES_PER_DAY,
        )
        return scale_for_party(plan, number_of_people)

    def scale_for_party(self, plan: TravelPlan, party_size: int) -> TravelPlan:
        return scale_for_party(plan, party_size)

    async def save_route(self, plan: TravelPlan) -> None:
        await self.store.save(plan)
        logger.info("Saved plan %s for %s", plan.id, plan.destination_id)

    async def fetch_saved_routes(self) -> List[TravelPlan]:
        return await self.store.fetch_saved()

    async def delete_route(self, plan_id: str) -> None:
        await self.store.delete(plan_id)
        logger.info("Deleted plan %s", plan_id)

    async def compare(self, left_id: str, right_id: str) -> DestinationComparison:
        left, right, available = await asyncio.gather(
            self.catalog.fetch_destination(left_id),
            self.catalog.fetch_destination(right_id),
            self.catalog.fetch_all_destinations(),
        )
        return compare_destinations(left, right, available)


def build_planner(config: Settings = default_settings) -> RoutePlanner:
    """Wire a planner from settings: CSV or Supabase catalog, memory or Supabase store."""
    if config.CATALOG_BACKEND == "supabase":
        catalog = SupabaseCatalog(get_supabase_client())
    else:
        catalog = CsvCatalog(config.CATALOG_DIR)

    if config.ROUTE_STORE_BACKEND == "supabase":
        store = SupabaseRouteStore(get_supabase_client())
    else:
        store = InMemoryRouteStore()

    return RoutePlanner(catalog, store, config=config)
