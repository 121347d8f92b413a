# routa/services/route_store.py

import asyncio
import logging
from typing import List

from pydantic import ValidationError
from supabase import Client

from routa.core.errors import NetworkError
from routa.models.plan import TravelPlan

logger = logging.getLogger(__name__)

PLANS_TABLE = "travel_plans"


class InMemoryRouteStore:
    """Saved plans kept in process memory. Appends and deletes are serialised by a lock."""

    def __init__(self):
        self._plans: List[TravelPlan] = []
        self._lock = asyncio.Lock()

    async def save(self, plan: TravelPlan) -> None:
        async with self._lock:
            self._plans.append(plan)

    async def fetch_saved(self) -> List[TravelPlan]:
        async with self._lock:
            return list(self._plans)

    async def delete(self, plan_id: str) -> None:
        async with self._lock:
            self._plans = [p for p in self._plans if p.id != plan_id]


class SupabaseRouteStore:
    """Saved plans stored as JSON documents in the `travel_plans` table."""

    def __init__(self, client: Client):
        self.client = client

    async def _run(self, action: str, fn):
        try:
            return await asyncio.to_thread(fn)
        except Exception as e:
            logger.error("Supabase error while trying to %s: %s", action, e)
            raise NetworkError(str(e)) from e

    async def save(self, plan: TravelPlan) -> None:
        row = {
            "id": plan.id,
            "destination_id": plan.destination_id,
            "created_at": plan.created_at.isoformat(),
            "payload": plan.model_dump(mode="json"),
        }
        await self._run("save plan", lambda: self.client.table(PLANS_TABLE).upsert(row).execute())

    async def fetch_saved(self) -> List[TravelPlan]:
        response = await self._run(
            "fetch saved plans",
            lambda: self.client.table(PLANS_TABLE).select("*").order("created_at").execute(),
        )
        plans = []
        for row in response.data or []:
            try:
                plans.append(TravelPlan.model_validate(row["payload"]))
            except (KeyError, ValidationError) as e:
                logger.warning("Skipping unreadable saved plan %r: %s", row.get("id"), e)
        return plans

    async def delete(self, plan_id: str) -> None:
        await self._run(
            "delete plan",
            lambda: self.client.table(PLANS_TABLE).delete().eq("id", plan_id).execute(),
        )
