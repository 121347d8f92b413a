# routa/services/supabase_catalog.py

import asyncio
import logging
from typing import Any, Dict, List

from supabase import Client

from routa.core.errors import DestinationNotFound, NetworkError
from routa.models.catalog import Accommodation, AccommodationType, Destination, Place, Restaurant
from routa.services.data_loader import (
    accommodation_from_row,
    convert_rows,
    destination_from_row,
    place_from_row,
    restaurant_from_row,
)

logger = logging.getLogger(__name__)

DESTINATIONS_TABLE = "destinations"
PLACES_TABLE = "places"
RESTAURANTS_TABLE = "restaurants"
ACCOMMODATIONS_TABLE = "accommodations"


class SupabaseCatalog:
    """
    Catalog backed by Supabase tables. The supabase client is synchronous, so
    each query runs in a worker thread to keep the event loop free.
    """

    def __init__(self, client: Client):
        self.client = client

    async def _select(self, table: str, **filters: Any) -> List[Dict[str, Any]]:
        def run():
            query = self.client.table(table).select("*")
            for column, value in filters.items():
                query = query.eq(column, value)
            return query.execute()

        try:
            response = await asyncio.to_thread(run)
        except Exception as e:
            logger.error("Supabase error reading %s %s: %s", table, filters, e)
            raise NetworkError(str(e)) from e
        return response.data or []

    # --- destinations ---

    async def fetch_all_destinations(self) -> List[Destination]:
        return convert_rows(await self._select(DESTINATIONS_TABLE), destination_from_row)

    async def fetch_destination(self, destination_id: str) -> Destination:
        rows = await self._select(DESTINATIONS_TABLE, id=destination_id)
        destinations = convert_rows(rows, destination_from_row)
        if not destinations:
            raise DestinationNotFound(destination_id)
        return destinations[0]

    async def search_destinations(self, query: str) -> List[Destination]:
        # Substring search over name and country is done client side
        q = query.strip().lower()
        return [
            d for d in await self.fetch_all_destinations()
            if q in d.name.lower() or q in d.country.lower()
        ]

    async def fetch_popular_destinations(self, limit: int = 5) -> List[Destination]:
        def run():
            return (
                self.client.table(DESTINATIONS_TABLE)
                .select("*")
                .order("popularity", desc=True)
                .limit(limit)
                .execute()
            )

        try:
            response = await asyncio.to_thread(run)
        except Exception as e:
            logger.error("Supabase error reading popular destinations: %s", e)
            raise NetworkError(str(e)) from e
        return convert_rows(response.data or [], destination_from_row)

    # --- places ---

    async def fetch_places(self, destination_id: str) -> List[Place]:
        return convert_rows(await self._select(PLACES_TABLE, destination_id=destination_id), place_from_row)

    async def fetch_place(self, place_id: str) -> Place:
        places = convert_rows(await self._select(PLACES_TABLE, id=place_id), place_from_row)
        if not places:
            raise DestinationNotFound(place_id)
        return places[0]

    async def search_places(self, destination_id: str, query: str) -> List[Place]:
        q = query.strip().lower()
        return [
            p for p in await self.fetch_places(destination_id)
            if q in p.name.lower() or q in p.description.lower()
        ]

    # --- restaurants and lodging ---

    async def fetch_restaurants(self, destination_id: str) -> List[Restaurant]:
        rows = await self._select(RESTAURANTS_TABLE, destination_id=destination_id)
        return convert_rows(rows, restaurant_from_row)

    async def fetch_accommodations(self, destination_id: str) -> List[Accommodation]:
        rows = await self._select(ACCOMMODATIONS_TABLE, destination_id=destination_id)
        return convert_rows(rows, accommodation_from_row)

    async def fetch_accommodation(self, accommodation_id: str) -> Accommodation:
        rows = await self._select(ACCOMMODATIONS_TABLE, id=accommodation_id)
        accommodations = convert_rows(rows, accommodation_from_row)
        if not accommodations:
            raise DestinationNotFound(accommodation_id)
        return accommodations[0]

    async def fetch_accommodations_by_type(
        self, acc_type: AccommodationType, destination_id: str
    ) -> List[Accommodation]:
        return [a for a in await self.fetch_accommodations(destination_id) if a.type == acc_type]

    async def fetch_accommodations_by_price_range(
        self, min_price: float, max_price: float, destination_id: str
    ) -> List[Accommodation]:
        return [
            a for a in await self.fetch_accommodations(destination_id)
            if min_price <= a.price_per_night <= max_price
        ]
