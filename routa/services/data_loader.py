import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, TypeVar

import pandas as pd
from pydantic import ValidationError

from routa.core.errors import DecodingError, DestinationNotFound
from routa.models.catalog import (
    Accommodation,
    AccommodationType,
    Attraction,
    Coordinates,
    CostOfLiving,
    Destination,
    Place,
    PlaceType,
    PopularPlace,
    Restaurant,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DESTINATIONS_FILE = "destinations.csv"
PLACES_FILE = "places.csv"
RESTAURANTS_FILE = "restaurants.csv"
ACCOMMODATIONS_FILE = "accommodations.csv"


def safe_json_parse(x):
    if isinstance(x, list):
        return x
    try:
        return json.loads(x) if pd.notna(x) else []
    except (json.JSONDecodeError, TypeError):
        return []


def _clean(row: Dict[str, Any]) -> Dict[str, Any]:
    # NaN from empty CSV cells becomes None
    return {
        k: (None if not isinstance(v, (list, dict)) and pd.isna(v) else v)
        for k, v in row.items()
    }


def _coords(row: Dict[str, Any]) -> Optional[Coordinates]:
    if row.get("latitude") is None or row.get("longitude") is None:
        return None
    return Coordinates(latitude=float(row["latitude"]), longitude=float(row["longitude"]))


def _popular_place(item: Dict[str, Any]) -> PopularPlace:
    return PopularPlace(
        id=str(item["id"]),
        name=item["name"],
        type=item.get("type") or "",
        coordinates=_coords(item),
        rating=item.get("rating"),
        image_url=item.get("image_url"),
        description=item.get("description") or "",
    )


def _nested(value: Any, convert: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Parse a JSON list of objects, dropping entries that do not convert."""
    items = []
    for item in safe_json_parse(value):
        try:
            items.append(convert(item))
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as e:
            logger.warning("Skipping malformed nested entry %r: %s", item, e)
    return items


def destination_from_row(row: Dict[str, Any]) -> Destination:
    row = _clean(row)
    cost = None
    if row.get("cost_level") and row.get("daily_budget_min") is not None:
        cost = CostOfLiving(
            level=row["cost_level"],
            symbol=row.get("cost_symbol") or "",
            description=row.get("cost_description"),
            daily_budget_min=int(row["daily_budget_min"]),
            daily_budget_max=int(row.get("daily_budget_max") or row["daily_budget_min"]),
        )
    return Destination(
        id=str(row["id"]),
        name=row["name"],
        country=row.get("country") or "",
        description=row.get("description"),
        image_url=row.get("image_url"),
        currency=row.get("currency"),
        language=row.get("language"),
        coordinates=_coords(row),
        climate=row.get("climate"),
        cost_of_living=cost,
        travel_style=safe_json_parse(row.get("travel_style")),
        best_for=safe_json_parse(row.get("best_for")),
        top_attractions=_nested(row.get("top_attractions"), Attraction.model_validate),
        popular_places=_nested(row.get("popular_places"), _popular_place),
        popularity=int(row["popularity"]) if row.get("popularity") is not None else None,
        rating=row.get("rating"),
    )


def place_from_row(row: Dict[str, Any]) -> Place:
    row = _clean(row)
    # Unknown place types fall back to historical
    try:
        place_type = PlaceType(row.get("type") or "historical")
    except ValueError:
        place_type = PlaceType.HISTORICAL
    return Place(
        id=str(row["id"]),
        destination_id=str(row["destination_id"]),
        name=row["name"],
        type=place_type,
        description=row.get("description") or "",
        address=row.get("address") or "",
        coordinates=_coords(row),
        visit_duration=int(row.get("visit_duration") or 60),
        entrance_fee=row.get("entrance_fee"),
        rating=row.get("rating"),
        image_url=row.get("image_url"),
        tips=safe_json_parse(row.get("tips")),
    )


def restaurant_from_row(row: Dict[str, Any]) -> Restaurant:
    row = _clean(row)
    return Restaurant(
        id=str(row["id"]),
        destination_id=str(row["destination_id"]),
        name=row["name"],
        cuisine=row.get("cuisine") or "",
        price_range=int(row.get("price_range") or 2),
        rating=row.get("rating"),
        address=row.get("address") or "",
        coordinates=_coords(row),
    )


def accommodation_from_row(row: Dict[str, Any]) -> Accommodation:
    row = _clean(row)
    # Unknown lodging types fall back to hotel
    try:
        acc_type = AccommodationType(row.get("type") or "hotel")
    except ValueError:
        acc_type = AccommodationType.HOTEL
    return Accommodation(
        id=str(row["id"]),
        destination_id=str(row["destination_id"]),
        name=row["name"],
        type=acc_type,
        price_per_night=float(row["price_per_night"]),
        rating=row.get("rating"),
        address=row.get("address") or "",
        amenities=safe_json_parse(row.get("amenities")),
    )


def convert_rows(rows: List[Dict[str, Any]], convert: Callable[[Dict[str, Any]], T]) -> List[T]:
    """Convert raw rows, skipping (and logging) any row that does not parse."""
    items = []
    for row in rows:
        try:
            items.append(convert(row))
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            logger.warning("Skipping malformed %s row %r: %s", convert.__name__, row.get("id"), e)
    return items


def load_table(path: Path) -> List[Dict[str, Any]]:
    try:
        df = pd.read_csv(path)
    except FileNotFoundError:
        logger.warning("Catalog file %s not found, treating it as empty", path)
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DecodingError(f"Could not read {path.name}: {e}") from e
    return df.to_dict(orient="records")


class CsvCatalog:
    """Read-only catalog of destinations, places, restaurants and lodging loaded from CSV files."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)
        self.destinations = convert_rows(load_table(self.data_dir / DESTINATIONS_FILE), destination_from_row)
        self.places = convert_rows(load_table(self.data_dir / PLACES_FILE), place_from_row)
        self.restaurants = convert_rows(load_table(self.data_dir / RESTAURANTS_FILE), restaurant_from_row)
        self.accommodations = convert_rows(
            load_table(self.data_dir / ACCOMMODATIONS_FILE), accommodation_from_row
        )
        logger.info(
            "Loaded catalog from %s: %d destinations, %d places, %d restaurants, %d accommodations",
            self.data_dir, len(self.destinations), len(self.places),
            len(self.restaurants), len(self.accommodations),
        )

    # --- destinations ---

    async def fetch_all_destinations(self) -> List[Destination]:
        return list(self.destinations)

    async def fetch_destination(self, destination_id: str) -> Destination:
        for destination in self.destinations:
            if destination.id == destination_id:
                return destination
        raise DestinationNotFound(destination_id)

    async def search_destinations(self, query: str) -> List[Destination]:
        q = query.strip().lower()
        return [
            d for d in self.destinations
            if q in d.name.lower() or q in d.country.lower()
        ]

    async def fetch_popular_destinations(self, limit: int = 5) -> List[Destination]:
        ranked = sorted(self.destinations, key=lambda d: d.popularity or 0, reverse=True)
        return ranked[:limit]

    # --- places ---

    async def fetch_places(self, destination_id: str) -> List[Place]:
        return [p for p in self.places if p.destination_id == destination_id]

    async def fetch_place(self, place_id: str) -> Place:
        for place in self.places:
            if place.id == place_id:
                return place
        raise DestinationNotFound(place_id)

    async def search_places(self, destination_id: str, query: str) -> List[Place]:
        q = query.strip().lower()
        return [
            p for p in await self.fetch_places(destination_id)
            if q in p.name.lower() or q in p.description.lower()
        ]

    # --- restaurants and lodging ---

    async def fetch_restaurants(self, destination_id: str) -> List[Restaurant]:
        return [r for r in self.restaurants if r.destination_id == destination_id]

    async def fetch_accommodations(self, destination_id: str) -> List[Accommodation]:
        return [a for a in self.accommodations if a.destination_id == destination_id]

    async def fetch_accommodation(self, accommodation_id: str) -> Accommodation:
        for accommodation in self.accommodations:
            if accommodation.id == accommodation_id:
                return accommodation
        raise DestinationNotFound(accommodation_id)

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
