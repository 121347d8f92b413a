# tests/conftest.py

import random
from datetime import date, datetime, timezone
from types import SimpleNamespace

import pytest

from routa.core.config import Settings
from routa.core.errors import DestinationNotFound
from routa.logic.itinerary import synthesize_plan
from routa.models.catalog import (
    Accommodation,
    AccommodationType,
    Attraction,
    CostOfLiving,
    Destination,
    Place,
    PlaceType,
    PopularPlace,
    Restaurant,
)
from routa.models.plan import BudgetTier
from routa.services.plan_service import RoutePlanner
from routa.services.route_store import InMemoryRouteStore



class StaticCatalog:
    """Catalog over plain lists, for tests."""

    def __init__(self, destinations, places=(), restaurants=(), accommodations=()):
        self.destinations = list(destinations)
        self.places = list(places)
        self.restaurants = list(restaurants)
        self.accommodations = list(accommodations)

    async def fetch_all_destinations(self):
        return list(self.destinations)

    async def fetch_destination(self, destination_id):
        for d in self.destinations:
            if d.id == destination_id:
                return d
        raise DestinationNotFound(destination_id)

    async def fetch_places(self, destination_id):
        return [p for p in self.places if p.destination_id == destination_id]

    async def fetch_restaurants(self, destination_id):
        return [r for r in self.restaurants if r.destination_id == destination_id]

    async def fetch_accommodations(self, destination_id):
        return [a for a in self.accommodations if a.destination_id == destination_id]


@pytest.fixture
def istanbul():
    return Destination(
        id="istanbul",
        name="Istanbul",
        country="Türkiye",
        cost_of_living=CostOfLiving(level="Medium", symbol="$$", daily_budget_min=30, daily_budget_max=100),
        travel_style=["Romantic", "Cultural", "Historical"],
        best_for=["Couples", "Food Lovers"],
        top_attractions=[
            Attraction(name="Hagia Sophia", type="Museum"),
            Attraction(name="Topkapı Palace", type="Palace"),
            Attraction(name="Grand Bazaar", type="Shopping"),
            Attraction(name="Bosphorus Cruise", type="Experience"),
        ],
        popularity=95,
        rating=4.7,
    )


@pytest.fixture
def paris():
    return Destination(
        id="paris",
        name="Paris",
        country="France",
        cost_of_living=CostOfLiving(level="High", symbol="$$$", daily_budget_min=100, daily_budget_max=300),
        travel_style=["romantic", "Artistic"],
        best_for=["Couples", "Fashion"],
        popular_places=[
            PopularPlace(id="eiffel-tower", name="Eiffel Tower", type="Monument"),
            PopularPlace(id="louvre", name="Louvre Museum", type="Museum"),
        ],
        popularity=98,
        rating=4.8,
    )


@pytest.fixture
def places():
    return [
        Place(id="ayasofya", destination_id="istanbul", name="Hagia Sophia", visit_duration=90, entrance_fee=0),
        Place(id="topkapi", destination_id="istanbul", name="Topkapı Palace", visit_duration=180, entrance_fee=320),
        Place(id="bazaar", destination_id="istanbul", name="Grand Bazaar", type=PlaceType.SHOPPING),
        Place(id="galata", destination_id="istanbul", name="Galata Tower", type=PlaceType.VIEWPOINT),
    ]


@pytest.fixture
def restaurants():
    return [
        Restaurant(id="pandeli", destination_id="istanbul", name="Pandeli", cuisine="Turkish", price_range=3),
        Restaurant(id="ciya", destination_id="istanbul", name="Çiya Sofrası", cuisine="Anatolian", price_range=2),
    ]


@pytest.fixture
def accommodations():
    return [
        Accommodation(id="blue_house", destination_id="istanbul", name="Blue House",
                      type=AccommodationType.HOTEL, price_per_night=450),
        Accommodation(id="four_seasons", destination_id="istanbul", name="Four Seasons",
                      type=AccommodationType.HOTEL, price_per_night=2500),
        Accommodation(id="sultan_hostel", destination_id="istanbul", name="Sultan Hostel",
                      type=AccommodationType.HOSTEL, price_per_night=150),
    ]


@pytest.fixture
def catalog(istanbul, paris, places, restaurants, accommodations):
    return StaticCatalog([istanbul, paris], places, restaurants, accommodations)


@pytest.fixture
def planner(catalog):
    return RoutePlanner(catalog, InMemoryRouteStore(), rng=random.Random(42), config=Settings())


@pytest.fixture
def make_plan(istanbul, places, restaurants, accommodations):
    def _make(tier=BudgetTier.STANDARD, duration=3, seed=7):
        return synthesize_plan(
            istanbul,
            places,
            restaurants,
            accommodations,
            tier,
            duration,
            rng=random.Random(seed),
            start_date=date(2026, 5, 1),
            now=datetime(2026, 4, 1, 12, 0, tzinfo=timezone.utc),
        )
    return _make


class FakeQuery:
    """Chainable stand-in for a supabase query builder; records every call."""

    def __init__(self, client):
        self.client = client

    def __getattr__(self, name):
        def chain(*args, **kwargs):
            self.client.calls.append((name, args, kwargs))
            return self
        return chain

    def execute(self):
        if self.client.fail:
            raise RuntimeError("connection refused")
        return SimpleNamespace(data=self.client.rows)


class FakeClient:
    def __init__(self, rows=None, fail=False):
        self.rows = rows or []
        self.fail = fail
        self.calls = []

    def table(self, name):
        self.calls.append(("table", (name,), {}))
        return FakeQuery(self)


@pytest.fixture
def fake_client():
    return FakeClient
