# tests/test_data_loader.py

import asyncio
from pathlib import Path

import pytest

from routa.core.errors import DestinationNotFound
from routa.models.catalog import AccommodationType, PlaceType
from routa.services.data_loader import (
    CsvCatalog,
    convert_rows,
    destination_from_row,
    place_from_row,
    safe_json_parse,
)

DATA_DIR = Path(__file__).resolve().parent.parent / "routa" / "data"


@pytest.fixture(scope="module")
def csv_catalog():
    return CsvCatalog(DATA_DIR)


def test_bundled_catalog_loads(csv_catalog):
    ids = {d.id for d in asyncio.run(csv_catalog.fetch_all_destinations())}
    assert {"istanbul", "paris", "tokyo", "roma"} <= ids


def test_destination_fields_parsed(csv_catalog):
    istanbul = asyncio.run(csv_catalog.fetch_destination("istanbul"))
    assert istanbul.cost_of_living.daily_budget_min == 30
    assert istanbul.cost_of_living.daily_budget_max == 100
    assert "Cultural" in istanbul.travel_style
    assert istanbul.coordinates.latitude == pytest.approx(41.0082)


def test_unknown_destination_raises(csv_catalog):
    with pytest.raises(DestinationNotFound):
        asyncio.run(csv_catalog.fetch_destination("atlantis"))


def test_search_destinations_by_name_or_country(csv_catalog):
    assert [d.id for d in asyncio.run(csv_catalog.search_destinations("PAR"))] == ["paris"]
    assert [d.id for d in asyncio.run(csv_catalog.search_destinations("japan"))] == ["tokyo"]


def test_popular_destinations_sorted(csv_catalog):
    popular = asyncio.run(csv_catalog.fetch_popular_destinations(2))
    assert [d.id for d in popular] == ["paris", "istanbul"]


def test_places_for_destination(csv_catalog):
    places = asyncio.run(csv_catalog.fetch_places("istanbul"))
    assert len(places) == 4
    bazaar = next(p for p in places if p.id == "kapalicarsi")
    assert bazaar.type == PlaceType.SHOPPING
    assert bazaar.entrance_fee is None
    assert bazaar.tips == ["Bargain", "Carry cash"]


def test_search_places(csv_catalog):
    found = asyncio.run(csv_catalog.search_places("istanbul", "panorama"))
    assert [p.id for p in found] == ["galata"]


def test_fetch_place(csv_catalog):
    assert asyncio.run(csv_catalog.fetch_place("topkapi")).visit_duration == 180


def test_accommodation_filters(csv_catalog):
    hostels = asyncio.run(csv_catalog.fetch_accommodations_by_type(AccommodationType.HOSTEL, "istanbul"))
    assert [a.id for a in hostels] == ["sultan_hostel"]
    mid = asyncio.run(csv_catalog.fetch_accommodations_by_price_range(100, 500, "istanbul"))
    assert {a.id for a in mid} == {"sultan_hostel", "blue_house"}


def test_missing_directory_gives_empty_catalog(tmp_path):
    catalog = CsvCatalog(tmp_path)
    assert asyncio.run(catalog.fetch_all_destinations()) == []


def test_malformed_rows_are_skipped():
    rows = [
        {"id": "ok", "destination_id": "x", "name": "Fine"},
        {"id": "bad", "destination_id": "x"},
        {"id": "neg", "destination_id": "x", "name": "Negative", "entrance_fee": -5},
    ]
    assert [p.id for p in convert_rows(rows, place_from_row)] == ["ok"]


def test_safe_json_parse():
    assert safe_json_parse('["a", "b"]') == ["a", "b"]
    assert safe_json_parse(["a"]) == ["a"]
    assert safe_json_parse("not json") == []
    assert safe_json_parse(float("nan")) == []


def test_fetch_accommodation(csv_catalog):
    blue_house = asyncio.run(csv_catalog.fetch_accommodation("blue_house"))
    assert blue_house.destination_id == "istanbul"
    assert blue_house.type == AccommodationType.HOTEL
    assert blue_house.price_per_night == 450


def test_unknown_accommodation_raises(csv_catalog):
    with pytest.raises(DestinationNotFound):
        asyncio.run(csv_catalog.fetch_accommodation("ritz"))


def test_top_attractions_and_popular_places(csv_catalog):
    istanbul = asyncio.run(csv_catalog.fetch_destination("istanbul"))
    assert [a.name for a in istanbul.top_attractions][:2] == ["Hagia Sophia", "Topkapı Palace"]
    assert istanbul.top_attractions[0].type == "Museum"
    assert [p.id for p in istanbul.popular_places] == ["galata-tower", "hagia-sophia"]

    paris = asyncio.run(csv_catalog.fetch_destination("paris"))
    assert paris.top_attractions == []
    eiffel = paris.popular_places[0]
    assert eiffel.name == "Eiffel Tower"
    assert eiffel.coordinates.longitude == pytest.approx(2.2945)
    notre_dame = next(p for p in paris.popular_places if p.id == "notre-dame")
    assert notre_dame.coordinates is None


def test_malformed_nested_entries_skipped():
    destination = destination_from_row({
        "id": "x",
        "name": "X",
        "top_attractions": '[{"name": "Kept"}, {"type": "Nameless"}]',
        "popular_places": '[{"id": "p", "name": "Kept"}, {"name": "No id"}, "junk"]',
    })
    assert [a.name for a in destination.top_attractions] == ["Kept"]
    assert [p.id for p in destination.popular_places] == ["p"]


def test_unknown_place_type_falls_back_to_historical():
    rows = [{"id": "etna", "destination_id": "x", "name": "Mount Etna", "type": "volcano"}]
    places = convert_rows(rows, place_from_row)
    assert [p.id for p in places] == ["etna"]
    assert places[0].type == PlaceType.HISTORICAL
