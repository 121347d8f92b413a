from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class CostOfLiving(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: str  # "Low", "Medium", "Medium-High", "High"
    symbol: str  # "$", "$$", "$$$"
    description: Optional[str] = None
    daily_budget_min: int  # USD
    daily_budget_max: int  # USD

    @property
    def daily_midpoint(self) -> float:
        return (self.daily_budget_min + self.daily_budget_max) / 2


class Attraction(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: Optional[str] = None  # "Museum", "Monument", ...


class PopularPlace(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str = ""
    coordinates: Optional[Coordinates] = None
    rating: Optional[float] = None
    image_url: Optional[str] = None
    description: str = ""


class Destination(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    country: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    currency: Optional[str] = None
    language: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    climate: Optional[str] = None
    cost_of_living: Optional[CostOfLiving] = None
    travel_style: List[str] = []
    best_for: List[str] = []
    top_attractions: List[Attraction] = []
    popular_places: List[PopularPlace] = []
    popularity: Optional[int] = None
    rating: Optional[float] = None


class PlaceType(str, Enum):
    HISTORICAL = "historical"
    MUSEUM = "museum"
    PARK = "park"
    BEACH = "beach"
    SHOPPING = "shopping"
    VIEWPOINT = "viewpoint"
    ENTERTAINMENT = "entertainment"


class Place(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    destination_id: str
    name: str
    type: PlaceType = PlaceType.HISTORICAL
    description: str = ""
    address: str = ""
    coordinates: Optional[Coordinates] = None
    visit_duration: int = Field(default=60, ge=0)  # minutes
    entrance_fee: Optional[float] = Field(default=None, ge=0)
    rating: Optional[float] = None
    image_url: Optional[str] = None
    tips: List[str] = []


class Restaurant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    destination_id: str
    name: str
    cuisine: str = ""
    price_range: int = Field(default=2, ge=1, le=4)  # 1-4 ($ - $$$$)
    rating: Optional[float] = None
    address: str = ""
    coordinates: Optional[Coordinates] = None


class AccommodationType(str, Enum):
    HOTEL = "hotel"
    HOSTEL = "hostel"
    AIRBNB = "airbnb"
    BOUTIQUE = "boutique"


class Accommodation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    destination_id: str
    name: str
    type: AccommodationType = AccommodationType.HOTEL
    price_per_night: float = Field(ge=0)
    rating: Optional[float] = None
    address: str = ""
    amenities: List[str] = []
