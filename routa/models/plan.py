import datetime as dt
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from routa.models.catalog import Accommodation, Place, Restaurant


class BudgetTier(str, Enum):
    ECONOMY = "economy"
    STANDARD = "standard"
    LUXURY = "luxury"

    @property
    def display_name(self) -> str:
        return _TIER_LABELS[self][0]

    @property
    def accommodation_type(self) -> str:
        return _TIER_LABELS[self][1]


_TIER_LABELS = {
    BudgetTier.ECONOMY: ("Economy", "Hostel / budget hotel"),
    BudgetTier.STANDARD: ("Standard", "3-4 star hotel"),
    BudgetTier.LUXURY: ("Luxury", "5 star / boutique hotel"),
}


class Budget(BaseModel):
    """Trip cost envelope split into six categories. `total` is always derived."""

    model_config = ConfigDict(frozen=True)

    accommodation: float = Field(default=0, ge=0)
    food: float = Field(default=0, ge=0)
    transportation: float = Field(default=0, ge=0)
    activities: float = Field(default=0, ge=0)
    shopping: float = Field(default=0, ge=0)
    other: float = Field(default=0, ge=0)

    @computed_field
    @property
    def total(self) -> float:
        return (
            self.accommodation + self.food + self.transportation
            + self.activities + self.shopping + self.other
        )

    def scaled(self, factor: float) -> "Budget":
        return Budget(
            accommodation=self.accommodation * factor,
            food=self.food * factor,
            transportation=self.transportation * factor,
            activities=self.activities * factor,
            shopping=self.shopping * factor,
            other=self.other * factor,
        )


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class Meal(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: MealType
    restaurant: Restaurant
    estimated_cost: float = Field(ge=0)


class DayPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    day_number: int = Field(ge=1)
    date: Optional[dt.date] = None
    places: Tuple[Place, ...] = ()
    meals: Tuple[Meal, ...] = ()
    accommodation: Optional[Accommodation] = None
    estimated_cost: float = Field(ge=0)


class TravelPlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    destination_id: str
    budget_tier: BudgetTier
    duration: int = Field(ge=1)  # days
    total_budget: Budget
    daily_itinerary: Tuple[DayPlan, ...]
    created_at: dt.datetime

    @model_validator(mode="after")
    def _check_itinerary(self) -> "TravelPlan":
        if len(self.daily_itinerary) != self.duration:
            raise ValueError(
                f"daily_itinerary has {len(self.daily_itinerary)} days, expected {self.duration}"
            )
        day_numbers = [day.day_number for day in self.daily_itinerary]
        if day_numbers != list(range(1, self.duration + 1)):
            raise ValueError(f"day numbers must run 1..{self.duration}, got {day_numbers}")
        return self
