from typing import List, Optional

from pydantic import BaseModel, Field

from routa.models.catalog import Destination
from routa.models.plan import Budget, BudgetTier, TravelPlan

# --- Route generation ---

class BudgetEstimateRequest(BaseModel):
    budget_tier: BudgetTier = BudgetTier.STANDARD
    duration: int = 3
    number_of_people: int = 1


class BudgetEstimate(BaseModel):
    budget_tier: BudgetTier
    duration: int
    number_of_people: int
    budget: Budget
    daily_per_person: float


class RouteRequest(BaseModel):
    destination_id: str
    budget_tier: BudgetTier = BudgetTier.STANDARD
    duration: int = 3
    number_of_people: int = 1


class ScaleRequest(BaseModel):
    plan: TravelPlan
    number_of_people: int


class RouteOptions(BaseModel):
    durations: List[int]
    default_duration: int
    budget_tiers: List[BudgetTier]

# --- Comparison ---

class DestinationComparison(BaseModel):
    left: Destination
    right: Destination
    cheaper_id: Optional[str] = None
    better_rated_id: Optional[str] = None
    shared_travel_styles: List[str] = Field(default_factory=list)
    shared_best_for: List[str] = Field(default_factory=list)
    left_top_attractions: List[str] = Field(default_factory=list)
    right_top_attractions: List[str] = Field(default_factory=list)
    alternatives: List[Destination] = Field(default_factory=list)
