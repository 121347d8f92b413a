# routa/services/comparison.py

from typing import List, Optional, Sequence

from routa.core.errors import InvalidInput
from routa.models.catalog import Destination
from routa.models.schemas import DestinationComparison


def _cheaper(left: Destination, right: Destination) -> Optional[str]:
    if left.cost_of_living is None or right.cost_of_living is None:
        return None
    l_mid = left.cost_of_living.daily_midpoint
    r_mid = right.cost_of_living.daily_midpoint
    if l_mid == r_mid:
        return None
    return left.id if l_mid < r_mid else right.id


def _better_rated(left: Destination, right: Destination) -> Optional[str]:
    if left.rating is None or right.rating is None or left.rating == right.rating:
        return None
    return left.id if left.rating > right.rating else right.id


def top_attraction_names(destination: Destination, limit: int = 3) -> List[str]:
    # Listed attractions first; popular places stand in when there are none
    if destination.top_attractions:
        return [a.name for a in destination.top_attractions[:limit]]
    return [p.name for p in destination.popular_places[:limit]]


def _shared(a: List[str], b: List[str]) -> List[str]:
    others = {x.lower() for x in b}
    return [x for x in a if x.lower() in others]


def compare_destinations(
    left: Destination, right: Destination, available: Sequence[Destination] = ()
) -> DestinationComparison:
    """
    Side-by-side comparison of two destinations. `cheaper_id` and `better_rated_id`
    are None on a tie or when either side lacks the data. Alternatives are the
    remaining destinations, neither side included.
    """
    if left.id == right.id:
        raise InvalidInput("Cannot compare a destination with itself")

    selected = {left.id, right.id}
    return DestinationComparison(
        left=left,
        right=right,
        cheaper_id=_cheaper(left, right),
        better_rated_id=_better_rated(left, right),
        shared_travel_styles=_shared(left.travel_style, right.travel_style),
        shared_best_for=_shared(left.best_for, right.best_for),
        left_top_attractions=top_attraction_names(left),
        right_top_attractions=top_attraction_names(right),
        alternatives=[d for d in available if d.id not in selected],
    )
