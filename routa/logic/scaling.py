# routa/logic/scaling.py

from routa.logic.budget import require_positive
from routa.models.plan import TravelPlan


def scale_for_party(plan: TravelPlan, party_size: int) -> TravelPlan:
    """
    Re-derive a plan's whole-trip budget for a party of `party_size` people.

    Only the top-level budget is multiplied. The day plans, including their meal
    and per-day estimated costs, are carried over as generated for one person.
    """
    require_positive("party_size", party_size)
    if party_size == 1:
        return plan

    return plan.model_copy(update={"total_budget": plan.total_budget.scaled(party_size)})
