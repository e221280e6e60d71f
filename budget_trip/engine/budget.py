"""Budget breakdown for a committed transport and hotel choice."""
from __future__ import annotations

import math

from budget_trip.config import get_logger
from budget_trip.schemas import BudgetBreakdown, TravelInput

logger = get_logger(__name__)

# Ceiling on the per-day discretionary spend estimate.
DAILY_EXPENSE_CAP = 1500.0
# Float noise, relative to the budget, tolerated when the daily allowance absorbs the remainder.
REMAINING_REL_TOL = 1e-9


def allocate_budget(
    travel_input: TravelInput,
    transport_cost: float,
    hotel_per_night: float,
    days: int,
) -> BudgetBreakdown:
    """Split the budget into transport, hotel and daily spend.

    ``daily_expense`` goes negative when transport and hotel alone exceed the
    budget. ``within_budget`` reflects the unclamped remainder while the
    returned ``remaining`` never drops below zero. A remainder within
    rounding noise of zero counts as exactly zero.
    """
    budget = travel_input.budget
    hotel_total = hotel_per_night * days
    daily_expense = min(DAILY_EXPENSE_CAP, (budget - transport_cost - hotel_total) / days)
    total_estimated = transport_cost + hotel_total + daily_expense * days
    remaining = budget - total_estimated
    if math.isclose(remaining, 0.0, abs_tol=budget * REMAINING_REL_TOL):
        remaining = 0.0
    utilization = max(0.0, min(100.0, total_estimated / budget * 100))

    logger.info(
        "Budget %.2f over %d day(s): transport %.2f, hotel %.2f, daily %.2f, total %.2f (%.1f%%)",
        budget,
        days,
        transport_cost,
        hotel_total,
        daily_expense,
        total_estimated,
        utilization,
    )
    return BudgetBreakdown(
        transport=transport_cost,
        hotel=hotel_total,
        daily_expense=daily_expense,
        total_days=days,
        total_estimated=total_estimated,
        remaining=max(0.0, remaining),
        utilization_percent=utilization,
        within_budget=remaining >= 0,
    )
