"""Hotel value ranking against the budget left after transport."""
from __future__ import annotations

from typing import List, Sequence

from budget_trip.config import get_logger
from budget_trip.schemas import HotelOption

logger = get_logger(__name__)

# Share of the post-transport budget available for accommodation.
HOTEL_BUDGET_SHARE = 0.6
MIN_AFFORDABLE = 2
FALLBACK_COUNT = 4


def value_score(hotel: HotelOption) -> float:
    return hotel.rating / hotel.price_per_night


def rank_hotels(
    options: Sequence[HotelOption],
    budget: float,
    days: int,
    committed_transport_cost: float,
) -> List[HotelOption]:
    """Order hotels by rating per currency unit and flag the best value.

    Hotels priced above the nightly cap are dropped unless that would leave
    fewer than two, in which case the four best-scoring hotels are shown
    regardless of price. Callers guarantee ``days >= 1`` and positive prices.
    """
    if not options:
        return []

    remaining_budget = budget - committed_transport_cost
    max_per_night = remaining_budget * HOTEL_BUDGET_SHARE / days

    ranked = sorted(options, key=value_score, reverse=True)
    affordable = [hotel for hotel in ranked if hotel.price_per_night <= max_per_night]
    if len(affordable) >= MIN_AFFORDABLE:
        final = affordable
    else:
        final = ranked[:FALLBACK_COUNT]
        logger.info(
            "Only %d hotel(s) within %.2f per night; showing top %d by value instead",
            len(affordable),
            max_per_night,
            len(final),
        )

    best_idx = 0
    for idx, hotel in enumerate(final):
        if value_score(hotel) > value_score(final[best_idx]):
            best_idx = idx

    logger.debug(
        "Hotel cap %.2f/night over %d day(s); %d of %d kept, best value %s",
        max_per_night,
        days,
        len(final),
        len(options),
        final[best_idx].name,
    )
    return [
        hotel.model_copy(update={"best_value": idx == best_idx})
        for idx, hotel in enumerate(final)
    ]
