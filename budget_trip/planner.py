"""Deterministic travel plan assembly.

Everything here is synchronous and free of I/O: the same input and candidate
lists always produce the same plan.
"""
from __future__ import annotations

from datetime import date
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, TypeVar, Union

from pydantic import ValidationError

from budget_trip.catalog import FALLBACK_WEATHER
from budget_trip.config import get_logger
from budget_trip.engine.budget import allocate_budget
from budget_trip.engine.hotels import rank_hotels
from budget_trip.engine.transport import rank_transport
from budget_trip.schemas import (
    Attraction,
    HotelOption,
    TransportOption,
    TravelInput,
    TravelPlan,
    WeatherInfo,
)

logger = get_logger(__name__)

DEFAULT_TRIP_DAYS = 3

T = TypeVar("T", TransportOption, HotelOption)


class InvalidInputError(ValueError):
    """Raised when a travel request cannot be planned as submitted."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


def validate_travel_input(
    payload: Union[TravelInput, Mapping[str, Any]],
    *,
    min_budget: float = 0.0,
) -> TravelInput:
    if isinstance(payload, TravelInput):
        travel_input = payload
    else:
        try:
            travel_input = TravelInput.model_validate(dict(payload))
        except ValidationError as exc:
            errors = exc.errors(include_url=False, include_context=False, include_input=False)
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'request'}: {err['msg']}"
                for err in errors
            )
            raise InvalidInputError(f"Invalid travel request: {details}", errors) from exc

    if travel_input.budget < min_budget:
        raise InvalidInputError(
            f"Minimum budget is {min_budget:,.0f}",
            [{"loc": ["budget"], "msg": f"Minimum budget is {min_budget:,.0f}", "type": "min_budget"}],
        )
    return travel_input


def trip_days(start: Optional[date], end: Optional[date]) -> int:
    """Nights between the dates, at least 1; 3 when no valid range is given."""
    if not start or not end or end < start:
        return DEFAULT_TRIP_DAYS
    return max(1, (end - start).days)


def pick_committed(options: Sequence[T], flag: str) -> Optional[T]:
    """Return the option with ``flag`` set, else the first, else ``None``."""
    for option in options:
        if getattr(option, flag):
            return option
    return options[0] if options else None


def assemble_plan(
    travel_input: TravelInput,
    transport_candidates: Sequence[TransportOption],
    hotel_candidates: Sequence[HotelOption],
    *,
    weather: Optional[WeatherInfo] = None,
    attractions: Iterable[Attraction] = (),
    food: Iterable[Attraction] = (),
    shopping: Iterable[Attraction] = (),
) -> TravelPlan:
    days = trip_days(travel_input.start_date, travel_input.end_date)
    unavailable: List[str] = []

    logger.info(
        "Planning %s -> %s for %d day(s) on budget %.2f (%s)",
        travel_input.source,
        travel_input.destination,
        days,
        travel_input.budget,
        travel_input.preference.value,
    )

    # Hotel affordability depends on the settled transport cost, so transport goes first.
    transport = rank_transport(transport_candidates, travel_input.preference, travel_input.budget)
    committed_transport = pick_committed(transport, "recommended")
    if committed_transport is None:
        logger.warning("No transport options for %s -> %s", travel_input.source, travel_input.destination)
        unavailable.append("transport")
    transport_cost = committed_transport.cost if committed_transport else 0.0

    hotels = rank_hotels(hotel_candidates, travel_input.budget, days, transport_cost)
    committed_hotel = pick_committed(hotels, "best_value")
    if committed_hotel is None:
        logger.warning("No hotel options in %s", travel_input.destination)
        unavailable.append("hotels")
    hotel_per_night = committed_hotel.price_per_night if committed_hotel else 0.0

    budget = allocate_budget(travel_input, transport_cost, hotel_per_night, days)

    return TravelPlan(
        input=travel_input,
        transport=transport,
        hotels=hotels,
        attractions=list(attractions),
        food=list(food),
        shopping=list(shopping),
        weather=weather or FALLBACK_WEATHER,
        budget=budget,
        unavailable=unavailable,
    )
