# budget_trip/orchestrator.py
from __future__ import annotations

import asyncio
import random
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, TypeVar

from budget_trip.catalog import FALLBACK_HOTELS, FALLBACK_PLACES, FALLBACK_TRANSPORT, FALLBACK_WEATHER
from budget_trip.config import Settings, get_logger
from budget_trip.llm import call_llm
from budget_trip.planner import assemble_plan, validate_travel_input
from budget_trip.tools.candidates import CandidateGenerator
from budget_trip.tools.providers import GeoapifyClient, WeatherClient

logger = get_logger(__name__)

R = TypeVar("R")


def build_generator(settings: Settings) -> CandidateGenerator:
    return CandidateGenerator(rng=random.Random(settings.candidate_seed))


async def orchestrate_plan(
    payload: Mapping[str, Any],
    *,
    settings: Optional[Settings] = None,
    generator: Optional[CandidateGenerator] = None,
    weather_client: Optional[WeatherClient] = None,
    places_client: Optional[GeoapifyClient] = None,
    include_tips: bool = True,
) -> Dict[str, Any]:
    """Validate a request, gather candidates and live data, and assemble a plan.

    Weather, places and hotels are fetched concurrently. Any fetch that fails
    or comes back empty is replaced by the static catalog entry and reported
    under ``data_sources``; an empty generator result falls back to the catalog
    transport options the same way. Raises ``InvalidInputError`` for bad requests.
    """
    settings = settings or Settings.from_env()
    travel_input = validate_travel_input(payload, min_budget=settings.min_budget)
    generator = generator or build_generator(settings)
    weather_client = weather_client or WeatherClient(
        settings.openweathermap_api_key, timeout=settings.http_timeout
    )
    places_client = places_client or GeoapifyClient(
        settings.geoapify_api_key, timeout=settings.http_timeout, seed=settings.candidate_seed
    )

    source, destination = travel_input.source, travel_input.destination
    logger.info("Orchestration start: %s -> %s, budget=%s", source, destination, travel_input.budget)

    route = generator.route(source, destination)
    transport = generator.transport(source, destination)

    results = await asyncio.gather(
        weather_client.fetch(destination),
        places_client.places(destination, "attraction"),
        places_client.places(destination, "food"),
        places_client.places(destination, "shopping"),
        places_client.hotels(destination),
        return_exceptions=True,
    )
    weather_res, attractions_res, food_res, shopping_res, hotels_res = results

    data_sources: Dict[str, str] = {}
    transport, data_sources["transport"] = _or_fallback(
        "transport", transport, FALLBACK_TRANSPORT, "static_tables"
    )
    weather, data_sources["weather"] = _or_fallback("weather", weather_res, FALLBACK_WEATHER, "openweathermap")
    attractions, data_sources["attractions"] = _or_fallback(
        "attractions", attractions_res, FALLBACK_PLACES["attraction"], "geoapify"
    )
    food, data_sources["food"] = _or_fallback("food", food_res, FALLBACK_PLACES["food"], "geoapify")
    shopping, data_sources["shopping"] = _or_fallback(
        "shopping", shopping_res, FALLBACK_PLACES["shopping"], "geoapify"
    )
    hotels, data_sources["hotels"] = _or_fallback("hotels", hotels_res, FALLBACK_HOTELS, "geoapify")

    plan = assemble_plan(
        travel_input,
        transport,
        hotels,
        weather=weather,
        attractions=attractions,
        food=food,
        shopping=shopping,
    )
    plan_dump = plan.model_dump(mode="json")
    logger.info(
        "Plan ready: %d transport, %d hotel option(s); utilization %.1f%%",
        len(plan.transport),
        len(plan.hotels),
        plan.budget.utilization_percent,
    )

    response: Dict[str, Any] = {
        "plan": plan_dump,
        "route": route.model_dump(mode="json"),
        "data_sources": data_sources,
    }
    if include_tips:
        # The OpenAI client is synchronous; keep it off the event loop.
        response["travel_tips"] = await asyncio.to_thread(call_llm, plan_dump, settings)
    return response


def _or_fallback(label: str, result: Any, fallback: R, live_source: str) -> Tuple[R, str]:
    if isinstance(result, BaseException):
        logger.warning("%s unavailable (%s); using fallback data", label.capitalize(), result)
        return fallback, "fallback"
    if isinstance(result, Sequence) and not result:
        logger.info("%s provider returned nothing; using fallback data", label.capitalize())
        return fallback, "fallback"
    return result, live_source

