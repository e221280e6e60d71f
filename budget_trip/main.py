from __future__ import annotations

from typing import Any, Dict, Literal

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from budget_trip.config import Settings, get_logger
from budget_trip.orchestrator import build_generator, orchestrate_plan
from budget_trip.planner import InvalidInputError
from budget_trip.tools.providers import GeoapifyClient, ProviderError, WeatherClient

logger = get_logger(__name__)

settings = Settings.from_env()

app = FastAPI(title="Budget Trip Planner API")

# Origins are scoped via BUDGET_TRIP_ALLOWED_ORIGINS; defaults to "*" for local UIs.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require(value: str | None, field: str) -> str:
    if not value or not value.strip():
        raise HTTPException(status_code=400, detail=f"{field} is required")
    return value.strip()


@app.post("/api/plan")
async def api_plan(payload: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
    """Primary endpoint: validate the trip form and return the assembled plan."""
    try:
        return await orchestrate_plan(payload, settings=settings)
    except InvalidInputError as exc:
        raise HTTPException(status_code=422, detail=exc.errors or str(exc)) from exc


@app.post("/api/transport")
async def api_transport(
    source: str | None = Body(None),
    destination: str | None = Body(None),
) -> Dict[str, Any]:
    source = _require(source, "source")
    destination = _require(destination, "destination")
    generator = build_generator(settings)
    options = generator.transport(source, destination)
    return {
        "options": [option.model_dump(mode="json") for option in options],
        "route": generator.route(source, destination).model_dump(mode="json"),
    }


@app.post("/api/hotels")
async def api_hotels(city: str | None = Body(None, embed=True)) -> Dict[str, Any]:
    city = _require(city, "city")
    client = GeoapifyClient(settings.geoapify_api_key, timeout=settings.http_timeout, seed=settings.candidate_seed)
    try:
        hotels = await client.hotels(city)
    except ProviderError as exc:
        logger.warning("Hotel lookup failed for %s: %s", city, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if not hotels:
        return {"hotels": [], "message": "No hotels found for this location", "source": "no_results"}
    return {"hotels": [hotel.model_dump(mode="json") for hotel in hotels], "source": "geoapify"}


@app.post("/api/weather")
async def api_weather(city: str | None = Body(None, embed=True)) -> Dict[str, Any]:
    city = _require(city, "city")
    client = WeatherClient(settings.openweathermap_api_key, timeout=settings.http_timeout)
    try:
        weather = await client.fetch(city)
    except ProviderError as exc:
        logger.warning("Weather lookup failed for %s: %s", city, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return weather.model_dump(mode="json")


@app.post("/api/places")
async def api_places(
    city: str | None = Body(None),
    type: Literal["attraction", "food", "shopping"] = Body("attraction"),
) -> Dict[str, Any]:
    city = _require(city, "city")
    client = GeoapifyClient(settings.geoapify_api_key, timeout=settings.http_timeout, seed=settings.candidate_seed)
    try:
        places = await client.places(city, type)
    except ProviderError as exc:
        logger.warning("Places lookup failed for %s (%s): %s", city, type, exc)
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    if not places:
        return {"places": [], "message": "No places found for this location", "source": "no_results"}
    return {"places": [place.model_dump(mode="json") for place in places], "source": "geoapify"}
