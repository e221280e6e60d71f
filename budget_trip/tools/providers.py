"""HTTP clients for weather, places and hotel data."""
from __future__ import annotations

import math
import random
from typing import Any, Dict, List, Literal, Optional, Tuple

import httpx

from budget_trip.config import get_logger
from budget_trip.schemas import Attraction, HotelOption, WeatherInfo

logger = get_logger(__name__)

PlaceKind = Literal["attraction", "food", "shopping"]


class ProviderError(RuntimeError):
    """Raised when an upstream data provider cannot serve a request."""


# (substrings, icon, advice) checked in order against the lower-cased condition.
_WEATHER_ADVICE: Tuple[Tuple[Tuple[str, ...], str, str], ...] = (
    (("clear", "sun"), "☀️", "Perfect weather for outdoor sightseeing! Carry sunscreen and stay hydrated."),
    (("cloud",), "⛅", "Great weather for exploring! Comfortable temperature for walking tours."),
    (("rain", "drizzle"), "🌧️", "Carry an umbrella. Good time to visit indoor attractions and museums."),
    (("thunder", "storm"), "⛈️", "Stay indoors if possible. Check local attractions for indoor options."),
    (("snow",), "❄️", "Bundle up warm! Great weather for winter activities."),
    (("mist", "fog"), "🌫️", "Low visibility expected. Take care while traveling."),
)


def weather_advice(condition: str) -> Tuple[str, str]:
    lowered = condition.lower()
    for needles, icon, advice in _WEATHER_ADVICE:
        if any(needle in lowered for needle in needles):
            return icon, advice
    return "🌤️", "Enjoy your trip!"


class WeatherClient:
    ENDPOINT = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, api_key: Optional[str], *, timeout: float = 10.0):
        self.api_key = api_key
        self.timeout = timeout

    async def fetch(self, city: str) -> WeatherInfo:
        if not self.api_key:
            raise ProviderError("OPENWEATHERMAP_API_KEY not configured")

        params = {"q": city, "appid": self.api_key, "units": "metric"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.ENDPOINT, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as exc:
            raise ProviderError(f"Failed to fetch weather data for {city}") from exc

        weather = (data.get("weather") or [{}])[0]
        main = data.get("main") or {}
        condition = weather.get("main") or "Unknown"
        icon, advice = weather_advice(condition)
        logger.info("Weather for %s: %s", city, condition)
        return WeatherInfo(
            condition=condition,
            description=weather.get("description") or "",
            temperature=round(main.get("temp") or 0),
            icon=icon,
            advice=advice,
            humidity=main.get("humidity"),
            wind_speed=(data.get("wind") or {}).get("speed"),
        )


_PLACE_CATEGORIES: Dict[str, str] = {
    "attraction": "tourism.sights,tourism.attraction",
    "food": "catering.restaurant,catering.cafe",
    "shopping": "commercial.shopping_mall,commercial.marketplace",
}

_PLACE_IMAGES: Dict[str, Tuple[str, ...]] = {
    "attraction": (
        "https://images.unsplash.com/photo-1524492412937-b28074a5d7da?w=400",
        "https://images.unsplash.com/photo-1587474260584-136574528ed5?w=400",
        "https://images.unsplash.com/photo-1599661046289-e31897846e41?w=400",
        "https://images.unsplash.com/photo-1564507592333-c60657eea523?w=400",
        "https://images.unsplash.com/photo-1477587458883-47145ed94245?w=400",
        "https://images.unsplash.com/photo-1602216056096-3b40cc0c9944?w=400",
    ),
    "food": (
        "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=400",
        "https://images.unsplash.com/photo-1555396273-367ea4eb4db5?w=400",
        "https://images.unsplash.com/photo-1552566626-52f8b828add9?w=400",
        "https://images.unsplash.com/photo-1414235077428-338989a2e8c0?w=400",
        "https://images.unsplash.com/photo-1559339352-11d035aa65de?w=400",
        "https://images.unsplash.com/photo-1596797038530-2c107229654b?w=400",
    ),
    "shopping": (
        "https://images.unsplash.com/photo-1441986300917-64674bd600d8?w=400",
        "https://images.unsplash.com/photo-1555529669-e69e7aa0ba9a?w=400",
        "https://images.unsplash.com/photo-1472851294608-062f824d29cc?w=400",
        "https://images.unsplash.com/photo-1534452203293-494d7ddbf7e0?w=400",
        "https://images.unsplash.com/photo-1583922606661-0822ed0bd916?w=400",
        "https://images.unsplash.com/photo-1607082349566-187342175e2f?w=400",
    ),
}

_HOTEL_IMAGES: Tuple[str, ...] = (
    "https://images.unsplash.com/photo-1566073771259-6a8506099945?w=400&q=80",
    "https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?w=400&q=80",
    "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?w=400&q=80",
    "https://images.unsplash.com/photo-1582719478250-c89cae4dc85b?w=400&q=80",
    "https://images.unsplash.com/photo-1542314831-068cd1dbfeeb?w=400&q=80",
    "https://images.unsplash.com/photo-1571896349842-33c89424de2d?w=400&q=80",
    "https://images.unsplash.com/photo-1445019980597-93fa8acb246c?w=400&q=80",
    "https://images.unsplash.com/photo-1564507592333-c60657eea523?w=400&q=80",
)

_PRICE_LEVELS = ("Free", "Budget", "Moderate", "Expensive", "Luxury")


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    radius = 6371.0
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return radius * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class GeoapifyClient:
    """Geocoding plus nearby-search for places and hotels.

    Ratings and prices that Geoapify does not expose are estimated from a
    random source derived per call from ``seed`` and the lookup.
    """

    GEOCODE_ENDPOINT = "https://api.geoapify.com/v1/geocode/search"
    PLACES_ENDPOINT = "https://api.geoapify.com/v2/places"
    SEARCH_RADIUS_M = 10000

    def __init__(
        self,
        api_key: Optional[str],
        *,
        timeout: float = 10.0,
        seed: Optional[int] = None,
        country: str = "India",
    ):
        self.api_key = api_key
        self.timeout = timeout
        self.seed = seed
        self.country = country

    def _rng(self, *scope: str) -> random.Random:
        if self.seed is None:
            return random.Random()
        return random.Random(":".join([str(self.seed), *scope]))

    async def geocode(self, city: str) -> Optional[Tuple[float, float]]:
        data = await self._get(
            self.GEOCODE_ENDPOINT,
            {"text": f"{city}, {self.country}", "format": "json"},
        )
        results = data.get("results") or []
        if not results:
            logger.warning("Geoapify could not geocode %s", city)
            return None
        return float(results[0]["lat"]), float(results[0]["lon"])

    async def places(self, city: str, kind: PlaceKind = "attraction") -> List[Attraction]:
        features = await self._nearby(city, _PLACE_CATEGORIES[kind], limit=10)
        rng = self._rng(kind, city)
        images = _PLACE_IMAGES[kind]
        places: List[Attraction] = []
        for idx, feature in enumerate(features[:6]):
            props = feature.get("properties") or {}
            raw = (props.get("datasource") or {}).get("raw") or {}
            address = props.get("formatted") or props.get("address_line1")
            places.append(
                Attraction(
                    id=f"{kind}-{props.get('place_id') or idx}",
                    name=props.get("name") or f"{kind.capitalize()} in {city}",
                    description=address or f"Popular {kind} in {city}",
                    type=kind,
                    category=_food_category(props.get("categories") or []) if kind == "food" else None,
                    image=images[idx % len(images)],
                    rating=raw.get("rating") or 3.5 + rng.random() * 1.5,
                    address=address,
                )
            )
        named = [place for place in places if " in " not in place.name]
        logger.info("Geoapify returned %d %s place(s) for %s", len(places), kind, city)
        return named or places

    async def hotels(self, city: str) -> List[HotelOption]:
        center = await self.geocode(city)
        if center is None:
            return []
        features = await self._around(center, "accommodation.hotel", limit=20)
        rng = self._rng("hotels", city)

        hotels: List[HotelOption] = []
        for idx, feature in enumerate(features[:8]):
            props = feature.get("properties") or {}
            coords = (feature.get("geometry") or {}).get("coordinates") or [center[1], center[0]]
            raw = (props.get("datasource") or {}).get("raw") or {}
            rating = float(raw.get("stars") or 3 + rng.random() * 2)
            level = min(4, int(rating))
            price = round(1500 + level * 1500 + rating * 200 + rng.random() * 500)

            amenities = ["WiFi"]
            if rating >= 4:
                amenities.append("Breakfast")
            if level >= 3:
                amenities.extend(["Pool", "Spa"])
            if level >= 2:
                amenities.append("Parking")
            if rating >= 4.5:
                amenities.append("Gym")

            km = haversine_km(center[0], center[1], coords[1], coords[0])
            hotels.append(
                HotelOption(
                    id=f"hotel-{props.get('place_id') or idx}",
                    name=props.get("name") or f"Hotel in {city}",
                    price_per_night=price,
                    rating=round(rating, 1),
                    distance=f"{km:.1f} km from center",
                    amenities=amenities[:4],
                    image=_HOTEL_IMAGES[idx % len(_HOTEL_IMAGES)],
                    address=props.get("formatted") or props.get("address_line1") or f"{city}, {self.country}",
                    price_level=_PRICE_LEVELS[level],
                )
            )

        named = [hotel for hotel in hotels if not hotel.name.startswith("Hotel in")]
        final = named or hotels
        logger.info("Geoapify returned %d hotel(s) for %s", len(final), city)
        return sorted(final, key=lambda hotel: hotel.rating, reverse=True)

    async def _nearby(self, city: str, categories: str, *, limit: int) -> List[Dict[str, Any]]:
        center = await self.geocode(city)
        if center is None:
            return []
        return await self._around(center, categories, limit=limit)

    async def _around(self, center: Tuple[float, float], categories: str, *, limit: int) -> List[Dict[str, Any]]:
        lat, lon = center
        data = await self._get(
            self.PLACES_ENDPOINT,
            {
                "categories": categories,
                "filter": f"circle:{lon},{lat},{self.SEARCH_RADIUS_M}",
                "limit": limit,
            },
        )
        return list(data.get("features") or [])

    async def _get(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        if not self.api_key:
            raise ProviderError("GEOAPIFY_API_KEY not configured")
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params={**params, "apiKey": self.api_key})
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as exc:
            raise ProviderError(f"Geoapify request to {url} failed") from exc


def _food_category(categories: List[str]) -> str:
    for needle, label in (("cafe", "Café"), ("bar", "Bar"), ("bakery", "Bakery")):
        if any(needle in category for category in categories):
            return label
    return "Restaurant"
