"""Static fallback data served when live providers are unavailable."""
from __future__ import annotations

from types import MappingProxyType
from typing import Tuple

from budget_trip.schemas import Attraction, HotelOption, TransportOption, WeatherInfo

FALLBACK_WEATHER = WeatherInfo(
    condition="Pleasant",
    temperature=26,
    icon="🌤️",
    advice="Ideal weather conditions for all activities. Enjoy your trip!",
)

FALLBACK_TRANSPORT: Tuple[TransportOption, ...] = (
    TransportOption(id="flight-1", mode="flight", name="IndiGo Airlines", cost=4500, duration="2h 15m",
                    departure_time="06:30", arrival_time="08:45", comfort="Standard"),
    TransportOption(id="flight-2", mode="flight", name="Air India Express", cost=5200, duration="2h 30m",
                    departure_time="10:00", arrival_time="12:30", comfort="Premium"),
    TransportOption(id="train-1", mode="train", name="Rajdhani Express", cost=1800, duration="8h 30m",
                    departure_time="16:00", arrival_time="00:30", comfort="Standard"),
    TransportOption(id="train-2", mode="train", name="Shatabdi Express", cost=1200, duration="6h 45m",
                    departure_time="06:00", arrival_time="12:45", comfort="Standard"),
    TransportOption(id="bus-1", mode="bus", name="VRL Travels Volvo", cost=800, duration="10h 00m",
                    departure_time="21:00", arrival_time="07:00", comfort="Standard"),
    TransportOption(id="bus-2", mode="bus", name="Orange Travels", cost=600, duration="12h 00m",
                    departure_time="20:00", arrival_time="08:00", comfort="Basic"),
)

FALLBACK_HOTELS: Tuple[HotelOption, ...] = (
    HotelOption(id="hotel-1", name="The Grand Heritage", price_per_night=4500, rating=4.5,
                distance="0.5 km from center", amenities=["WiFi", "Breakfast", "Pool", "Spa"],
                image="https://images.unsplash.com/photo-1566073771259-6a8506099945?w=400"),
    HotelOption(id="hotel-2", name="City Comfort Inn", price_per_night=2200, rating=4.0,
                distance="1.2 km from center", amenities=["WiFi", "Breakfast", "Parking"],
                image="https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?w=400"),
    HotelOption(id="hotel-3", name="Budget Stay Plus", price_per_night=1200, rating=3.5,
                distance="2.5 km from center", amenities=["WiFi", "AC", "TV"],
                image="https://images.unsplash.com/photo-1590490360182-c33d57733427?w=400"),
    HotelOption(id="hotel-4", name="Backpacker Hostel", price_per_night=600, rating=3.2,
                distance="3 km from center", amenities=["WiFi", "Shared Kitchen"],
                image="https://images.unsplash.com/photo-1555854877-bab0e564b8d5?w=400"),
)

FALLBACK_ATTRACTIONS: Tuple[Attraction, ...] = (
    Attraction(id="attr-1", name="Historic Fort & Palace", type="attraction",
               description="A magnificent 16th-century fort with stunning architecture and panoramic city views.",
               image="https://images.unsplash.com/photo-1524492412937-b28074a5d7da?w=400"),
    Attraction(id="attr-2", name="Botanical Gardens", type="attraction",
               description="Sprawling gardens featuring exotic plants, scenic walking paths, and peaceful lakes.",
               image="https://images.unsplash.com/photo-1585320806297-9794b3e4eeae?w=400"),
    Attraction(id="attr-3", name="Cultural Museum", type="attraction",
               description="World-class museum showcasing local art, history, and cultural heritage.",
               image="https://images.unsplash.com/photo-1554907984-15263bfd63bd?w=400"),
)

FALLBACK_FOOD: Tuple[Attraction, ...] = (
    Attraction(id="food-1", name="Street Food Corner", type="food", category="Street Food",
               description="Famous for authentic local street food - chaats, samosas, and fresh juices.",
               image="https://images.unsplash.com/photo-1601050690597-df0568f70950?w=400"),
    Attraction(id="food-2", name="Spice Garden Restaurant", type="food", category="Restaurant",
               description="Fine dining with traditional recipes passed down through generations.",
               image="https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=400"),
    Attraction(id="food-3", name="Rooftop Café Vista", type="food", category="Restaurant",
               description="Trendy café with fusion cuisine and breathtaking sunset views.",
               image="https://images.unsplash.com/photo-1554118811-1e0d58224f24?w=400"),
)

FALLBACK_SHOPPING: Tuple[Attraction, ...] = (
    Attraction(id="shop-1", name="Heritage Bazaar", type="shopping",
               description="Traditional market famous for handicrafts, textiles, and authentic souvenirs.",
               image="https://images.unsplash.com/photo-1555529669-e69e7aa0ba9a?w=400"),
    Attraction(id="shop-2", name="City Central Mall", type="shopping",
               description="Modern shopping destination with international brands and entertainment.",
               image="https://images.unsplash.com/photo-1519567241046-7f570eee3ce6?w=400"),
)

FALLBACK_PLACES = MappingProxyType({
    "attraction": FALLBACK_ATTRACTIONS,
    "food": FALLBACK_FOOD,
    "shopping": FALLBACK_SHOPPING,
})
