"""Approximate road/air distances between supported cities."""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping

FALLBACK_DISTANCE_KM = 800

_RAW_DISTANCES = {
    "mumbai": {"delhi": 1400, "bangalore": 980, "chennai": 1340, "kolkata": 1990, "hyderabad": 710, "pune": 150, "jaipur": 1150, "goa": 590, "ahmedabad": 530, "kerala": 1100, "agra": 1200, "varanasi": 1500, "udaipur": 650, "manali": 2000},
    "delhi": {"mumbai": 1400, "bangalore": 2150, "chennai": 2180, "kolkata": 1500, "hyderabad": 1550, "pune": 1450, "jaipur": 280, "goa": 1900, "ahmedabad": 940, "kerala": 2700, "agra": 230, "varanasi": 820, "udaipur": 660, "manali": 550},
    "bangalore": {"mumbai": 980, "delhi": 2150, "chennai": 350, "kolkata": 1880, "hyderabad": 570, "pune": 840, "jaipur": 1920, "goa": 560, "ahmedabad": 1500, "kerala": 500, "agra": 1950, "varanasi": 1900, "udaipur": 1400, "manali": 2700},
    "chennai": {"mumbai": 1340, "delhi": 2180, "bangalore": 350, "kolkata": 1670, "hyderabad": 630, "pune": 1180, "jaipur": 1980, "goa": 860, "ahmedabad": 1850, "kerala": 700, "agra": 2000, "varanasi": 1800, "udaipur": 1700, "manali": 2800},
    "kolkata": {"mumbai": 1990, "delhi": 1500, "bangalore": 1880, "chennai": 1670, "hyderabad": 1500, "pune": 1880, "jaipur": 1500, "goa": 2000, "ahmedabad": 1900, "kerala": 2200, "agra": 1300, "varanasi": 680, "udaipur": 1600, "manali": 1900},
    "hyderabad": {"mumbai": 710, "delhi": 1550, "bangalore": 570, "chennai": 630, "kolkata": 1500, "pune": 560, "jaipur": 1350, "goa": 580, "ahmedabad": 1100, "kerala": 900, "agra": 1400, "varanasi": 1200, "udaipur": 1000, "manali": 2100},
    "pune": {"mumbai": 150, "delhi": 1450, "bangalore": 840, "chennai": 1180, "kolkata": 1880, "hyderabad": 560, "jaipur": 1150, "goa": 450, "ahmedabad": 660, "kerala": 980, "agra": 1250, "varanasi": 1400, "udaipur": 750, "manali": 2000},
    "jaipur": {"mumbai": 1150, "delhi": 280, "bangalore": 1920, "chennai": 1980, "kolkata": 1500, "hyderabad": 1350, "pune": 1150, "goa": 1600, "ahmedabad": 660, "kerala": 2400, "agra": 240, "varanasi": 800, "udaipur": 400, "manali": 750},
    "goa": {"mumbai": 590, "delhi": 1900, "bangalore": 560, "chennai": 860, "kolkata": 2000, "hyderabad": 580, "pune": 450, "jaipur": 1600, "ahmedabad": 1100, "kerala": 450, "agra": 1700, "varanasi": 1800, "udaipur": 1100, "manali": 2400},
    "ahmedabad": {"mumbai": 530, "delhi": 940, "bangalore": 1500, "chennai": 1850, "kolkata": 1900, "hyderabad": 1100, "pune": 660, "jaipur": 660, "goa": 1100, "kerala": 1700, "agra": 750, "varanasi": 1200, "udaipur": 260, "manali": 1400},
    "kerala": {"mumbai": 1100, "delhi": 2700, "bangalore": 500, "chennai": 700, "kolkata": 2200, "hyderabad": 900, "pune": 980, "jaipur": 2400, "goa": 450, "ahmedabad": 1700, "agra": 2500, "varanasi": 2300, "udaipur": 1800, "manali": 3200},
    "agra": {"mumbai": 1200, "delhi": 230, "bangalore": 1950, "chennai": 2000, "kolkata": 1300, "hyderabad": 1400, "pune": 1250, "jaipur": 240, "goa": 1700, "ahmedabad": 750, "kerala": 2500, "varanasi": 600, "udaipur": 480, "manali": 700},
    "varanasi": {"mumbai": 1500, "delhi": 820, "bangalore": 1900, "chennai": 1800, "kolkata": 680, "hyderabad": 1200, "pune": 1400, "jaipur": 800, "goa": 1800, "ahmedabad": 1200, "kerala": 2300, "agra": 600, "udaipur": 1000, "manali": 1300},
    "udaipur": {"mumbai": 650, "delhi": 660, "bangalore": 1400, "chennai": 1700, "kolkata": 1600, "hyderabad": 1000, "pune": 750, "jaipur": 400, "goa": 1100, "ahmedabad": 260, "kerala": 1800, "agra": 480, "varanasi": 1000, "manali": 1100},
    "manali": {"mumbai": 2000, "delhi": 550, "bangalore": 2700, "chennai": 2800, "kolkata": 1900, "hyderabad": 2100, "pune": 2000, "jaipur": 750, "goa": 2400, "ahmedabad": 1400, "kerala": 3200, "agra": 700, "varanasi": 1300, "udaipur": 1100},
}

DEFAULT_DISTANCES: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {city: MappingProxyType(dict(row)) for city, row in _RAW_DISTANCES.items()}
)


def normalize_city(city: str) -> str:
    return re.sub(r"\s+", "", city.strip().casefold())


class DistanceEstimator:
    """Resolve a city pair to kilometres using a read-only lookup table.

    The table is consulted in both directions, so a one-sided entry is enough.
    Pairs missing from the table resolve to ``fallback_km``.
    """

    def __init__(
        self,
        table: Mapping[str, Mapping[str, int]] = DEFAULT_DISTANCES,
        fallback_km: int = FALLBACK_DISTANCE_KM,
    ):
        if fallback_km <= 0:
            raise ValueError("fallback_km must be positive")
        self._table = table
        self.fallback_km = fallback_km

    def distance(self, source: str, destination: str) -> int:
        src, dest = normalize_city(source), normalize_city(destination)
        for a, b in ((src, dest), (dest, src)):
            km = self._table.get(a, {}).get(b)
            if km and km > 0:
                return km
        return self.fallback_km
