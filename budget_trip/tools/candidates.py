"""Static-table transport candidates for a route.

All randomness flows through the injected ``random.Random`` so a fixed seed
reproduces the same candidate list.
"""
from __future__ import annotations

import random
from typing import List, NamedTuple, Optional, Tuple

from budget_trip.config import get_logger
from budget_trip.engine.distance import DistanceEstimator
from budget_trip.schemas import ComfortTier, RouteInfo, TransportMode, TransportOption

logger = get_logger(__name__)


class Carrier(NamedTuple):
    name: str
    base_cost: float
    comfort: ComfortTier
    speed_kmh: float = 0.0


FLIGHT_CARRIERS: Tuple[Carrier, ...] = (
    Carrier("IndiGo", 3500, ComfortTier.STANDARD),
    Carrier("Air India", 4500, ComfortTier.PREMIUM),
    Carrier("SpiceJet", 3000, ComfortTier.STANDARD),
    Carrier("Vistara", 5000, ComfortTier.PREMIUM),
    Carrier("GoFirst", 2800, ComfortTier.BASIC),
)

TRAIN_SERVICES: Tuple[Carrier, ...] = (
    Carrier("Rajdhani Express", 1200, ComfortTier.PREMIUM, 80),
    Carrier("Shatabdi Express", 1000, ComfortTier.STANDARD, 90),
    Carrier("Duronto Express", 1100, ComfortTier.STANDARD, 85),
    Carrier("Garib Rath", 600, ComfortTier.BASIC, 70),
    Carrier("Superfast Express", 500, ComfortTier.STANDARD, 65),
)

BUS_OPERATORS: Tuple[Carrier, ...] = (
    Carrier("VRL Travels Volvo", 800, ComfortTier.PREMIUM, 55),
    Carrier("Orange Travels", 600, ComfortTier.STANDARD, 50),
    Carrier("SRS Travels", 550, ComfortTier.STANDARD, 50),
    Carrier("Neeta Tours", 700, ComfortTier.STANDARD, 55),
    Carrier("State Transport", 400, ComfortTier.BASIC, 45),
)

MIN_FLIGHT_KM = 300
TRAIN_RANGE_KM = (100, 2000)
MAX_BUS_KM = 1500


def format_duration(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60}m"


def add_minutes(clock: str, minutes: int) -> str:
    """Add minutes to an ``HH:MM`` time, wrapping past midnight."""
    hours, mins = (int(part) for part in clock.split(":"))
    total = hours * 60 + mins + minutes
    return f"{(total // 60) % 24:02d}:{total % 60:02d}"


class CandidateGenerator:
    def __init__(
        self,
        estimator: Optional[DistanceEstimator] = None,
        rng: Optional[random.Random] = None,
    ):
        self.estimator = estimator or DistanceEstimator()
        self.rng = rng or random.Random()

    def route(self, source: str, destination: str) -> RouteInfo:
        return RouteInfo(
            source=source,
            destination=destination,
            distance_km=self.estimator.distance(source, destination),
        )

    def transport(self, source: str, destination: str) -> List[TransportOption]:
        distance = self.estimator.distance(source, destination)
        options: List[TransportOption] = []

        if distance > MIN_FLIGHT_KM:
            for idx, carrier in enumerate(self._pick(FLIGHT_CARRIERS), start=1):
                minutes = int(distance / 800 * 60 + 45 + self.rng.random() * 30)
                cost = round(carrier.base_cost + distance * 2.5 + self.rng.random() * 500)
                options.append(self._option(TransportMode.FLIGHT, idx, carrier, cost, minutes))

        low, high = TRAIN_RANGE_KM
        if low <= distance <= high:
            for idx, carrier in enumerate(self._pick(TRAIN_SERVICES), start=1):
                minutes = int(distance / carrier.speed_kmh * 60)
                cost = round(carrier.base_cost + distance * 0.8 + self.rng.random() * 200)
                options.append(self._option(TransportMode.TRAIN, idx, carrier, cost, minutes))

        if distance < MAX_BUS_KM:
            for idx, carrier in enumerate(self._pick(BUS_OPERATORS), start=1):
                minutes = int(distance / carrier.speed_kmh * 60)
                cost = round(carrier.base_cost + distance * 0.5 + self.rng.random() * 100)
                options.append(self._option(TransportMode.BUS, idx, carrier, cost, minutes))

        logger.info(
            "Generated %d transport options for %s -> %s (%dkm)",
            len(options),
            source,
            destination,
            distance,
        )
        return options

    def _pick(self, roster: Tuple[Carrier, ...]) -> List[Carrier]:
        count = self.rng.randint(1, 2)
        return self.rng.sample(roster, count)

    def _departure(self) -> str:
        hours = self.rng.randint(5, 22)
        mins = "00" if self.rng.random() < 0.5 else "30"
        return f"{hours:02d}:{mins}"

    def _option(
        self,
        mode: TransportMode,
        idx: int,
        carrier: Carrier,
        cost: float,
        minutes: int,
    ) -> TransportOption:
        departure = self._departure()
        return TransportOption(
            id=f"{mode.value}-{idx}",
            mode=mode,
            name=carrier.name,
            cost=cost,
            duration=format_duration(minutes),
            departure_time=departure,
            arrival_time=add_minutes(departure, minutes),
            comfort=carrier.comfort,
        )
