import random

from budget_trip.engine.distance import DistanceEstimator
from budget_trip.engine.transport import duration_minutes
from budget_trip.schemas import TransportMode
from budget_trip.tools.candidates import CandidateGenerator, add_minutes, format_duration


def _generator(seed: int = 7) -> CandidateGenerator:
    return CandidateGenerator(rng=random.Random(seed))


def _modes(options):
    return {option.mode for option in options}


def test_clock_helpers():
    assert format_duration(135) == "2h 15m"
    assert format_duration(600) == "10h 0m"
    assert add_minutes("06:30", 135) == "08:45"
    assert add_minutes("23:30", 90) == "01:00"


def test_short_route_has_no_flights():
    options = _generator().transport("Mumbai", "Pune")
    assert _modes(options) == {TransportMode.TRAIN, TransportMode.BUS}


def test_long_route_is_flights_only():
    options = _generator().transport("Kerala", "Manali")
    assert _modes(options) == {TransportMode.FLIGHT}


def test_mid_range_route_offers_every_mode():
    options = _generator().transport("Mumbai", "Goa")
    assert _modes(options) == {TransportMode.FLIGHT, TransportMode.TRAIN, TransportMode.BUS}


def test_candidates_are_well_formed():
    for seed in range(5):
        options = _generator(seed).transport("Delhi", "Jaipur")
        for mode in TransportMode:
            per_mode = [option for option in options if option.mode is mode]
            assert len(per_mode) <= 2
            assert [option.id for option in per_mode] == [f"{mode.value}-{i}" for i in range(1, len(per_mode) + 1)]
        for option in options:
            minutes = duration_minutes(option.duration)
            assert minutes > 0
            assert option.arrival_time == add_minutes(option.departure_time, minutes)
            assert option.cost > 0
            assert not option.recommended


def test_seeded_generation_is_reproducible():
    first = _generator(42).transport("Chennai", "Bangalore")
    second = _generator(42).transport("Chennai", "Bangalore")
    assert [o.model_dump() for o in first] == [o.model_dump() for o in second]


def test_route_uses_estimator():
    generator = CandidateGenerator(DistanceEstimator({"x": {"y": 50}}), random.Random(1))
    route = generator.route("X", "Y")
    assert route.distance_km == 50
    assert _modes(generator.transport("X", "Y")) == {TransportMode.BUS}
