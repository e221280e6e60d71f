from budget_trip.engine.hotels import rank_hotels, value_score
from budget_trip.schemas import HotelOption


def _hotel(hotel_id: str, rating: float, price: float) -> HotelOption:
    return HotelOption(
        id=hotel_id,
        name=f"Hotel {hotel_id}",
        price_per_night=price,
        rating=rating,
        distance="1 km from center",
        amenities=["WiFi"],
    )


def _catalog():
    return [
        _hotel("grand", 4.5, 4500),
        _hotel("comfort", 4.0, 2200),
        _hotel("budget", 3.5, 1200),
        _hotel("hostel", 3.2, 600),
    ]


def test_affordable_hotels_are_kept_and_best_value_flagged():
    ranked = rank_hotels(_catalog(), budget=15000, days=3, committed_transport_cost=800)

    # cap: (15000 - 800) * 0.6 / 3 = 2840 per night
    assert [h.id for h in ranked] == ["hostel", "budget", "comfort"]
    assert ranked[0].best_value is True
    assert [h.best_value for h in ranked[1:]] == [False, False]


def test_order_is_descending_by_value_score():
    ranked = rank_hotels(_catalog(), budget=100000, days=2, committed_transport_cost=0)
    scores = [value_score(h) for h in ranked]
    assert scores == sorted(scores, reverse=True)
    assert len(ranked) == 4


def test_falls_back_to_top_four_when_fewer_than_two_affordable():
    hotels = _catalog() + [_hotel("palace", 5.0, 9000)]
    ranked = rank_hotels(hotels, budget=5000, days=3, committed_transport_cost=4500)

    # cap is 100 per night: nothing qualifies, so the four best by score remain
    assert [h.id for h in ranked] == ["hostel", "budget", "comfort", "grand"]
    assert sum(h.best_value for h in ranked) == 1
    assert ranked[0].best_value


def test_single_affordable_hotel_still_triggers_fallback():
    ranked = rank_hotels(_catalog(), budget=4000, days=2, committed_transport_cost=0)

    # cap 1200 per night: hostel and budget both qualify
    assert [h.id for h in ranked] == ["hostel", "budget"]

    ranked = rank_hotels(_catalog(), budget=3000, days=2, committed_transport_cost=0)
    # cap 900 per night: only the hostel qualifies
    assert len(ranked) == 4


def test_ties_flag_first_hotel_only():
    hotels = [_hotel("a", 4.0, 2000), _hotel("b", 4.0, 2000)]
    ranked = rank_hotels(hotels, budget=50000, days=1, committed_transport_cost=0)
    assert [h.best_value for h in ranked] == [True, False]


def test_empty_catalog_returns_empty_list():
    assert rank_hotels([], budget=15000, days=3, committed_transport_cost=800) == []


def test_ranking_is_deterministic_and_inputs_unchanged():
    hotels = _catalog()
    first = rank_hotels(hotels, 15000, 3, 800)
    second = rank_hotels(hotels, 15000, 3, 800)
    assert [h.model_dump() for h in first] == [h.model_dump() for h in second]
    assert not any(h.best_value for h in hotels)
