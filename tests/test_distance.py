from types import MappingProxyType

import pytest

from budget_trip.engine.distance import DEFAULT_DISTANCES, DistanceEstimator, normalize_city


def test_known_pair_resolves_from_table():
    estimator = DistanceEstimator()
    assert estimator.distance("Mumbai", "Pune") == 150
    assert estimator.distance("Delhi", "Agra") == 230


def test_lookup_is_symmetric_for_one_sided_entries():
    estimator = DistanceEstimator({"alpha": {"beta": 420}})
    assert estimator.distance("alpha", "beta") == 420
    assert estimator.distance("beta", "alpha") == 420


def test_city_names_are_normalized_before_lookup():
    estimator = DistanceEstimator({"newdelhi": {"jaipur": 270}})
    assert normalize_city("  New   Delhi ") == "newdelhi"
    assert estimator.distance("  NEW Delhi", "jaipur ") == 270


def test_unknown_pair_uses_fallback():
    estimator = DistanceEstimator()
    assert estimator.distance("Atlantis", "El Dorado") == 800
    assert DistanceEstimator(fallback_km=500).distance("Atlantis", "Mumbai") == 500


def test_fallback_must_be_positive():
    with pytest.raises(ValueError):
        DistanceEstimator(fallback_km=0)


def test_default_table_is_read_only():
    assert isinstance(DEFAULT_DISTANCES, MappingProxyType)
    with pytest.raises(TypeError):
        DEFAULT_DISTANCES["mumbai"]["delhi"] = 1  # type: ignore[index]
