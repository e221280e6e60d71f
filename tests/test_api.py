from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from budget_trip import main
from budget_trip.config import Settings
from budget_trip.main import app
from budget_trip.planner import InvalidInputError
from budget_trip.tools.providers import GeoapifyClient


def _sample_payload() -> dict:
    return {
        "budget": 15000,
        "source": "Mumbai",
        "destination": "Goa",
        "startDate": "2025-12-01",
        "endDate": "2025-12-04",
        "preference": "balanced",
    }


def _no_keys(monkeypatch):
    monkeypatch.setattr(main, "settings", Settings(allowed_origins=["*"], candidate_seed=1))


def test_api_plan_endpoint(monkeypatch):
    client = TestClient(app)
    orchestrator = AsyncMock(return_value={"plan": {"transport": []}})
    monkeypatch.setattr("budget_trip.main.orchestrate_plan", orchestrator)

    response = client.post("/api/plan", json=_sample_payload())

    assert response.status_code == 200
    orchestrator.assert_awaited_once()
    assert orchestrator.await_args.args[0]["destination"] == "Goa"
    assert response.json() == {"plan": {"transport": []}}


def test_api_plan_rejects_invalid_input(monkeypatch):
    client = TestClient(app)
    errors = [{"loc": ["budget"], "msg": "Minimum budget is 1,000", "type": "min_budget"}]
    orchestrator = AsyncMock(side_effect=InvalidInputError("Minimum budget is 1,000", errors))
    monkeypatch.setattr("budget_trip.main.orchestrate_plan", orchestrator)

    response = client.post("/api/plan", json={**_sample_payload(), "budget": 100})

    assert response.status_code == 422
    assert response.json()["detail"] == errors


def test_api_plan_end_to_end_without_keys(monkeypatch):
    _no_keys(monkeypatch)
    client = TestClient(app)

    response = client.post("/api/plan", json=_sample_payload())

    assert response.status_code == 200
    body = response.json()
    assert body["route"]["distance_km"] == 590
    assert body["data_sources"]["weather"] == "fallback"
    assert body["data_sources"]["hotels"] == "fallback"
    assert body["travel_tips"]["llm"] == "skipped"
    assert sum(t["recommended"] for t in body["plan"]["transport"]) <= 1
    assert sum(h["best_value"] for h in body["plan"]["hotels"]) == 1


def test_api_transport_requires_cities():
    client = TestClient(app)
    response = client.post("/api/transport", json={"source": "Mumbai"})
    assert response.status_code == 400
    assert response.json()["detail"] == "destination is required"


def test_api_transport_returns_candidates(monkeypatch):
    _no_keys(monkeypatch)
    client = TestClient(app)

    response = client.post("/api/transport", json={"source": "Mumbai", "destination": "Pune"})

    assert response.status_code == 200
    body = response.json()
    assert body["route"]["distance_km"] == 150
    assert body["options"]
    assert {o["mode"] for o in body["options"]} <= {"train", "bus"}


def test_api_weather_without_key_is_bad_gateway(monkeypatch):
    _no_keys(monkeypatch)
    client = TestClient(app)

    response = client.post("/api/weather", json={"city": "Goa"})

    assert response.status_code == 502
    assert "OPENWEATHERMAP_API_KEY" in response.json()["detail"]


def test_api_hotels_reports_no_results(monkeypatch):
    _no_keys(monkeypatch)

    async def no_hotels(self, city):
        return []

    monkeypatch.setattr(GeoapifyClient, "hotels", no_hotels)
    client = TestClient(app)

    response = client.post("/api/hotels", json={"city": "Goa"})

    assert response.status_code == 200
    assert response.json() == {
        "hotels": [],
        "message": "No hotels found for this location",
        "source": "no_results",
    }


def test_api_places_requires_city():
    client = TestClient(app)
    response = client.post("/api/places", json={"type": "food"})
    assert response.status_code == 400
