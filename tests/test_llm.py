from types import SimpleNamespace

from budget_trip import llm
from budget_trip.catalog import FALLBACK_HOTELS, FALLBACK_TRANSPORT
from budget_trip.config import Settings
from budget_trip.planner import assemble_plan
from budget_trip.schemas import TravelInput


def _plan_dump() -> dict:
    travel_input = TravelInput(budget=15000, source="Mumbai", destination="Goa", preference="cheapest")
    return assemble_plan(travel_input, FALLBACK_TRANSPORT, FALLBACK_HOTELS).model_dump(mode="json")


def test_build_prompt_describes_committed_choices():
    prompt = llm.build_prompt(_plan_dump())
    assert "Mumbai -> Goa, 3 day(s), preference: cheapest" in prompt
    assert "Recommended transport: bus Orange Travels (600.0, 12h 00m)" in prompt
    assert "Best value hotel: Backpacker Hostel" in prompt
    assert "Weather: Pleasant" in prompt


def test_call_llm_is_skipped_without_key():
    settings = Settings(allowed_origins=["*"])
    assert llm.call_llm(_plan_dump(), settings) == {"llm": "skipped", "reason": "missing_openai_client"}


def test_call_llm_returns_model_json(monkeypatch):
    captured = {}

    class FakeOpenAI:
        def __init__(self, api_key):
            captured["api_key"] = api_key
            self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

        def _create(self, **kwargs):
            captured["kwargs"] = kwargs
            content = '{"summary": "Cheap and cheerful.", "tips": ["Book early"]}'
            return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])

    monkeypatch.setattr(llm, "OpenAI", FakeOpenAI)
    settings = Settings(allowed_origins=["*"], openai_api_key="sk-test", llm_model="test-model")

    result = llm.call_llm(_plan_dump(), settings)

    assert result == {"llm": "ok", "model": "test-model", "summary": "Cheap and cheerful.", "tips": ["Book early"]}
    assert captured["api_key"] == "sk-test"
    assert captured["kwargs"]["response_format"] == {"type": "json_object"}


def test_call_llm_reports_errors(monkeypatch):
    class BrokenOpenAI:
        def __init__(self, api_key):
            self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

        def _create(self, **kwargs):
            raise RuntimeError("network unreachable")

    monkeypatch.setattr(llm, "OpenAI", BrokenOpenAI)
    settings = Settings(allowed_origins=["*"], openai_api_key="sk-test")

    result = llm.call_llm(_plan_dump(), settings)

    assert result["llm"] == "error"
