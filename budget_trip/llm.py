# budget_trip/llm.py
import json
from typing import Any, Dict, Optional

from openai import OpenAI

from budget_trip.config import Settings, get_logger

logger = get_logger(__name__)

SYSTEM_PROMPT = """You are a budget travel assistant.
Use ONLY the provided plan data; never change prices or recommendations.
Return JSON with two keys:
  1) summary (one short paragraph)
  2) tips (array of 3-5 short strings)
If unsure, keep advice generic and mark it 'indicative'.
Return ONLY valid JSON.
"""

USER_TEMPLATE = """Trip: {source} -> {destination}, {days} day(s), preference: {preference}
Budget: {budget} (estimated spend {total}, {utilization:.0f}% used, within budget: {within})
Recommended transport: {transport}
Best value hotel: {hotel}
Weather: {weather}
"""


def _client(settings: Settings) -> Optional[OpenAI]:
    if not settings.openai_api_key:
        return None
    return OpenAI(api_key=settings.openai_api_key)


def _committed_label(items, flag: str, describe) -> str:
    for item in items:
        if item.get(flag):
            return describe(item)
    return "none"


def build_prompt(plan: Dict[str, Any]) -> str:
    travel_input = plan.get("input", {})
    budget = plan.get("budget", {})
    weather = plan.get("weather", {})
    return USER_TEMPLATE.format(
        source=travel_input.get("source"),
        destination=travel_input.get("destination"),
        days=budget.get("total_days"),
        preference=travel_input.get("preference"),
        budget=travel_input.get("budget"),
        total=round(budget.get("total_estimated") or 0, 2),
        utilization=budget.get("utilization_percent") or 0,
        within=budget.get("within_budget"),
        transport=_committed_label(
            plan.get("transport", []),
            "recommended",
            lambda t: f"{t['mode']} {t['name']} ({t['cost']}, {t['duration']})",
        ),
        hotel=_committed_label(
            plan.get("hotels", []),
            "best_value",
            lambda h: f"{h['name']} ({h['price_per_night']}/night, rating {h['rating']})",
        ),
        weather=f"{weather.get('condition')} {weather.get('temperature')}C",
    )


def call_llm(plan: Dict[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Ask the model for a short narrative over an already-computed plan."""
    settings = settings or Settings.from_env()
    client = _client(settings)
    if client is None:
        logger.info("Skipping LLM call; OPENAI_API_KEY not configured.")
        return {"llm": "skipped", "reason": "missing_openai_client"}

    try:
        resp = client.chat.completions.create(
            model=settings.llm_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_prompt(plan)},
            ],
            temperature=0.3,
            response_format={"type": "json_object"},
        )
        content = resp.choices[0].message.content or "{}"
        data = json.loads(content)
    except Exception as exc:
        logger.warning("LLM travel tips failed: %s", exc, exc_info=True)
        return {"llm": "error", "reason": str(exc)}

    if not isinstance(data, dict):
        return {"llm": "error", "reason": "non_object_response"}
    logger.info("LLM travel tips received with keys: %s", ", ".join(sorted(data.keys())))
    return {"llm": "ok", "model": settings.llm_model, **data}
