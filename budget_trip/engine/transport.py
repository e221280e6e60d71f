"""Transport ranking by user preference under a budget cap."""
from __future__ import annotations

import re
from typing import Callable, Dict, List, Sequence

from budget_trip.config import get_logger
from budget_trip.schemas import Preference, TransportOption

logger = get_logger(__name__)

# Share of the total budget a recommended transport option may consume.
TRANSPORT_BUDGET_SHARE = 0.4

_DURATION_RE = re.compile(r"(\d+)h\s*(\d+)?m?")

RECOMMENDATION_REASONS: Dict[Preference, str] = {
    Preference.CHEAPEST: "Recommended for lowest cost within your budget",
    Preference.FASTEST: "Recommended for quickest travel time",
    Preference.BALANCED: "Best balance of cost and travel time",
}


def duration_minutes(duration: str) -> int:
    """Parse ``"<h>h <m>m"`` into minutes; anything unparsable counts as 0."""
    match = _DURATION_RE.search(duration or "")
    if not match:
        logger.debug("Unparsable duration %r treated as 0 minutes", duration)
        return 0
    hours, minutes = match.groups()
    return int(hours) * 60 + int(minutes or 0)


def _by_cost(option: TransportOption) -> float:
    return option.cost


def _by_duration(option: TransportOption) -> float:
    return duration_minutes(option.duration)


def _by_balance(option: TransportOption) -> float:
    return option.cost * 0.6 + duration_minutes(option.duration) * 10


SORT_KEYS: Dict[Preference, Callable[[TransportOption], float]] = {
    Preference.CHEAPEST: _by_cost,
    Preference.FASTEST: _by_duration,
    Preference.BALANCED: _by_balance,
}


def rank_transport(
    options: Sequence[TransportOption],
    preference: Preference,
    budget: float,
) -> List[TransportOption]:
    if not options:
        return []

    ranked = sorted(options, key=SORT_KEYS[preference])
    candidate = ranked[0]
    cap = budget * TRANSPORT_BUDGET_SHARE
    affordable = candidate.cost <= cap

    if affordable:
        logger.info(
            "Recommending %s %s at %.2f for %s preference (cap %.2f)",
            candidate.mode.value,
            candidate.name,
            candidate.cost,
            preference.value,
            cap,
        )
    else:
        logger.info(
            "Top %s option %s costs %.2f, above transport cap %.2f; no recommendation",
            preference.value,
            candidate.name,
            candidate.cost,
            cap,
        )

    reason = RECOMMENDATION_REASONS[preference]
    result: List[TransportOption] = []
    for idx, option in enumerate(ranked):
        flagged = idx == 0 and affordable
        result.append(
            option.model_copy(update={"recommended": flagged, "reason": reason if flagged else None})
        )
    return result
