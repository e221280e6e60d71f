"""Environment-driven settings shared by the service layer."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger with the project's stream handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    level = os.getenv("BUDGET_TRIP_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    logger.propagate = False
    return logger


@dataclass(frozen=True)
class Settings:
    allowed_origins: List[str]
    min_budget: float = 1000.0
    candidate_seed: Optional[int] = None
    http_timeout: float = 10.0
    llm_model: str = "gpt-4o-mini"
    openweathermap_api_key: Optional[str] = None
    geoapify_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        raw_origins = os.getenv("BUDGET_TRIP_ALLOWED_ORIGINS") or "*"
        origins = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]
        seed = os.getenv("BUDGET_TRIP_CANDIDATE_SEED")
        return cls(
            allowed_origins=origins or ["*"],
            min_budget=_float_env("BUDGET_TRIP_MIN_BUDGET", 1000.0),
            candidate_seed=int(seed) if seed and seed.strip().lstrip("-").isdigit() else None,
            http_timeout=_float_env("BUDGET_TRIP_HTTP_TIMEOUT", 10.0),
            llm_model=os.getenv("BUDGET_TRIP_LLM_MODEL") or "gpt-4o-mini",
            openweathermap_api_key=os.getenv("OPENWEATHERMAP_API_KEY") or None,
            geoapify_api_key=os.getenv("GEOAPIFY_API_KEY") or None,
            openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        )


def _float_env(key: str, default: float) -> float:
    value = os.getenv(key)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        get_logger(__name__).warning("Ignoring non-numeric %s=%r; using %s", key, value, default)
        return default
