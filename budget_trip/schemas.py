from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class Preference(str, Enum):
    CHEAPEST = "cheapest"
    FASTEST = "fastest"
    BALANCED = "balanced"


class TransportMode(str, Enum):
    FLIGHT = "flight"
    TRAIN = "train"
    BUS = "bus"


class ComfortTier(str, Enum):
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"

    @property
    def level(self) -> int:
        return _COMFORT_LEVELS[self.value]

    def __lt__(self, other):  # type: ignore[override]
        if isinstance(other, ComfortTier):
            return self.level < other.level
        return NotImplemented

    def __le__(self, other):  # type: ignore[override]
        if isinstance(other, ComfortTier):
            return self.level <= other.level
        return NotImplemented

    def __gt__(self, other):  # type: ignore[override]
        if isinstance(other, ComfortTier):
            return self.level > other.level
        return NotImplemented

    def __ge__(self, other):  # type: ignore[override]
        if isinstance(other, ComfortTier):
            return self.level >= other.level
        return NotImplemented


_COMFORT_LEVELS = {"Basic": 0, "Standard": 1, "Premium": 2}

# ------- Request models -------
class TravelInput(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    budget: float = Field(..., gt=0, validation_alias=AliasChoices("budget", "budget_total"))
    source: str
    destination: str
    start_date: Optional[date] = Field(None, validation_alias=AliasChoices("start_date", "startDate"))
    end_date: Optional[date] = Field(None, validation_alias=AliasChoices("end_date", "endDate"))
    preference: Preference = Preference.BALANCED

    @field_validator("source", "destination")
    @classmethod
    def _city_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("city is required")
        return value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _blank_date_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _check_route_and_dates(self) -> "TravelInput":
        if self.source.casefold() == self.destination.casefold():
            raise ValueError("destination must be different from source")
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

# ------- Candidate models -------
class TransportOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    mode: TransportMode
    name: str
    cost: float = Field(..., gt=0)
    duration: str = Field(..., min_length=1)
    departure_time: str
    arrival_time: str
    comfort: ComfortTier = ComfortTier.STANDARD
    recommended: bool = False
    reason: Optional[str] = None

    @model_validator(mode="after")
    def _reason_matches_flag(self) -> "TransportOption":
        if self.recommended != bool(self.reason):
            raise ValueError("reason must be present exactly when the option is recommended")
        return self


class HotelOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    price_per_night: float = Field(..., gt=0)
    rating: float
    distance: str = ""
    amenities: List[str] = Field(default_factory=list)
    image: str = ""
    address: Optional[str] = None
    price_level: Optional[str] = None
    best_value: bool = False

# ------- Pass-through records -------
class WeatherInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    condition: str
    temperature: float
    icon: str
    advice: str
    description: Optional[str] = None
    humidity: Optional[float] = None
    wind_speed: Optional[float] = None


class Attraction(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    type: Literal["attraction", "food", "shopping"]
    category: Optional[str] = None
    image: str = ""
    rating: Optional[float] = None
    address: Optional[str] = None


class RouteInfo(BaseModel):
    source: str
    destination: str
    distance_km: int

# ------- Response models -------
class BudgetBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    transport: float
    hotel: float
    daily_expense: float
    total_days: int = Field(..., ge=1)
    total_estimated: float
    remaining: float = Field(..., ge=0)
    utilization_percent: float = Field(..., ge=0, le=100)
    within_budget: bool


class TravelPlan(BaseModel):
    input: TravelInput
    transport: List[TransportOption] = Field(default_factory=list)
    hotels: List[HotelOption] = Field(default_factory=list)
    attractions: List[Attraction] = Field(default_factory=list)
    food: List[Attraction] = Field(default_factory=list)
    shopping: List[Attraction] = Field(default_factory=list)
    weather: WeatherInfo
    budget: BudgetBreakdown
    unavailable: List[Literal["transport", "hotels"]] = Field(default_factory=list)
