from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

MAX_TRIP_DAYS = 30


class BudgetTier(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"


class TravelerType(str, Enum):
    SINGLE = "single"
    COUPLE = "couple"
    FAMILY = "family"


class Difficulty(str, Enum):
    EASY = "Easy"
    MODERATE = "Moderate"
    CHALLENGING = "Challenging"


# --- Trip Generation ---

class TripRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    destination: str = Field(min_length=1)
    days: int = Field(ge=1, le=MAX_TRIP_DAYS)
    month: str
    interests: str = Field(min_length=1)
    budget: BudgetTier
    travelers: TravelerType

    @field_validator("month", mode="before")
    @classmethod
    def normalize_month(cls, value):
        if isinstance(value, str):
            for month in MONTHS:
                if month.lower() == value.strip().lower():
                    return month
        raise ValueError("month must be one of the twelve month names")


class TripPlan(TripRequest):
    """
    A generated plan. The itinerary text is kept exactly as the model wrote it.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=False)

    itinerary: str


class ApiTestResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    response: Optional[str] = None
    error: Optional[str] = None
    timestamp: str


# --- Saved Trips ---

class TripCreate(TripPlan):
    title: Optional[str] = None


class TripCreated(BaseModel):
    id: str


class Trip(BaseModel):
    id: str
    user_id: str
    title: str
    destination: str
    days: int
    month: str
    interests: str
    itinerary: str
    budget: Optional[BudgetTier] = None
    travelers: Optional[TravelerType] = None
    created_at: datetime
    highlights: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    difficulty: Optional[Difficulty] = None
    estimated_budget: Optional[str] = None


class TripStats(BaseModel):
    total_trips: int
    total_days: int
    unique_destinations: int
    latest_destination: Optional[str] = None


class SetupStatus(BaseModel):
    is_configured: bool
    missing_vars: List[str]
