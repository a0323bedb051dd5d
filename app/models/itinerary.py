from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class ActivityCategory(str, Enum):
    FOOD = "food"
    CULTURE = "culture"
    NATURE = "nature"
    SHOPPING = "shopping"
    GENERAL = "general"


class ActivityEntry(BaseModel):
    time: Optional[str] = None
    activity: str
    category: ActivityCategory = ActivityCategory.GENERAL


class DayEntry(BaseModel):
    day: int
    title: str
    activities: List[ActivityEntry] = Field(default_factory=list)


class ParseItineraryRequest(BaseModel):
    itinerary: str


class ParseItineraryResponse(BaseModel):
    parsed: bool
    days: List[DayEntry]
