# app/logic/enrichment.py

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional, Sequence, Tuple

from app.logic.itinerary_parser import BULLET_RE
from app.models.schemas import BudgetTier, Difficulty, TravelerType, TripPlan

MAX_HIGHLIGHTS = 4
MAX_TAGS = 6

# Case-sensitive on purpose: lines starting with "Visit ..." do not count
HIGHLIGHT_KEYWORDS = ("visit", "explore", "experience")
HIGHLIGHT_MIN_LENGTH = 10
HIGHLIGHT_MAX_LENGTH = 100

# Destination rules are mutually exclusive, first match wins
DESTINATION_TAG_RULES: Sequence[Tuple[Tuple[str, ...], Tuple[str, ...]]] = (
    (("japan", "tokyo"), ("Asia", "Culture", "Technology")),
    (("paris", "france"), ("Europe", "Romance", "Art")),
    (("new york",), ("Urban", "Shopping", "Entertainment")),
)

# Every trigger found in an interest word adds its tag
INTEREST_TAG_RULES: Sequence[Tuple[Tuple[str, ...], str]] = (
    (("food", "cuisine"), "Culinary"),
    (("history",), "Historical"),
    (("nature",), "Nature"),
    (("adventure",), "Adventure"),
    (("art",), "Art & Culture"),
)

BUDGET_TAGS: Dict[BudgetTier, Tuple[str, str]] = {
    BudgetTier.LOW: ("Budget-Friendly", "Backpacker"),
    BudgetTier.MODERATE: ("Mid-Range", "Comfortable"),
    BudgetTier.HIGH: ("Luxury", "Premium"),
    BudgetTier.VERY_HIGH: ("Ultra-Luxury", "Exclusive"),
}

TRAVELER_TAGS: Dict[TravelerType, Tuple[str, str]] = {
    TravelerType.SINGLE: ("Solo Travel", "Independent"),
    TravelerType.COUPLE: ("Romantic", "Couples"),
    TravelerType.FAMILY: ("Family-Friendly", "Kids"),
}

ADVENTURE_KEYWORDS = ("hiking", "climbing", "adventure", "extreme", "trekking")
CHALLENGING_MIN_DAYS = 15
MODERATE_MIN_DAYS = 8

DEFAULT_DAILY_RATE = 100
DESTINATION_RATE_RULES: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("japan", "switzerland", "norway"), 200),
    (("thailand", "vietnam", "india"), 50),
)
BUDGET_RATE_FACTORS: Dict[BudgetTier, float] = {
    BudgetTier.LOW: 0.5,
    BudgetTier.MODERATE: 1,
    BudgetTier.HIGH: 2,
    BudgetTier.VERY_HIGH: 4,
}
BUDGET_SPREAD = 1.3

INTEREST_SPLIT_RE = re.compile(r"[,\s]+")


def _contains_any(text: str, needles: Sequence[str]) -> bool:
    return any(needle in text for needle in needles)


def extract_highlights(itinerary: str) -> List[str]:
    highlights = []
    for line in itinerary.splitlines():
        if not _contains_any(line, HIGHLIGHT_KEYWORDS):
            continue
        cleaned = BULLET_RE.sub("", line).strip()
        if HIGHLIGHT_MIN_LENGTH < len(cleaned) < HIGHLIGHT_MAX_LENGTH:
            highlights.append(cleaned)
    return highlights[:MAX_HIGHLIGHTS]


def generate_tags(
    destination: str,
    interests: str,
    budget: Optional[BudgetTier] = None,
    travelers: Optional[TravelerType] = None,
) -> List[str]:
    """
    Short labels for a trip, in generation order: destination, interests,
    budget, then traveler tags. Deduplicated and capped at six.
    """
    tags: List[str] = []

    destination_lower = destination.lower()
    for needles, destination_tags in DESTINATION_TAG_RULES:
        if _contains_any(destination_lower, needles):
            tags.extend(destination_tags)
            break

    for word in INTEREST_SPLIT_RE.split(interests.lower()):
        for triggers, tag in INTEREST_TAG_RULES:
            if _contains_any(word, triggers):
                tags.append(tag)

    if budget is not None:
        tags.extend(BUDGET_TAGS.get(budget, ()))
    if travelers is not None:
        tags.extend(TRAVELER_TAGS.get(travelers, ()))

    return list(dict.fromkeys(tags))[:MAX_TAGS]


def calculate_difficulty(days: int, interests: str) -> Difficulty:
    if _contains_any(interests.lower(), ADVENTURE_KEYWORDS) or days >= CHALLENGING_MIN_DAYS:
        return Difficulty.CHALLENGING
    if days >= MODERATE_MIN_DAYS:
        return Difficulty.MODERATE
    return Difficulty.EASY


def format_currency(amount: float) -> str:
    rounded = Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${int(rounded):,}"


def estimate_budget(destination: str, days: int, budget: Optional[BudgetTier] = None) -> str:
    daily_rate = DEFAULT_DAILY_RATE
    destination_lower = destination.lower()
    for needles, rate in DESTINATION_RATE_RULES:
        if _contains_any(destination_lower, needles):
            daily_rate = rate
            break

    if budget is not None:
        daily_rate *= BUDGET_RATE_FACTORS.get(budget, 1)

    total = daily_rate * days
    return f"{format_currency(total)} - {format_currency(total * BUDGET_SPREAD)}"


def default_title(days: int, destination: str) -> str:
    return f"{days}-Day Trip to {destination}"


def enrich_trip(plan: TripPlan) -> dict:
    return {
        "highlights": extract_highlights(plan.itinerary),
        "tags": generate_tags(plan.destination, plan.interests, plan.budget, plan.travelers),
        "difficulty": calculate_difficulty(plan.days, plan.interests).value,
        "estimated_budget": estimate_budget(plan.destination, plan.days, plan.budget),
    }
