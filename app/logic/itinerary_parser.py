# app/logic/itinerary_parser.py

import re
from typing import List, Optional, Sequence, Tuple

from app.models.itinerary import ActivityCategory, ActivityEntry, DayEntry

DAY_HEADER_RE = re.compile(r"Day (\d+)[:.]?\s*(.*)")
BULLET_RE = re.compile(r"^[-•*]\s*")
# "9:00", "14:30", "2pm", "2 PM", optionally followed by "-" or ":"
LEADING_TIME_RE = re.compile(r"^(\d{1,2}:\d{2}|\d{1,2}\s*[ap]m)\s*[-:]?\s*(.*)", re.IGNORECASE)

# Checked in order, first match wins
CATEGORY_RULES: Sequence[Tuple[Tuple[str, ...], ActivityCategory]] = (
    (("restaurant", "food", "eat"), ActivityCategory.FOOD),
    (("museum", "temple", "palace"), ActivityCategory.CULTURE),
    (("park", "garden", "nature"), ActivityCategory.NATURE),
    (("shopping", "market"), ActivityCategory.SHOPPING),
)


def strip_bullet(line: str) -> str:
    return BULLET_RE.sub("", line).strip()


def categorize_activity(text: str) -> ActivityCategory:
    lowered = text.lower()
    for keywords, category in CATEGORY_RULES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return ActivityCategory.GENERAL


def parse_activity(line: str) -> Optional[ActivityEntry]:
    """
    Builds an activity from one itinerary line, or None if nothing is left
    after removing the bullet marker.
    """
    cleaned = strip_bullet(line)
    if not cleaned:
        return None

    time_match = LEADING_TIME_RE.match(cleaned)
    if time_match:
        time, activity = time_match.group(1), time_match.group(2)
    else:
        time, activity = None, cleaned

    return ActivityEntry(time=time, activity=activity, category=categorize_activity(activity))


def parse_itinerary(itinerary: str) -> List[DayEntry]:
    """
    Best-effort projection of free-text model output into day records.

    Day numbers are taken as written: duplicates, gaps and out-of-order days
    come through unchanged. Lines before the first day header are dropped.
    An empty result means no day headers were found.
    """
    days: List[DayEntry] = []
    current_day: Optional[DayEntry] = None

    for raw_line in itinerary.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        day_match = DAY_HEADER_RE.search(line)
        if day_match:
            if current_day is not None:
                days.append(current_day)
            number = int(day_match.group(1))
            current_day = DayEntry(day=number, title=day_match.group(2) or f"Day {number}")
        elif current_day is not None:
            activity = parse_activity(line)
            if activity is not None:
                current_day.activities.append(activity)

    if current_day is not None:
        days.append(current_day)

    return days
