# app/logic/trip_history.py

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from app.core.config import settings
from app.models.schemas import Trip, TripStats


def _is_recent(trip: Trip, now: datetime) -> bool:
    created_at = trip.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at > now - timedelta(days=settings.RECENT_TRIP_WINDOW_DAYS)


TRIP_FILTERS: Dict[str, Callable[[Trip, datetime], bool]] = {
    "all": lambda trip, now: True,
    "recent": _is_recent,
    "long": lambda trip, now: trip.days >= settings.LONG_TRIP_MIN_DAYS,
    "short": lambda trip, now: trip.days < settings.LONG_TRIP_MIN_DAYS,
}


def filter_trips(
    trips: List[Trip],
    search: str = "",
    filter_by: str = "all",
    now: Optional[datetime] = None,
) -> List[Trip]:
    """
    Narrows a trip list by a search term (destination or title) and one of
    the history filters. Unknown filters fall back to "all".
    """
    now = now or datetime.now(timezone.utc)
    term = search.strip().lower()
    keep = TRIP_FILTERS.get(filter_by, TRIP_FILTERS["all"])

    return [
        trip for trip in trips
        if (term in trip.destination.lower() or term in trip.title.lower()) and keep(trip, now)
    ]


def summarize_trips(trips: List[Trip]) -> TripStats:
    # trips arrive newest first, as the store returns them
    return TripStats(
        total_trips=len(trips),
        total_days=sum(trip.days for trip in trips),
        unique_destinations=len({trip.destination for trip in trips}),
        latest_destination=trips[0].destination if trips else None,
    )
