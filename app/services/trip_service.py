# File: app/services/trip_service.py

import logging
import re
from typing import List
from urllib.parse import quote

from app.logic.enrichment import default_title, enrich_trip
from app.logic.itinerary_parser import parse_itinerary
from app.models.itinerary import DayEntry
from app.models.schemas import Trip, TripCreate
from app.services.trip_store import TripStore

logger = logging.getLogger(__name__)

UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def save_trip(store: TripStore, owner_id: str, trip: TripCreate) -> str:
    """
    Derives highlights, tags, difficulty and a budget estimate from the plan,
    then persists the enriched record. Returns the new trip id.
    """
    record = trip.model_dump(mode="json", exclude={"title"})
    record["title"] = trip.title or default_title(trip.days, trip.destination)
    record.update(enrich_trip(trip))

    logger.info(
        "Saving trip to %s for user %s (difficulty=%s, tags=%s)",
        trip.destination, owner_id, record["difficulty"], record["tags"],
    )
    return store.create(owner_id, record)


def trip_days(trip: Trip) -> List[DayEntry]:
    return parse_itinerary(trip.itinerary)


def export_content_disposition(trip: Trip) -> str:
    """
    Attachment header for the text export. Header values must stay latin-1,
    so the plain filename is reduced to ASCII and the real name goes in
    the RFC 5987 filename* parameter.
    """
    filename = f"{trip.destination.replace(' ', '_')}_itinerary.txt"
    ascii_filename = UNSAFE_FILENAME_CHARS.sub("_", filename)
    return f"attachment; filename=\"{ascii_filename}\"; filename*=UTF-8''{quote(filename, safe='')}"


def export_trip_text(trip: Trip) -> str:
    return f"""{trip.title}
Travel Month: {trip.month}
Interests: {trip.interests}

DETAILED ITINERARY:
{trip.itinerary}

Generated by AI Trip Planner"""
