# File: app/api/v1/endpoints/trips.py

from typing import List

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from app.auth.supabase_auth import get_current_user_id
from app.logic.trip_history import filter_trips, summarize_trips
from app.models.itinerary import DayEntry
from app.models.schemas import Trip, TripCreate, TripCreated, TripStats
from app.services import trip_service
from app.services.trip_store import TripStore, get_trip_store

router = APIRouter()


@router.post("", response_model=TripCreated, status_code=status.HTTP_201_CREATED)
def save_trip(
    trip: TripCreate,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    """
    Saves a generated plan, enriched with highlights, tags, difficulty and budget.
    """
    trip_id = trip_service.save_trip(store, user_id, trip)
    return TripCreated(id=trip_id)


@router.get("", response_model=List[Trip])
def list_trips(
    search: str = "",
    filter_by: str = "all",
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    """
    The signed-in user's trips, newest first.
    """
    return filter_trips(store.list(user_id), search=search, filter_by=filter_by)


@router.get("/stats", response_model=TripStats)
def trip_stats(
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    return summarize_trips(store.list(user_id))


@router.get("/{trip_id}", response_model=Trip)
def get_trip(
    trip_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    return store.get(trip_id, user_id)


@router.get("/{trip_id}/days", response_model=List[DayEntry])
def get_trip_days(
    trip_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    return trip_service.trip_days(store.get(trip_id, user_id))


@router.get("/{trip_id}/export", response_class=PlainTextResponse)
def export_trip(
    trip_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    trip = store.get(trip_id, user_id)
    return PlainTextResponse(
        trip_service.export_trip_text(trip),
        headers={"Content-Disposition": trip_service.export_content_disposition(trip)},
    )


@router.delete("/{trip_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_trip(
    trip_id: str,
    user_id: str = Depends(get_current_user_id),
    store: TripStore = Depends(get_trip_store),
):
    store.delete(trip_id, owner_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
