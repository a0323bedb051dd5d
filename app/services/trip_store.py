# File: app/services/trip_store.py

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client

from app.core.config import settings
from app.core.errors import PersistenceError, TripNotFoundError
from app.db.supabase_client import get_supabase_client
from app.models.schemas import Trip

logger = logging.getLogger(__name__)


def _to_trip(row: Dict[str, Any]) -> Trip:
    return Trip.model_validate({**row, "id": str(row["id"]), "user_id": str(row["user_id"])})


class TripStore:
    """
    Saved trips in the hosted document database, scoped by owning user.
    Records are created and deleted, never updated in place.
    """

    def __init__(self, client: Client, table: str = "trips"):
        self.client = client
        self.table = table

    def create(self, owner_id: str, record: Dict[str, Any]) -> str:
        row = {
            **record,
            "user_id": owner_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            response = self.client.table(self.table).insert(row).execute()
        except Exception as e:
            logger.exception("Supabase error saving trip for user %s", owner_id)
            raise PersistenceError() from e

        if not response.data:
            logger.error("Trip insert for user %s returned no data", owner_id)
            raise PersistenceError()

        trip_id = str(response.data[0]["id"])
        logger.info("Saved trip %s for user %s", trip_id, owner_id)
        return trip_id

    def list(self, owner_id: str) -> List[Trip]:
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("user_id", owner_id)
                .order("created_at", desc=True)
                .execute()
            )
        except Exception as e:
            logger.exception("Supabase error fetching trips for user %s", owner_id)
            raise PersistenceError("Failed to load trips. Please try again.") from e

        return [_to_trip(row) for row in response.data or []]

    def get(self, trip_id: str, owner_id: str) -> Trip:
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("id", trip_id)
                .eq("user_id", owner_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.exception("Supabase error fetching trip %s", trip_id)
            raise PersistenceError("Failed to load the trip. Please try again.") from e

        if not response.data:
            raise TripNotFoundError()
        return _to_trip(response.data[0])

    def delete(self, trip_id: str, owner_id: Optional[str] = None) -> None:
        try:
            query = self.client.table(self.table).delete().eq("id", trip_id)
            if owner_id is not None:
                query = query.eq("user_id", owner_id)
            query.execute()
        except Exception as e:
            logger.exception("Supabase error deleting trip %s", trip_id)
            raise PersistenceError("Failed to delete the trip. Please try again.") from e

        logger.info("Deleted trip %s", trip_id)


def get_trip_store() -> TripStore:
    return TripStore(get_supabase_client(), table=settings.TRIPS_TABLE)
