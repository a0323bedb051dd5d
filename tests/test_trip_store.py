from datetime import datetime

import pytest

from app.core.errors import PersistenceError, TripNotFoundError
from conftest import USER_ID


def test_create_stamps_owner_and_timestamp(trip_store, fake_db):
    trip_id = trip_store.create(USER_ID, {"destination": "Oslo", "days": 3})

    assert trip_id == "trip-1"
    (row,) = fake_db.tables["trips"]
    assert row["user_id"] == USER_ID
    assert datetime.fromisoformat(row["created_at"]).tzinfo is not None


def test_create_without_returned_row_fails(trip_store, fake_db):
    fake_db.empty_inserts = True

    with pytest.raises(PersistenceError):
        trip_store.create(USER_ID, {"destination": "Oslo"})


def test_backend_failures_surface_as_persistence_errors(trip_store, fake_db):
    fake_db.fail = True

    with pytest.raises(PersistenceError):
        trip_store.create(USER_ID, {"destination": "Oslo"})
    with pytest.raises(PersistenceError):
        trip_store.list(USER_ID)
    with pytest.raises(PersistenceError):
        trip_store.get("trip-1", USER_ID)
    with pytest.raises(PersistenceError):
        trip_store.delete("trip-1")


def test_list_is_scoped_and_newest_first(trip_store, fake_db, trip_row):
    fake_db.tables["trips"] = [
        trip_row(id="old", created_at="2026-01-01T00:00:00+00:00"),
        trip_row(id="other", user_id="someone-else"),
        trip_row(id="new", created_at="2026-09-01T00:00:00+00:00"),
    ]

    trips = trip_store.list(USER_ID)

    assert [trip.id for trip in trips] == ["new", "old"]
    query = fake_db.queries[-1]
    assert query.filters == [("user_id", USER_ID)]
    assert query.ordering == ("created_at", True)


def test_get_missing_trip(trip_store, fake_db, trip_row):
    fake_db.tables["trips"] = [trip_row(id="mine"), trip_row(id="theirs", user_id="someone-else")]

    assert trip_store.get("mine", USER_ID).id == "mine"
    with pytest.raises(TripNotFoundError):
        trip_store.get("theirs", USER_ID)


def test_delete_scoped_to_owner(trip_store, fake_db, trip_row):
    fake_db.tables["trips"] = [trip_row(id="a"), trip_row(id="b", user_id="someone-else")]

    trip_store.delete("b", owner_id=USER_ID)
    assert len(fake_db.tables["trips"]) == 2

    trip_store.delete("a", owner_id=USER_ID)
    assert [row["id"] for row in fake_db.tables["trips"]] == ["b"]


def test_numeric_ids_come_back_as_strings(trip_store, fake_db, trip_row):
    fake_db.tables["trips"] = [trip_row(id=42)]

    assert trip_store.list(USER_ID)[0].id == "42"
