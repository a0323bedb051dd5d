"""Shared fakes and fixtures for the trip planner tests."""

import itertools

import pytest
from fastapi.testclient import TestClient

from app.auth.supabase_auth import get_current_user_id
from app.main import app
from app.services.generation_client import get_generation_client
from app.services.trip_store import TripStore, get_trip_store

USER_ID = "user-123"

SAMPLE_ITINERARY = """Here is your trip!
Day 1: Arrival
- 9:00 Visit the museum
- Lunch at a restaurant
Day 2
- Hike the trail"""


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Just enough of the Supabase query builder for the trip store."""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.action = None
        self.payload = None
        self.filters = []
        self.ordering = None
        self.row_limit = None

    def insert(self, row):
        self.action, self.payload = "insert", row
        return self

    def select(self, columns="*"):
        self.action = "select"
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def execute(self):
        if self.db.fail:
            raise RuntimeError("backend unavailable")

        rows = self.db.tables.setdefault(self.table, [])
        if self.action == "insert":
            if self.db.empty_inserts:
                return FakeResponse([])
            row = {"id": f"trip-{next(self.db.ids)}", **self.payload}
            rows.append(row)
            return FakeResponse([dict(row)])

        matched = [row for row in rows if all(row.get(col) == val for col, val in self.filters)]
        if self.action == "delete":
            self.db.tables[self.table] = [row for row in rows if row not in matched]
            return FakeResponse(matched)

        if self.ordering:
            column, desc = self.ordering
            matched = sorted(matched, key=lambda row: row[column], reverse=desc)
        if self.row_limit is not None:
            matched = matched[:self.row_limit]
        return FakeResponse([dict(row) for row in matched])


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.queries = []
        self.fail = False
        self.empty_inserts = False
        self.ids = itertools.count(1)

    def table(self, name):
        query = FakeQuery(self, name)
        self.queries.append(query)
        return query


class FakeGenerator:
    """Stands in for GenerationClient; records every prompt it is sent."""

    def __init__(self, text=SAMPLE_ITINERARY):
        self.text = text
        self.error = None
        self.calls = []

    @property
    def is_configured(self):
        return True

    def ensure_configured(self):
        return None

    def generate(self, prompt, max_tokens):
        self.calls.append((prompt, max_tokens))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def trip_store(fake_db):
    return TripStore(fake_db, table="trips")


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def trip_row():
    def make(**overrides):
        row = {
            "id": "trip-x",
            "user_id": USER_ID,
            "title": "5-Day Trip to Tokyo, Japan",
            "destination": "Tokyo, Japan",
            "days": 5,
            "month": "March",
            "interests": "food, history",
            "itinerary": SAMPLE_ITINERARY,
            "budget": "moderate",
            "travelers": "couple",
            "created_at": "2026-10-01T10:00:00+00:00",
            "highlights": [],
            "tags": ["Asia"],
            "difficulty": "Easy",
            "estimated_budget": "$1,000 - $1,300",
        }
        row.update(overrides)
        return row
    return make


@pytest.fixture
def client(trip_store, generator):
    app.dependency_overrides[get_current_user_id] = lambda: USER_ID
    app.dependency_overrides[get_trip_store] = lambda: trip_store
    app.dependency_overrides[get_generation_client] = lambda: generator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
