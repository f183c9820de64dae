"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from eventdb.database import EventDB
from eventdb.domain import Event, EventStatus, Guest, GuestStatus, Sex
from eventdb.stores import Snapshot, SnapshotBackend, VolatileBackend


class FailingBackend(SnapshotBackend):
    """Volatile backend whose writes can be switched to fail."""

    is_volatile = True

    def __init__(self) -> None:
        self.fail = False
        self.writes = 0

    def initialize(self) -> Snapshot:
        return Snapshot()

    def load(self) -> Snapshot:
        return Snapshot()

    def persist(self, snapshot: Snapshot) -> None:
        if self.fail:
            raise OSError(28, "No space left on device")
        self.writes += 1


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_singleton():
    EventDB.reset_instance()
    yield
    EventDB.reset_instance()


@pytest.fixture
def gala() -> Event:
    return Event(
        id=1,
        title="Gala",
        organizer="Ada",
        venu="Hall A",
        description="Annual gala",
        start=datetime(2026, 5, 1, 18, 0, tzinfo=timezone.utc),
        end=datetime(2026, 5, 1, 23, 0, tzinfo=timezone.utc),
        status=EventStatus.PENDING,
    )


@pytest.fixture
def gala_night() -> Event:
    return Event(id=2, title="Gala Night", organizer="Grace", venu="Hall A", status=EventStatus.RUNNING)


@pytest.fixture
def guest() -> Guest:
    return Guest(
        id=1,
        event_id=1,
        firstname="Ada",
        lastname="Lovelace",
        age=36,
        sex=Sex.FEMALE,
        is_present=GuestStatus.PRESENT,
    )


@pytest.fixture
def db(gala: Event, gala_night: Event, guest: Guest) -> EventDB:
    """Isolated in-memory handle seeded with two events and one guest."""
    return EventDB(VolatileBackend(), Snapshot.from_records([gala, gala_night], [guest]))


@pytest.fixture
def failing_backend() -> FailingBackend:
    return FailingBackend()


@pytest.fixture
def failing_db(failing_backend: FailingBackend, gala: Event, guest: Guest) -> EventDB:
    return EventDB(failing_backend, Snapshot.from_records([gala], [guest]))
