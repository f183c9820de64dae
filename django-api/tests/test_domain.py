"""Unit tests for domain records, enums and errors.

Run with: pytest tests/test_domain.py -v
"""

import dataclasses

import pytest

from eventdb.domain import Event, EventStatus, Guest, GuestStatus, Sex
from eventdb.domain.errors import (
    ErrorCode,
    EventNotFoundError,
    GuestNotFoundError,
    StoreReadError,
    StoreWriteError,
)
from eventdb.stores import Snapshot


class TestEnums:
    """Enum values are the strings stored in the JSON document."""

    def test_event_status_values(self):
        """EventStatus covers the four lifecycle states."""
        assert [s.value for s in EventStatus] == ["PENDING", "RUNNING", "CANCELED", "FINISHED"]

    def test_guest_status_and_sex_values(self):
        """GuestStatus and Sex expose their literal values."""
        assert [s.value for s in GuestStatus] == ["NOTSET", "PRESENT", "ABSENT"]
        assert [s.value for s in Sex] == ["MALE", "FEMALE", "OTHER"]

    def test_status_compares_equal_to_raw_string(self):
        """str-valued enums compare equal to their raw value."""
        assert EventStatus.RUNNING == "RUNNING"


class TestRecords:
    """Tests for Event and Guest dataclasses."""

    def test_event_defaults(self):
        """An event only needs an id and a title."""
        event = Event(id=1, title="Gala")
        assert event.status is EventStatus.PENDING
        assert event.description == ""
        assert event.start is None

    def test_guest_defaults(self):
        """A new guest has no presence recorded."""
        guest = Guest(id=1, event_id=1, firstname="Ada", lastname="Lovelace")
        assert guest.is_present is GuestStatus.NOTSET
        assert guest.guest_image_path is None

    def test_records_are_immutable(self):
        """Records cannot be changed in place."""
        event = Event(id=1, title="Gala")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.title = "Other"  # type: ignore[misc]


class TestErrors:
    """Tests for the error taxonomy."""

    def test_not_found_errors_carry_code_and_id(self):
        """Lookup errors use NOT_FOUND and remember the missing id."""
        event_error = EventNotFoundError(7)
        guest_error = GuestNotFoundError(9)
        assert event_error.code is ErrorCode.NOT_FOUND
        assert event_error.event_id == 7
        assert guest_error.code is ErrorCode.NOT_FOUND
        assert guest_error.guest_id == 9

    def test_error_str_includes_code_value(self):
        """str() renders the wire code followed by the message."""
        assert str(StoreWriteError("error creating event")) == "WRITE ERROR: error creating event"
        assert StoreReadError("bad").code.value == "READ ERROR"

    def test_errors_are_raisable(self):
        """Domain errors behave as exceptions."""
        with pytest.raises(EventNotFoundError) as excinfo:
            raise EventNotFoundError(3)
        assert "event with id 3" in excinfo.value.message


class TestSnapshot:
    """Tests for Snapshot.from_records."""

    def test_counters_default_to_highest_id(self):
        """Missing counters start at the highest id present."""
        snapshot = Snapshot.from_records(
            [Event(id=3, title="a"), Event(id=5, title="b")],
            [Guest(id=4, event_id=3, firstname="x", lastname="y")],
        )
        assert snapshot.event_counter == 5
        assert snapshot.guest_counter == 4
        assert set(snapshot.events) == {3, 5}

    def test_explicit_counters_are_kept(self):
        """Given counters win over the ids present."""
        snapshot = Snapshot.from_records([Event(id=1, title="a")], [], event_counter=10, guest_counter=2)
        assert (snapshot.event_counter, snapshot.guest_counter) == (10, 2)

    def test_stale_counters_are_raised_to_highest_id(self):
        """A counter below an existing id is lifted to that id."""
        snapshot = Snapshot.from_records(
            [Event(id=5, title="a")],
            [Guest(id=3, event_id=5, firstname="x", lastname="y")],
            event_counter=0,
            guest_counter=1,
        )
        assert (snapshot.event_counter, snapshot.guest_counter) == (5, 3)

    def test_empty_snapshot(self):
        """An empty snapshot has zero counters."""
        snapshot = Snapshot.from_records()
        assert snapshot.events == {} and snapshot.guests == {}
        assert snapshot.event_counter == 0 and snapshot.guest_counter == 0
