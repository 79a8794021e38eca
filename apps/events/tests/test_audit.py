"""Tests for the audit sink."""

from __future__ import annotations

import json
from unittest import mock

import pytest

from apps.events.models import Event, EventType
from apps.events.services import record_event, record_events_batch, resolve_entity_type

pytestmark = pytest.mark.django_db


def test_entity_type_follows_event_type() -> None:
    assert resolve_entity_type(EventType.UNIT_CREATED) == "UNIT"
    assert resolve_entity_type(EventType.BOOKING_EXPIRED) == "BOOKING"
    assert resolve_entity_type(EventType.PAYMENT_COMPLETED) == "PAYMENT"


def test_record_event_serializes_payload() -> None:
    event = record_event(EventType.BOOKING_CREATED, 7, {"unit_id": 3, "total_cost": "230.00"})

    stored = Event.objects.get(pk=event.pk)
    assert stored.entity_type == "BOOKING"
    assert stored.entity_id == 7
    assert json.loads(stored.event_data) == {"total_cost": "230.00", "unit_id": 3}


def test_record_event_without_payload() -> None:
    event = record_event(EventType.BOOKING_CONFIRMED, 8)

    assert Event.objects.get(pk=event.pk).event_data is None


def test_batch_writes_one_row_per_entity() -> None:
    events = record_events_batch(EventType.BOOKING_EXPIRED, [1, 2, 3])

    assert len(events) == 3
    assert sorted(Event.objects.values_list("entity_id", flat=True)) == [1, 2, 3]


def test_empty_batch_writes_nothing() -> None:
    assert record_events_batch(EventType.BOOKING_EXPIRED, []) == []
    assert not Event.objects.exists()


def test_write_failures_are_swallowed(caplog) -> None:
    with mock.patch.object(Event.objects, "create", side_effect=RuntimeError("disk full")):
        with caplog.at_level("ERROR"):
            assert record_event(EventType.UNIT_CREATED, 1) is None
    with mock.patch.object(Event.objects, "bulk_create", side_effect=RuntimeError("disk full")):
        assert record_events_batch(EventType.UNIT_CREATED, [1, 2]) == []

    assert "Failed to record audit event" in caplog.text
    assert not Event.objects.exists()
