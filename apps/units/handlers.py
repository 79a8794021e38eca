"""Post-commit handlers for unit events."""

from __future__ import annotations

from apps.events.models import EventType
from apps.events.services import record_event
from apps.statistics.cache import availability_cache
from shared.application.message_bus import message_bus

from .events import UnitCreated


def audit_unit_created(event: UnitCreated) -> None:
    record_event(EventType.UNIT_CREATED, event.unit_id, {"owner_id": event.owner_id})


def invalidate_available_units(event: UnitCreated) -> None:
    availability_cache.invalidate()


def register() -> None:
    message_bus.register_event_handler(UnitCreated, audit_unit_created)
    message_bus.register_event_handler(UnitCreated, invalidate_available_units)
