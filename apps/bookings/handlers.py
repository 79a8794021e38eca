"""
Post-commit handlers for booking events

Best-effort side effects: each handler is isolated by the message bus,
so a failed audit write never prevents the cache invalidation.
"""

from __future__ import annotations

from apps.events.models import EventType
from apps.events.services import record_event, record_events_batch
from apps.statistics.cache import availability_cache
from shared.application.message_bus import message_bus

from .domain.events import BookingCancelled, BookingConfirmed, BookingCreated, BookingsExpired


def audit_booking_created(event: BookingCreated) -> None:
    record_event(
        EventType.BOOKING_CREATED,
        event.booking_id,
        {
            "unit_id": event.unit_id,
            "user_id": event.user_id,
            "start_date": event.dates.start_date.isoformat(),
            "end_date": event.dates.end_date.isoformat(),
            "total_cost": str(event.total_cost),
        },
    )


def audit_booking_confirmed(event: BookingConfirmed) -> None:
    record_event(EventType.BOOKING_CONFIRMED, event.booking_id)


def audit_booking_cancelled(event: BookingCancelled) -> None:
    payload = {"previous_status": event.previous_status}
    if event.refund_required:
        payload["refund_required"] = True
    record_event(EventType.BOOKING_CANCELLED, event.booking_id, payload)


def audit_bookings_expired(event: BookingsExpired) -> None:
    record_events_batch(EventType.BOOKING_EXPIRED, event.booking_ids)


def invalidate_available_units(event) -> None:
    availability_cache.invalidate()


def register() -> None:
    message_bus.register_event_handler(BookingCreated, audit_booking_created)
    message_bus.register_event_handler(BookingConfirmed, audit_booking_confirmed)
    message_bus.register_event_handler(BookingCancelled, audit_booking_cancelled)
    message_bus.register_event_handler(BookingsExpired, audit_bookings_expired)

    for event_type in (BookingCreated, BookingConfirmed, BookingCancelled, BookingsExpired):
        message_bus.register_event_handler(event_type, invalidate_available_units)
