"""Post-commit handlers for payment events."""

from __future__ import annotations

from apps.events.models import EventType
from apps.events.services import record_event
from shared.application.message_bus import message_bus

from .domain.events import PaymentCompleted


def audit_payment_completed(event: PaymentCompleted) -> None:
    record_event(
        EventType.PAYMENT_COMPLETED,
        event.payment_id,
        {"booking_id": event.booking_id, "amount": str(event.amount)},
    )


def register() -> None:
    message_bus.register_event_handler(PaymentCompleted, audit_payment_completed)
