"""Audit log models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class EventType(models.TextChoices):
    UNIT_CREATED = "UNIT_CREATED", _("Unit created")
    BOOKING_CREATED = "BOOKING_CREATED", _("Booking created")
    BOOKING_CONFIRMED = "BOOKING_CONFIRMED", _("Booking confirmed")
    BOOKING_CANCELLED = "BOOKING_CANCELLED", _("Booking cancelled")
    BOOKING_EXPIRED = "BOOKING_EXPIRED", _("Booking expired")
    PAYMENT_COMPLETED = "PAYMENT_COMPLETED", _("Payment completed")
    PAYMENT_FAILED = "PAYMENT_FAILED", _("Payment failed")


class EntityType(models.TextChoices):
    UNIT = "UNIT", _("Unit")
    BOOKING = "BOOKING", _("Booking")
    PAYMENT = "PAYMENT", _("Payment")


ENTITY_TYPE_BY_EVENT = {
    EventType.UNIT_CREATED: EntityType.UNIT,
    EventType.BOOKING_CREATED: EntityType.BOOKING,
    EventType.BOOKING_CONFIRMED: EntityType.BOOKING,
    EventType.BOOKING_CANCELLED: EntityType.BOOKING,
    EventType.BOOKING_EXPIRED: EntityType.BOOKING,
    EventType.PAYMENT_COMPLETED: EntityType.PAYMENT,
    EventType.PAYMENT_FAILED: EntityType.PAYMENT,
}


class Event(models.Model):
    """Audit log entry. Rows are never updated or deleted."""

    event_type = models.CharField(max_length=100, choices=EventType.choices)
    entity_type = models.CharField(max_length=50, choices=EntityType.choices)
    entity_id = models.BigIntegerField(null=True, blank=True)
    event_data = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["entity_type", "entity_id"], name="events_entity_idx"),
            models.Index(fields=["event_type", "created_at"], name="events_type_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event_type} {self.entity_type}#{self.entity_id}"
