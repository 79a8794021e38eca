"""Serializers for the booking domain."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from .domain.entities import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Date order and availability are checked by the booking service."""

    unit_id = serializers.IntegerField(min_value=1)
    user_id = serializers.IntegerField(min_value=1)
    start_date = serializers.DateField()
    end_date = serializers.DateField()


class BookingSerializer(serializers.Serializer):
    """Renders ORM rows and domain bookings (via ``booking_payload``) alike."""

    id = serializers.IntegerField()
    unit_id = serializers.IntegerField()
    user_id = serializers.IntegerField()
    start_date = serializers.DateField()
    end_date = serializers.DateField()
    status = serializers.CharField()
    created_at = serializers.DateTimeField()
    expires_at = serializers.DateTimeField(allow_null=True)
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=2)


def booking_payload(booking: Booking, total_cost: Decimal) -> dict:
    return {
        "id": booking.id,
        "unit_id": booking.unit_id,
        "user_id": booking.user_id,
        "start_date": booking.dates.start_date,
        "end_date": booking.dates.end_date,
        "status": booking.status.value,
        "created_at": booking.created_at,
        "expires_at": booking.expires_at,
        "total_cost": total_cost,
    }


class CancelBookingSerializer(serializers.Serializer):
    user_id = serializers.IntegerField(min_value=1)
