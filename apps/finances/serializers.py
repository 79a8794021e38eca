"""Serializers for payments."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .domain.entities import Payment


class ProcessPaymentSerializer(serializers.Serializer):
    booking_id = serializers.IntegerField(min_value=1)


class PaymentSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    booking_id = serializers.IntegerField()
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    status = serializers.CharField()
    created_at = serializers.DateTimeField()


def payment_payload(payment: Payment) -> dict:
    return {
        "id": payment.id,
        "booking_id": payment.booking_id,
        "amount": payment.amount,
        "status": payment.status.value,
        "created_at": payment.created_at,
    }
