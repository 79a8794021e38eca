"""Serializers for the units app."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from .models import Unit


class UnitSerializer(serializers.ModelSerializer):
    total_cost = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)
    owner_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Unit
        fields = [
            "id",
            "number_of_rooms",
            "accommodation_type",
            "floor",
            "base_cost",
            "total_cost",
            "description",
            "owner_id",
            "created_at",
        ]
        read_only_fields = fields


class CreateUnitSerializer(serializers.Serializer):
    number_of_rooms = serializers.IntegerField(min_value=1, max_value=20)
    accommodation_type = serializers.ChoiceField(choices=Unit.AccommodationType.choices)
    floor = serializers.IntegerField(min_value=-5, max_value=100)
    base_cost = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("1.00"),
        max_value=Decimal("100000.00"),
    )
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, default="")
    owner_id = serializers.IntegerField()
