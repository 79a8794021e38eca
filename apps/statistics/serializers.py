from __future__ import annotations

from rest_framework import serializers  # type: ignore


class AvailableUnitsStatisticSerializer(serializers.Serializer):
    available_units_count = serializers.IntegerField()
