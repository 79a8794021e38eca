"""Statistics API views."""

from __future__ import annotations

from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from .cache import availability_cache
from .serializers import AvailableUnitsStatisticSerializer


class AvailableUnitsView(APIView):
    """Cached count of units available for booking."""

    def get(self, request):
        payload = {"available_units_count": availability_cache.get()}
        return Response(AvailableUnitsStatisticSerializer(payload).data)


class RefreshAvailableUnitsView(APIView):
    """Recompute the count and overwrite the cached value."""

    def post(self, request):
        payload = {"available_units_count": availability_cache.force_refresh()}
        return Response(AvailableUnitsStatisticSerializer(payload).data)
