"""Unit API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from . import services
from .filters import UnitFilterSet
from .models import Unit
from .serializers import CreateUnitSerializer, UnitSerializer


class UnitViewSet(
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """
    Units: create, get, paginated list and search.

    ``/search/`` accepts the ``UnitFilterSet`` parameters; the plain list
    only supports paging and ordering.
    """

    serializer_class = UnitSerializer
    queryset = Unit.objects.all()
    lookup_value_regex = r"\d+"
    filter_backends = [OrderingFilter]
    filterset_class = None
    ordering_fields = ["id", "base_cost", "number_of_rooms", "floor", "created_at"]
    ordering = ["id"]

    def create(self, request):
        serializer = CreateUnitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        unit = services.create_unit(**serializer.validated_data)
        return Response(UnitSerializer(unit).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):
        return Response(UnitSerializer(services.get_unit(pk)).data)

    @action(
        detail=False,
        methods=["get"],
        filter_backends=[DjangoFilterBackend, OrderingFilter],
        filterset_class=UnitFilterSet,
    )
    def search(self, request):
        return self.list(request)
