"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.filters import OrderingFilter  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.services import get_user

from .bootstrap import booking_service
from .models import Booking
from .serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    CancelBookingSerializer,
    booking_payload,
)


class BookingViewSet(viewsets.GenericViewSet):
    """
    Bookings: create, get, list a user's bookings and cancel.

    Callers identify themselves with ``user_id``; there is no
    authentication.
    """

    queryset = Booking.objects.select_related("unit").all()
    serializer_class = BookingSerializer
    lookup_value_regex = r"\d+"
    filter_backends = [OrderingFilter]
    ordering_fields = ["id", "created_at", "start_date", "end_date", "status"]
    ordering = ["-created_at", "-id"]

    def create(self, request):
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking, total_cost = booking_service().create_booking(**serializer.validated_data)
        return Response(
            BookingSerializer(booking_payload(booking, total_cost)).data,
            status=status.HTTP_201_CREATED,
        )

    def retrieve(self, request, pk=None):
        booking, total_cost = booking_service().get_booking(int(pk))
        return Response(BookingSerializer(booking_payload(booking, total_cost)).data)

    @action(detail=False, methods=["get"], url_path=r"user/(?P<user_id>\d+)")
    def for_user(self, request, user_id=None):
        """Paginated bookings of a user, newest first."""
        user = get_user(int(user_id))
        queryset = self.filter_queryset(self.get_queryset().for_user(user.pk))
        page = self.paginate_queryset(queryset)
        serializer = self.get_serializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @action(detail=True, methods=["patch", "post"])
    def cancel(self, request, pk=None):
        """Cancel on behalf of ``user_id`` (query string or body)."""
        data = request.data if "user_id" in request.data else request.query_params
        serializer = CancelBookingSerializer(data={"user_id": data.get("user_id")})
        serializer.is_valid(raise_exception=True)
        booking_service().cancel_booking(int(pk), serializer.validated_data["user_id"])
        return Response(status=status.HTTP_204_NO_CONTENT)
