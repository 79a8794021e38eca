"""Payment API views."""

from __future__ import annotations

from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.bootstrap import payment_service

from .serializers import PaymentSerializer, ProcessPaymentSerializer, payment_payload


class ProcessPaymentView(APIView):
    """Emulated payment: completes the payment and confirms the booking."""

    def post(self, request):
        serializer = ProcessPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        payment = payment_service().process_payment(serializer.validated_data["booking_id"])
        return Response(PaymentSerializer(payment_payload(payment)).data)


class BookingPaymentView(APIView):

    def get(self, request, booking_id: int):
        payment = payment_service().get_payment_by_booking_id(booking_id)
        return Response(PaymentSerializer(payment_payload(payment)).data)
