"""Integration tests for payment endpoints."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.events.models import Event, EventType
from apps.finances.models import Payment
from apps.units.models import Unit
from apps.users.models import User


class PaymentAPITests(APITestCase):

    def setUp(self) -> None:
        self.user = User.objects.create(username="payer", email="payer@example.com")
        self.unit = Unit.objects.create(
            owner=self.user,
            number_of_rooms=1,
            accommodation_type=Unit.AccommodationType.HOUSE,
            floor=1,
            base_cost=Decimal("100.00"),
        )
        start = date.today() + timedelta(days=5)
        self.booking = Booking.objects.create(
            unit=self.unit,
            user=self.user,
            start_date=start,
            end_date=start + timedelta(days=2),
            expires_at=timezone.now() + timedelta(minutes=15),
        )
        self.payment = Payment.objects.create(booking=self.booking, amount=Decimal("230.00"))
        self.process_url = reverse("payment-process")

    def _process(self, booking_id: int):
        with self.captureOnCommitCallbacks(execute=True):
            return self.client.post(self.process_url, {"booking_id": booking_id}, format="json")

    def test_process_payment_confirms_booking(self) -> None:
        response = self._process(self.booking.pk)

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "COMPLETED")
        self.assertEqual(Decimal(response.data["amount"]), Decimal("230.00"))

        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.Status.CONFIRMED)
        self.assertIsNone(self.booking.expires_at)
        self.assertTrue(Event.objects.filter(event_type=EventType.PAYMENT_COMPLETED).exists())
        self.assertTrue(
            Event.objects.filter(event_type=EventType.BOOKING_CONFIRMED, entity_id=self.booking.pk).exists()
        )

    def test_expired_booking_is_408(self) -> None:
        Booking.objects.filter(pk=self.booking.pk).update(
            expires_at=timezone.now() - timedelta(seconds=1)
        )

        response = self._process(self.booking.pk)

        self.assertEqual(response.status_code, status.HTTP_408_REQUEST_TIMEOUT)
        self.payment.refresh_from_db()
        self.assertEqual(self.payment.status, Payment.Status.PENDING)

    def test_cancelled_booking_is_400(self) -> None:
        Booking.objects.filter(pk=self.booking.pk).update(status=Booking.Status.CANCELLED, expires_at=None)

        response = self._process(self.booking.pk)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_unknown_booking_is_404(self) -> None:
        self.assertEqual(self._process(424242).status_code, status.HTTP_404_NOT_FOUND)

    def test_invalid_body_is_400(self) -> None:
        response = self.client.post(self.process_url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("booking_id", response.data)

    def test_get_payment_by_booking(self) -> None:
        response = self.client.get(reverse("payment-by-booking", args=[self.booking.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], self.payment.pk)
        self.assertEqual(response.data["status"], "PENDING")

    def test_get_payment_for_unknown_booking_is_404(self) -> None:
        response = self.client.get(reverse("payment-by-booking", args=[424242]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
