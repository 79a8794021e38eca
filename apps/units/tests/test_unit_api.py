"""Integration tests for unit endpoints."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.events.models import Event, EventType
from apps.statistics.cache import availability_cache
from apps.units.models import Unit
from apps.users.models import User


class UnitAPITests(APITestCase):

    def setUp(self) -> None:
        self.owner = User.objects.create(username="host", email="host@example.com")
        self.list_url = reverse("unit-list")
        self.search_url = reverse("unit-search")

    def _unit(self, **kwargs) -> Unit:
        defaults = {
            "owner": self.owner,
            "number_of_rooms": 2,
            "accommodation_type": Unit.AccommodationType.FLAT,
            "floor": 2,
            "base_cost": Decimal("100.00"),
        }
        defaults.update(kwargs)
        return Unit.objects.create(**defaults)

    def _ids(self, response) -> list[int]:
        return sorted(item["id"] for item in response.data["results"])

    def test_create_unit_audits_and_invalidates_count(self) -> None:
        self.assertEqual(availability_cache.get(), 0)
        payload = {
            "number_of_rooms": 3,
            "accommodation_type": "HOUSE",
            "floor": 1,
            "base_cost": "120.00",
            "description": "House with garden",
            "owner_id": self.owner.pk,
        }

        with self.captureOnCommitCallbacks(execute=True):
            response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(Decimal(response.data["total_cost"]), Decimal("138.00"))
        self.assertEqual(response.data["owner_id"], self.owner.pk)
        self.assertTrue(
            Event.objects.filter(event_type=EventType.UNIT_CREATED, entity_id=response.data["id"]).exists()
        )
        self.assertEqual(availability_cache.get(), 1)

    def test_create_unit_for_unknown_owner_is_404(self) -> None:
        payload = {
            "number_of_rooms": 1,
            "accommodation_type": "FLAT",
            "floor": 0,
            "base_cost": "50.00",
            "owner_id": 9999,
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertFalse(Unit.objects.exists())

    def test_create_unit_validates_ranges(self) -> None:
        payload = {
            "number_of_rooms": 0,
            "accommodation_type": "CASTLE",
            "floor": 500,
            "base_cost": "0.10",
            "owner_id": self.owner.pk,
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("number_of_rooms", "accommodation_type", "floor", "base_cost"):
            self.assertIn(field, response.data)

    def test_get_unit(self) -> None:
        unit = self._unit()

        response = self.client.get(reverse("unit-detail", args=[unit.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["accommodation_type"], "FLAT")
        self.assertEqual(Decimal(response.data["total_cost"]), Decimal("115.00"))

    def test_get_unknown_unit_is_404(self) -> None:
        self.assertEqual(
            self.client.get(reverse("unit-detail", args=[9999])).status_code,
            status.HTTP_404_NOT_FOUND,
        )

    def test_list_is_paginated_and_ordered(self) -> None:
        for cost in ("300.00", "100.00", "200.00"):
            self._unit(base_cost=Decimal(cost))

        response = self.client.get(self.list_url, {"ordering": "-base_cost", "size": 2})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 3)
        costs = [Decimal(item["base_cost"]) for item in response.data["results"]]
        self.assertEqual(costs, [Decimal("300.00"), Decimal("200.00")])

    def test_search_by_attributes(self) -> None:
        match = self._unit(number_of_rooms=3, accommodation_type=Unit.AccommodationType.HOUSE, floor=1)
        self._unit(number_of_rooms=3, accommodation_type=Unit.AccommodationType.FLAT, floor=1)
        self._unit(number_of_rooms=2, accommodation_type=Unit.AccommodationType.HOUSE, floor=1)

        response = self.client.get(
            self.search_url, {"number_of_rooms": 3, "accommodation_type": "HOUSE", "floor": 1}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self._ids(response), [match.pk])

    def test_search_cost_bounds_are_user_prices(self) -> None:
        cheap = self._unit(base_cost=Decimal("99.99"))
        lower = self._unit(base_cost=Decimal("100.00"))
        upper = self._unit(base_cost=Decimal("200.00"))
        self._unit(base_cost=Decimal("200.01"))

        response = self.client.get(self.search_url, {"min_cost": "115", "max_cost": "230"})

        self.assertEqual(self._ids(response), [lower.pk, upper.pk])
        self.assertNotIn(cheap.pk, self._ids(response))

    def test_search_by_dates_excludes_blocked_units(self) -> None:
        guest = User.objects.create(username="guest", email="guest@example.com")
        start = date.today() + timedelta(days=20)
        booked = self._unit()
        confirmed = self._unit()
        cancelled = self._unit()
        free = self._unit()
        Booking.objects.create(
            unit=booked, user=guest, start_date=start, end_date=start + timedelta(days=2),
            expires_at=None, status=Booking.Status.CONFIRMED,
        )
        Booking.objects.create(
            unit=confirmed, user=guest, start_date=start + timedelta(days=2), end_date=start + timedelta(days=4),
            expires_at=None, status=Booking.Status.CONFIRMED,
        )
        Booking.objects.create(
            unit=cancelled, user=guest, start_date=start, end_date=start + timedelta(days=2),
            expires_at=None, status=Booking.Status.CANCELLED,
        )

        response = self.client.get(
            self.search_url,
            {"start_date": str(start + timedelta(days=1)), "end_date": str(start + timedelta(days=2))},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self._ids(response), sorted([cancelled.pk, free.pk]))

    def test_search_with_only_start_date_ignores_dates(self) -> None:
        self._unit()
        self._unit()

        response = self.client.get(self.search_url, {"start_date": str(date.today())})

        self.assertEqual(response.data["count"], 2)

    def test_search_with_inverted_dates_is_400(self) -> None:
        self._unit()
        start = date.today() + timedelta(days=5)

        response = self.client.get(
            self.search_url, {"start_date": str(start), "end_date": str(start - timedelta(days=1))}
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_plain_list_ignores_search_parameters(self) -> None:
        self._unit(number_of_rooms=1)
        self._unit(number_of_rooms=3)

        listed = self.client.get(self.list_url, {"number_of_rooms": 3})
        searched = self.client.get(self.search_url, {"number_of_rooms": 3})

        self.assertEqual(listed.status_code, status.HTTP_200_OK)
        self.assertEqual(listed.data["count"], 2)
        self.assertEqual(searched.status_code, status.HTTP_200_OK)
        self.assertEqual(searched.data["count"], 1)
