"""Availability cache: read-through, invalidation and degradation."""

from __future__ import annotations

from datetime import timedelta
from unittest import mock

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from apps.bookings.models import Booking
from apps.statistics.cache import AvailabilityCache, availability_cache, count_available_units


class CountingSource:

    def __init__(self, value: int = 3):
        self.value = value
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        return self.value


def test_get_computes_once_then_serves_cached_value() -> None:
    source = CountingSource(3)
    cache = AvailabilityCache(compute=source, key="test:available")

    assert cache.get() == 3
    source.value = 7
    assert cache.get() == 3
    assert source.calls == 1


def test_invalidate_forces_recompute() -> None:
    source = CountingSource(3)
    cache = AvailabilityCache(compute=source, key="test:available")
    cache.get()
    source.value = 7

    cache.invalidate()

    assert cache.get() == 7
    assert source.calls == 2


def test_force_refresh_overwrites_cached_value() -> None:
    source = CountingSource(3)
    cache = AvailabilityCache(compute=source, key="test:available")
    cache.get()
    source.value = 5

    assert cache.force_refresh() == 5
    assert cache.get() == 5


def test_unreachable_backend_degrades_to_source(caplog) -> None:
    source = CountingSource(4)
    cache = AvailabilityCache(compute=source, key="test:available")
    broken = mock.Mock()
    broken.get.side_effect = ConnectionError("redis down")
    broken.set.side_effect = ConnectionError("redis down")
    broken.delete.side_effect = ConnectionError("redis down")

    with mock.patch.object(AvailabilityCache, "backend", new_callable=mock.PropertyMock, return_value=broken):
        with caplog.at_level("WARNING"):
            assert cache.get() == 4
            assert cache.force_refresh() == 4
            cache.invalidate()

    assert source.calls == 2
    assert "treating as miss" in caplog.text
    assert "Failed to invalidate" in caplog.text


def test_warm_up_swallows_source_errors(caplog) -> None:
    cache = AvailabilityCache(compute=mock.Mock(side_effect=RuntimeError("no table")), key="test:available")

    with caplog.at_level("WARNING"):
        cache.warm_up()

    assert "warm-up failed" in caplog.text


@pytest.mark.django_db
def test_count_ignores_past_and_cancelled_bookings(make_unit, make_user, make_booking) -> None:
    today = timezone.localdate()
    user = make_user()
    past = make_unit(owner=user)
    cancelled = make_unit(owner=user)
    confirmed = make_unit(owner=user)
    ends_today = make_unit(owner=user)
    make_unit(owner=user)

    make_booking(unit=past, user=user, start_date=today - timedelta(days=5), end_date=today - timedelta(days=1))
    make_booking(
        unit=cancelled, user=user, start_date=today, end_date=today + timedelta(days=2),
        status=Booking.Status.CANCELLED, expires_at=None,
    )
    make_booking(
        unit=confirmed, user=user, start_date=today + timedelta(days=3), end_date=today + timedelta(days=4),
        status=Booking.Status.CONFIRMED, expires_at=None,
    )
    make_booking(unit=ends_today, user=user, start_date=today - timedelta(days=2), end_date=today)

    assert count_available_units() == 3


@pytest.mark.django_db
def test_statistics_endpoints(make_unit) -> None:
    client = APIClient()
    make_unit()

    response = client.get(reverse("available-units"))
    assert response.status_code == 200
    assert response.data == {"available_units_count": 1}

    # Written behind the cache's back, so only a refresh sees it
    make_unit()
    assert client.get(reverse("available-units")).data["available_units_count"] == 1

    refreshed = client.post(reverse("available-units-refresh"))
    assert refreshed.status_code == 200
    assert refreshed.data == {"available_units_count": 2}
    assert availability_cache.get() == 2
