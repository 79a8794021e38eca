"""Shared pytest fixtures."""

from __future__ import annotations

import itertools
from datetime import timedelta
from decimal import Decimal

import pytest
from django.core.cache import cache
from django.utils import timezone

_sequence = itertools.count(1)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_user(db):
    from apps.users.models import User

    def factory(**kwargs):
        n = next(_sequence)
        kwargs.setdefault("username", f"user{n}")
        kwargs.setdefault("email", f"user{n}@example.com")
        return User.objects.create(**kwargs)

    return factory


@pytest.fixture
def make_unit(db, make_user):
    from apps.units.models import Unit

    def factory(**kwargs):
        if "owner" not in kwargs and "owner_id" not in kwargs:
            kwargs["owner"] = make_user()
        kwargs.setdefault("number_of_rooms", 2)
        kwargs.setdefault("accommodation_type", Unit.AccommodationType.FLAT)
        kwargs.setdefault("floor", 3)
        kwargs.setdefault("base_cost", Decimal("100.00"))
        kwargs.setdefault("description", "Bright flat near the park")
        return Unit.objects.create(**kwargs)

    return factory


@pytest.fixture
def make_booking(db):
    """ORM booking row; PENDING rows get a payment window unless one is given."""
    from apps.bookings.models import Booking

    def factory(**kwargs):
        status = kwargs.setdefault("status", Booking.Status.PENDING)
        if status == Booking.Status.PENDING:
            kwargs.setdefault("expires_at", timezone.now() + timedelta(minutes=15))
        return Booking.objects.create(**kwargs)

    return factory
