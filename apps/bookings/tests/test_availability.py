"""Overlap semantics and the availability checker."""

from __future__ import annotations

from datetime import date, timedelta
from decimal import Decimal

import pytest

from apps.bookings.domain.availability import AvailabilityChecker
from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.models import Booking as BookingModel
from apps.bookings.tests.fakes import InMemoryBookingRepository
from shared.domain.exceptions import InvalidArgumentError
from shared.domain.value_objects import DateRange, overlaps

D = date(2026, 2, 1)


def day(n: int) -> date:
    return D + timedelta(days=n)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((0, 2), (1, 3), True),
        ((0, 2), (2, 4), True),   # same-day touch
        ((2, 4), (0, 2), True),
        ((0, 2), (3, 5), False),
        ((3, 5), (0, 2), False),
        ((0, 10), (3, 4), True),  # containment
        ((3, 4), (0, 10), True),
        ((1, 1), (1, 1), True),
    ],
)
def test_overlap_is_inclusive(a, b, expected) -> None:
    first = DateRange(day(a[0]), day(a[1]))
    second = DateRange(day(b[0]), day(b[1]))

    assert first.overlaps_with(second) is expected
    assert overlaps(day(a[0]), day(a[1]), day(b[0]), day(b[1])) is expected


def test_range_must_not_end_before_it_starts() -> None:
    with pytest.raises(InvalidArgumentError):
        DateRange(day(2), day(1))


def _stored(repository, status, start, end, unit_id=1):
    from django.utils import timezone

    booking = Booking.create(unit_id, 10, DateRange(day(start), day(end)), timezone.now(), timedelta(minutes=15))
    if status == BookingStatus.CONFIRMED:
        booking.confirm()
    elif status == BookingStatus.CANCELLED:
        booking.cancel()
    return repository.save_booking(booking)


def test_cancelled_bookings_do_not_block() -> None:
    repository = InMemoryBookingRepository()
    checker = AvailabilityChecker(repository)
    _stored(repository, BookingStatus.CANCELLED, 0, 5)

    assert checker.is_available(1, day(1), day(2))


@pytest.mark.parametrize("status", [BookingStatus.PENDING, BookingStatus.CONFIRMED])
def test_blocking_statuses(status) -> None:
    repository = InMemoryBookingRepository()
    checker = AvailabilityChecker(repository)
    _stored(repository, status, 0, 2)

    assert not checker.is_available(1, day(2), day(4))
    assert checker.is_available(1, day(3), day(4))
    assert checker.is_available(2, day(0), day(2))


@pytest.mark.django_db
def test_queryset_overlap_matches_domain_rule(make_unit, make_user, make_booking) -> None:
    unit = make_unit(base_cost=Decimal("80.00"))
    user = make_user()
    make_booking(unit=unit, user=user, start_date=day(0), end_date=day(2))
    make_booking(
        unit=unit,
        user=user,
        start_date=day(5),
        end_date=day(6),
        status=BookingModel.Status.CANCELLED,
    )

    blocking = BookingModel.objects.filter(unit=unit).blocking()

    assert blocking.overlapping(day(2), day(3)).count() == 1
    assert blocking.overlapping(day(3), day(6)).count() == 0
    assert BookingModel.objects.filter(unit=unit).overlapping(day(3), day(6)).count() == 1
