"""
Django ORM repositories for the booking core

Exclusive locks are row locks (``SELECT ... FOR UPDATE``). They only have
an effect inside a transaction, which the unit of work provides; on
backends without row locks (SQLite) Django drops the clause and the
in-process guard of the unit of work is what serializes requests.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Optional

from apps.bookings.application.ports import (
    AbstractBookingRepository,
    AbstractUnitRepository,
    AbstractUserRepository,
    UnitSnapshot,
)
from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.models import Booking as BookingModel
from apps.units.models import Unit
from apps.users.models import User
from shared.domain.value_objects import DateRange

logger = logging.getLogger(__name__)


def to_entity(row: BookingModel) -> Booking:
    return Booking(
        id=row.pk,
        unit_id=row.unit_id,
        user_id=row.user_id,
        dates=DateRange(row.start_date, row.end_date),
        status=BookingStatus(row.status),
        created_at=row.created_at,
        expires_at=row.expires_at,
    )


class DjangoUnitRepository(AbstractUnitRepository):

    def find_unit_with_exclusive_lock(self, unit_id: int) -> Optional[UnitSnapshot]:
        row = (
            Unit.objects.select_for_update()
            .filter(pk=unit_id)
            .values("id", "base_cost")
            .first()
        )
        return UnitSnapshot(**row) if row else None

    def find_unit(self, unit_id: int) -> Optional[UnitSnapshot]:
        row = Unit.objects.filter(pk=unit_id).values("id", "base_cost").first()
        return UnitSnapshot(**row) if row else None


class DjangoUserRepository(AbstractUserRepository):

    def find_user_by_id(self, user_id: int) -> Optional[int]:
        return User.objects.filter(pk=user_id).values_list("id", flat=True).first()


class DjangoBookingRepository(AbstractBookingRepository):

    def find_conflicting_bookings(self, unit_id: int, start_date: date, end_date: date) -> List[Booking]:
        rows = (
            BookingModel.objects.filter(unit_id=unit_id)
            .blocking()
            .overlapping(start_date, end_date)
        )
        return [to_entity(row) for row in rows]

    def save_booking(self, booking: Booking) -> Booking:
        fields = {
            "unit_id": booking.unit_id,
            "user_id": booking.user_id,
            "start_date": booking.dates.start_date,
            "end_date": booking.dates.end_date,
            "status": booking.status.value,
            "expires_at": booking.expires_at,
        }
        if booking.id is None:
            row = BookingModel.objects.create(created_at=booking.created_at, **fields)
            booking.id = row.pk
        else:
            BookingModel.objects.filter(pk=booking.id).update(**fields)
        return booking

    def find_booking_by_id(self, booking_id: int) -> Optional[Booking]:
        row = BookingModel.objects.filter(pk=booking_id).first()
        return to_entity(row) if row else None

    def find_booking_with_exclusive_lock(self, booking_id: int) -> Optional[Booking]:
        row = BookingModel.objects.select_for_update().filter(pk=booking_id).first()
        return to_entity(row) if row else None

    def find_expired_pending_booking_ids(self, now: datetime) -> List[int]:
        # Locked so the set cannot change before the bulk update below
        return list(
            BookingModel.objects.select_for_update()
            .expired_pending(now)
            .order_by("pk")
            .values_list("pk", flat=True)
        )

    def bulk_cancel_expired_bookings(self, now: datetime) -> int:
        return BookingModel.objects.expired_pending(now).update(
            status=BookingModel.Status.CANCELLED,
            expires_at=None,
        )

    def find_cancelled_booking_ids(self, booking_ids: List[int]) -> List[int]:
        return list(
            BookingModel.objects.filter(pk__in=booking_ids, status=BookingModel.Status.CANCELLED)
            .order_by("pk")
            .values_list("pk", flat=True)
        )
