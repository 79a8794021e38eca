"""
Persistence ports for the booking core

The booking and payment use cases only talk to these interfaces. The
Django implementations live in ``apps.bookings.infrastructure`` and
``apps.finances.infrastructure``; tests plug in in-memory versions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from apps.bookings.domain.entities import Booking


@dataclass(frozen=True)
class UnitSnapshot:
    """The parts of a unit the booking core needs."""
    id: int
    base_cost: Decimal


class AbstractUnitRepository(ABC):

    @abstractmethod
    def find_unit_with_exclusive_lock(self, unit_id: int) -> Optional[UnitSnapshot]:
        """
        Load a unit and hold it exclusively until the transaction ends

        Must be called inside a unit of work.
        """

    @abstractmethod
    def find_unit(self, unit_id: int) -> Optional[UnitSnapshot]:
        """Load a unit without locking it."""


class AbstractUserRepository(ABC):

    @abstractmethod
    def find_user_by_id(self, user_id: int) -> Optional[int]:
        """Return the user's id if the user exists."""


class AbstractBookingRepository(ABC):

    @abstractmethod
    def find_conflicting_bookings(self, unit_id: int, start_date: date, end_date: date) -> List[Booking]:
        """Blocking bookings of the unit overlapping ``[start_date, end_date]``."""

    @abstractmethod
    def save_booking(self, booking: Booking) -> Booking:
        """Insert or update; assigns ``booking.id`` on insert."""

    @abstractmethod
    def find_booking_by_id(self, booking_id: int) -> Optional[Booking]:
        """Load a booking without locking it."""

    @abstractmethod
    def find_booking_with_exclusive_lock(self, booking_id: int) -> Optional[Booking]:
        """Load a booking and hold it exclusively until the transaction ends."""

    @abstractmethod
    def find_expired_pending_booking_ids(self, now: datetime) -> List[int]:
        """Ids of PENDING bookings with ``expires_at <= now``."""

    @abstractmethod
    def bulk_cancel_expired_bookings(self, now: datetime) -> int:
        """
        Cancel every PENDING booking with ``expires_at <= now`` in one statement

        The status condition is part of the statement, so rows moved out of
        PENDING by a concurrent operation are left alone. Returns the number
        of cancelled rows.
        """

    @abstractmethod
    def find_cancelled_booking_ids(self, booking_ids: List[int]) -> List[int]:
        """The subset of ``booking_ids`` whose status is CANCELLED."""


class PaymentCoupling(ABC):
    """Payment side of booking creation, run inside the booking's unit of work."""

    @abstractmethod
    def create_pending_payment(self, booking_id: int, amount: Decimal):
        """Create the PENDING payment for a freshly created booking."""
