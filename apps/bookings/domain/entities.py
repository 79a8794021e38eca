"""
Booking Domain Entities

Core business entities for the booking domain:
- Booking: Main aggregate representing a reservation of a unit
- BookingStatus: FSM states for booking lifecycle
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from shared.domain.base import Aggregate
from shared.domain.exceptions import ForbiddenError, InvalidStateError
from shared.domain.value_objects import DateRange


class BookingStatus(Enum):
    """
    Booking Status Finite State Machine

    State transitions:
    - PENDING -> CONFIRMED (payment succeeded)
    - PENDING -> CANCELLED (user cancelled, or payment window elapsed)
    - CONFIRMED -> CANCELLED (user cancelled, no refund issued)

    CANCELLED is terminal.
    """
    PENDING = 'PENDING'        # Waiting for payment
    CONFIRMED = 'CONFIRMED'    # Paid and confirmed
    CANCELLED = 'CANCELLED'    # Cancelled by user or expired

    @classmethod
    def blocking(cls) -> tuple['BookingStatus', ...]:
        """Statuses that count against a unit's availability"""
        return (cls.PENDING, cls.CONFIRMED)


@dataclass(kw_only=True, eq=False)
class Booking(Aggregate):
    """
    Booking Aggregate Root

    Represents a user's reservation of a unit for an inclusive date range.

    Key invariants:
    - ``dates.end_date >= dates.start_date`` (enforced by DateRange)
    - ``expires_at`` is set while PENDING and cleared on any other status
    - CANCELLED bookings never transition again
    """

    unit_id: int
    user_id: int
    dates: DateRange
    status: BookingStatus = BookingStatus.PENDING
    expires_at: datetime | None = None

    @classmethod
    def create(
        cls,
        unit_id: int,
        user_id: int,
        dates: DateRange,
        now: datetime,
        expiration: timedelta,
    ) -> 'Booking':
        """New PENDING booking whose payment window closes at ``now + expiration``"""
        return cls(
            unit_id=unit_id,
            user_id=user_id,
            dates=dates,
            status=BookingStatus.PENDING,
            created_at=now,
            expires_at=now + expiration,
        )

    def mark_created(self, total_cost):
        """
        Announce the booking once it has an identity

        Events: BookingCreated
        """
        from apps.bookings.domain.events import BookingCreated

        self.add_event(BookingCreated(
            booking_id=self.id,
            unit_id=self.unit_id,
            user_id=self.user_id,
            dates=self.dates,
            total_cost=total_cost,
        ))

    def confirm(self):
        """
        Confirm booking (PENDING -> CONFIRMED)

        Only payment processing calls this.
        Events: BookingConfirmed
        """
        if self.status != BookingStatus.PENDING:
            raise InvalidStateError(
                f"Cannot confirm booking {self.id} from status {self.status.value}. "
                f"Booking must be PENDING."
            )

        from apps.bookings.domain.events import BookingConfirmed

        self.status = BookingStatus.CONFIRMED
        self.expires_at = None

        self.add_event(BookingConfirmed(booking_id=self.id, unit_id=self.unit_id))

    def cancel(self, requested_by: int | None = None) -> BookingStatus:
        """
        Cancel booking (PENDING | CONFIRMED -> CANCELLED)

        ``requested_by`` is the user asking for the cancellation; it must
        be the booking's owner. Returns the status the booking had before.

        Events: BookingCancelled
        """
        if requested_by is not None and requested_by != self.user_id:
            raise ForbiddenError("You can only cancel your own bookings")

        if self.status == BookingStatus.CANCELLED:
            raise InvalidStateError(f"Booking {self.id} is already cancelled")

        from apps.bookings.domain.events import BookingCancelled

        previous = self.status
        self.status = BookingStatus.CANCELLED
        self.expires_at = None

        self.add_event(BookingCancelled(
            booking_id=self.id,
            unit_id=self.unit_id,
            previous_status=previous.value,
            refund_required=previous == BookingStatus.CONFIRMED,
        ))
        return previous

    def is_expired(self, now: datetime) -> bool:
        """A PENDING booking whose payment window has closed (inclusive)"""
        return (
            self.status == BookingStatus.PENDING
            and self.expires_at is not None
            and self.expires_at <= now
        )

    @property
    def blocks_dates(self) -> bool:
        return self.status in BookingStatus.blocking()

    def __str__(self):
        return f"Booking {self.id} ({self.status.value}) unit={self.unit_id} {self.dates}"
