"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits; their
handlers write the audit log and invalidate the availability cache.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from shared.domain.base import DomainEvent
from shared.domain.value_objects import DateRange


@dataclass
class BookingCreated(DomainEvent):
    """
    Event: A new PENDING booking was created

    Triggers:
    - Audit BOOKING_CREATED
    - Invalidate available units count
    """
    booking_id: int
    unit_id: int
    user_id: int
    dates: DateRange
    total_cost: Decimal


@dataclass
class BookingConfirmed(DomainEvent):
    """
    Event: Booking payment confirmed (PENDING -> CONFIRMED)

    Triggers:
    - Audit BOOKING_CONFIRMED
    - Invalidate available units count
    """
    booking_id: int
    unit_id: int


@dataclass
class BookingCancelled(DomainEvent):
    """
    Event: Booking cancelled by its owner

    ``refund_required`` is set when a CONFIRMED (paid) booking was
    cancelled. Refunds are not issued automatically; the flag ends up in
    the audit payload for manual follow-up.
    """
    booking_id: int
    unit_id: int
    previous_status: str
    refund_required: bool = False


@dataclass
class BookingsExpired(DomainEvent):
    """
    Event: A sweep cancelled PENDING bookings whose payment window elapsed

    One event per sweep, so audit rows are written in one batch and the
    cache is invalidated once.
    """
    booking_ids: List[int] = field(default_factory=list)
