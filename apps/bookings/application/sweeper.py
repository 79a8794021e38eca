"""
Expiration Sweeper

Cancels PENDING bookings whose payment window has elapsed. Runs on its
own schedule, independently of request handling.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from django.utils import timezone

from apps.bookings.application.ports import AbstractBookingRepository
from apps.bookings.domain.events import BookingsExpired
from shared.application.uow import AbstractUnitOfWork

logger = logging.getLogger(__name__)


class ExpirationSweeper:
    """
    One sweep = one transaction with one bulk UPDATE

    Audit rows for the cancelled bookings are written in a single batch
    and the availability cache is invalidated once, both after commit via
    ``BookingsExpired``. Errors never escape ``sweep()``: the next
    scheduled run retries naturally.
    """

    def __init__(
        self,
        bookings: AbstractBookingRepository,
        uow_factory: Callable[[], AbstractUnitOfWork],
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.bookings = bookings
        self.uow_factory = uow_factory
        self.clock = clock

    def sweep(self) -> dict[str, int]:
        now = self.clock()
        try:
            return {"expired": self._expire(now)}
        except Exception as e:
            logger.error(f"Booking expiration sweep failed at {now.isoformat()}: {e}", exc_info=True)
            return {"expired": 0}

    def _expire(self, now: datetime) -> int:
        with self.uow_factory() as uow:
            booking_ids = self.bookings.find_expired_pending_booking_ids(now)
            if not booking_ids:
                logger.debug("No expired bookings found")
                return 0

            logger.info(f"Found {len(booking_ids)} expired bookings to cancel")
            cancelled = self.bookings.bulk_cancel_expired_bookings(now)
            if cancelled != len(booking_ids):
                logger.warning(
                    f"Expected to cancel {len(booking_ids)} expired bookings, cancelled {cancelled}"
                )
                # Rows that left PENDING in between must not be audited as expired
                booking_ids = self.bookings.find_cancelled_booking_ids(booking_ids)

            if booking_ids:
                uow.add_event(BookingsExpired(booking_ids=booking_ids))

        logger.info(f"Successfully cancelled {cancelled} expired bookings")
        return cancelled
