"""
Payment Application Service

Creates the PENDING payment of a new booking and processes (emulates)
payments, confirming the booking in the same transaction.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from django.utils import timezone

from apps.bookings.application.ports import AbstractBookingRepository, PaymentCoupling
from apps.bookings.domain.entities import BookingStatus
from apps.finances.application.ports import AbstractPaymentRepository
from apps.finances.domain.entities import Payment
from shared.application.uow import AbstractUnitOfWork
from shared.domain.exceptions import InvalidStateError, NotFoundError, PaymentWindowClosedError

logger = logging.getLogger(__name__)


class PaymentService(PaymentCoupling):

    def __init__(
        self,
        payments: AbstractPaymentRepository,
        bookings: AbstractBookingRepository,
        uow_factory: Callable[[], AbstractUnitOfWork],
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.payments = payments
        self.bookings = bookings
        self.uow_factory = uow_factory
        self.clock = clock

    def create_pending_payment(self, booking_id: int, amount: Decimal) -> Payment:
        """Must run inside the unit of work that creates the booking."""
        payment = self.payments.save_payment(Payment.pending(booking_id, amount))
        logger.info(f"Pending payment {payment.id} created for booking {booking_id}: amount={amount}")
        return payment

    def process_payment(self, booking_id: int) -> Payment:
        """
        Emulate a successful payment and confirm the booking

        The booking's exclusive guard is held from before the status check
        until commit, so an expiry sweep or a cancellation cannot slip in
        between the check and the confirmation.

        Raises:
            NotFoundError: booking or payment does not exist
            PaymentWindowClosedError: booking expired but has not been swept yet
            InvalidStateError: booking is not PENDING or payment not PENDING
        """
        logger.info(f"Processing payment for booking {booking_id}")

        with self.uow_factory() as uow:
            uow.lock("booking", booking_id)

            booking = self.bookings.find_booking_with_exclusive_lock(booking_id)
            if booking is None:
                raise NotFoundError(f"Booking not found with id: {booking_id}")

            if booking.is_expired(self.clock()):
                raise PaymentWindowClosedError(
                    f"Payment window for booking {booking_id} closed at {booking.expires_at.isoformat()}"
                )
            if booking.status != BookingStatus.PENDING:
                raise InvalidStateError(
                    f"Booking {booking_id} is {booking.status.value}, not PENDING"
                )

            payment = self.payments.find_payment_by_booking_id(booking_id)
            if payment is None:
                raise NotFoundError(f"Payment not found for booking: {booking_id}")

            payment.complete()
            booking.confirm()

            self.payments.save_payment(payment)
            self.bookings.save_booking(booking)

            uow.collect_events(payment)
            uow.collect_events(booking)

        logger.info(f"Payment {payment.id} completed, booking {booking_id} confirmed")
        return payment

    def get_payment_by_booking_id(self, booking_id: int) -> Payment:
        payment = self.payments.find_payment_by_booking_id(booking_id)
        if payment is None:
            raise NotFoundError(f"Payment not found for booking: {booking_id}")
        return payment
