"""
Booking Application Service

Use cases of the booking lifecycle. Each write runs in its own unit of
work, which holds the entity's exclusive guard from before the first read
until after commit, and publishes the collected domain events once the
transaction has committed.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Callable

from django.utils import timezone

from apps.bookings.application.ports import (
    AbstractBookingRepository,
    AbstractUnitRepository,
    AbstractUserRepository,
    PaymentCoupling,
)
from apps.bookings.domain.availability import AvailabilityChecker
from apps.bookings.domain.entities import Booking, BookingStatus
from apps.bookings.domain.pricing import compute_total_cost
from shared.application.uow import AbstractUnitOfWork
from shared.domain.exceptions import ConflictError, NotFoundError
from shared.domain.value_objects import DateRange

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION = timedelta(minutes=15)


class BookingService:
    """
    Booking lifecycle: create, read, cancel. Confirmation happens in payment processing.

    Collaborators are injected so the same code runs against the Django
    repositories in production and against in-memory fakes in tests.
    """

    def __init__(
        self,
        units: AbstractUnitRepository,
        users: AbstractUserRepository,
        bookings: AbstractBookingRepository,
        payments: PaymentCoupling,
        uow_factory: Callable[[], AbstractUnitOfWork],
        expiration: timedelta = DEFAULT_EXPIRATION,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.units = units
        self.users = users
        self.bookings = bookings
        self.payments = payments
        self.uow_factory = uow_factory
        self.expiration = expiration
        self.clock = clock
        self.availability = AvailabilityChecker(bookings)

    def create_booking(
        self,
        unit_id: int,
        user_id: int,
        start_date: date,
        end_date: date,
    ) -> tuple[Booking, Decimal]:
        """
        Create a PENDING booking and its PENDING payment

        Steps:
        1. Take the unit's exclusive guard
        2. Check unit and user exist, validate dates
        3. Check availability under the guard
        4. Save booking, create payment for the computed total
        5. Commit; BookingCreated is published afterwards

        Returns the booking and its total cost.

        Raises:
            NotFoundError: unit or user does not exist
            InvalidArgumentError: end date before start date
            ConflictError: a blocking booking overlaps the dates
        """
        logger.info(
            f"Creating booking for unit_id={unit_id}, user_id={user_id}, "
            f"dates={start_date} to {end_date}"
        )

        with self.uow_factory() as uow:
            uow.lock("unit", unit_id)

            unit = self.units.find_unit_with_exclusive_lock(unit_id)
            if unit is None:
                raise NotFoundError(f"Unit not found with id: {unit_id}")

            if self.users.find_user_by_id(user_id) is None:
                raise NotFoundError(f"User not found with id: {user_id}")

            dates = DateRange(start_date, end_date)

            if self.availability.conflicts(unit_id, dates):
                logger.info(f"Unit {unit_id} is not available for {dates}")
                raise ConflictError("Unit is not available for selected dates")

            booking = Booking.create(
                unit_id=unit_id,
                user_id=user_id,
                dates=dates,
                now=self.clock(),
                expiration=self.expiration,
            )
            booking = self.bookings.save_booking(booking)

            total_cost = compute_total_cost(unit.base_cost, dates.start_date, dates.end_date)
            self.payments.create_pending_payment(booking.id, total_cost)

            booking.mark_created(total_cost)
            uow.collect_events(booking)

        logger.info(
            f"Booking created successfully: booking_id={booking.id}, "
            f"unit_id={unit_id}, user_id={user_id}, total_cost={total_cost}"
        )
        return booking, total_cost

    def get_booking(self, booking_id: int) -> tuple[Booking, Decimal]:
        """Booking with its total cost computed from the unit's current base cost."""
        booking = self.bookings.find_booking_by_id(booking_id)
        if booking is None:
            raise NotFoundError(f"Booking not found with id: {booking_id}")

        unit = self.units.find_unit(booking.unit_id)
        if unit is None:
            raise NotFoundError(f"Unit not found with id: {booking.unit_id}")

        return booking, compute_total_cost(unit.base_cost, booking.dates.start_date, booking.dates.end_date)

    def cancel_booking(self, booking_id: int, user_id: int) -> Booking:
        """
        Cancel a booking on behalf of its owner

        Cancelling a CONFIRMED booking succeeds but issues no refund; the
        cancellation event carries ``refund_required`` for follow-up.

        Raises:
            NotFoundError: booking does not exist
            ForbiddenError: user does not own the booking
            InvalidStateError: booking is already cancelled
        """
        logger.info(f"Cancelling booking: booking_id={booking_id}, user_id={user_id}")

        with self.uow_factory() as uow:
            uow.lock("booking", booking_id)

            booking = self.bookings.find_booking_with_exclusive_lock(booking_id)
            if booking is None:
                raise NotFoundError(f"Booking not found with id: {booking_id}")

            if booking.user_id != user_id:
                logger.warning(
                    f"Unauthorized cancel attempt: booking_id={booking_id}, "
                    f"request_user_id={user_id}, owner_user_id={booking.user_id}"
                )

            previous = booking.cancel(requested_by=user_id)
            if previous == BookingStatus.CONFIRMED:
                logger.warning(f"Cancelling confirmed booking {booking_id} - refund logic not implemented")

            self.bookings.save_booking(booking)
            uow.collect_events(booking)

        logger.info(f"Booking cancelled successfully: booking_id={booking_id}")
        return booking
