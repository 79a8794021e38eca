"""Wire the booking and payment services to the Django repositories."""

from __future__ import annotations

from datetime import timedelta

from django.conf import settings  # type: ignore

from apps.bookings.application.services import BookingService
from apps.bookings.application.sweeper import ExpirationSweeper
from apps.bookings.infrastructure.repositories import (
    DjangoBookingRepository,
    DjangoUnitRepository,
    DjangoUserRepository,
)
from apps.finances.application.services import PaymentService
from apps.finances.infrastructure.repositories import DjangoPaymentRepository
from shared.application.uow import DjangoUnitOfWork


def payment_service() -> PaymentService:
    return PaymentService(
        payments=DjangoPaymentRepository(),
        bookings=DjangoBookingRepository(),
        uow_factory=DjangoUnitOfWork,
    )


def booking_service() -> BookingService:
    return BookingService(
        units=DjangoUnitRepository(),
        users=DjangoUserRepository(),
        bookings=DjangoBookingRepository(),
        payments=payment_service(),
        uow_factory=DjangoUnitOfWork,
        expiration=timedelta(minutes=settings.BOOKING_EXPIRATION_MINUTES),
    )


def expiration_sweeper() -> ExpirationSweeper:
    return ExpirationSweeper(
        bookings=DjangoBookingRepository(),
        uow_factory=DjangoUnitOfWork,
    )
