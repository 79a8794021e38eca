"""Django ORM repository for payments."""

from __future__ import annotations

from typing import Optional

from apps.finances.application.ports import AbstractPaymentRepository
from apps.finances.domain.entities import Payment, PaymentStatus
from apps.finances.models import Payment as PaymentModel


def to_entity(row: PaymentModel) -> Payment:
    return Payment(
        id=row.pk,
        booking_id=row.booking_id,
        amount=row.amount,
        status=PaymentStatus(row.status),
        created_at=row.created_at,
    )


class DjangoPaymentRepository(AbstractPaymentRepository):

    def save_payment(self, payment: Payment) -> Payment:
        if payment.id is None:
            row = PaymentModel.objects.create(
                booking_id=payment.booking_id,
                amount=payment.amount,
                status=payment.status.value,
                created_at=payment.created_at,
            )
            payment.id = row.pk
        else:
            # Amount is frozen at creation
            PaymentModel.objects.filter(pk=payment.id).update(status=payment.status.value)
        return payment

    def find_payment_by_booking_id(self, booking_id: int) -> Optional[Payment]:
        row = PaymentModel.objects.filter(booking_id=booking_id).first()
        return to_entity(row) if row else None
