"""
Payment Domain Entities

- Payment: the payment of one booking, amount frozen at booking time
- PaymentStatus: PENDING -> COMPLETED | FAILED
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from shared.domain.base import Aggregate
from shared.domain.exceptions import InvalidStateError


class PaymentStatus(Enum):
    PENDING = 'PENDING'
    COMPLETED = 'COMPLETED'
    FAILED = 'FAILED'


@dataclass(kw_only=True, eq=False)
class Payment(Aggregate):
    """Payment of a booking. Payment processing is emulated."""

    booking_id: int
    amount: Decimal
    status: PaymentStatus = PaymentStatus.PENDING

    @classmethod
    def pending(cls, booking_id: int, amount: Decimal) -> 'Payment':
        return cls(booking_id=booking_id, amount=amount, status=PaymentStatus.PENDING)

    def complete(self):
        """
        Mark payment as completed (PENDING -> COMPLETED)

        Events: PaymentCompleted
        """
        if self.status != PaymentStatus.PENDING:
            raise InvalidStateError(
                f"Payment {self.id} is {self.status.value}, only PENDING payments can be processed"
            )

        from apps.finances.domain.events import PaymentCompleted

        self.status = PaymentStatus.COMPLETED
        self.add_event(PaymentCompleted(
            payment_id=self.id,
            booking_id=self.booking_id,
            amount=self.amount,
        ))
