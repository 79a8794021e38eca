"""Payment Domain Events"""

from dataclasses import dataclass
from decimal import Decimal

from shared.domain.base import DomainEvent


@dataclass
class PaymentCompleted(DomainEvent):
    """
    Event: Emulated payment succeeded (PENDING -> COMPLETED)

    Triggers:
    - Audit PAYMENT_COMPLETED
    """
    payment_id: int
    booking_id: int
    amount: Decimal
