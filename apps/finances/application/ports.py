"""Persistence port for payments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from apps.finances.domain.entities import Payment


class AbstractPaymentRepository(ABC):

    @abstractmethod
    def save_payment(self, payment: Payment) -> Payment:
        """Insert or update; assigns ``payment.id`` on insert."""

    @abstractmethod
    def find_payment_by_booking_id(self, booking_id: int) -> Optional[Payment]:
        """The booking's payment, if any."""
