"""Unit domain events."""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass
class UnitCreated(DomainEvent):
    unit_id: int
    owner_id: int
