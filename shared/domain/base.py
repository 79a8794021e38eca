"""
Base Domain Classes

Foundational building blocks used by the booking and payment cores:
- Entity: Objects with identity
- Aggregate: Consistency boundaries that collect domain events
- DomainEvent: Something that happened, published after commit
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime
from typing import List
from uuid import UUID, uuid4

from django.utils import timezone


@dataclass
class Entity(ABC):
    """
    Base class for all entities

    Identity is assigned by the persistence layer, so a freshly built
    entity has ``id=None`` until it is saved. Two entities are equal if
    they are of the same class and share a non-null id.
    """
    id: int | None = None
    created_at: datetime = field(default_factory=timezone.now)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        return hash((self.__class__.__name__, self.id))


@dataclass(eq=False)
class Aggregate(Entity):
    """
    Base class for aggregate roots

    Aggregates collect domain events while a use case runs. The unit of
    work drains them and publishes them once the transaction commits.
    """
    _events: List['DomainEvent'] = field(default_factory=list, repr=False, init=False, compare=False)

    def add_event(self, event: 'DomainEvent'):
        """Add a domain event to be published"""
        self._events.append(event)

    def clear_events(self):
        """Clear all collected events (called after collection)"""
        self._events.clear()

    @property
    def events(self) -> List['DomainEvent']:
        """Get copy of collected events"""
        return self._events.copy()


@dataclass
class DomainEvent:
    """
    Base class for domain events

    Events describe a committed state change. Handlers for them are
    best-effort side effects (audit log, cache invalidation).
    """
    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=timezone.now, kw_only=True)
