"""
Unit of Work Pattern

Manages database transactions, holds exclusive guards for the duration
of the transaction and ensures that domain events are published only
after a successful commit.

Effects that must succeed with the transaction (e.g. creating the
booking's payment) are plain calls inside the ``with`` block. Effects
that are best-effort (audit log, cache invalidation) are domain events
handled by the message bus after commit.
"""

from abc import ABC, abstractmethod
from typing import List
import logging

from django.db import transaction

from shared.application.locks import AbstractGuard, entity_guard, guard_key
from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class AbstractUnitOfWork(ABC):
    """Abstract Unit of Work pattern"""

    def __init__(self, guard: AbstractGuard | None = None):
        self._events: List[DomainEvent] = []
        self._guard = guard or entity_guard
        self._held: List[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._release_guards()

    def lock(self, entity: str, entity_id) -> None:
        """
        Acquire the exclusive guard on an entity until this unit of work ends

        Must be called before the entity's state is read, so that a
        concurrent operation on the same entity observes the committed
        result of this one.
        """
        key = guard_key(entity, entity_id)
        if key in self._held:
            return
        self._guard.acquire(key)
        self._held.append(key)
        logger.debug(f"Acquired exclusive guard {key}")

    def _release_guards(self):
        while self._held:
            key = self._held.pop()
            self._guard.release(key)
            logger.debug(f"Released exclusive guard {key}")

    def collect_events(self, aggregate):
        """
        Collect events from aggregate root

        Extracts all domain events from the aggregate and
        clears them from the aggregate.
        """
        if hasattr(aggregate, 'events'):
            new_events = aggregate.events
            if new_events:
                self._events.extend(new_events)
                aggregate.clear_events()
                logger.debug(
                    f"Collected {len(new_events)} events from "
                    f"{aggregate.__class__.__name__} (ID: {aggregate.id})"
                )

    def add_event(self, event: DomainEvent):
        """Queue an event that is not owned by a single aggregate"""
        self._events.append(event)

    @abstractmethod
    def commit(self):
        """Commit the transaction"""

    @abstractmethod
    def rollback(self):
        """Rollback the transaction"""

    def _drain_events(self) -> List[DomainEvent]:
        events = self._events.copy()
        self._events.clear()
        return events

    def _publish_events(self, events: List[DomainEvent]):
        """
        Publish collected events to message bus

        Called after successful transaction commit.
        """
        from shared.application.message_bus import message_bus

        logger.info(f"Publishing {len(events)} domain events after commit")

        try:
            message_bus.publish_events(events)
        except Exception as e:
            # State is already committed; a failed side effect must not undo it
            logger.error(f"Error publishing events: {e}", exc_info=True)


class DjangoUnitOfWork(AbstractUnitOfWork):
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork() as uow:
            uow.lock("unit", unit_id)
            unit = units.find_unit_with_exclusive_lock(unit_id)

            booking = Booking.create(...)
            bookings.save_booking(booking)

            uow.collect_events(booking)
            # Transaction commits here
        # Guards are released, events are published after commit
    """

    def __init__(self, guard: AbstractGuard | None = None):
        super().__init__(guard)
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction, then release guards"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            try:
                if self._transaction:
                    self._transaction.__exit__(exc_type, exc_val, exc_tb)
            finally:
                self._release_guards()

    def commit(self):
        """
        Schedule event publishing after commit

        Events are published using Django's transaction.on_commit()
        so they only run once the database commit succeeds.
        """
        logger.debug(f"Committing transaction with {len(self._events)} events")

        events = self._drain_events()
        if events:
            transaction.on_commit(lambda: self._publish_events(events))

    def rollback(self):
        """Rollback changes and discard events"""
        logger.warning(f"Rolling back transaction, discarding {len(self._events)} events")
        self._events.clear()
