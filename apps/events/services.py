"""Audit sink.

Fire-and-forget from the caller's perspective: a failed write is logged
and swallowed, never propagated into the business flow.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from .models import ENTITY_TYPE_BY_EVENT, Event, EventType

logger = logging.getLogger(__name__)


def resolve_entity_type(event_type: str) -> str:
    return ENTITY_TYPE_BY_EVENT[EventType(event_type)]


def _serialize(event_data: Any) -> str | None:
    if event_data is None or isinstance(event_data, str):
        return event_data
    return json.dumps(event_data, default=str, sort_keys=True)


def record_event(event_type: str, entity_id: int | None, event_data: Any = None) -> Event | None:
    """Append one audit row. Returns ``None`` if the write failed."""

    try:
        event = Event.objects.create(
            event_type=event_type,
            entity_type=resolve_entity_type(event_type),
            entity_id=entity_id,
            event_data=_serialize(event_data),
        )
    except Exception as exc:
        logger.error(f"Failed to record audit event {event_type} for {entity_id}: {exc}", exc_info=True)
        return None

    logger.info(f"Event created: {event_type} for entity: {entity_id}")
    return event


def record_events_batch(
    event_type: str, entity_ids: Iterable[int], event_data: Any = None
) -> list[Event]:
    """Append one audit row per entity id with a single INSERT."""

    ids = list(entity_ids)
    if not ids:
        return []

    try:
        entity_type = resolve_entity_type(event_type)
        payload = _serialize(event_data)
        events = Event.objects.bulk_create(
            [
                Event(
                    event_type=event_type,
                    entity_type=entity_type,
                    entity_id=entity_id,
                    event_data=payload,
                )
                for entity_id in ids
            ]
        )
    except Exception as exc:
        logger.error(f"Failed to record {len(ids)} audit events of type {event_type}: {exc}", exc_info=True)
        return []

    logger.info(f"Batch created {len(events)} events of type {event_type}")
    return events
