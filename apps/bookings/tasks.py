"""Celery tasks for the booking domain."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .bootstrap import expiration_sweeper

logger = logging.getLogger(__name__)


@shared_task(name="bookings.expire_pending_bookings", ignore_result=True)
def expire_pending_bookings() -> dict[str, int]:
    """
    Cancel PENDING bookings whose payment window has elapsed.

    Scheduled by Celery Beat every ``BOOKING_SWEEP_INTERVAL_SECONDS``.
    Never raises: a failed sweep is logged and the next run retries.

    Returns:
        dict: {"expired": number of cancelled bookings}
    """
    result = expiration_sweeper().sweep()
    if result["expired"]:
        logger.info(f"Expired {result['expired']} pending bookings")
    return result
