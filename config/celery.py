import logging
import os

from celery import Celery
from celery.signals import beat_init, worker_ready  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings.dev")

logger = logging.getLogger(__name__)

app = Celery("rental_booking")

app.config_from_object("django.conf:settings", namespace="CELERY")
app.autodiscover_tasks()


# ============================================================================
# CELERY BEAT SCHEDULE (Periodic Tasks)
# ============================================================================

@app.on_after_configure.connect
def setup_periodic_tasks(sender, **kwargs):
    from django.conf import settings  # type: ignore

    interval = float(settings.BOOKING_SWEEP_INTERVAL_SECONDS)
    # Cancel unpaid bookings whose payment window elapsed
    sender.conf.beat_schedule = {
        "expire-pending-bookings": {
            "task": "bookings.expire_pending_bookings",
            "schedule": interval,
            # A sweep still queued when the next one is due is redundant
            "options": {"expires": interval},
        },
    }


@beat_init.connect
def schedule_initial_sweep(sender=None, **kwargs):
    """First sweep shortly after startup instead of one full interval later."""
    from django.conf import settings  # type: ignore

    countdown = float(settings.BOOKING_SWEEP_INITIAL_DELAY_SECONDS)
    app.send_task("bookings.expire_pending_bookings", countdown=countdown)
    logger.info(f"Initial booking expiration sweep scheduled in {countdown}s")


@worker_ready.connect
def warm_up_statistics(sender=None, **kwargs):
    from apps.statistics.cache import availability_cache

    availability_cache.warm_up()
