"""
Availability Cache

Read-through, invalidate-on-write cache of the number of units with no
blocking booking ending today or later. The backing store (Redis via
django-redis in production) may be unreachable: every cache call then
degrades to a miss or a no-op and the count is served from the database.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from django.conf import settings  # type: ignore
from django.core.cache import caches  # type: ignore
from django.utils import timezone  # type: ignore

from shared.domain.exceptions import UnavailableError

logger = logging.getLogger(__name__)


def count_available_units() -> int:
    from apps.units.models import Unit

    return Unit.objects.available_from(timezone.localdate()).count()


class AvailabilityCache:

    def __init__(
        self,
        compute: Callable[[], int] = count_available_units,
        alias: str = "default",
        key: str | None = None,
        timeout: int | None = None,
    ):
        self.compute = compute
        self.alias = alias
        self._key = key
        self._timeout = timeout

    @property
    def key(self) -> str:
        return self._key or settings.AVAILABLE_UNITS_CACHE_KEY

    @property
    def timeout(self) -> int | None:
        if self._timeout is not None:
            return self._timeout
        return getattr(settings, "AVAILABLE_UNITS_CACHE_TIMEOUT", None)

    @property
    def backend(self):
        return caches[self.alias]

    def get(self) -> int:
        cached = self._read()
        if cached is not None:
            logger.debug(f"Retrieved available units count from cache: {cached}")
            return int(cached)

        logger.debug("Cache miss for available units count, recalculating")
        return self.force_refresh()

    def force_refresh(self) -> int:
        count = self.compute()
        self._write(count)
        logger.info(f"Cached available units count: {count}")
        return count

    def invalidate(self) -> None:
        """Drop the cached value. The next ``get()`` recomputes."""
        try:
            self._call("delete", self.key)
        except UnavailableError as exc:
            logger.warning(f"Failed to invalidate {self.key}: {exc}")
            return
        logger.debug("Invalidated available units cache")

    def warm_up(self) -> None:
        logger.info("Warming up available units cache")
        try:
            self.force_refresh()
        except Exception as exc:
            # Database not ready yet; the first get() fills the cache instead
            logger.warning(f"Cache warm-up failed: {exc}")

    def _call(self, operation: str, *args, **kwargs) -> Any:
        try:
            return getattr(self.backend, operation)(*args, **kwargs)
        except Exception as exc:
            raise UnavailableError(f"cache {operation} failed: {exc}") from exc

    def _read(self) -> Any:
        try:
            return self._call("get", self.key)
        except UnavailableError as exc:
            logger.warning(f"Cache read of {self.key} failed, treating as miss: {exc}")
            return None

    def _write(self, count: int) -> None:
        try:
            self._call("set", self.key, count, timeout=self.timeout)
        except UnavailableError as exc:
            logger.warning(f"Cache write of {self.key} failed: {exc}")


# Process-wide handle
availability_cache = AvailabilityCache()
