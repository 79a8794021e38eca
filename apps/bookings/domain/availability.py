"""
Availability Checker

A unit is available for a date range iff none of its blocking bookings
(PENDING or CONFIRMED) overlaps the range, inclusive on both ends.

The answer is only trustworthy while the caller holds the unit's
exclusive guard; otherwise a concurrent create can slip in between the
check and the insert.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from shared.domain.value_objects import DateRange

if TYPE_CHECKING:
    from apps.bookings.application.ports import AbstractBookingRepository


class AvailabilityChecker:

    def __init__(self, bookings: AbstractBookingRepository):
        self.bookings = bookings

    def conflicts(self, unit_id: int, dates: DateRange) -> list:
        return self.bookings.find_conflicting_bookings(unit_id, dates.start_date, dates.end_date)

    def is_available(self, unit_id: int, start_date: date, end_date: date) -> bool:
        return not self.conflicts(unit_id, DateRange(start_date, end_date))
