"""
Common Value Objects

- DateRange: the inclusive stay period of a booking
"""

from dataclasses import dataclass
from datetime import date

from shared.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class DateRange:
    """
    Date range value object

    Both ``start_date`` and ``end_date`` are inclusive, and a range may
    start and end on the same day. Overlap therefore includes touching
    ranges: a stay ending on day X blocks another one starting on day X.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date is None or self.end_date is None:
            raise InvalidArgumentError("Start date and end date are required")
        if self.end_date < self.start_date:
            raise InvalidArgumentError(
                f"End date ({self.end_date}) must be on or after start date ({self.start_date})"
            )

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Examples:
            - DateRange(1, 3) overlaps with DateRange(2, 4) -> True
            - DateRange(1, 3) overlaps with DateRange(3, 5) -> True (same-day touch)
            - DateRange(1, 3) overlaps with DateRange(4, 6) -> False
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")
        return overlaps(self.start_date, self.end_date, other.start_date, other.end_date)

    @property
    def nights(self) -> int:
        """Billable nights; a same-day range still books one night."""
        return max(1, (self.end_date - self.start_date).days)

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"


def overlaps(a_start: date, a_end: date, b_start: date, b_end: date) -> bool:
    # Inclusive on both ends: start1 <= end2 AND end1 >= start2
    return a_start <= b_end and a_end >= b_start
