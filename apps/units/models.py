"""Accommodation unit models."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.bookings.domain.pricing import total_cost_to_user_price


class UnitQuerySet(models.QuerySet):

    def _blocking_bookings(self):
        from apps.bookings.models import Booking

        return Booking.objects.blocking()

    def available_between(self, start_date: date, end_date: date):
        """Units with no blocking booking overlapping ``[start_date, end_date]``."""
        busy = self._blocking_bookings().overlapping(start_date, end_date).values("unit_id")
        return self.exclude(pk__in=busy)

    def available_from(self, day: date):
        """Units with no blocking booking ending on ``day`` or later."""
        busy = self._blocking_bookings().ending_on_or_after(day).values("unit_id")
        return self.exclude(pk__in=busy)


class Unit(models.Model):
    """A bookable house, flat or apartment."""

    class AccommodationType(models.TextChoices):
        HOUSE = "HOUSE", _("House")
        FLAT = "FLAT", _("Flat")
        APARTMENTS = "APARTMENTS", _("Apartments")

    number_of_rooms = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(20)],
    )
    accommodation_type = models.CharField(max_length=20, choices=AccommodationType.choices)
    floor = models.SmallIntegerField(
        validators=[MinValueValidator(-5), MaxValueValidator(100)],
    )
    base_cost = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("1.00")), MaxValueValidator(Decimal("100000.00"))],
        help_text=_("Nightly cost before markup."),
    )
    description = models.TextField(max_length=1000, blank=True, default="")
    owner = models.ForeignKey(
        "users.User",
        on_delete=models.PROTECT,
        related_name="units",
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)

    objects = UnitQuerySet.as_manager()

    class Meta:
        ordering = ["id"]
        indexes = [
            models.Index(fields=["accommodation_type", "number_of_rooms"], name="units_type_rooms_idx"),
            models.Index(fields=["base_cost"], name="units_base_cost_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.get_accommodation_type_display()} #{self.pk} ({self.number_of_rooms} rooms)"

    @property
    def total_cost(self) -> Decimal:
        """Nightly price shown to users, markup included."""
        return total_cost_to_user_price(self.base_cost)
