"""Booking persistence models."""

from __future__ import annotations

from datetime import date, datetime

from django.db import models  # type: ignore
from django.db.models import F, Q  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class BookingQuerySet(models.QuerySet):

    def blocking(self):
        """PENDING and CONFIRMED bookings; CANCELLED never blocks a unit."""
        return self.filter(status__in=[Booking.Status.PENDING, Booking.Status.CONFIRMED])

    def overlapping(self, start_date: date, end_date: date):
        # Inclusive on both ends: a stay ending on day X blocks one starting on day X
        return self.filter(start_date__lte=end_date, end_date__gte=start_date)

    def ending_on_or_after(self, day: date):
        return self.filter(end_date__gte=day)

    def expired_pending(self, now: datetime):
        return self.filter(status=Booking.Status.PENDING, expires_at__lte=now)

    def for_user(self, user_id: int):
        return self.filter(user_id=user_id)


class Booking(models.Model):
    """Reservation of a unit for an inclusive date range."""

    class Status(models.TextChoices):
        PENDING = "PENDING", _("Pending payment")
        CONFIRMED = "CONFIRMED", _("Confirmed")
        CANCELLED = "CANCELLED", _("Cancelled")

    unit = models.ForeignKey(
        "units.Unit",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    user = models.ForeignKey(
        "users.User",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    start_date = models.DateField()
    end_date = models.DateField()
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    expires_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text=_("Payment deadline; set only while the booking is pending."),
    )

    objects = BookingQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["unit", "status", "start_date", "end_date"], name="bookings_unit_dates_idx"),
            models.Index(fields=["status", "expires_at"], name="bookings_status_expiry_idx"),
            models.Index(fields=["user", "created_at"], name="bookings_user_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(end_date__gte=F("start_date")),
                name="bookings_end_after_start",
            ),
            models.CheckConstraint(
                condition=(
                    Q(status="PENDING", expires_at__isnull=False)
                    | (~Q(status="PENDING") & Q(expires_at__isnull=True))
                ),
                name="bookings_expiry_iff_pending",
            ),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} unit={self.unit_id} {self.start_date}..{self.end_date} ({self.status})"

    @property
    def total_cost(self):
        from apps.bookings.domain.pricing import compute_total_cost

        return compute_total_cost(self.unit.base_cost, self.start_date, self.end_date)
