"""Admin registrations for bookings."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ("id", "unit", "user", "start_date", "end_date", "status", "expires_at", "created_at")
    list_filter = ("status",)
    search_fields = ("id", "user__username")
    date_hierarchy = "start_date"
    list_select_related = ("unit", "user")
    # Lifecycle transitions go through the booking service
    readonly_fields = ("unit", "user", "start_date", "end_date", "status", "expires_at", "created_at")
