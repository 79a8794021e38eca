"""Admin registrations for units."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Unit


@admin.register(Unit)
class UnitAdmin(admin.ModelAdmin):
    list_display = ("id", "accommodation_type", "number_of_rooms", "floor", "base_cost", "owner", "created_at")
    list_filter = ("accommodation_type", "number_of_rooms")
    search_fields = ("description", "owner__username")
    readonly_fields = ("created_at",)
    list_select_related = ("owner",)
