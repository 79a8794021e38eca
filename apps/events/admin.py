from django.contrib import admin  # type: ignore

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("id", "event_type", "entity_type", "entity_id", "created_at")
    list_filter = ("event_type", "entity_type")
    search_fields = ("entity_id",)
    readonly_fields = ("event_type", "entity_type", "entity_id", "event_data", "created_at")

    def has_add_permission(self, request):  # type: ignore[override]
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore[override]
        return False

    def has_delete_permission(self, request, obj=None):  # type: ignore[override]
        return False
