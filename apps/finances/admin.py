from django.contrib import admin  # type: ignore

from .models import Payment


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("id", "booking", "amount", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("booking__id",)
    readonly_fields = ("booking", "amount", "status", "created_at")
