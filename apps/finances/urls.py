"""URL routing for payments."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingPaymentView, ProcessPaymentView

urlpatterns = [
    path("process/", ProcessPaymentView.as_view(), name="payment-process"),
    path("booking/<int:booking_id>/", BookingPaymentView.as_view(), name="payment-by-booking"),
]
