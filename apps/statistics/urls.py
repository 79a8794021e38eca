"""URL declarations for the statistics app."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import AvailableUnitsView, RefreshAvailableUnitsView

urlpatterns = [
    path('available-units/', AvailableUnitsView.as_view(), name='available-units'),
    path('available-units/refresh/', RefreshAvailableUnitsView.as_view(), name='available-units-refresh'),
]
