"""URL configuration for the rental booking backend.

The `urlpatterns` list routes the Django admin and each app's DRF views
under the versioned API prefix.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/v1/users/', include('apps.users.urls')),
    path('api/v1/units/', include('apps.units.urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/payments/', include('apps.finances.urls')),
    path('api/v1/statistics/', include('apps.statistics.urls')),
]
