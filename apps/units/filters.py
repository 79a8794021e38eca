"""FilterSet definitions for unit search and listing."""

from __future__ import annotations

import django_filters  # type: ignore

from apps.bookings.domain.pricing import base_cost_from_user_price
from shared.domain.value_objects import DateRange

from .models import Unit


class UnitFilterSet(django_filters.FilterSet):
    """
    Unit search

    ``min_cost``/``max_cost`` are user-facing prices (markup included) and
    are converted back to base-cost bounds before querying. When both
    ``start_date`` and ``end_date`` are given, units with a blocking
    booking overlapping the range are excluded.
    """

    number_of_rooms = django_filters.NumberFilter(field_name="number_of_rooms", lookup_expr="exact")
    accommodation_type = django_filters.ChoiceFilter(choices=Unit.AccommodationType.choices)
    floor = django_filters.NumberFilter(field_name="floor", lookup_expr="exact")
    min_cost = django_filters.NumberFilter(method="filter_min_cost")
    max_cost = django_filters.NumberFilter(method="filter_max_cost")
    start_date = django_filters.DateFilter(method="filter_dates")
    end_date = django_filters.DateFilter(method="filter_dates")

    class Meta:
        model = Unit
        fields = ["number_of_rooms", "accommodation_type", "floor"]

    def filter_min_cost(self, queryset, name, value):  # type: ignore
        return queryset.filter(base_cost__gte=base_cost_from_user_price(value))

    def filter_max_cost(self, queryset, name, value):  # type: ignore
        return queryset.filter(base_cost__lte=base_cost_from_user_price(value))

    def filter_dates(self, queryset, name, value):  # type: ignore
        # Applied once both bounds are known, see filter_queryset
        return queryset

    def filter_queryset(self, queryset):  # type: ignore
        queryset = super().filter_queryset(queryset)
        start_date = self.form.cleaned_data.get("start_date")
        end_date = self.form.cleaned_data.get("end_date")
        if start_date and end_date:
            dates = DateRange(start_date, end_date)
            queryset = queryset.available_between(dates.start_date, dates.end_date)
        return queryset
