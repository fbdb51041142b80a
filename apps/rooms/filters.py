"""FilterSet definitions for the room listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Room
from .repository import filter_by_room_type


class RoomFilterSet(django_filters.FilterSet):
    room_type = django_filters.CharFilter(method="filter_room_type")
    price_min = django_filters.NumberFilter(field_name="room_price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="room_price", lookup_expr="lte")

    class Meta:
        model = Room
        fields = ["room_type"]

    def filter_room_type(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return filter_by_room_type(queryset, value)
