"""Admin registration for rooms."""

from __future__ import annotations

from django.contrib import admin

from .models import Room


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    list_display = ("id", "room_type", "room_price", "created_at")
    list_filter = ("room_type",)
    search_fields = ("room_type", "description")
    readonly_fields = ("created_at",)
