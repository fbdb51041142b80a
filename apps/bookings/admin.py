"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "confirmation_code",
        "room",
        "guest_email",
        "check_in",
        "check_out",
        "created_at",
    )
    list_filter = ("check_in", "check_out", "room__room_type")
    search_fields = ("confirmation_code", "guest_email", "guest_full_name")
    readonly_fields = ("confirmation_code", "created_at")
