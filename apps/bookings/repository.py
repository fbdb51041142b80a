"""Booking store: persistence for bookings."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from .models import Booking

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from apps.rooms.models import Room

    from .services import BookingRequest


class BookingStore:
    def all(self) -> list[Booking]:
        return list(Booking.objects.select_related("room"))

    def by_guest_email(self, email: str) -> list[Booking]:
        return list(Booking.objects.select_related("room").filter(guest_email=email))

    def by_room(self, room_id: int) -> list[Booking]:
        return list(Booking.objects.select_related("room").filter(room_id=room_id))

    def by_confirmation_code(self, code: str) -> Booking | None:
        return Booking.objects.select_related("room").filter(confirmation_code=code).first()

    def has_overlapping(self, room_id: int, check_in: date, check_out: date) -> bool:
        return Booking.objects.filter(room_id=room_id).overlapping(check_in, check_out).exists()

    def add(self, room: "Room", request: "BookingRequest") -> Booking:
        """Insert a booking for ``room``; the confirmation code is generated on save."""

        booking = Booking(
            room=room,
            check_in=request.check_in,
            check_out=request.check_out,
            guest_email=request.guest_email,
            guest_full_name=request.guest_full_name,
            num_of_adults=request.num_of_adults,
            num_of_children=request.num_of_children,
        )
        booking.save(force_insert=True)
        return booking

    def delete(self, booking_id: int) -> int:
        """Delete by id. Unknown ids delete nothing."""

        deleted, _ = Booking.objects.filter(pk=booking_id).delete()
        return deleted
