"""
Booking Service

Use cases for the booking domain. Every write runs inside a database
transaction; the create path follows this order:

1. Validate the stay (check-out after check-in)
2. Start database transaction (atomic)
3. Lock the room row with SELECT FOR UPDATE
4. Check for overlapping bookings of that room
5. Insert the booking with a fresh confirmation code
6. Commit, releasing the room lock

Because the lock is taken before the overlap check, a concurrent request for
the same room waits in step 3 and then sees the first booking in step 4.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

import structlog  # type: ignore
from django.db import IntegrityError, OperationalError, transaction  # type: ignore

from apps.rooms.repository import RoomStore
from shared.domain.results import Failure, InvalidRequest, NotFound, Ok, TransientFailure
from shared.domain.value_objects import DateRange

from .models import Booking
from .repository import BookingStore

logger = structlog.get_logger(__name__)

UNAVAILABLE_MESSAGE = "Sorry, this room is not available for the selected dates."


@dataclass(frozen=True)
class BookingRequest:
    """Guest's request to book a room"""
    check_in: date
    check_out: date
    guest_email: str
    guest_full_name: str = ''
    num_of_adults: int = 1
    num_of_children: int = 0


class BookingService:
    def __init__(self, booking_store: BookingStore | None = None, room_store: RoomStore | None = None):
        self.booking_store = booking_store or BookingStore()
        self.room_store = room_store or RoomStore()

    def list_all_bookings(self) -> list[Booking]:
        return self.booking_store.all()

    def list_bookings_by_guest_email(self, email: str) -> list[Booking]:
        return self.booking_store.by_guest_email(email)

    def list_bookings_for_room(self, room_id: int) -> list[Booking]:
        return self.booking_store.by_room(room_id)

    def cancel_booking(self, booking_id: int) -> None:
        """Delete the booking. Cancelling an unknown id is a no-op."""

        deleted = self.booking_store.delete(booking_id)
        logger.info("booking.cancelled", booking_id=booking_id, deleted=bool(deleted))

    def find_by_confirmation_code(self, code: str) -> Ok[Booking] | NotFound:
        booking = self.booking_store.by_confirmation_code(code)
        if booking is None:
            return NotFound(f"No booking found with booking code: {code}")
        return Ok(booking)

    def create_booking(self, room_id: int, request: BookingRequest) -> Ok[str] | Failure:
        """
        Book ``room_id`` for the requested stay

        Returns Ok(confirmation_code), NotFound for an unknown room,
        InvalidRequest for a bad stay or taken dates, and TransientFailure
        when the database gave up on the lock. Nothing is retried here.
        """
        log = logger.bind(room_id=room_id, check_in=str(request.check_in), check_out=str(request.check_out))

        try:
            DateRange(request.check_in, request.check_out)
        except ValueError as exc:
            log.info("booking.rejected", reason="invalid_dates")
            return InvalidRequest(str(exc))

        try:
            with transaction.atomic():
                result = self._book_locked_room(room_id, request)
                if not result.ok:
                    transaction.set_rollback(True)
        except OperationalError as exc:
            log.warning("booking.lock_failed", error=str(exc))
            return TransientFailure("The room is busy right now, please retry the booking.")
        except IntegrityError as exc:
            log.warning("booking.write_conflict", error=str(exc))
            return TransientFailure("The booking could not be saved, please retry the booking.")

        if result.ok:
            log.info("booking.created", confirmation_code=result.value)
        else:
            log.info("booking.rejected", reason=type(result).__name__)
        return result

    def _book_locked_room(self, room_id: int, request: BookingRequest) -> Ok[str] | Failure:
        locked = self.room_store.lock_room_for_update(room_id)
        if not locked.ok:
            return locked

        if self.booking_store.has_overlapping(room_id, request.check_in, request.check_out):
            return InvalidRequest(UNAVAILABLE_MESSAGE)

        booking = self.booking_store.add(locked.value, request)
        return Ok(booking.confirmation_code)
