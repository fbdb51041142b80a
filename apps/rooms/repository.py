"""Room store used by the booking workflow and the room API."""

from __future__ import annotations

from datetime import date

import structlog  # type: ignore
from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Value  # type: ignore
from django.db.models.functions import StrIndex  # type: ignore
from django.db.transaction import TransactionManagementError  # type: ignore

from apps.bookings.models import Booking
from shared.domain.results import NotFound, Ok

from .models import Room

logger = structlog.get_logger(__name__)


def filter_by_room_type(queryset, room_type: str):
    """Case-sensitive substring match on room_type.

    ``__contains`` turns into LIKE, which SQLite compares case-insensitively,
    so the match goes through INSTR/STRPOS instead. An empty string matches
    every room.
    """

    return queryset.annotate(
        room_type_position=StrIndex("room_type", Value(room_type)),
    ).filter(room_type_position__gt=0)


def _apply_lock_timeout(connection) -> None:
    """Bound the row-lock wait for the current transaction (PostgreSQL only).

    SQLite waits on its connection ``timeout`` option instead.
    """

    if connection.vendor != "postgresql":
        return
    timeout_ms = int(settings.BOOKING_LOCK_TIMEOUT_MS)
    with connection.cursor() as cursor:
        cursor.execute(f"SET LOCAL lock_timeout = {timeout_ms}")


class RoomStore:
    """Queries over rooms, including the exclusive lock read."""

    def list_distinct_room_types(self) -> set[str]:
        return set(Room.objects.order_by().values_list("room_type", flat=True).distinct())

    def lock_room_for_update(self, room_id: int) -> Ok[Room] | NotFound:
        """Fetch a room with SELECT ... FOR UPDATE.

        The lock lives until the enclosing ``transaction.atomic()`` block
        commits or rolls back; a second transaction asking for the same row
        blocks until then.
        """

        connection = transaction.get_connection()
        if not connection.in_atomic_block:
            raise TransactionManagementError(
                "lock_room_for_update() must be called inside transaction.atomic()."
            )

        _apply_lock_timeout(connection)
        try:
            room = Room.objects.select_for_update().get(pk=room_id)
        except Room.DoesNotExist:
            return NotFound("Sorry, Room not found!")
        logger.debug("room.locked", room_id=room_id)
        return Ok(room)

    def find_available_rooms(self, check_in: date, check_out: date, room_type: str) -> list[Room]:
        """Rooms of a matching type with no booking overlapping the stay."""

        booked_room_ids = Booking.objects.overlapping(check_in, check_out).values("room_id")
        queryset = filter_by_room_type(Room.objects.all(), room_type)
        return list(queryset.exclude(id__in=booked_room_ids))
