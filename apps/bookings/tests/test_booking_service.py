"""Tests for the booking service workflow."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.db import OperationalError
from django.test import TestCase

from apps.bookings.models import Booking
from apps.bookings.services import BookingRequest, BookingService
from apps.rooms.models import Room
from shared.domain.results import InvalidRequest, NotFound, Ok, TransientFailure


class BookingServiceTests(TestCase):
    def setUp(self) -> None:
        self.service = BookingService()
        self.room = Room.objects.create(room_type="Single", room_price=Decimal("80.00"))
        self.other_room = Room.objects.create(room_type="Double", room_price=Decimal("120.00"))

    def _request(self, check_in: date, check_out: date, email: str = "guest@example.com") -> BookingRequest:
        return BookingRequest(check_in=check_in, check_out=check_out, guest_email=email)

    def test_create_booking_returns_confirmation_code(self) -> None:
        result = self.service.create_booking(
            self.room.id,
            BookingRequest(
                check_in=date(2024, 3, 1),
                check_out=date(2024, 3, 5),
                guest_email="guest@example.com",
                guest_full_name="Ada Lovelace",
                num_of_adults=2,
                num_of_children=1,
            ),
        )

        self.assertIsInstance(result, Ok)
        self.assertTrue(result.value)
        booking = Booking.objects.get(confirmation_code=result.value)
        self.assertEqual(booking.room, self.room)
        self.assertEqual(booking.guest_full_name, "Ada Lovelace")
        self.assertEqual(booking.total_num_of_guests, 3)

    def test_shared_boundary_day_is_rejected(self) -> None:
        first = self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))
        self.assertIsInstance(first, Ok)

        second = self.service.create_booking(self.room.id, self._request(date(2024, 3, 5), date(2024, 3, 8)))

        self.assertIsInstance(second, InvalidRequest)
        self.assertIn("not available", second.message)
        self.assertEqual(Booking.objects.filter(room=self.room).count(), 1)

    def test_stay_after_existing_booking_succeeds(self) -> None:
        self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        result = self.service.create_booking(self.room.id, self._request(date(2024, 3, 6), date(2024, 3, 10)))

        self.assertIsInstance(result, Ok)
        self.assertNotEqual(result.value, "")
        self.assertEqual(Booking.objects.filter(room=self.room).count(), 2)

    def test_same_dates_on_another_room_succeed(self) -> None:
        self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        result = self.service.create_booking(self.other_room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        self.assertIsInstance(result, Ok)

    def test_check_out_not_after_check_in_is_invalid(self) -> None:
        for check_in, check_out in [
            (date(2024, 3, 5), date(2024, 3, 5)),
            (date(2024, 3, 5), date(2024, 3, 1)),
        ]:
            with self.subTest(check_in=check_in, check_out=check_out):
                result = self.service.create_booking(self.room.id, self._request(check_in, check_out))
                self.assertIsInstance(result, InvalidRequest)

        self.assertFalse(Booking.objects.exists())

    def test_invalid_dates_win_over_missing_room(self) -> None:
        result = self.service.create_booking(999_999, self._request(date(2024, 3, 5), date(2024, 3, 5)))

        self.assertIsInstance(result, InvalidRequest)

    def test_missing_room_is_not_found(self) -> None:
        result = self.service.create_booking(999_999, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        self.assertIsInstance(result, NotFound)
        self.assertFalse(Booking.objects.exists())

    def test_lock_failure_is_transient_and_leaves_no_booking(self) -> None:
        with mock.patch.object(
            self.service.room_store,
            "lock_room_for_update",
            side_effect=OperationalError("could not obtain lock on row in relation \"rooms_room\""),
        ), mock.patch("apps.bookings.services.logger") as logger:
            result = self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        self.assertIsInstance(result, TransientFailure)
        self.assertTrue(result.retryable)
        logger.bind.return_value.warning.assert_called_once_with("booking.lock_failed", error=mock.ANY)
        self.assertFalse(Booking.objects.exists())

    def test_confirmation_code_collision_is_transient(self) -> None:
        first = self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        with mock.patch.object(Booking, "generate_confirmation_code", return_value=first.value), \
                mock.patch("apps.bookings.services.logger") as logger:
            second = self.service.create_booking(
                self.other_room.id,
                self._request(date(2024, 3, 1), date(2024, 3, 5)),
            )

        self.assertIsInstance(second, TransientFailure)
        self.assertNotIn("busy", second.message)
        self.assertEqual(Booking.objects.count(), 1)
        logger.bind.return_value.warning.assert_called_once_with("booking.write_conflict", error=mock.ANY)

    def test_cancel_booking_is_idempotent(self) -> None:
        result = self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))
        booking = Booking.objects.get(confirmation_code=result.value)

        self.service.cancel_booking(booking.id)
        self.service.cancel_booking(booking.id)

        self.assertFalse(Booking.objects.filter(pk=booking.id).exists())

    def test_cancelled_dates_can_be_booked_again(self) -> None:
        result = self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))
        self.service.cancel_booking(Booking.objects.get(confirmation_code=result.value).id)

        again = self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        self.assertIsInstance(again, Ok)

    def test_find_by_confirmation_code(self) -> None:
        created = self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5)))

        found = self.service.find_by_confirmation_code(created.value)
        missing = self.service.find_by_confirmation_code("NOPE")

        self.assertIsInstance(found, Ok)
        self.assertEqual(found.value.room_id, self.room.id)
        self.assertIsInstance(missing, NotFound)
        self.assertIn("NOPE", missing.message)

    def test_listing_bookings(self) -> None:
        self.service.create_booking(self.room.id, self._request(date(2024, 3, 1), date(2024, 3, 5), "a@example.com"))
        self.service.create_booking(self.room.id, self._request(date(2024, 3, 10), date(2024, 3, 12), "b@example.com"))
        self.service.create_booking(
            self.other_room.id,
            self._request(date(2024, 3, 1), date(2024, 3, 5), "a@example.com"),
        )

        self.assertEqual(len(self.service.list_all_bookings()), 3)
        self.assertEqual(
            {booking.room_id for booking in self.service.list_bookings_by_guest_email("a@example.com")},
            {self.room.id, self.other_room.id},
        )
        self.assertEqual(
            [booking.guest_email for booking in self.service.list_bookings_for_room(self.room.id)],
            ["a@example.com", "b@example.com"],
        )
        self.assertEqual(self.service.list_bookings_by_guest_email("nobody@example.com"), [])
