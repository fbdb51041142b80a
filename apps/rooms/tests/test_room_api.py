"""Integration tests for room API endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.rooms.models import Room


class RoomAPITests(APITestCase):
    def setUp(self) -> None:
        self.single = Room.objects.create(room_type="Single", room_price=Decimal("80.00"))
        self.double = Room.objects.create(room_type="Double", room_price=Decimal("120.00"))
        self.suite = Room.objects.create(
            room_type="Deluxe Suite",
            room_price=Decimal("300.00"),
            description="Sea view",
        )

    def test_list_rooms(self) -> None:
        response = self.client.get(reverse("room-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual([item["id"] for item in response.data], [self.single.id, self.double.id, self.suite.id])

    def test_filter_rooms_by_type_and_price(self) -> None:
        response = self.client.get(reverse("room-list"), {"room_type": "Suite"})
        self.assertEqual([item["id"] for item in response.data], [self.suite.id])

        response = self.client.get(reverse("room-list"), {"room_type": "suite"})
        self.assertEqual(response.data, [])

        response = self.client.get(reverse("room-list"), {"price_min": "100", "price_max": "200"})
        self.assertEqual([item["id"] for item in response.data], [self.double.id])

    def test_room_detail_not_found(self) -> None:
        response = self.client.get(reverse("room-detail", args=[999_999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_room_types_are_distinct(self) -> None:
        Room.objects.create(room_type="Single", room_price=Decimal("90.00"))

        response = self.client.get(reverse("room-types"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data, ["Deluxe Suite", "Double", "Single"])

    def test_available_rooms_excludes_booked_room(self) -> None:
        Booking.objects.create(
            room=self.double,
            check_in=date(2024, 5, 2),
            check_out=date(2024, 5, 4),
            guest_email="guest@example.com",
        )

        response = self.client.get(
            reverse("room-available"),
            {"check_in": "2024-05-01", "check_out": "2024-05-03"},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual({item["id"] for item in response.data}, {self.single.id, self.suite.id})

    def test_available_rooms_filters_by_type(self) -> None:
        response = self.client.get(
            reverse("room-available"),
            {"check_in": "2024-05-01", "check_out": "2024-05-03", "room_type": "Suite"},
        )

        self.assertEqual([item["id"] for item in response.data], [self.suite.id])

    def test_available_rooms_rejects_inverted_dates(self) -> None:
        response = self.client.get(
            reverse("room-available"),
            {"check_in": "2024-05-03", "check_out": "2024-05-01"},
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
