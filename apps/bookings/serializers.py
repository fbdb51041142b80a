"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking
from .services import BookingRequest

# Upper bound of PositiveSmallIntegerField on every backend.
MAX_GUESTS_PER_FIELD = 32767


class BookingCreateSerializer(serializers.Serializer):
    """Input of a booking request.

    Date order and availability are decided by BookingService, so they are
    not validated here.
    """

    room_id = serializers.IntegerField()
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    guest_email = serializers.CharField(max_length=254)
    guest_full_name = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")
    num_of_adults = serializers.IntegerField(min_value=1, max_value=MAX_GUESTS_PER_FIELD, required=False, default=1)
    num_of_children = serializers.IntegerField(min_value=0, max_value=MAX_GUESTS_PER_FIELD, required=False, default=0)

    def to_booking_request(self) -> BookingRequest:
        data = dict(self.validated_data)
        data.pop("room_id")
        return BookingRequest(**data)


class BookingSerializer(serializers.ModelSerializer):
    room_id = serializers.ReadOnlyField(source="room.id")
    room_type = serializers.ReadOnlyField(source="room.room_type")
    total_num_of_guests = serializers.ReadOnlyField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "confirmation_code",
            "room_id",
            "room_type",
            "check_in",
            "check_out",
            "guest_email",
            "guest_full_name",
            "num_of_adults",
            "num_of_children",
            "total_num_of_guests",
            "created_at",
        ]
        read_only_fields = fields
