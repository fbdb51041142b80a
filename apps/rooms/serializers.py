"""Serializers for the rooms domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Room


class RoomSerializer(serializers.ModelSerializer):
    class Meta:
        model = Room
        fields = ["id", "room_type", "room_price", "description", "created_at"]
        read_only_fields = fields


class AvailabilityQuerySerializer(serializers.Serializer):
    """Query parameters of the availability search."""

    check_in = serializers.DateField()
    check_out = serializers.DateField()
    room_type = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)

    def validate(self, attrs):  # type: ignore
        if attrs["check_out"] <= attrs["check_in"]:
            raise serializers.ValidationError("Check-out date must be after check-in date.")
        return attrs
