"""API views for the rooms domain."""

from __future__ import annotations

from rest_framework import status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import RoomFilterSet
from .models import Room
from .repository import RoomStore
from .serializers import AvailabilityQuerySerializer, RoomSerializer


class RoomViewSet(viewsets.ReadOnlyModelViewSet):
    """Read-only access to rooms plus room-type and availability lookups."""

    queryset = Room.objects.all()
    serializer_class = RoomSerializer
    filterset_class = RoomFilterSet
    room_store = RoomStore()

    @action(detail=False, methods=["get"])
    def types(self, request):  # type: ignore
        return Response(sorted(self.room_store.list_distinct_room_types()), status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"])
    def available(self, request):  # type: ignore
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        rooms = self.room_store.find_available_rooms(
            query.validated_data["check_in"],
            query.validated_data["check_out"],
            query.validated_data["room_type"],
        )
        return Response(RoomSerializer(rooms, many=True).data, status=status.HTTP_200_OK)
