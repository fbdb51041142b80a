"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import serializers, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from shared.infrastructure.responses import failure_response

from .serializers import BookingCreateSerializer, BookingSerializer
from .services import BookingService


class BookingViewSet(viewsets.GenericViewSet):
    """Viewset for creating, looking up and cancelling bookings."""

    serializer_class = BookingSerializer
    service = BookingService()

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        return BookingSerializer

    def list(self, request):  # type: ignore
        guest_email = request.query_params.get("guest_email")
        room = request.query_params.get("room")
        if guest_email:
            bookings = self.service.list_bookings_by_guest_email(guest_email)
        elif room:
            room_id = serializers.IntegerField(min_value=1).run_validation(room)
            bookings = self.service.list_bookings_for_room(room_id)
        else:
            bookings = self.service.list_all_bookings()
        return Response(BookingSerializer(bookings, many=True).data)

    def create(self, request):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = self.service.create_booking(
            serializer.validated_data["room_id"],
            serializer.to_booking_request(),
        )
        if not result.ok:
            return failure_response(result)
        return Response({"confirmation_code": result.value}, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None):  # type: ignore
        booking_id = serializers.IntegerField(min_value=1).run_validation(pk)
        self.service.cancel_booking(booking_id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=["get"], url_path=r"confirmation/(?P<code>[^/.]+)")
    def confirmation(self, request, code=None):  # type: ignore
        result = self.service.find_by_confirmation_code(code)
        if not result.ok:
            return failure_response(result)
        return Response(BookingSerializer(result.value).data)
