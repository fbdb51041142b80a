"""Booking domain models."""

from __future__ import annotations

import secrets

from django.db import models  # type: ignore
from django.db.models import F, Q  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import DateRange


class BookingQuerySet(models.QuerySet):
    def overlapping(self, check_in, check_out):
        """Bookings whose stay overlaps [check_in, check_out], boundaries inclusive."""
        return self.filter(Q(check_in__lte=check_out) & Q(check_out__gte=check_in))


class Booking(models.Model):
    """A guest's reservation of a room for a range of dates."""

    room = models.ForeignKey(
        "rooms.Room",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    guest_email = models.CharField(max_length=254)
    guest_full_name = models.CharField(max_length=255, blank=True)
    num_of_adults = models.PositiveSmallIntegerField(default=1)
    num_of_children = models.PositiveSmallIntegerField(default=0)
    confirmation_code = models.CharField(max_length=12, unique=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["check_in", "id"]
        constraints = [
            models.CheckConstraint(
                condition=Q(check_out__gt=F("check_in")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["room", "check_in", "check_out"], name="booking_room_dates_idx"),
            models.Index(fields=["guest_email"], name="booking_guest_email_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.confirmation_code} for room {self.room_id}"

    def save(self, *args, **kwargs):  # type: ignore
        if self._state.adding and not self.confirmation_code:
            self.confirmation_code = self.generate_confirmation_code()
        super().save(*args, **kwargs)

    @staticmethod
    def generate_confirmation_code() -> str:
        return secrets.token_hex(5).upper()

    @property
    def dates(self) -> DateRange:
        return DateRange(self.check_in, self.check_out)

    @property
    def total_num_of_guests(self) -> int:
        return self.num_of_adults + self.num_of_children
