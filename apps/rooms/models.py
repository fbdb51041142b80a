"""Room domain models."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Room(models.Model):
    """A hotel room that guests can book for a range of dates."""

    room_type = models.CharField(
        max_length=100,
        db_index=True,
        help_text=_("Room category, e.g. 'Single', 'Deluxe Suite'."),
    )
    room_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")
        ordering = ["id"]

    def __str__(self) -> str:
        return f"Room #{self.pk} ({self.room_type})"

    def is_booked_on(self, check_in, check_out) -> bool:
        """True when any booking of this room overlaps the given stay."""
        return self.bookings.overlapping(check_in, check_out).exists()
