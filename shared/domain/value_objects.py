"""
Common Value Objects

Value objects used across the booking domain:
- DateRange: Represents a stay (check-in to check-out)
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateRange:
    """
    Date range value object

    Represents a stay from start_date (check-in) to end_date (check-out).
    Construction rejects empty and inverted ranges.
    """
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.start_date >= self.end_date:
            raise ValueError(f"Check-out date ({self.end_date}) must be after check-in date ({self.start_date})")

    def overlaps_with(self, other: 'DateRange') -> bool:
        """
        Check if this range overlaps with another

        Both boundaries are inclusive, so a check-out on the same day
        as another stay's check-in counts as an overlap.

        Examples:
            - DateRange(1, 5) overlaps with DateRange(4, 8) -> True
            - DateRange(1, 5) overlaps with DateRange(5, 8) -> True (shared day)
            - DateRange(1, 5) overlaps with DateRange(6, 8) -> False
        """
        if not isinstance(other, DateRange):
            raise TypeError("Can only check overlap with another DateRange")

        return (self.start_date <= other.end_date and
                self.end_date >= other.start_date)

    def __len__(self) -> int:
        """Number of nights"""
        return (self.end_date - self.start_date).days

    def __str__(self):
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def __repr__(self):
        return f"DateRange({self.start_date}, {self.end_date})"
