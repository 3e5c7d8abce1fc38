"""
Inclusive date ranges and optionally-bounded numeric ranges.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from .date import datetime_to_str, days_inclusive, month_start, to_date
from .decimals import to_decimal


@dataclass(frozen=True)
class DateRange:
    """Date interval with both ends included."""

    start: date
    end: date

    def __post_init__(self):
        start = to_date(self.start)
        end = to_date(self.end)
        if start > end:
            raise ValueError(f"DateRange start {start} is after end {end}")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return days_inclusive(self.start, self.end)

    @property
    def first_month(self) -> date:
        return month_start(self.start)

    @property
    def last_month(self) -> date:
        return month_start(self.end)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def intersection(self, other: "DateRange") -> Optional["DateRange"]:
        if not self.overlaps(other):
            return None
        return DateRange(max(self.start, other.start), min(self.end, other.end))

    def overlap_days(self, other: "DateRange") -> int:
        """Days shared with other, zero when disjoint."""
        shared = self.intersection(other)
        return shared.days if shared is not None else 0

    def __str__(self) -> str:
        return f"{datetime_to_str(self.start)}..{datetime_to_str(self.end)}"


@dataclass(frozen=True)
class NumericRange:
    """Closed numeric interval; a None bound is unbounded in that direction."""

    lower: Optional[Decimal] = None
    upper: Optional[Decimal] = None

    def __post_init__(self):
        object.__setattr__(self, "lower", to_decimal(self.lower))
        object.__setattr__(self, "upper", to_decimal(self.upper))

    @property
    def is_unbounded(self) -> bool:
        return self.lower is None and self.upper is None

    def overlaps(self, other: "NumericRange") -> bool:
        """True iff the two closed intervals share at least one point."""
        below = (
            self.lower is not None
            and other.upper is not None
            and self.lower > other.upper
        )
        above = (
            other.lower is not None
            and self.upper is not None
            and other.lower > self.upper
        )
        return not (below or above)

    def rounded(self, places: int = 5) -> "NumericRange":
        """Copy with both bounds quantized to the given number of places."""
        quantum = Decimal(1).scaleb(-places)

        def _round(value: Optional[Decimal]) -> Optional[Decimal]:
            return value.quantize(quantum) if value is not None else None

        return NumericRange(_round(self.lower), _round(self.upper))
