"""
Tier schedules and tier bundles.

A tier schedule is N ascending boundaries cutting the cumulative productivity
axis into N + 1 tiers, each with its own conversion factor. A tier bundle is a
schedule expressed as a list of tiers together with the dates it is in effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from tierlib.utils.date import to_date
from tierlib.utils.decimals import to_decimal
from tierlib.utils.ranges import DateRange, NumericRange


class TierScheduleError(ValueError):
    """Raised when a tier schedule or tier bundle is malformed."""


@dataclass(frozen=True)
class TierSchedule:
    """Tier boundaries and the conversion factor of every tier they define."""

    boundaries: Tuple[Decimal, ...]
    conversion_factors: Tuple[Decimal, ...]

    def __post_init__(self):
        boundaries = tuple(to_decimal(b) for b in self.boundaries)
        factors = tuple(to_decimal(f) for f in self.conversion_factors)
        if any(b is None for b in boundaries):
            raise TierScheduleError("Tier boundaries must not be None")
        if any(f is None for f in factors):
            raise TierScheduleError("Conversion factors must not be None")
        if len(factors) != len(boundaries) + 1:
            raise TierScheduleError(
                f"{len(boundaries)} tier boundaries need {len(boundaries) + 1} "
                f"conversion factors, got {len(factors)}"
            )
        object.__setattr__(self, "boundaries", boundaries)
        object.__setattr__(self, "conversion_factors", factors)

    @property
    def conversion_range(self) -> NumericRange:
        return NumericRange(min(self.conversion_factors), max(self.conversion_factors))

    def scaled_bounds(self, ratio: Decimal) -> Tuple[NumericRange, ...]:
        """
        Tier bounds with every boundary multiplied by ratio.

        The first tier has no lower bound and the last has no upper bound.
        """
        scaled = [b * ratio for b in sorted(self.boundaries)]
        edges = [None] + scaled + [None]
        return tuple(NumericRange(lower, upper) for lower, upper in zip(edges, edges[1:]))

    @classmethod
    def from_tiers(cls, tiers: Iterable["Tier"]) -> "TierSchedule":
        """
        Build a schedule from tiers keyed by their lower bound.

        Tiers are ordered by lower bound (a missing bound sorts first). The
        lower bounds of every tier after the first become the boundaries, with
        a missing bound read as zero.
        """
        ordered = sorted(
            tiers,
            key=lambda t: (t.lower_bound is not None, t.lower_bound or Decimal(0)),
        )
        if not ordered:
            raise TierScheduleError("A tier schedule needs at least one tier")
        boundaries = tuple(
            t.lower_bound if t.lower_bound is not None else Decimal(0)
            for t in ordered[1:]
        )
        return cls(boundaries, tuple(t.conversion_factor for t in ordered))


@dataclass(frozen=True)
class Tier:
    lower_bound: Optional[Decimal]
    conversion_factor: Decimal

    def __post_init__(self):
        object.__setattr__(self, "lower_bound", to_decimal(self.lower_bound))
        object.__setattr__(self, "conversion_factor", to_decimal(self.conversion_factor))
        if self.conversion_factor is None:
            raise TierScheduleError("A tier needs a conversion factor")


@dataclass(frozen=True)
class TierBundle:
    """A set of tiers in effect from ``effective_from`` to ``effective_to`` (inclusive)."""

    effective_from: date
    effective_to: Optional[date]
    tiers: Tuple[Tier, ...] = field(default=())

    def __post_init__(self):
        effective_from = to_date(self.effective_from)
        effective_to = to_date(self.effective_to) if self.effective_to is not None else None
        if effective_to is not None and effective_from > effective_to:
            raise TierScheduleError(
                f"Tier bundle effective_from {effective_from} is after effective_to {effective_to}"
            )
        object.__setattr__(self, "effective_from", effective_from)
        object.__setattr__(self, "effective_to", effective_to)
        object.__setattr__(self, "tiers", tuple(self.tiers))

    @property
    def schedule(self) -> TierSchedule:
        return TierSchedule.from_tiers(self.tiers)

    @property
    def has_tier_bounds(self) -> bool:
        """True when at least one tier carries a lower bound."""
        return any(t.lower_bound is not None for t in self.tiers)

    def period(self, open_end: date) -> DateRange:
        """
        Effective range, ending at open_end when the bundle is open-ended.

        Raises:
            TierScheduleError: If an open-ended bundle starts after open_end
        """
        if self.effective_to is not None:
            return DateRange(self.effective_from, self.effective_to)
        if open_end < self.effective_from:
            raise TierScheduleError(
                f"Open-ended tier bundle from {self.effective_from} starts after {open_end}"
            )
        return DateRange(self.effective_from, open_end)
