"""
Result value types produced by the bundle distributor.

Month distributions line up one-to-one with the decipherer's
``month_start_dates``; ``None`` marks a month with no productivity data and is
kept distinct from a zero amount.

Converted amounts and totals are computed once at construction, so they carry
the decimal context the distributor built them under.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence, Tuple

from tierlib.utils.decimals import nullable_add, nullable_multiply, nullable_sum
from tierlib.utils.ranges import DateRange, NumericRange

MonthDistribution = Tuple[Optional[Decimal], ...]


@dataclass(frozen=True)
class TierDistribution:
    """Raw per-month amounts that fell inside one tier's bounds."""

    bounds: NumericRange
    conversion_factor: Optional[Decimal]
    month_distribution: MonthDistribution
    converted_month_distribution: MonthDistribution = field(init=False)
    total: Optional[Decimal] = field(init=False)
    converted_total: Optional[Decimal] = field(init=False)

    def __post_init__(self):
        months = tuple(self.month_distribution)
        converted = tuple(
            nullable_multiply(value, self.conversion_factor) for value in months
        )
        object.__setattr__(self, "month_distribution", months)
        object.__setattr__(self, "converted_month_distribution", converted)
        object.__setattr__(self, "total", nullable_sum(months))
        object.__setattr__(self, "converted_total", nullable_sum(converted))


@dataclass(frozen=True)
class TieredAccrualPeriodDistribution:
    """Tier distributions of one accrual period, ordered by ascending bound."""

    accrual_period: DateRange
    tier_distributions: Tuple[TierDistribution, ...]
    converted_total: Optional[Decimal] = field(init=False)

    def __post_init__(self):
        tiers = tuple(self.tier_distributions)
        object.__setattr__(self, "tier_distributions", tiers)
        object.__setattr__(
            self, "converted_total", nullable_sum(t.converted_total for t in tiers)
        )


@dataclass(frozen=True)
class AccrualPeriodDistribution:
    """Tier-flattened, converted per-month amounts of one accrual period."""

    accrual_period: DateRange
    month_distribution: MonthDistribution
    month_start_dates: Tuple[date, ...] = field(default=())
    total: Optional[Decimal] = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "month_distribution", tuple(self.month_distribution))
        object.__setattr__(self, "month_start_dates", tuple(self.month_start_dates))
        if self.month_start_dates and len(self.month_start_dates) != len(
            self.month_distribution
        ):
            raise ValueError(
                "month_start_dates and month_distribution must have the same length"
            )
        object.__setattr__(self, "total", nullable_sum(self.month_distribution))

    @classmethod
    def flatten(
        cls,
        distribution: TieredAccrualPeriodDistribution,
        month_start_dates: Sequence[date] = (),
    ) -> "AccrualPeriodDistribution":
        """
        Combine every tier's converted amounts month by month.

        A month is None only when it is None in every tier.
        """
        combined = None
        for tier in distribution.tier_distributions:
            converted = tier.converted_month_distribution
            if combined is None:
                combined = converted
            else:
                combined = tuple(
                    nullable_add(a, b) for a, b in zip(combined, converted)
                )
        return cls(distribution.accrual_period, combined or (), month_start_dates)
