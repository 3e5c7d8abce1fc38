"""Bundle distributions and cross-distribution aggregation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional, Sequence, Tuple

from tierlib.utils.date import month_start
from tierlib.utils.decimals import nullable_add, nullable_sum
from tierlib.utils.ranges import DateRange, NumericRange

from .types import (
    AccrualPeriodDistribution,
    MonthDistribution,
    TieredAccrualPeriodDistribution,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BundleDistribution:
    """Distribution of productivity across one tier bundle's period."""

    distribution_period: DateRange
    conversion_range: Optional[NumericRange]
    tiered_distributions: Tuple[TieredAccrualPeriodDistribution, ...]
    flattened_distributions: Tuple[AccrualPeriodDistribution, ...]

    def __post_init__(self):
        object.__setattr__(self, "tiered_distributions", tuple(self.tiered_distributions))
        object.__setattr__(
            self, "flattened_distributions", tuple(self.flattened_distributions)
        )

    @property
    def is_empty(self) -> bool:
        """True for gap-fill placeholders, which carry no conversion range."""
        return self.conversion_range is None

    @property
    def total(self) -> Optional[Decimal]:
        """Sum of the flattened period totals, None when every period is empty."""
        return nullable_sum(f.total for f in self.flattened_distributions)

    def apply_floor(
        self, floor_start_date: date, floor: Sequence[Optional[Decimal]]
    ) -> "BundleDistribution":
        """Copy of this distribution with ``floor`` folded into every flattened period."""
        return BundleDistribution(
            self.distribution_period,
            self.conversion_range,
            self.tiered_distributions,
            tuple(
                AccrualPeriodDistribution(
                    flattened.accrual_period,
                    carry_floor(
                        flattened.month_distribution,
                        floor,
                        floor_start_date,
                        flattened.month_start_dates,
                    ),
                    flattened.month_start_dates,
                )
                for flattened in self.flattened_distributions
            ),
        )


def carry_floor(
    month_distribution: Sequence[Optional[Decimal]],
    floor: Sequence[Optional[Decimal]],
    floor_start_date: date,
    month_start_dates: Sequence[date] = (),
) -> MonthDistribution:
    """
    Fold a floor distribution into a month distribution.

    Months on or after the month containing ``floor_start_date`` take the
    null-aware sum of both values; earlier months keep their own value. When
    ``month_start_dates`` is empty every month is treated as on or after the
    anchor.

    Raises:
        ValueError: If the sequences disagree in length
    """
    if len(month_distribution) != len(floor):
        raise ValueError(
            f"Floor has {len(floor)} months, distribution has {len(month_distribution)}"
        )
    if month_start_dates and len(month_start_dates) != len(month_distribution):
        raise ValueError("month_start_dates must match the month distribution length")

    anchor_month = month_start(floor_start_date)
    result = []
    for i, (value, floor_value) in enumerate(zip(month_distribution, floor)):
        if month_start_dates and month_start_dates[i] < anchor_month:
            result.append(value)
        else:
            result.append(nullable_add(value, floor_value))
    return tuple(result)


def aggregate_distributions(
    distributions: Sequence[BundleDistribution],
) -> List[BundleDistribution]:
    """
    Stitch successive bundle distributions into one continuous view.

    The first distribution passes through; each later one has the last
    flattened period of the previously aggregated distribution carried in as
    its floor, anchored at the first distribution's start date.

    Raises:
        ValueError: If distributions is empty
    """
    distributions = list(distributions)
    if not distributions:
        raise ValueError("Need at least one distribution to aggregate")

    first = distributions[0]
    anchor = first.distribution_period.start
    aggregated = [first]
    ongoing = first
    for distribution in distributions[1:]:
        if not ongoing.flattened_distributions:
            raise ValueError(
                f"Distribution for {ongoing.distribution_period} has no accrual periods"
            )
        floor = ongoing.flattened_distributions[-1].month_distribution
        logger.debug(
            "Carrying floor from %s into %s",
            ongoing.distribution_period,
            distribution.distribution_period,
        )
        ongoing = distribution.apply_floor(anchor, floor)
        aggregated.append(ongoing)
    return aggregated
