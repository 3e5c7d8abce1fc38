"""
Tiered distribution of dated productivity across accrual periods.
"""

import logging
import math
from collections import OrderedDict, abc
from datetime import date, timedelta
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from tierlib.config import DistributionConfig
from tierlib.schedule.decipher import AccrualPeriodDecipher
from tierlib.utils.date import DateLike, add_months, month_start, to_date
from tierlib.utils.decimals import NumberLike, to_decimal
from tierlib.utils.ranges import DateRange, NumericRange

from .bundle import BundleDistribution
from .tiers import TierSchedule
from .types import (
    AccrualPeriodDistribution,
    MonthDistribution,
    TierDistribution,
    TieredAccrualPeriodDistribution,
)

logger = logging.getLogger(__name__)

ProductivityValues = Union[
    Iterable[Tuple[DateLike, Optional[NumberLike]]],
    Mapping[DateLike, Optional[NumberLike]],
    pd.Series,
]
DatedValue = Tuple[date, Optional[Decimal]]


def _normalize_values(values: ProductivityValues) -> Tuple[DatedValue, ...]:
    """Turn the accepted productivity inputs into (date, Decimal | None) pairs."""
    if isinstance(values, (pd.Series, abc.Mapping)):
        pairs = values.items()
    else:
        pairs = values

    normalized = []
    for day, amount in pairs:
        if isinstance(amount, float) and math.isnan(amount):
            amount = None
        normalized.append((to_date(day), to_decimal(amount)))
    return tuple(normalized)


def _monthly_sums(
    values: Sequence[DatedValue], accrual_period: DateRange
) -> Dict[date, Decimal]:
    """
    Per-month sums of the values dated inside the accrual period.

    Months without any entry are absent; an entry with a None amount still
    marks its month as present and counts as zero.
    """
    sums: Dict[date, Decimal] = OrderedDict()
    for day, amount in values:
        if not accrual_period.contains(day):
            continue
        key = month_start(day)
        sums[key] = sums.get(key, Decimal(0)) + (amount if amount is not None else Decimal(0))
    return sums


def distribute_across_tier(
    bounds: NumericRange,
    months: Sequence[date],
    monthly_sums: Mapping[date, Decimal],
) -> MonthDistribution:
    """
    Amounts of a running total that fall inside one tier, month by month.

    The running total starts at zero and advances by each month's sum whatever
    the tier; a month's amount is the part of that advance clipped to the
    tier's bounds, zero when the advance misses the tier and None when the
    month has no data.
    """
    counter = Decimal(0)
    result: List[Optional[Decimal]] = []
    for month in months:
        month_sum = monthly_sums.get(month)
        if month_sum is None:
            result.append(None)
            continue

        new_total = counter + month_sum
        traversed = NumericRange(min(counter, new_total), max(counter, new_total))
        if traversed.overlaps(bounds):
            upper = new_total if bounds.upper is None else min(new_total, bounds.upper)
            lower = counter if bounds.lower is None else max(counter, bounds.lower)
            result.append(upper - lower)
        else:
            result.append(Decimal(0))
        counter = new_total
    return tuple(result)


class BundleDistributor:
    """Distributes productivity into tiers over the decipherer's accrual periods."""

    def __init__(
        self,
        decipher: AccrualPeriodDecipher,
        config: Optional[DistributionConfig] = None,
    ):
        if decipher is None:
            raise ValueError("decipher is required")
        if not isinstance(decipher, AccrualPeriodDecipher):
            raise TypeError(
                f"decipher must be an AccrualPeriodDecipher, got {type(decipher)}"
            )
        self._decipher = decipher
        self.config = config or DistributionConfig()

    @property
    def decipher(self) -> AccrualPeriodDecipher:
        return self._decipher

    def _report_accrual_periods(self) -> List[DateRange]:
        """
        Full reference periods over the decipherer's window.

        The window is extended to the end of the interval that begins at the
        last reset date (or at the window start when there is none).
        """
        decipher = self._decipher
        last_reset = (
            decipher.reset_dates[-1]
            if decipher.reset_dates
            else decipher.date_window.start
        )
        last_full_end = add_months(last_reset, decipher.interval.months()) - timedelta(days=1)
        return decipher.decipher_accrual_periods(
            DateRange(decipher.date_window.start, last_full_end), False
        )

    def proration_ratio(
        self, accrual_period: DateRange, report_periods: Sequence[DateRange]
    ) -> Decimal:
        """Fraction of a full year's tier thresholds that applies to an accrual period."""
        dividend = Decimal(self._decipher.interval.dividend())
        ratio = Decimal(0)
        for report_period in report_periods:
            overlap = accrual_period.overlap_days(report_period)
            if overlap:
                ratio += Decimal(overlap) / Decimal(report_period.days) / dividend
        return ratio

    def _assemble_tier_distribution(
        self,
        accrual_period: DateRange,
        bounds: NumericRange,
        conversion_factor: Decimal,
        monthly_sums: Mapping[date, Decimal],
    ) -> TierDistribution:
        months = self._decipher.month_start_dates
        in_period = [
            m for m in months if accrual_period.first_month <= m <= accrual_period.last_month
        ]
        period_breakdown = iter(distribute_across_tier(bounds, in_period, monthly_sums))
        month_distribution = tuple(
            next(period_breakdown)
            if accrual_period.first_month <= m <= accrual_period.last_month
            else None
            for m in months
        )
        return TierDistribution(bounds, conversion_factor, month_distribution)

    def _distribute_period(
        self,
        accrual_period: DateRange,
        schedule: TierSchedule,
        values: Sequence[DatedValue],
        report_periods: Sequence[DateRange],
    ) -> TieredAccrualPeriodDistribution:
        ratio = self.proration_ratio(accrual_period, report_periods)
        tier_bounds = schedule.scaled_bounds(ratio)
        logger.debug(
            "Accrual period %s: proration ratio %s, tier bounds %s",
            accrual_period,
            ratio,
            [(b.lower, b.upper) for b in tier_bounds],
        )
        monthly_sums = _monthly_sums(values, accrual_period)
        tier_distributions = tuple(
            self._assemble_tier_distribution(accrual_period, bounds, factor, monthly_sums)
            for bounds, factor in zip(tier_bounds, schedule.conversion_factors)
        )
        return TieredAccrualPeriodDistribution(accrual_period, tier_distributions)

    def distribute(
        self,
        values: ProductivityValues,
        tier_boundaries: Iterable[NumberLike],
        conversion_factors: Iterable[NumberLike],
        bundle_period: DateRange,
        cumulative: bool = False,
    ) -> BundleDistribution:
        """
        Distribute productivity into tiers for every accrual period of a bundle.

        Args:
            values: Dated productivity amounts; several entries may share a date
            tier_boundaries: Full-interval tier thresholds (N of them)
            conversion_factors: One factor per tier (N + 1 of them), lowest tier first
            bundle_period: Range the bundle is in effect
            cumulative: If True accrual periods grow from the bundle start

        Returns:
            BundleDistribution with tiered and flattened results per accrual period

        Raises:
            TierScheduleError: If the factor count is not the boundary count plus one
        """
        schedule = TierSchedule(tuple(tier_boundaries), tuple(conversion_factors))

        with self.config.decimal_context():
            dated_values = _normalize_values(values)
            accrual_periods = self._decipher.decipher_accrual_periods(
                bundle_period, cumulative
            )
            report_periods = self._report_accrual_periods()

            tiered = tuple(
                self._distribute_period(ap, schedule, dated_values, report_periods)
                for ap in accrual_periods
            )
            months = self._decipher.month_start_dates
            flattened = tuple(
                AccrualPeriodDistribution.flatten(distribution, months)
                for distribution in tiered
            )

        return BundleDistribution(
            bundle_period, schedule.conversion_range, tiered, flattened
        )

    def create_empty_distribution(
        self, window: DateRange, cumulative: bool = False
    ) -> BundleDistribution:
        """Placeholder distribution with no data for a range no bundle covers."""
        months = self._decipher.month_start_dates
        empty_months = (None,) * len(months)
        empty_tier = TierDistribution(NumericRange(None, None), None, empty_months)
        accrual_periods = self._decipher.decipher_accrual_periods(window, cumulative)
        logger.debug("Creating empty distribution for gap %s", window)
        return BundleDistribution(
            window,
            None,
            tuple(TieredAccrualPeriodDistribution(ap, (empty_tier,)) for ap in accrual_periods),
            tuple(AccrualPeriodDistribution(ap, empty_months, months) for ap in accrual_periods),
        )

    def fill_distribution_gaps(
        self, distributions: Iterable[BundleDistribution], cumulative: bool = False
    ) -> List[BundleDistribution]:
        """
        Add empty placeholders for the parts of the window no distribution covers.

        Returns:
            The distributions plus placeholders ordered by period end, or the
            distributions unchanged when there is no gap
        """
        distributions = list(distributions)
        gaps = self._decipher.decipher_gaps(d.distribution_period for d in distributions)
        if not gaps:
            return distributions
        placeholders = [self.create_empty_distribution(gap, cumulative) for gap in gaps]
        return sorted(
            distributions + placeholders, key=lambda d: d.distribution_period.end
        )
