"""
Convenience helpers for distributing productivity across tier bundles.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List, Optional

from tierlib.config import DistributionConfig
from tierlib.conventions.types import AccrualInterval
from tierlib.schedule.decipher import AccrualPeriodDecipher
from tierlib.utils.decimals import nullable_sum
from tierlib.utils.ranges import DateRange

from .bundle import BundleDistribution
from .distributor import BundleDistributor, ProductivityValues
from .tiers import TierBundle

logger = logging.getLogger(__name__)


def create_decipher(
    window: DateRange,
    interval: Optional[AccrualInterval] = None,
    config: Optional[DistributionConfig] = None,
) -> AccrualPeriodDecipher:
    """Decipherer for a window, using the configured default interval when none is given."""
    if interval is None:
        interval = (config or DistributionConfig()).default_interval
    return AccrualPeriodDecipher(window, interval)


def distribute_tier_bundles(
    values: ProductivityValues,
    bundles: Iterable[TierBundle],
    decipher: AccrualPeriodDecipher,
    cumulative: bool = False,
    config: Optional[DistributionConfig] = None,
) -> List[BundleDistribution]:
    """
    Distribute the same productivity once per tier bundle.

    Each bundle is distributed over its effective range; an open-ended bundle
    runs to the end of the decipherer's window and is skipped when it starts
    after that.

    Returns:
        One BundleDistribution per distributed bundle, in the order given
    """
    distributor = BundleDistributor(decipher, config)
    # Values may be a one-shot iterator and are read once per bundle.
    if not hasattr(values, "items"):
        values = list(values)

    window_end = decipher.date_window.end
    distributions = []
    for bundle in bundles:
        if bundle.effective_to is None and bundle.effective_from > window_end:
            logger.debug(
                "Skipping tier bundle from %s, it starts after the window end %s",
                bundle.effective_from,
                window_end,
            )
            continue
        schedule = bundle.schedule
        period = bundle.period(window_end)
        logger.debug(
            "Distributing bundle %s with %d tier(s)", period, len(schedule.conversion_factors)
        )
        distributions.append(
            distributor.distribute(
                values,
                schedule.boundaries,
                schedule.conversion_factors,
                period,
                cumulative,
            )
        )
    return distributions


def total_productivity(distributions: Iterable[BundleDistribution]) -> Optional[Decimal]:
    """Sum of every distribution's flattened totals, None when all are empty."""
    return nullable_sum(d.total for d in distributions)
