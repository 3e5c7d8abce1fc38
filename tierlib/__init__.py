"""Tiered Productivity Compensation Engine.

This package distributes dated productivity credits into tiered
compensation bands over accrual periods and converts them into
compensation units.

Key modules:
- schedule: Accrual period decipherment and coverage records
- distribution: Tiered distribution, result types and aggregation
- conventions: Accrual intervals
- utils: Date and numeric ranges, date and decimal helpers
- config: Decimal context and default interval settings
"""

__version__ = "1.0.0"

from tierlib.config import DistributionConfig
from tierlib.conventions.types import AccrualInterval
from tierlib.distribution import (
    AccrualPeriodDistribution,
    BundleDistribution,
    BundleDistributor,
    Tier,
    TierBundle,
    TierDistribution,
    TieredAccrualPeriodDistribution,
    TierSchedule,
    TierScheduleError,
    aggregate_distributions,
    distribute_tier_bundles,
)
from tierlib.schedule import AccrualPeriodDecipher
from tierlib.utils.ranges import DateRange, NumericRange

__all__ = [
    "__version__",
    "DistributionConfig",
    "AccrualInterval",
    "AccrualPeriodDecipher",
    "DateRange",
    "NumericRange",
    "BundleDistributor",
    "BundleDistribution",
    "TieredAccrualPeriodDistribution",
    "AccrualPeriodDistribution",
    "TierDistribution",
    "Tier",
    "TierBundle",
    "TierSchedule",
    "TierScheduleError",
    "aggregate_distributions",
    "distribute_tier_bundles",
]
