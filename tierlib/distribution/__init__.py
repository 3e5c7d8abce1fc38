"""
Tiered distribution engine.

Key modules:
- distributor: BundleDistributor, the tiering and proration algorithm
- types: per-tier and per-accrual-period result values
- bundle: BundleDistribution and cross-distribution aggregation
- tiers: tier schedules and tier bundles
- helpers: one-call distribution across several tier bundles
"""

from .bundle import BundleDistribution, aggregate_distributions, carry_floor
from .distributor import BundleDistributor, distribute_across_tier
from .helpers import create_decipher, distribute_tier_bundles, total_productivity
from .tiers import Tier, TierBundle, TierSchedule, TierScheduleError
from .types import (
    AccrualPeriodDistribution,
    TierDistribution,
    TieredAccrualPeriodDistribution,
)

__all__ = [
    # Engine
    "BundleDistributor",
    "distribute_across_tier",
    # Results
    "BundleDistribution",
    "TieredAccrualPeriodDistribution",
    "AccrualPeriodDistribution",
    "TierDistribution",
    # Aggregation
    "aggregate_distributions",
    "carry_floor",
    # Tiers
    "Tier",
    "TierBundle",
    "TierSchedule",
    "TierScheduleError",
    # Helpers
    "create_decipher",
    "distribute_tier_bundles",
    "total_productivity",
]
