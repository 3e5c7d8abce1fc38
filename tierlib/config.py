"""Engine configuration."""

import decimal
import logging
import os
from dataclasses import dataclass, field

from tierlib.conventions.types import AccrualInterval

logger = logging.getLogger(__name__)

_ROUNDING_MODES = {
    name: getattr(decimal, name)
    for name in (
        "ROUND_HALF_EVEN",
        "ROUND_HALF_UP",
        "ROUND_HALF_DOWN",
        "ROUND_UP",
        "ROUND_DOWN",
        "ROUND_CEILING",
        "ROUND_FLOOR",
        "ROUND_05UP",
    )
}


@dataclass
class DistributionConfig:
    """Configuration for distribution arithmetic."""

    precision: int = 28
    rounding: str = "ROUND_HALF_EVEN"
    default_interval: AccrualInterval = field(default=AccrualInterval.ANNUAL)

    def __post_init__(self):
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        key = self.rounding.upper()
        if key not in _ROUNDING_MODES:
            raise ValueError(f"Unsupported rounding mode: {self.rounding}")
        self.rounding = key

    @classmethod
    def from_env(cls) -> "DistributionConfig":
        """
        Build a configuration from environment variables.

        TIERLIB_DECIMAL_PRECISION, TIERLIB_DECIMAL_ROUNDING and
        TIERLIB_ACCRUAL_INTERVAL override the defaults when set.
        """
        config = cls(
            precision=int(os.getenv("TIERLIB_DECIMAL_PRECISION", "28")),
            rounding=os.getenv("TIERLIB_DECIMAL_ROUNDING", "ROUND_HALF_EVEN"),
            default_interval=AccrualInterval.parse(
                os.getenv("TIERLIB_ACCRUAL_INTERVAL"), AccrualInterval.ANNUAL
            ),
        )
        logger.debug("Loaded distribution config from environment: %s", config)
        return config

    def decimal_context(self):
        """Context manager running decimal arithmetic with these settings."""
        return decimal.localcontext(
            decimal.Context(prec=self.precision, rounding=_ROUNDING_MODES[self.rounding])
        )
