"""
Basic types and enums used across the accrual scheduling system.
"""

from enum import Enum
from typing import Optional


class AccrualInterval(Enum):
    """Accrual intervals, valued by their length in months."""

    ANNUAL = 12
    SEMIANNUAL = 6
    QUARTERLY = 3
    MONTHLY = 1

    def months(self) -> int:
        return self.value

    def dividend(self) -> int:
        """Number of intervals that make up a year."""
        return 12 // self.value

    @classmethod
    def parse(
        cls, name: Optional[str], default: Optional["AccrualInterval"] = None
    ) -> "AccrualInterval":
        """
        Parse an interval name case-insensitively.

        Unknown or empty names fall back to ``default`` (ANNUAL when not given).
        Both "SemiAnnual" and "SEMI_ANNUAL" spellings are accepted.
        """
        if default is None:
            default = cls.ANNUAL
        if not name:
            return default
        key = name.strip().upper().replace("_", "").replace("-", "")
        for member in cls:
            if member.name == key:
                return member
        return default
