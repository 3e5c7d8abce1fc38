# Re-export schedule components
from .decipher import AccrualPeriodDecipher
from .records import month_records, split_by_month

__all__ = ["AccrualPeriodDecipher", "month_records", "split_by_month"]
