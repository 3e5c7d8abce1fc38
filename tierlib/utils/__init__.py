from .date import add_months, days_inclusive, month_start, months_between, to_date
from .decimals import nullable_add, nullable_sum, to_decimal
from .ranges import DateRange, NumericRange

__all__ = [
    "DateRange",
    "NumericRange",
    "to_date",
    "month_start",
    "add_months",
    "months_between",
    "days_inclusive",
    "to_decimal",
    "nullable_add",
    "nullable_sum",
]
