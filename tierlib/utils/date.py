from typing import Union
from datetime import datetime, date
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or pandas Timestamp to a plain date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def datetime_to_str(date_like: DateLike) -> str:
    """ISO 'YYYY-MM-DD' text for a date-like, as used in range labels and logs."""
    return to_date(date_like).strftime(DATE_FMT)


def month_start(dt: date) -> date:
    """First calendar day of the month containing dt."""
    return dt.replace(day=1)


def add_months(dt: date, months: int) -> date:
    """
    Shift dt by a whole number of months, clamping to the last day of the
    target month when the day does not exist there.
    """
    return dt + relativedelta(months=months)


def months_between(start: date, end: date) -> int:
    """Calendar month difference between the months containing start and end."""
    return (end.year - start.year) * 12 + end.month - start.month


def days_inclusive(start: date, end: date) -> int:
    """Number of days from start to end, counting both ends."""
    return (end - start).days + 1
