"""
Per-month coverage records for a sequence of effective-dated spans.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import List, Optional, Protocol, Sequence

from tierlib.utils.ranges import DateRange


class EffectiveDated(Protocol):
    effective_from: date
    effective_to: Optional[date]


def _month_end(dt: date) -> date:
    return date(dt.year, dt.month, calendar.monthrange(dt.year, dt.month)[1])


def split_by_month(span: DateRange) -> List[DateRange]:
    """Split a range into pieces that each stay within one calendar month."""
    pieces = []
    start = span.start
    while start <= span.end:
        end = min(_month_end(start), span.end)
        pieces.append(DateRange(start, end))
        start = end + timedelta(days=1)
    return pieces


def month_records(items: Sequence[EffectiveDated], as_of: date) -> List[DateRange]:
    """
    Monthly coverage records for effective-dated items such as tier bundles.

    Items are taken in ``effective_from`` order. An item without
    ``effective_to`` runs to the day before the next item starts, or to
    ``as_of`` when it is the last one. Each span is split by calendar month.
    """
    ordered = sorted(items, key=lambda item: item.effective_from)
    records: List[DateRange] = []
    for i, item in enumerate(ordered):
        if item.effective_to is not None:
            end = item.effective_to
        elif i < len(ordered) - 1:
            end = ordered[i + 1].effective_from - timedelta(days=1)
        else:
            end = as_of
        if end < item.effective_from:
            continue
        records.extend(split_by_month(DateRange(item.effective_from, end)))
    return records
