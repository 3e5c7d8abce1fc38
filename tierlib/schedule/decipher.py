"""
Accrual period decipherment.

Slices a date window into interval-aligned accrual periods. Period boundaries
are anchored on the decipherer's own window start and recur every
``interval.months()`` months, so that every window deciphered by the same
instance breaks on the same calendar dates.
"""

import logging
from datetime import date, timedelta
from typing import Iterable, List, Tuple

from tierlib.conventions.types import AccrualInterval
from tierlib.utils.date import add_months, month_start, months_between
from tierlib.utils.ranges import DateRange

logger = logging.getLogger(__name__)


class AccrualPeriodDecipher:
    """Derives accrual periods, reset dates and report months for a window."""

    def __init__(self, date_window: DateRange, interval: AccrualInterval):
        if not isinstance(date_window, DateRange):
            raise TypeError(f"date_window must be a DateRange, got {type(date_window)}")
        if not isinstance(interval, AccrualInterval):
            raise TypeError(f"interval must be an AccrualInterval, got {type(interval)}")
        self._date_window = date_window
        self._interval = interval
        self._reset_dates = tuple(
            self._anchors_within(date_window.start, date_window.end)
        )
        self._month_start_dates = self._months_touched(date_window)

    @property
    def date_window(self) -> DateRange:
        return self._date_window

    @property
    def interval(self) -> AccrualInterval:
        return self._interval

    @property
    def reset_dates(self) -> Tuple[date, ...]:
        """Dates after the window start, up to its end, at which a new period begins."""
        return self._reset_dates

    @property
    def month_start_dates(self) -> Tuple[date, ...]:
        """First day of every calendar month the window touches."""
        return self._month_start_dates

    def _anchor(self, k: int) -> date:
        # Computed from the window start each time so month-end days do not drift.
        return add_months(self._date_window.start, k * self._interval.months())

    def _anchors_within(self, start: date, end: date) -> List[date]:
        """Anchor dates strictly after start and on or before end."""
        months = self._interval.months()
        k = months_between(self._date_window.start, start) // months - 1
        anchors = []
        while True:
            anchor = self._anchor(k)
            if anchor > end:
                break
            if anchor > start:
                anchors.append(anchor)
            k += 1
        return anchors

    @staticmethod
    def _months_touched(window: DateRange) -> Tuple[date, ...]:
        first = month_start(window.start)
        count = months_between(window.start, window.end) + 1
        return tuple(add_months(first, i) for i in range(count))

    def decipher_accrual_periods(
        self, window: DateRange, cumulative: bool = False
    ) -> List[DateRange]:
        """
        Split a window into accrual periods.

        Args:
            window: Range to split; it may extend beyond the decipherer's own window
            cumulative: If True every period starts at ``window.start`` and only
                the end advances

        Returns:
            Periods in ascending order; the last one is clipped to ``window.end``
        """
        starts = [window.start] + self._anchors_within(window.start, window.end)
        ends = [anchor - timedelta(days=1) for anchor in starts[1:]] + [window.end]

        if cumulative:
            periods = [DateRange(window.start, end) for end in ends]
        else:
            periods = [DateRange(start, end) for start, end in zip(starts, ends)]

        logger.debug(
            "Deciphered %d %s accrual period(s) for %s (cumulative=%s)",
            len(periods),
            self._interval.name,
            window,
            cumulative,
        )
        return periods

    def decipher_gaps(self, existing_periods: Iterable[DateRange]) -> List[DateRange]:
        """
        Find the parts of the decipherer's window not covered by any period.

        Args:
            existing_periods: Covered ranges, in any order

        Returns:
            Maximal uncovered ranges in ascending order
        """
        window = self._date_window
        covered = sorted(
            (p for p in existing_periods if p.overlaps(window)),
            key=lambda p: (p.start, p.end),
        )

        gaps: List[DateRange] = []
        cursor = window.start
        for period in covered:
            if period.start > cursor:
                gaps.append(DateRange(cursor, period.start - timedelta(days=1)))
            if period.end >= cursor:
                if period.end >= window.end:
                    cursor = None
                    break
                cursor = period.end + timedelta(days=1)

        if cursor is not None and cursor <= window.end:
            gaps.append(DateRange(cursor, window.end))

        logger.debug("Found %d coverage gap(s) in %s", len(gaps), window)
        return gaps

    def __repr__(self) -> str:
        return f"AccrualPeriodDecipher({self._date_window}, {self._interval.name})"
