"""Tests for monthly coverage records."""

from datetime import date

from tierlib.distribution.tiers import Tier, TierBundle
from tierlib.schedule.records import month_records, split_by_month
from tierlib.utils.ranges import DateRange


def _bundle(start, end=None):
    return TierBundle(start, end, (Tier(None, 1),))


def test_split_by_month():
    pieces = split_by_month(DateRange(date(2019, 1, 20), date(2019, 3, 5)))
    assert pieces == [
        DateRange(date(2019, 1, 20), date(2019, 1, 31)),
        DateRange(date(2019, 2, 1), date(2019, 2, 28)),
        DateRange(date(2019, 3, 1), date(2019, 3, 5)),
    ]


def test_split_single_day():
    day = DateRange(date(2019, 6, 30), date(2019, 6, 30))
    assert split_by_month(day) == [day]


def test_open_bundle_runs_until_next_bundle():
    records = month_records(
        [_bundle("2019-03-10", "2019-04-05"), _bundle("2019-01-15")],
        as_of=date(2019, 12, 31),
    )
    assert records == [
        DateRange(date(2019, 1, 15), date(2019, 1, 31)),
        DateRange(date(2019, 2, 1), date(2019, 2, 28)),
        DateRange(date(2019, 3, 1), date(2019, 3, 9)),
        DateRange(date(2019, 3, 10), date(2019, 3, 31)),
        DateRange(date(2019, 4, 1), date(2019, 4, 5)),
    ]


def test_last_open_bundle_runs_until_as_of():
    records = month_records([_bundle("2019-05-20")], as_of=date(2019, 6, 10))
    assert records == [
        DateRange(date(2019, 5, 20), date(2019, 5, 31)),
        DateRange(date(2019, 6, 1), date(2019, 6, 10)),
    ]


def test_bundle_starting_after_as_of_has_no_records():
    assert month_records([_bundle("2019-05-20")], as_of=date(2019, 5, 1)) == []


def test_trailing_single_day_month_is_kept():
    records = month_records([_bundle("2019-02-01", "2019-03-01")], as_of=date(2019, 12, 31))
    assert records == [
        DateRange(date(2019, 2, 1), date(2019, 2, 28)),
        DateRange(date(2019, 3, 1), date(2019, 3, 1)),
    ]
