"""Tests for date and numeric ranges."""

from datetime import date
from decimal import Decimal

import pytest

from tierlib.utils.ranges import DateRange, NumericRange


def test_date_range_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        DateRange(date(2019, 2, 1), date(2019, 1, 31))


def test_date_range_accepts_iso_strings():
    r = DateRange("2019-01-01", "20190131")
    assert r == DateRange(date(2019, 1, 1), date(2019, 1, 31))
    assert r.days == 31


def test_date_range_single_day():
    r = DateRange(date(2019, 3, 5), date(2019, 3, 5))
    assert r.days == 1
    assert r.contains(date(2019, 3, 5))
    assert not r.contains(date(2019, 3, 6))


def test_date_range_overlap_days():
    q1 = DateRange(date(2019, 1, 1), date(2019, 3, 31))
    feb_to_may = DateRange(date(2019, 2, 1), date(2019, 5, 31))
    assert q1.overlap_days(feb_to_may) == 59
    assert q1.intersection(feb_to_may) == DateRange(date(2019, 2, 1), date(2019, 3, 31))


def test_date_range_disjoint_has_no_overlap():
    jan = DateRange(date(2019, 1, 1), date(2019, 1, 31))
    mar = DateRange(date(2019, 3, 1), date(2019, 3, 31))
    assert not jan.overlaps(mar)
    assert jan.intersection(mar) is None
    assert jan.overlap_days(mar) == 0


def test_date_range_is_hashable_and_structural():
    a = DateRange(date(2019, 1, 1), date(2019, 1, 31))
    b = DateRange(date(2019, 1, 1), date(2019, 1, 31))
    assert a == b
    assert len({a, b}) == 1


def test_numeric_range_unbounded_overlaps_everything():
    unbounded = NumericRange(None, None)
    assert unbounded.is_unbounded
    assert unbounded.overlaps(NumericRange(Decimal(-5), Decimal(-1)))
    assert unbounded.overlaps(NumericRange(Decimal(10), None))


def test_numeric_range_touching_bounds_overlap():
    assert NumericRange(0, 1000).overlaps(NumericRange(1000, 1500))
    assert not NumericRange(0, 999).overlaps(NumericRange(1000, 1500))


def test_numeric_range_half_open_bounds():
    top_tier = NumericRange(Decimal(750), None)
    bottom_tier = NumericRange(None, Decimal(500))
    assert top_tier.overlaps(NumericRange(0, 1000))
    assert not top_tier.overlaps(NumericRange(0, 700))
    assert bottom_tier.overlaps(NumericRange(-300, 0))
    assert not bottom_tier.overlaps(NumericRange(600, 700))


def test_numeric_range_rounded():
    r = NumericRange(Decimal("32.876712328"), None).rounded(5)
    assert r == NumericRange(Decimal("32.87671"), None)


def test_date_range_label():
    r = DateRange("20190201", date(2019, 3, 1))
    assert str(r) == "2019-02-01..2019-03-01"
