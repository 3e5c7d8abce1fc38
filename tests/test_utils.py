"""Tests for date and decimal helpers."""

from datetime import date, datetime
from decimal import Decimal

import pandas as pd
import pytest

from tierlib.utils.date import add_months, datetime_to_str, months_between, to_date
from tierlib.utils.decimals import nullable_add, nullable_sum, to_decimal


@pytest.mark.parametrize(
    "value",
    [
        date(2019, 1, 31),
        datetime(2019, 1, 31, 15, 30),
        pd.Timestamp("2019-01-31"),
        "2019-01-31",
        "20190131",
    ],
)
def test_to_date(value):
    assert to_date(value) == date(2019, 1, 31)


def test_to_date_rejects_bad_input():
    with pytest.raises(ValueError):
        to_date("31/01/2019")
    with pytest.raises(TypeError):
        to_date(20190131)


def test_datetime_to_str():
    assert datetime_to_str("20190131") == "2019-01-31"


def test_add_months_clamps_to_month_end():
    assert add_months(date(2019, 1, 31), 1) == date(2019, 2, 28)
    assert add_months(date(2020, 1, 31), 1) == date(2020, 2, 29)
    assert add_months(date(2019, 3, 31), -1) == date(2019, 2, 28)


def test_months_between():
    assert months_between(date(2019, 1, 31), date(2019, 2, 1)) == 1
    assert months_between(date(2019, 1, 15), date(2020, 1, 14)) == 12


def test_to_decimal():
    assert to_decimal(None) is None
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("12.5") == Decimal("12.5")
    assert to_decimal(7) == Decimal(7)


def test_to_decimal_rejects_bad_input():
    with pytest.raises(ValueError):
        to_decimal("abc")
    with pytest.raises(TypeError):
        to_decimal(True)


def test_nullable_arithmetic():
    assert nullable_add(None, None) is None
    assert nullable_add(None, Decimal(2)) == Decimal(2)
    assert nullable_sum([None, None]) is None
    assert nullable_sum([None, Decimal(1), Decimal(2)]) == Decimal(3)
