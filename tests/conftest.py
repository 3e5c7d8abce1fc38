"""Pytest configuration and shared fixtures for the tierlib test suite."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from tierlib.conventions.types import AccrualInterval
from tierlib.distribution.distributor import BundleDistributor
from tierlib.schedule.decipher import AccrualPeriodDecipher
from tierlib.utils.ranges import DateRange


def mock_daily_productivity(start, end, amount):
    """One (date, amount) entry for every day from start to end inclusive."""
    amount = Decimal(amount)
    return [
        (start + timedelta(days=i), amount) for i in range((end - start).days + 1)
    ]


@pytest.fixture
def daily_productivity():
    return mock_daily_productivity


@pytest.fixture
def calendar_2019():
    return DateRange(date(2019, 1, 1), date(2019, 12, 31))


@pytest.fixture
def make_distributor():
    def _make(window, interval=AccrualInterval.MONTHLY):
        return BundleDistributor(AccrualPeriodDecipher(window, interval))

    return _make
