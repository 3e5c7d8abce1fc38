"""Tests for configuration and accrual interval parsing."""

from decimal import Decimal

import pytest

from tierlib.config import DistributionConfig
from tierlib.conventions.types import AccrualInterval


def test_defaults():
    config = DistributionConfig()
    assert config.precision == 28
    assert config.rounding == "ROUND_HALF_EVEN"
    assert config.default_interval is AccrualInterval.ANNUAL


def test_from_env(monkeypatch):
    monkeypatch.setenv("TIERLIB_DECIMAL_PRECISION", "12")
    monkeypatch.setenv("TIERLIB_DECIMAL_ROUNDING", "round_half_up")
    monkeypatch.setenv("TIERLIB_ACCRUAL_INTERVAL", "Quarterly")

    config = DistributionConfig.from_env()

    assert config.precision == 12
    assert config.rounding == "ROUND_HALF_UP"
    assert config.default_interval is AccrualInterval.QUARTERLY


def test_from_env_without_variables(monkeypatch):
    for name in ("TIERLIB_DECIMAL_PRECISION", "TIERLIB_DECIMAL_ROUNDING", "TIERLIB_ACCRUAL_INTERVAL"):
        monkeypatch.delenv(name, raising=False)
    assert DistributionConfig.from_env() == DistributionConfig()


@pytest.mark.parametrize("kwargs", [{"precision": 0}, {"rounding": "ROUND_SIDEWAYS"}])
def test_invalid_config(kwargs):
    with pytest.raises(ValueError):
        DistributionConfig(**kwargs)


def test_decimal_context():
    with DistributionConfig(precision=5).decimal_context():
        assert Decimal(1) / Decimal(3) == Decimal("0.33333")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Annual", AccrualInterval.ANNUAL),
        ("SEMI_ANNUAL", AccrualInterval.SEMIANNUAL),
        ("semi-annual", AccrualInterval.SEMIANNUAL),
        ("quarterly", AccrualInterval.QUARTERLY),
        ("MONTHLY", AccrualInterval.MONTHLY),
        ("fortnightly", AccrualInterval.ANNUAL),
        (None, AccrualInterval.ANNUAL),
    ],
)
def test_parse_interval(name, expected):
    assert AccrualInterval.parse(name) is expected


def test_parse_interval_with_default():
    assert AccrualInterval.parse("", AccrualInterval.MONTHLY) is AccrualInterval.MONTHLY


@pytest.mark.parametrize(
    "interval, months, dividend",
    [
        (AccrualInterval.ANNUAL, 12, 1),
        (AccrualInterval.SEMIANNUAL, 6, 2),
        (AccrualInterval.QUARTERLY, 3, 4),
        (AccrualInterval.MONTHLY, 1, 12),
    ],
)
def test_interval_months_and_dividend(interval, months, dividend):
    assert interval.months() == months
    assert interval.dividend() == dividend
