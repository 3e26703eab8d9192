"""Tests for Danish display formatting."""

from datetime import date, datetime, UTC
from decimal import Decimal

import pytest

from nospend.utils.formatting import format_currency, format_date, format_percent


@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("4500"), "4.500 kr."),
        (Decimal("160.714285"), "161 kr."),
        (Decimal("0"), "0 kr."),
        (Decimal("999.5"), "1.000 kr."),
        (Decimal("1234567"), "1.234.567 kr."),
        (Decimal("-207.14"), "-207 kr."),
        (12000, "12.000 kr."),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


def test_format_date_plain_date():
    assert format_date(date(2025, 2, 5)) == "05. feb."


def test_format_date_may_has_no_period():
    assert format_date(date(2025, 5, 17)) == "17. maj"


def test_format_date_naive_datetime():
    assert format_date(datetime(2025, 12, 1, 9, 30)) == "01. dec."


def test_format_date_aware_datetime_converts_to_local():
    value = datetime(2025, 2, 14, 12, 0, tzinfo=UTC)
    local = value.astimezone()
    assert format_date(value) == format_date(local.replace(tzinfo=None))


def test_format_date_iso_string():
    assert format_date("2025-03-09T10:00:00") == "09. mar."


@pytest.mark.parametrize(
    "ratio,expected",
    [(Decimal("0"), "0%"), (Decimal("0.311"), "31%"), (Decimal("1"), "100%")],
)
def test_format_percent(ratio, expected):
    assert format_percent(ratio) == expected
