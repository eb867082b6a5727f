"""Unit tests for date and money helpers"""

from datetime import date
from decimal import Decimal
from revolving_credit.utils.date_utils import days_between, format_date_range, format_us_date, parse_iso_date
from revolving_credit.utils.money import round_money, to_money_float


def test_parse_iso_date_drops_time():
    assert parse_iso_date("2024-03-05T23:59:00Z") == date(2024, 3, 5)


def test_days_between():
    assert days_between(date(2024, 1, 1), date(2025, 1, 1)) == 366
    assert days_between(date(2024, 1, 10), date(2024, 1, 1)) == -9


def test_us_date_labels():
    assert format_us_date(date(2024, 1, 5)) == "1/5/2024"
    assert format_date_range(date(2024, 1, 1), date(2024, 12, 31)) == "1/1/2024 to 12/31/2024"


def test_round_money_half_up():
    assert round_money(Decimal("2.675")) == Decimal("2.68")
    assert round_money(Decimal("152.876712")) == Decimal("152.88")
    assert to_money_float(Decimal("0.005")) == 0.01


def test_round_money_large_values():
    """27 integer digits plus cents exceeds the default 28-digit precision"""
    assert round_money(Decimal("1e27")) == Decimal("1e27")
    assert round_money(Decimal("123456789012345678901234567.895")) == Decimal("123456789012345678901234567.90")
