"""Unit tests for decimal rounding helpers"""

from decimal import Decimal
from mortgage_calculator.utils.money import format_money, round_half_up, round_money


def test_round_money_half_up():
    """Test ties round away from zero"""
    assert round_money(Decimal("0.125")) == Decimal("0.13")
    assert round_money(Decimal("0.124999")) == Decimal("0.12")
    assert round_money(Decimal("-0.125")) == Decimal("-0.13")


def test_round_half_up_places():
    """Test rounding to an arbitrary number of places"""
    assert round_half_up(Decimal("0.13471335"), 4) == Decimal("0.1347")
    assert round_half_up(Decimal("0.30000005"), 4) == Decimal("0.3000")
    assert round_half_up(Decimal("0.12345"), 4) == Decimal("0.1235")


def test_format_money():
    """Test amounts are rendered with exactly two decimals"""
    assert format_money(Decimal("75000")) == "75000.00"
    assert format_money(Decimal("1234.5")) == "1234.50"
    assert format_money(Decimal("0.005")) == "0.01"
