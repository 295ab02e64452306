"""Decimal rounding and formatting utilities"""

from decimal import Decimal, ROUND_HALF_UP

CENTS = Decimal("0.01")


def round_half_up(value: Decimal, places: int = 2) -> Decimal:
    """Round to a fixed number of fractional digits, ties away from zero"""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_money(value: Decimal) -> Decimal:
    """Round a monetary amount to cents"""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """Format an amount with exactly two decimals, e.g. 1234.5 -> '1234.50'"""
    return f"{round_money(value):.2f}"
