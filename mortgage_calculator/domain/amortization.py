"""Fixed-rate amortization: monthly payment and total interest"""

import logging
from decimal import Context, Decimal, ROUND_HALF_UP, localcontext

from mortgage_calculator.domain.exceptions import InvalidLoanInputError
from mortgage_calculator.utils.money import round_money

logger = logging.getLogger(__name__)

# Significant digits carried through rate conversion and the power term
PRECISION = 10
MONTHS_PER_YEAR = 12

_INTERMEDIATE = Context(prec=PRECISION, rounding=ROUND_HALF_UP)
_FINAL = Context(prec=28, rounding=ROUND_HALF_UP)


def validate_loan_terms(principal: Decimal, annual_rate_percent: Decimal, duration_years: int) -> None:
    """
    Fail fast on inputs the amortization formula is undefined for.

    Raises:
        InvalidLoanInputError: amounts are not finite Decimals, principal <= 0,
            rate < 0, or duration is not a positive integer
    """
    if not isinstance(principal, Decimal) or not principal.is_finite():
        raise InvalidLoanInputError("principal", "must be a finite Decimal")
    if principal <= 0:
        raise InvalidLoanInputError("principal", "must be greater than 0")

    if not isinstance(annual_rate_percent, Decimal) or not annual_rate_percent.is_finite():
        raise InvalidLoanInputError("annual_interest_rate_percent", "must be a finite Decimal")
    if annual_rate_percent < 0:
        raise InvalidLoanInputError("annual_interest_rate_percent", "must not be negative")

    if isinstance(duration_years, bool) or not isinstance(duration_years, int):
        raise InvalidLoanInputError("duration_years", "must be an integer")
    if duration_years < 1:
        raise InvalidLoanInputError("duration_years", "must be at least 1")


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Convert an annual percentage (e.g. 3.5) to a monthly fraction at PRECISION digits"""
    with localcontext(_INTERMEDIATE):
        return annual_rate_percent / 100 / MONTHS_PER_YEAR


def compute_monthly_payment(principal: Decimal, annual_rate_percent: Decimal, duration_years: int) -> Decimal:
    """
    Calculate the fixed monthly payment of an annuity mortgage.

    Formula:
        M = P * (r * (1 + r)^n) / ((1 + r)^n - 1)

    where r is the monthly rate and n the number of monthly payments.
    Intermediates are carried at PRECISION significant digits and only the
    final payment is rounded to cents (half-up). A rate of exactly zero
    splits the principal evenly over all payments instead.

    Example:
        300000 at 3.5% over 30 years -> 1347.13
    """
    validate_loan_terms(principal, annual_rate_percent, duration_years)
    total_payments = duration_years * MONTHS_PER_YEAR

    # Exact equality, not a tolerance: tiny positive rates use the formula
    if annual_rate_percent == 0:
        return round_money(_FINAL.divide(principal, Decimal(total_payments)))

    rate = monthly_rate(annual_rate_percent)
    # 1 + r is exact; only the power and the numerator are cut to PRECISION
    growth = _INTERMEDIATE.power(_FINAL.add(Decimal(1), rate), total_payments)
    numerator = _INTERMEDIATE.multiply(principal, _INTERMEDIATE.multiply(rate, growth))
    denominator = _FINAL.subtract(growth, Decimal(1))
    if denominator == 0:
        raise InvalidLoanInputError(
            "annual_interest_rate_percent",
            f"is too small to amortize at {PRECISION} significant digits",
        )

    payment = round_money(_FINAL.divide(numerator, denominator))
    logger.debug(
        "Monthly payment computed",
        extra={"monthly_rate": str(rate), "total_payments": total_payments, "monthly_payment": str(payment)},
    )
    return payment


def compute_total_interest(monthly_payment: Decimal, principal: Decimal, duration_years: int) -> Decimal:
    """
    Total interest paid over the life of the loan.

    Uses the rounded monthly payment so that
    total_interest + principal == monthly_payment * total_payments holds exactly.
    """
    total_paid = _FINAL.multiply(monthly_payment, Decimal(duration_years * MONTHS_PER_YEAR))
    return _FINAL.subtract(total_paid, principal)
