"""Mortgage calculation engine - core business logic"""

import logging
from decimal import Decimal

from mortgage_calculator.domain.advice import generate_advice
from mortgage_calculator.domain.amortization import (
    compute_monthly_payment,
    compute_total_interest,
    validate_loan_terms,
)
from mortgage_calculator.domain.borrowing import compute_max_borrowing
from mortgage_calculator.domain.exceptions import InvalidLoanInputError
from mortgage_calculator.domain.models import CalculationResult, EnergyLabel, LivingSituation, LoanInput

logger = logging.getLogger(__name__)


def validate_household(loan_input: LoanInput) -> None:
    """
    Check the optional household profile.

    Either none or all of the required household fields must be given;
    partner income is optional in both cases.
    """
    fields = loan_input.household_fields
    missing = [name for name, value in fields.items() if value is None]

    if len(missing) == len(fields):
        if loan_input.partner_income is not None:
            raise InvalidLoanInputError("partner_income", "requires a complete household profile")
        return
    if missing:
        raise InvalidLoanInputError(missing[0], "is required when a household profile is supplied")

    if not isinstance(loan_input.living_situation, LivingSituation):
        raise InvalidLoanInputError("living_situation", "must be a LivingSituation")
    if not isinstance(loan_input.energy_label, EnergyLabel):
        raise InvalidLoanInputError("energy_label", "must be an EnergyLabel")
    if not isinstance(loan_input.main_income, Decimal) or not loan_input.main_income.is_finite():
        raise InvalidLoanInputError("main_income", "must be a finite Decimal")
    if loan_input.main_income <= 0:
        raise InvalidLoanInputError("main_income", "must be greater than 0")
    partner_income = loan_input.partner_income
    if partner_income is not None:
        if not isinstance(partner_income, Decimal) or not partner_income.is_finite():
            raise InvalidLoanInputError("partner_income", "must be a finite Decimal")
        if partner_income < 0:
            raise InvalidLoanInputError("partner_income", "must not be negative")

    period = loan_input.fixed_interest_period_years
    if isinstance(period, bool) or not isinstance(period, int) or period < 1:
        raise InvalidLoanInputError("fixed_interest_period_years", "must be an integer of at least 1")


def calculate_mortgage(loan_input: LoanInput) -> CalculationResult:
    """
    Main entry point: compute payment figures and, when a household profile
    is supplied, borrowing capacity and advice.

    Raises:
        InvalidLoanInputError: a precondition on the input does not hold
    """
    validate_loan_terms(
        loan_input.principal,
        loan_input.annual_interest_rate_percent,
        loan_input.duration_years,
    )
    validate_household(loan_input)

    monthly_payment = compute_monthly_payment(
        loan_input.principal,
        loan_input.annual_interest_rate_percent,
        loan_input.duration_years,
    )
    total_interest = compute_total_interest(monthly_payment, loan_input.principal, loan_input.duration_years)

    if not loan_input.is_extended:
        return CalculationResult(monthly_payment=monthly_payment, total_interest=total_interest)

    max_borrowing = compute_max_borrowing(loan_input)
    advice = generate_advice(loan_input, monthly_payment, max_borrowing)
    logger.debug("Household figures computed", extra={"max_borrowing": str(max_borrowing)})

    return CalculationResult(
        monthly_payment=monthly_payment,
        total_interest=total_interest,
        max_borrowing=max_borrowing,
        advice=advice,
    )
