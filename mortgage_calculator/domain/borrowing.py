"""Income-based maximum borrowing capacity"""

from decimal import Decimal

from mortgage_calculator.domain.exceptions import InvalidLoanInputError
from mortgage_calculator.domain.models import LoanInput
from mortgage_calculator.utils.money import round_money

INCOME_MULTIPLIER = Decimal("4.5")
ENERGY_EFFICIENCY_BONUS = Decimal("1.05")


def compute_max_borrowing(loan_input: LoanInput) -> Decimal:
    """
    Estimate the maximum loan a household can take on.

    Rules:
    - Total income: main income, plus partner income when living together
    - Base capacity: 4.5x gross annual income
    - Energy label A or B: +5% bonus (C-G unchanged)
    - Rounded to cents, half-up

    Example:
        alone, 60000 income, label C -> 270000.00
        alone, 60000 income, label A -> 283500.00
    """
    if not loan_input.is_extended:
        raise InvalidLoanInputError("household", "borrowing capacity requires a complete household profile")

    capacity = loan_input.total_income * INCOME_MULTIPLIER
    if loan_input.energy_label.is_efficient:
        capacity *= ENERGY_EFFICIENCY_BONUS

    return round_money(capacity)
