"""Rule-based advice text derived from the computed figures"""

from decimal import Context, Decimal, ROUND_HALF_UP
from typing import List, Optional

from mortgage_calculator.domain.models import LoanInput
from mortgage_calculator.utils.money import format_money, round_half_up, round_money

SHORT_FIXED_PERIOD_YEARS = 10
LONG_FIXED_PERIOD_YEARS = 20
HIGH_BURDEN_PERCENT = Decimal("30")
COMFORTABLE_PERCENT = Decimal("25")

WITHIN_CAPACITY = "The requested loan amount is within your maximum borrowing capacity."
EXCEEDS_CAPACITY = "The requested loan amount exceeds your maximum borrowing capacity by {excess}."
ENERGY_EFFICIENT = "Your energy-efficient home (label {label}) qualifies for a 5% higher borrowing capacity."
ENERGY_IMPROVEMENT = (
    "Consider improving the energy efficiency of the home (label {label}) "
    "to lower energy costs and increase its value."
)
SHORT_FIXED_PERIOD = "A fixed interest period shorter than 10 years exposes you to the risk of rising rates."
LONG_FIXED_PERIOD = "A fixed interest period of 20 years or more provides long-term payment stability."
HIGH_BURDEN = (
    "The monthly payment exceeds 30% of your gross monthly income, which is a high financial burden."
)
COMFORTABLE_BURDEN = "The monthly payment is comfortably within your gross monthly income."

_CONTEXT = Context(prec=28, rounding=ROUND_HALF_UP)


def payment_to_income_percent(monthly_payment: Decimal, total_income: Decimal) -> Decimal:
    """
    Monthly payment as a percentage of gross monthly income.

    Monthly income is rounded to cents and the payment/income ratio to four
    decimals before scaling to a percentage.
    """
    monthly_income = round_money(_CONTEXT.divide(total_income, Decimal(12)))
    ratio = round_half_up(_CONTEXT.divide(monthly_payment, monthly_income), 4)
    return ratio * 100


def _capacity_fragment(loan_input: LoanInput, max_borrowing: Decimal) -> str:
    if loan_input.principal <= max_borrowing:
        return WITHIN_CAPACITY
    return EXCEEDS_CAPACITY.format(excess=format_money(loan_input.principal - max_borrowing))


def _energy_fragment(loan_input: LoanInput) -> Optional[str]:
    label = loan_input.energy_label
    if label.is_efficient:
        return ENERGY_EFFICIENT.format(label=label.value)
    if label.is_inefficient:
        return ENERGY_IMPROVEMENT.format(label=label.value)
    return None


def _fixed_period_fragment(loan_input: LoanInput) -> Optional[str]:
    years = loan_input.fixed_interest_period_years
    if years < SHORT_FIXED_PERIOD_YEARS:
        return SHORT_FIXED_PERIOD
    if years >= LONG_FIXED_PERIOD_YEARS:
        return LONG_FIXED_PERIOD
    return None


def _burden_fragment(loan_input: LoanInput, monthly_payment: Decimal) -> Optional[str]:
    percent = payment_to_income_percent(monthly_payment, loan_input.total_income)
    if percent > HIGH_BURDEN_PERCENT:
        return HIGH_BURDEN
    if percent <= COMFORTABLE_PERCENT:
        return COMFORTABLE_BURDEN
    return None


def generate_advice(loan_input: LoanInput, monthly_payment: Decimal, max_borrowing: Decimal) -> str:
    """
    Build the advice text from independent fragments.

    Fragment order is fixed:
    1. Borrowing capacity (always present)
    2. Energy label: A/B positive, F/G improvement, C-E nothing
    3. Fixed interest period: < 10 rate risk, >= 20 stability, 10-19 nothing
    4. Payment burden: > 30% high, <= 25% comfortable, in between nothing
    """
    fragments: List[Optional[str]] = [
        _capacity_fragment(loan_input, max_borrowing),
        _energy_fragment(loan_input),
        _fixed_period_fragment(loan_input),
        _burden_fragment(loan_input, monthly_payment),
    ]
    return " ".join(fragment for fragment in fragments if fragment).strip()
