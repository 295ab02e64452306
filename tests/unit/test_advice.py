"""Unit tests for advice generation"""

import pytest
from decimal import Decimal
from mortgage_calculator.domain.advice import (
    COMFORTABLE_BURDEN,
    ENERGY_EFFICIENT,
    ENERGY_IMPROVEMENT,
    EXCEEDS_CAPACITY,
    HIGH_BURDEN,
    LONG_FIXED_PERIOD,
    SHORT_FIXED_PERIOD,
    WITHIN_CAPACITY,
    generate_advice,
    payment_to_income_percent,
)
from mortgage_calculator.domain.borrowing import compute_max_borrowing
from mortgage_calculator.domain.models import EnergyLabel, LivingSituation, LoanInput


def make_loan(
    principal: str = "300000",
    main_income: str = "60000",
    energy_label: EnergyLabel = EnergyLabel.C,
    fixed_period: int = 15,
    living_situation: LivingSituation = LivingSituation.ALONE,
    partner_income: str | None = None,
) -> LoanInput:
    return LoanInput(
        principal=Decimal(principal),
        annual_interest_rate_percent=Decimal("3.5"),
        duration_years=30,
        living_situation=living_situation,
        main_income=Decimal(main_income),
        partner_income=Decimal(partner_income) if partner_income is not None else None,
        energy_label=energy_label,
        fixed_interest_period_years=fixed_period,
    )


def advice_for(loan: LoanInput, monthly_payment: str) -> str:
    return generate_advice(loan, Decimal(monthly_payment), compute_max_borrowing(loan))


def test_within_capacity_efficient_home_comfortable(household_loan):
    """Test two-income household, label B, 10-year fixed period"""
    advice = advice_for(household_loan, "1347.13")

    # 1347.13 / 10000.00 = 13.47% of monthly income
    assert advice == " ".join([WITHIN_CAPACITY, ENERGY_EFFICIENT.format(label="B"), COMFORTABLE_BURDEN])
    assert "within your maximum borrowing capacity" in advice
    assert "energy-efficient" in advice


def test_exceeds_capacity_short_period_high_burden():
    """Test capacity shortfall is reported with the exact excess"""
    loan = make_loan(main_income="50000", energy_label=EnergyLabel.D, fixed_period=5)
    advice = advice_for(loan, "1347.13")

    # capacity 225000.00, monthly income 4166.67, ratio 0.3233 -> 32.33%
    assert advice == " ".join(
        [EXCEEDS_CAPACITY.format(excess="75000.00"), SHORT_FIXED_PERIOD, HIGH_BURDEN]
    )


def test_inefficient_label_long_period_middle_band():
    """Test F/G improvement and 20+ year stability fragments; 25-30% emits nothing"""
    loan = make_loan(main_income="60000", energy_label=EnergyLabel.G, fixed_period=20)
    advice = advice_for(loan, "1347.13")

    # capacity 270000.00, monthly income 5000.00, ratio 26.94%
    assert advice == " ".join(
        [
            EXCEEDS_CAPACITY.format(excess="30000.00"),
            ENERGY_IMPROVEMENT.format(label="G"),
            LONG_FIXED_PERIOD,
        ]
    )


@pytest.mark.parametrize("label", [EnergyLabel.C, EnergyLabel.D, EnergyLabel.E])
def test_neutral_labels_emit_nothing(label):
    """Test labels C-E add no energy fragment"""
    advice = advice_for(make_loan(energy_label=label), "1347.13")

    assert "energy" not in advice


@pytest.mark.parametrize(
    "period, expected",
    [
        (1, SHORT_FIXED_PERIOD),
        (9, SHORT_FIXED_PERIOD),
        (10, None),
        (19, None),
        (20, LONG_FIXED_PERIOD),
        (30, LONG_FIXED_PERIOD),
    ],
)
def test_fixed_period_boundaries(period, expected):
    """Test < 10 risk, 10-19 nothing, >= 20 stability"""
    advice = advice_for(make_loan(fixed_period=period), "1347.13")

    if expected is None:
        assert SHORT_FIXED_PERIOD not in advice
        assert LONG_FIXED_PERIOD not in advice
    else:
        assert expected in advice


def test_capacity_boundary_is_within():
    """Test a loan exactly at capacity counts as within"""
    loan = make_loan(principal="270000.00", main_income="60000")
    advice = advice_for(loan, "1212.42")

    assert advice.startswith(WITHIN_CAPACITY)


def test_burden_exactly_25_percent_is_comfortable():
    """Test 1000.00 / 4000.00 = 25.00% is comfortable"""
    loan = make_loan(principal="240000", main_income="48000")
    advice = advice_for(loan, "1000.00")

    assert advice == " ".join([EXCEEDS_CAPACITY.format(excess="24000.00"), COMFORTABLE_BURDEN])


def test_burden_exactly_30_percent_emits_nothing():
    """Test 1000.00 / 3333.33 rounds to 30.00%, which is not above 30"""
    loan = make_loan(principal="240000", main_income="40000")
    advice = advice_for(loan, "1000.00")

    assert advice == EXCEEDS_CAPACITY.format(excess="60000.00")


def test_payment_to_income_percent_rounding():
    """Test monthly income to cents and ratio to four decimals"""
    assert payment_to_income_percent(Decimal("1000.00"), Decimal("40000")) == Decimal("30")
    assert payment_to_income_percent(Decimal("1347.13"), Decimal("50000")) == Decimal("32.33")
    assert payment_to_income_percent(Decimal("1347.13"), Decimal("120000")) == Decimal("13.47")


def test_partner_income_counts_towards_burden():
    """Test the burden ratio uses household income"""
    alone = make_loan(main_income="50000", living_situation=LivingSituation.ALONE, partner_income="50000")
    together = make_loan(main_income="50000", living_situation=LivingSituation.TOGETHER, partner_income="50000")

    assert HIGH_BURDEN in advice_for(alone, "1347.13")
    assert COMFORTABLE_BURDEN in advice_for(together, "1347.13")


def test_advice_is_deterministic(household_loan):
    """Test identical inputs produce byte-identical text"""
    first = advice_for(household_loan, "1347.13")
    second = advice_for(household_loan, "1347.13")

    assert first == second
    assert first == first.strip()
    assert "  " not in first
