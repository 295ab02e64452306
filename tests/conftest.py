"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from mortgage_calculator.api.main import create_app
from mortgage_calculator.domain.models import EnergyLabel, LivingSituation, LoanInput


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def basic_loan() -> LoanInput:
    """Plain loan: 300000 at 3.5% over 30 years"""
    return LoanInput(
        principal=Decimal("300000.00"),
        annual_interest_rate_percent=Decimal("3.5"),
        duration_years=30,
    )


@pytest.fixture
def household_loan() -> LoanInput:
    """Same loan with a two-income household and an energy-efficient home"""
    return LoanInput(
        principal=Decimal("300000.00"),
        annual_interest_rate_percent=Decimal("3.5"),
        duration_years=30,
        living_situation=LivingSituation.TOGETHER,
        main_income=Decimal("75000.00"),
        partner_income=Decimal("45000.00"),
        energy_label=EnergyLabel.B,
        fixed_interest_period_years=10,
    )


@pytest.fixture
def household_payload() -> dict:
    """Extended request body as sent by API clients"""
    return {
        "loanAmount": 300000.00,
        "interestRate": 3.5,
        "loanTermYears": 30,
        "livingSituation": "together",
        "mainIncome": 75000.00,
        "partnerIncome": 45000.00,
        "energyLabel": "B",
        "fixedInterestPeriod": 10,
    }
