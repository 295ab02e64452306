"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional


class LivingSituation(str, Enum):
    """Household composition used to determine total income"""

    ALONE = "alone"
    TOGETHER = "together"


class EnergyLabel(str, Enum):
    """Property energy efficiency label"""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    @property
    def is_efficient(self) -> bool:
        return self in (EnergyLabel.A, EnergyLabel.B)

    @property
    def is_inefficient(self) -> bool:
        return self in (EnergyLabel.F, EnergyLabel.G)


@dataclass(frozen=True)
class LoanInput:
    """Validated loan parameters handed to the calculation engine"""

    principal: Decimal
    annual_interest_rate_percent: Decimal
    duration_years: int

    # Household profile (extended variant)
    living_situation: Optional[LivingSituation] = None
    main_income: Optional[Decimal] = None
    partner_income: Optional[Decimal] = None
    energy_label: Optional[EnergyLabel] = None
    fixed_interest_period_years: Optional[int] = None

    @property
    def total_payments(self) -> int:
        return self.duration_years * 12

    @property
    def household_fields(self) -> dict:
        """Required household fields, keyed by name (partner income is optional)"""
        return {
            "living_situation": self.living_situation,
            "main_income": self.main_income,
            "energy_label": self.energy_label,
            "fixed_interest_period_years": self.fixed_interest_period_years,
        }

    @property
    def is_extended(self) -> bool:
        """True when the full household profile is supplied"""
        return all(value is not None for value in self.household_fields.values())

    @property
    def total_income(self) -> Decimal:
        """Gross annual household income (partner income only counts when living together)"""
        if self.main_income is None:
            raise ValueError("total_income requires main_income")
        if self.living_situation == LivingSituation.TOGETHER:
            return self.main_income + (self.partner_income or Decimal("0"))
        return self.main_income


@dataclass(frozen=True)
class CalculationResult:
    """Output of the calculation engine"""

    monthly_payment: Decimal
    total_interest: Decimal
    max_borrowing: Optional[Decimal] = None
    advice: Optional[str] = None

    @property
    def is_extended(self) -> bool:
        return self.max_borrowing is not None
