"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import Annotated, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, WithJsonSchema, model_validator
from pydantic.alias_generators import to_camel

from mortgage_calculator.domain.models import CalculationResult, EnergyLabel, LivingSituation, LoanInput

# Amounts stay Decimal end to end and are written as JSON numbers by DecimalJSONResponse
Amount = Annotated[Decimal, WithJsonSchema({"type": "number"})]


class MortgageCalculationRequest(BaseModel):
    """Request body for POST /calculate"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "loanAmount": 300000.00,
                    "interestRate": 3.5,
                    "loanTermYears": 30,
                    "livingSituation": "together",
                    "mainIncome": 75000.00,
                    "partnerIncome": 45000.00,
                    "energyLabel": "B",
                    "fixedInterestPeriod": 10,
                }
            ]
        },
    )

    principal: Decimal = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("principal", "loanAmount"),
        description="Principal loan amount (also accepted as loanAmount)",
    )
    interest_rate: Decimal = Field(
        ...,
        ge=0,
        validation_alias=AliasChoices("interestRate", "interest_rate"),
        description="Annual interest rate as a percentage, e.g. 3.5",
    )
    duration_years: int = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("durationYears", "loanTermYears", "duration_years"),
        description="Loan term in years (also accepted as loanTermYears)",
    )
    living_situation: Optional[LivingSituation] = Field(
        None,
        validation_alias=AliasChoices("livingSituation", "living_situation"),
        description="Living situation: alone or together",
    )
    main_income: Optional[Decimal] = Field(
        None,
        gt=0,
        validation_alias=AliasChoices("mainIncome", "main_income"),
        description="Gross annual main income",
    )
    partner_income: Optional[Decimal] = Field(
        None,
        ge=0,
        validation_alias=AliasChoices("partnerIncome", "partner_income"),
        description="Gross annual partner income (only counted when living together)",
    )
    energy_label: Optional[EnergyLabel] = Field(
        None,
        validation_alias=AliasChoices("energyLabel", "energy_label"),
        description="Property energy efficiency label, A (best) to G",
    )
    fixed_interest_period: Optional[int] = Field(
        None,
        ge=1,
        validation_alias=AliasChoices("fixedInterestPeriod", "fixed_interest_period"),
        description="Fixed interest rate period in years",
    )

    @model_validator(mode="after")
    def check_household_profile(self) -> "MortgageCalculationRequest":
        """Household fields are all-or-nothing (partner income stays optional)"""
        household = {
            "livingSituation": self.living_situation,
            "mainIncome": self.main_income,
            "energyLabel": self.energy_label,
            "fixedInterestPeriod": self.fixed_interest_period,
        }
        missing = [name for name, value in household.items() if value is None]
        if missing and len(missing) < len(household):
            raise ValueError(f"household profile is incomplete, missing: {', '.join(missing)}")
        if len(missing) == len(household) and self.partner_income is not None:
            raise ValueError("partnerIncome requires livingSituation, mainIncome, energyLabel and fixedInterestPeriod")
        return self

    def to_loan_input(self) -> LoanInput:
        """Convert the validated payload into the engine's input record"""
        return LoanInput(
            principal=self.principal,
            annual_interest_rate_percent=self.interest_rate,
            duration_years=self.duration_years,
            living_situation=self.living_situation,
            main_income=self.main_income,
            partner_income=self.partner_income,
            energy_label=self.energy_label,
            fixed_interest_period_years=self.fixed_interest_period,
        )


class MortgageCalculationResponse(BaseModel):
    """Response for POST /calculate"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    monthly_payment: Amount = Field(..., description="Monthly payment amount", examples=[1347.13])
    total_interest: Amount = Field(
        ..., description="Total interest paid over the life of the loan", examples=[184966.80]
    )
    max_borrowing: Optional[Amount] = Field(
        None, description="Maximum borrowing capacity based on household income", examples=[567000.00]
    )
    advice: Optional[str] = Field(None, description="Advice derived from the calculated figures")

    @classmethod
    def from_result(cls, result: CalculationResult) -> "MortgageCalculationResponse":
        return cls(
            monthly_payment=result.monthly_payment,
            total_interest=result.total_interest,
            max_borrowing=result.max_borrowing,
            advice=result.advice,
        )

    def to_content(self) -> dict:
        """camelCase payload with Decimal amounts and absent optional fields omitted"""
        return self.model_dump(by_alias=True, exclude_none=True)


class FieldError(BaseModel):
    """Single invalid field in a rejected request"""

    field: str
    message: str


class ProblemDetail(BaseModel):
    """RFC 7807 Problem Details for HTTP APIs"""

    type: str = "about:blank"
    title: str
    status: int
    detail: str = ""
    request_id: str = ""
    errors: List[FieldError] = Field(default_factory=list)
