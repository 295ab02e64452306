"""POST /calculate - mortgage calculation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from mortgage_calculator.api.v1.schemas import (
    MortgageCalculationRequest,
    MortgageCalculationResponse,
    ProblemDetail,
)
from mortgage_calculator.api.decimal_json import DecimalJSONResponse, DecimalJSONRoute
from mortgage_calculator.api.dependencies import get_request_id
from mortgage_calculator.domain.calculator import calculate_mortgage
from mortgage_calculator.domain.exceptions import InvalidLoanInputError
from mortgage_calculator.infrastructure.observability.metrics import record_calculation, rejected_requests_counter
from mortgage_calculator.infrastructure.observability.logging import log_calculation, log_rejection

router = APIRouter(route_class=DecimalJSONRoute)


@router.post(
    "/calculate",
    response_model=MortgageCalculationResponse,
    response_class=DecimalJSONResponse,
    summary="Calculate mortgage payment",
    responses={400: {"model": ProblemDetail, "description": "Invalid input parameters"}},
)
def calculate(
    request_body: MortgageCalculationRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Calculate monthly payment and total interest for a fixed-rate mortgage.

    When the household profile (living situation, main income, energy label,
    fixed interest period) is supplied, the response also carries the maximum
    borrowing capacity and advice text.
    """
    start_time = time.time()
    loan_input = request_body.to_loan_input()

    try:
        result = calculate_mortgage(loan_input)

    except InvalidLoanInputError as e:
        rejected_requests_counter.labels(reason="precondition").inc()
        log_rejection(request_id, "precondition", str(e))
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", exc_info=True, extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    # Record metrics and logs
    variant = "extended" if result.is_extended else "basic"
    exceeds_capacity = loan_input.principal > result.max_borrowing if result.is_extended else None
    energy_label = loan_input.energy_label.value if loan_input.energy_label else None
    duration_ms = (time.time() - start_time) * 1000

    record_calculation(variant, result.monthly_payment, energy_label, exceeds_capacity)
    log_calculation(request_id, variant, str(result.monthly_payment), exceeds_capacity, duration_ms)

    return DecimalJSONResponse(content=MortgageCalculationResponse.from_result(result).to_content())
