"""POST /v1/loan/decision - loan decision endpoint"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from decision_engine.api.dependencies import get_decision_engine, get_request_id
from decision_engine.api.v1.schemas import LoanDecisionRequest, LoanDecisionResponse
from decision_engine.domain.engine import DecisionEngine
from decision_engine.domain.exceptions import ErrorKind, ErrorTier
from decision_engine.infrastructure.observability.logging import log_decision
from decision_engine.infrastructure.observability.metrics import record_decision

router = APIRouter()

# Status code for each business rejection; validation rejections are 400
BUSINESS_STATUS_CODES = {
    ErrorKind.NO_VALID_LOAN: 404,
    ErrorKind.INVALID_AGE: 403,
}


def status_code_for(kind: ErrorKind) -> int:
    if kind.tier is ErrorTier.VALIDATION:
        return 400
    return BUSINESS_STATUS_CODES[kind]


@router.post(
    "/loan/decision",
    response_model=LoanDecisionResponse,
    responses={
        400: {"model": LoanDecisionResponse},
        403: {"model": LoanDecisionResponse},
        404: {"model": LoanDecisionResponse},
    },
)
def create_decision(
    request_body: LoanDecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide on a loan for the given personal code, amount and period.

    Approved requests return 200 with the amount and period, which may
    differ from the requested ones. Rejections return the error message
    with a status code reflecting the rejection kind.
    """
    start_time = time.perf_counter()
    request_id = get_request_id(request)

    try:
        decision = engine.calculate_approved_loan(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="An unexpected error occurred")

    duration_ms = (time.perf_counter() - start_time) * 1000
    record_decision(decision)
    log_decision(request_id, decision, duration_ms)

    response = LoanDecisionResponse(
        loan_amount=decision.loan_amount,
        loan_period=decision.loan_period,
        error_message=decision.error_message,
    )
    if decision.is_approved:
        return response

    return JSONResponse(
        status_code=status_code_for(decision.error_kind),
        content=response.model_dump(),
    )
