"""POST /api/cimb - fixed-date loan interest with a monthly rate"""

import logging
from fastapi import APIRouter, HTTPException, Request

from revolving_credit.api.v1.schemas import LoanInterestRequestSchema, LoanInterestResponse
from revolving_credit.api.dependencies import get_request_id
from revolving_credit.domain.calculator import calculate_loan_interest
from revolving_credit.domain.exceptions import ValidationError
from revolving_credit.domain.requests import build_loan_interest_request
from revolving_credit.infrastructure.observability.logging import log_rejection
from revolving_credit.infrastructure.observability.metrics import loan_interest_counter
from revolving_credit.utils.date_utils import format_date_range, format_us_date
from revolving_credit.utils.money import to_money_float

router = APIRouter()


@router.post("/cimb", response_model=LoanInterestResponse)
def create_loan_interest(request_body: LoanInterestRequestSchema, request: Request):
    """
    Interest owed on a loan between two dates.

    The monthly rate is annualized (x12) and applied as simple daily
    interest over a 365-day year.
    """
    request_id = get_request_id(request)

    try:
        loan_request = build_loan_interest_request(
            loan_amount=request_body.loan_amount,
            interest_rate_per_month=request_body.interest_rate_per_month,
            start_date=request_body.start_date,
            end_date=request_body.end_date,
        )
        result = calculate_loan_interest(loan_request)
        loan_interest_counter.labels(outcome="ok").inc()

        return LoanInterestResponse(
            loan_amount=to_money_float(result.loan_amount),
            interest_rate_per_month=to_money_float(result.monthly_interest_rate),
            date_range=format_date_range(result.start_date, result.end_date),
            start_date=format_us_date(result.start_date),
            end_date=format_us_date(result.end_date),
            days=result.days,
            interest=to_money_float(result.interest),
            total_amount=to_money_float(result.total_amount),
        )

    except ValidationError as e:
        loan_interest_counter.labels(outcome="rejected").inc()
        log_rejection(request_id, "cimb", str(e))
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
