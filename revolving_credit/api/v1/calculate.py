"""POST /api/calculate - revolving credit interest and payoff endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from revolving_credit.api.v1.schemas import (
    AmortizationRowSchema,
    CalculationRequestSchema,
    CalculationResponse,
    CustomPaymentRowSchema,
    CustomPaymentSummarySchema,
    DateInterestSchema,
)
from revolving_credit.api.dependencies import get_request_id
from revolving_credit.domain.calculator import calculate
from revolving_credit.domain.exceptions import InsufficientPaymentError, ValidationError
from revolving_credit.domain.models import CalculationResult
from revolving_credit.domain.requests import build_calculation_request
from revolving_credit.infrastructure.observability.logging import log_calculation, log_rejection
from revolving_credit.infrastructure.observability.metrics import record_calculation, record_rejection
from revolving_credit.utils.date_utils import format_date_range, format_us_date
from revolving_credit.utils.money import to_money_float

router = APIRouter()


def to_response(result: CalculationResult) -> CalculationResponse:
    """Round every currency value to cents for the wire"""
    amortization = result.amortization
    response = CalculationResponse(
        monthly_interest=to_money_float(result.monthly_interest),
        minimum_payment=to_money_float(result.minimum_payment),
        new_balance=to_money_float(result.new_balance_after_one_payment),
        months_to_pay_off=amortization.months_to_pay_off,
        total_interest_paid=to_money_float(amortization.total_interest_paid),
        reached_cap=amortization.reached_cap,
        amortization_schedule=[
            AmortizationRowSchema(
                month=row.month,
                payment=to_money_float(row.payment),
                principal=to_money_float(row.principal),
                interest=to_money_float(row.interest),
                remaining_balance=to_money_float(row.remaining_balance),
            )
            for row in amortization.schedule
        ],
    )

    if result.date_range_interest is not None:
        ranged = result.date_range_interest
        response.date_interest = DateInterestSchema(
            date_range=format_date_range(ranged.start_date, ranged.end_date),
            start_date=format_us_date(ranged.start_date),
            end_date=format_us_date(ranged.end_date),
            days=ranged.days,
            interest=to_money_float(ranged.interest),
        )

    if result.custom_payment_result is not None:
        accrued = result.custom_payment_result
        response.custom_payment = CustomPaymentSummarySchema(
            payments=[
                CustomPaymentRowSchema(
                    number=row.number,
                    date=row.date.isoformat(),
                    amount=to_money_float(row.amount),
                    days=row.days,
                    interest=to_money_float(row.interest),
                    balance=to_money_float(row.balance),
                )
                for row in accrued.rows
            ],
            total_paid=to_money_float(accrued.total_paid),
            total_interest_accrued=to_money_float(accrued.total_interest_accrued),
            final_balance=to_money_float(accrued.final_balance),
        )

    return response


@router.post("/calculate", response_model=CalculationResponse, response_model_exclude_none=True)
def create_calculation(request_body: CalculationRequestSchema, request: Request):
    """
    Calculate monthly interest, minimum payment and payoff schedule.

    Flow:
    1. Validate and parse the payload
    2. Run interest, payoff, date-range and custom-payment calculations
    3. Round to cents and return
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        calculation_request = build_calculation_request(
            balance=request_body.balance,
            interest_rate=request_body.interest_rate,
            payment=request_body.payment,
            credit_limit=request_body.credit_limit,
            grace_period=request_body.grace_period,
            start_date=request_body.start_date,
            end_date=request_body.end_date,
            reference_date=request_body.reference_date,
            custom_payments=[p.model_dump() for p in request_body.custom_payments or []],
        )
        result = calculate(calculation_request)
        response = to_response(result)

        duration_ms = (time.time() - start_time) * 1000
        record_calculation(result.amortization.months_to_pay_off, result.amortization.reached_cap)
        log_calculation(
            request_id,
            result.amortization.months_to_pay_off,
            result.amortization.reached_cap,
            duration_ms,
        )

        return response

    except InsufficientPaymentError as e:
        record_rejection()
        log_rejection(request_id, "calculate", str(e))
        raise HTTPException(
            status_code=400,
            detail={
                "error": str(e),
                "monthlyInterest": to_money_float(e.monthly_interest),
                "minimumPayment": to_money_float(e.minimum_payment),
            },
        )

    except ValidationError as e:
        record_rejection()
        log_rejection(request_id, "calculate", str(e))
        raise HTTPException(status_code=400, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")
