"""Calculation entry points - compose the interest, payoff and accrual rules"""

from contextlib import contextmanager
from datetime import date
from decimal import Decimal, DecimalException
from typing import Iterator

from revolving_credit.domain.amortization import project_balance_after_one_payment, simulate_amortization
from revolving_credit.domain.custom_payments import accrue_custom_payments
from revolving_credit.domain.date_interest import compute_loan_interest, compute_range_interest
from revolving_credit.domain.exceptions import CalculationError
from revolving_credit.domain.minimum_payment import compute_minimum_payment
from revolving_credit.domain.models import (
    CalculationRequest,
    CalculationResult,
    LoanInterestRequest,
    LoanInterestResult,
)


@contextmanager
def _arithmetic_guard() -> Iterator[None]:
    """Surface trapped Decimal signals (overflow, invalid operation) as CalculationError"""
    try:
        yield
    except DecimalException as e:
        raise CalculationError(f"Calculation failed: {e.__class__.__name__}") from e


def _custom_payment_start(request: CalculationRequest) -> date:
    """Accrual for the first custom payment runs from referenceDate, startDate, or today"""
    if request.reference_date is not None:
        return request.reference_date
    if request.start_date is not None:
        return request.start_date
    return date.today()


def calculate(request: CalculationRequest) -> CalculationResult:
    """
    Main entry point: run every calculation the request asks for.

    Flow:
    1. Monthly interest and minimum payment
    2. One-payment balance projection
    3. Amortization schedule (raises InsufficientPaymentError)
    4. Date-range interest, if a range was supplied
    5. Custom payment accrual, if payments were supplied

    A zero balance yields an empty schedule and zero aggregates.

    Raises:
        InsufficientPaymentError: payment cannot outpace interest
        CalculationError: Decimal arithmetic overflowed or was undefined
    """
    with _arithmetic_guard():
        return _calculate(request)


def _calculate(request: CalculationRequest) -> CalculationResult:
    if request.balance == 0:
        monthly_interest = minimum_payment = new_balance = Decimal("0")
    else:
        monthly_interest, minimum_payment = compute_minimum_payment(
            request.balance, request.annual_interest_rate
        )
        new_balance = project_balance_after_one_payment(
            request.balance,
            request.annual_interest_rate,
            request.payment_amount,
            request.grace_period_months,
        )

    amortization = simulate_amortization(
        request.balance,
        request.annual_interest_rate,
        request.payment_amount,
        request.grace_period_months,
    )

    date_range_interest = None
    if request.has_date_range:
        date_range_interest = compute_range_interest(
            request.balance, request.annual_interest_rate, request.start_date, request.end_date
        )

    custom_payment_result = None
    if request.custom_payments:
        custom_payment_result = accrue_custom_payments(
            request.balance,
            request.annual_interest_rate,
            request.custom_payments,
            reference_date=_custom_payment_start(request),
        )

    return CalculationResult(
        monthly_interest=monthly_interest,
        minimum_payment=minimum_payment,
        new_balance_after_one_payment=new_balance,
        amortization=amortization,
        date_range_interest=date_range_interest,
        custom_payment_result=custom_payment_result,
    )


def calculate_loan_interest(request: LoanInterestRequest) -> LoanInterestResult:
    """Fixed-date loan interest with a monthly rate"""
    with _arithmetic_guard():
        return compute_loan_interest(request)
