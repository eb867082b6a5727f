"""Boundary validation: raw payload values → validated domain requests"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional

from revolving_credit.domain.amortization import MAX_AMORTIZATION_MONTHS
from revolving_credit.domain.exceptions import (
    InvalidDateRangeError,
    InvalidNumericValueError,
    MissingInputError,
    NegativeValueError,
)
from revolving_credit.domain.models import CalculationRequest, CustomPayment, LoanInterestRequest
from revolving_credit.utils.date_utils import parse_iso_date

# Largest accepted magnitude for any numeric input (one quadrillion)
MAX_INPUT_MAGNITUDE = Decimal("1e15")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_decimal(value: Any, field_name: str) -> Decimal:
    """
    Convert a JSON number or numeric string to Decimal.

    Commas are stripped so "1,250.50" parses. Floats go through ``str`` to
    keep their shortest decimal form (0.1 → Decimal("0.1")).

    Raises:
        InvalidNumericValueError: unparseable, boolean, non-finite or
            larger than MAX_INPUT_MAGNITUDE
    """
    if isinstance(value, bool):
        raise InvalidNumericValueError(f"Invalid numeric value for {field_name}: {value!r}")
    try:
        if isinstance(value, str):
            parsed = Decimal(value.strip().replace(",", ""))
        elif isinstance(value, (int, float, Decimal)):
            parsed = Decimal(str(value))
        else:
            raise TypeError(type(value).__name__)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise InvalidNumericValueError(f"Invalid numeric value for {field_name}: {value!r}") from e

    if not parsed.is_finite() or abs(parsed) > MAX_INPUT_MAGNITUDE:
        raise InvalidNumericValueError(f"Invalid numeric value for {field_name}: {value!r}")
    return parsed


def _parse_grace_period(value: Any) -> int:
    """Whole months, truncated toward zero; anything past the schedule cap behaves like the cap"""
    parsed = parse_decimal(value, "gracePeriod")
    return int(max(min(parsed, Decimal(MAX_AMORTIZATION_MONTHS)), -Decimal(MAX_AMORTIZATION_MONTHS)))


def _require_non_negative(values: Dict[str, Decimal]) -> None:
    negative = [name for name, value in values.items() if value < 0]
    if negative:
        raise NegativeValueError(f"Values cannot be negative: {', '.join(negative)}")


def _parse_date(value: Any, field_name: str) -> date:
    try:
        return parse_iso_date(value)
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidDateRangeError(f"Invalid date format for {field_name}: {value!r}") from e


def _parse_custom_payments(raw_payments: Iterable[Dict[str, Any]]) -> List[CustomPayment]:
    payments = []
    for index, raw in enumerate(raw_payments, start=1):
        amount = raw.get("amount")
        when = raw.get("date")
        if _is_blank(amount) or _is_blank(when):
            raise MissingInputError(f"Custom payment {index} requires amount and date")

        parsed_amount = parse_decimal(amount, f"customPayments[{index}].amount")
        _require_non_negative({f"customPayments[{index}].amount": parsed_amount})
        payments.append(CustomPayment(amount=parsed_amount, date=_parse_date(when, f"customPayments[{index}].date")))
    return payments


def build_calculation_request(
    balance: Any,
    interest_rate: Any,
    payment: Any,
    credit_limit: Any = None,
    grace_period: Any = None,
    start_date: Any = None,
    end_date: Any = None,
    reference_date: Any = None,
    custom_payments: Optional[Iterable[Dict[str, Any]]] = None,
) -> CalculationRequest:
    """
    Validate a revolving-credit payload.

    Checks run in order: required fields, numeric parsing, non-negativity,
    date range. The payment-versus-interest check belongs to the engine.

    Raises:
        MissingInputError, InvalidNumericValueError, NegativeValueError,
        InvalidDateRangeError
    """
    if any(_is_blank(v) for v in (balance, interest_rate, payment)):
        raise MissingInputError("Missing required parameters: balance, interestRate, payment")

    parsed_balance = parse_decimal(balance, "balance")
    parsed_rate = parse_decimal(interest_rate, "interestRate")
    parsed_payment = parse_decimal(payment, "payment")
    parsed_limit = Decimal("0") if _is_blank(credit_limit) else parse_decimal(credit_limit, "creditLimit")
    parsed_grace = 0 if _is_blank(grace_period) else _parse_grace_period(grace_period)

    _require_non_negative(
        {
            "balance": parsed_balance,
            "interestRate": parsed_rate,
            "payment": parsed_payment,
            "creditLimit": parsed_limit,
            "gracePeriod": Decimal(parsed_grace),
        }
    )

    parsed_start = parsed_end = None
    if not (_is_blank(start_date) and _is_blank(end_date)):
        if _is_blank(start_date) or _is_blank(end_date):
            raise MissingInputError("Date range requires both startDate and endDate")
        parsed_start = _parse_date(start_date, "startDate")
        parsed_end = _parse_date(end_date, "endDate")
        if parsed_end <= parsed_start:
            raise InvalidDateRangeError("End date must be after start date")

    parsed_reference = None if _is_blank(reference_date) else _parse_date(reference_date, "referenceDate")

    return CalculationRequest(
        balance=parsed_balance,
        annual_interest_rate=parsed_rate,
        payment_amount=parsed_payment,
        credit_limit=parsed_limit,
        grace_period_months=parsed_grace,
        start_date=parsed_start,
        end_date=parsed_end,
        reference_date=parsed_reference,
        custom_payments=_parse_custom_payments(custom_payments or []),
    )


def build_loan_interest_request(
    loan_amount: Any,
    interest_rate_per_month: Any,
    start_date: Any,
    end_date: Any,
) -> LoanInterestRequest:
    """
    Validate a fixed-date loan interest payload (monthly rate).

    Raises:
        MissingInputError, InvalidNumericValueError, NegativeValueError,
        InvalidDateRangeError
    """
    if any(_is_blank(v) for v in (loan_amount, interest_rate_per_month, start_date, end_date)):
        raise MissingInputError(
            "Missing required parameters: loanAmount, startDate, endDate, interestRatePerMonth"
        )

    amount = parse_decimal(loan_amount, "loanAmount")
    monthly_rate = parse_decimal(interest_rate_per_month, "interestRatePerMonth")
    _require_non_negative({"loanAmount": amount, "interestRatePerMonth": monthly_rate})

    start = _parse_date(start_date, "startDate")
    end = _parse_date(end_date, "endDate")
    if end <= start:
        raise InvalidDateRangeError("End date must be after start date")

    return LoanInterestRequest(loan_amount=amount, monthly_interest_rate=monthly_rate, start_date=start, end_date=end)
