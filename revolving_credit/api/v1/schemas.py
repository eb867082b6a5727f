"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel
from typing import List, Optional, Union

# Numbers may arrive as JSON numbers or numeric strings; the domain parses them.
# Strict types keep JSON booleans as bools so the domain rejects them.
NumericInput = Optional[Union[StrictInt, StrictFloat, StrictBool, str]]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CustomPaymentSchema(CamelModel):
    """Single dated payment supplied by the caller"""

    amount: NumericInput = None
    date: Optional[str] = None


class CalculationRequestSchema(CamelModel):
    """Request body for POST /api/calculate"""

    balance: NumericInput = None
    interest_rate: NumericInput = None
    payment: NumericInput = None
    credit_limit: NumericInput = None
    grace_period: NumericInput = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    reference_date: Optional[str] = None
    custom_payments: Optional[List[CustomPaymentSchema]] = None


class AmortizationRowSchema(CamelModel):
    month: int
    payment: float
    principal: float
    interest: float
    remaining_balance: float


class DateInterestSchema(CamelModel):
    date_range: str
    start_date: str
    end_date: str
    days: int
    interest: float


class CustomPaymentRowSchema(CamelModel):
    number: int
    date: str
    amount: float
    days: int
    interest: float
    balance: float


class CustomPaymentSummarySchema(CamelModel):
    payments: List[CustomPaymentRowSchema]
    total_paid: float
    total_interest_accrued: float
    final_balance: float


class CalculationResponse(CamelModel):
    """Response for POST /api/calculate"""

    monthly_interest: float
    minimum_payment: float
    new_balance: float
    months_to_pay_off: int
    total_interest_paid: float
    reached_cap: bool = False
    amortization_schedule: List[AmortizationRowSchema]
    date_interest: Optional[DateInterestSchema] = None
    custom_payment: Optional[CustomPaymentSummarySchema] = None


class LoanInterestRequestSchema(CamelModel):
    """Request body for POST /api/cimb"""

    loan_amount: NumericInput = None
    interest_rate_per_month: NumericInput = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


class LoanInterestResponse(CamelModel):
    """Response for POST /api/cimb"""

    loan_amount: float
    interest_rate_per_month: float
    date_range: str
    start_date: str
    end_date: str
    days: int
    interest: float
    total_amount: float
