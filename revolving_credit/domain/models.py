"""Domain models - pure Python dataclasses representing calculation inputs and results"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List, Optional


@dataclass
class CustomPayment:
    """Irregular, caller-specified payment"""

    amount: Decimal
    date: date


@dataclass
class CalculationRequest:
    """Validated revolving-credit calculation input"""

    balance: Decimal
    annual_interest_rate: Decimal  # percent, e.g. 18 for 18%
    payment_amount: Decimal
    credit_limit: Decimal = Decimal("0")  # accepted, not used in any formula
    grace_period_months: int = 0
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    reference_date: Optional[date] = None
    custom_payments: List[CustomPayment] = field(default_factory=list)

    @property
    def has_date_range(self) -> bool:
        return self.start_date is not None and self.end_date is not None


@dataclass
class AmortizationRow:
    """Single month of the amortization schedule (unrounded)"""

    month: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    remaining_balance: Decimal


@dataclass
class AmortizationResult:
    """Output of the month-by-month payoff simulation"""

    schedule: List[AmortizationRow]
    months_to_pay_off: int
    total_interest_paid: Decimal
    reached_cap: bool = False


@dataclass
class DateRangeInterest:
    """Simple daily interest between two dates"""

    start_date: date
    end_date: date
    days: int
    interest: Decimal


@dataclass
class CustomPaymentRow:
    """One processed custom payment"""

    number: int
    date: date
    amount: Decimal
    days: int
    interest: Decimal
    balance: Decimal


@dataclass
class CustomPaymentResult:
    """Accrual summary across all custom payments"""

    rows: List[CustomPaymentRow]
    total_paid: Decimal
    total_interest_accrued: Decimal
    final_balance: Decimal


@dataclass
class CalculationResult:
    """Complete revolving-credit calculation output"""

    monthly_interest: Decimal
    minimum_payment: Decimal
    new_balance_after_one_payment: Decimal
    amortization: AmortizationResult
    date_range_interest: Optional[DateRangeInterest] = None
    custom_payment_result: Optional[CustomPaymentResult] = None


@dataclass
class LoanInterestRequest:
    """Validated fixed-date loan interest input (monthly rate variant)"""

    loan_amount: Decimal
    monthly_interest_rate: Decimal  # percent per month
    start_date: date
    end_date: date


@dataclass
class LoanInterestResult:
    """Interest owed on a loan between two dates"""

    loan_amount: Decimal
    monthly_interest_rate: Decimal
    start_date: date
    end_date: date
    days: int
    interest: Decimal
    total_amount: Decimal
