"""Month-by-month payoff simulation for revolving credit balances"""

from decimal import Decimal
from enum import Enum
from typing import List

from revolving_credit.domain.exceptions import InsufficientPaymentError
from revolving_credit.domain.minimum_payment import compute_minimum_payment, monthly_rate
from revolving_credit.domain.models import AmortizationResult, AmortizationRow

# Hard iteration limit (50 years of monthly payments). Bounds worst-case
# runtime for near-zero payments; it is not a regulatory term.
MAX_AMORTIZATION_MONTHS = 600

# Balances at or below one cent count as paid off (absorbs rounding residue)
PAYOFF_TOLERANCE = Decimal("0.01")


class AmortizationState(str, Enum):
    ACCRUING = "accruing"
    PAID_OFF = "paid_off"


def is_grace_month(month: int, grace_period_months: int) -> bool:
    """Interest is waived for months 1..grace_period_months of the schedule"""
    return month <= grace_period_months


def has_grace_period(grace_period_months: int) -> bool:
    """Coarse test used by the one-payment projection: is any grace configured"""
    return grace_period_months > 0


def check_payment_sufficient(
    balance: Decimal,
    annual_rate_percent: Decimal,
    payment_amount: Decimal,
) -> None:
    """
    Reject payments that can never reduce principal.

    Raises:
        InsufficientPaymentError: payment <= monthly interest with a non-zero rate
    """
    monthly_interest, minimum_payment = compute_minimum_payment(balance, annual_rate_percent)
    if payment_amount <= monthly_interest and annual_rate_percent > 0:
        raise InsufficientPaymentError(
            "Payment amount is too low to pay off the balance. "
            "It must be greater than the monthly interest.",
            monthly_interest=monthly_interest,
            minimum_payment=minimum_payment,
        )


def simulate_amortization(
    balance: Decimal,
    annual_rate_percent: Decimal,
    payment_amount: Decimal,
    grace_period_months: int = 0,
) -> AmortizationResult:
    """
    Simulate monthly payments until the balance is paid off.

    Rules:
    - Interest is charged on the remaining balance each month, except during
      the first ``grace_period_months`` months
    - Payment covers interest first, remainder goes to principal
    - Principal paid never exceeds the remaining balance
    - Stops once the balance is within one cent of zero, or after
      MAX_AMORTIZATION_MONTHS months (``reached_cap`` is then True)

    Rows carry full-precision values; rounding happens at the output boundary.

    Raises:
        InsufficientPaymentError: payment cannot cover the first month's interest
    """
    if balance == 0:
        return AmortizationResult(schedule=[], months_to_pay_off=0, total_interest_paid=Decimal("0"))

    check_payment_sufficient(balance, annual_rate_percent, payment_amount)

    rate = monthly_rate(annual_rate_percent)
    remaining_balance = balance
    total_interest = Decimal("0")
    schedule: List[AmortizationRow] = []
    state = AmortizationState.ACCRUING
    month = 0

    while state is AmortizationState.ACCRUING and month < MAX_AMORTIZATION_MONTHS:
        month += 1

        if is_grace_month(month, grace_period_months):
            interest = Decimal("0")
        else:
            interest = remaining_balance * rate

        principal = min(payment_amount - interest, remaining_balance)
        total_interest += interest
        remaining_balance -= principal

        # Clamp drift below zero
        if remaining_balance < 0:
            remaining_balance = Decimal("0")

        schedule.append(
            AmortizationRow(
                month=month,
                payment=principal + interest,
                principal=principal,
                interest=interest,
                remaining_balance=remaining_balance,
            )
        )

        if remaining_balance <= PAYOFF_TOLERANCE:
            state = AmortizationState.PAID_OFF

    return AmortizationResult(
        schedule=schedule,
        months_to_pay_off=month,
        total_interest_paid=total_interest,
        reached_cap=state is AmortizationState.ACCRUING,
    )


def project_balance_after_one_payment(
    balance: Decimal,
    annual_rate_percent: Decimal,
    payment_amount: Decimal,
    grace_period_months: int = 0,
) -> Decimal:
    """
    Balance after a single payment, computed independently of the schedule.

    Interest is skipped whenever any grace period is configured, unlike the
    schedule which checks each month against the grace window. Never negative.
    """
    monthly_interest, _ = compute_minimum_payment(balance, annual_rate_percent)
    interest_charged = Decimal("0") if has_grace_period(grace_period_months) else monthly_interest
    return max(Decimal("0"), balance + interest_charged - payment_amount)
