"""Interest accrual across irregular, caller-dated payments"""

from datetime import date
from decimal import Decimal
from typing import List

from revolving_credit.domain.date_interest import daily_rate
from revolving_credit.domain.models import CustomPayment, CustomPaymentResult, CustomPaymentRow
from revolving_credit.utils.date_utils import days_between


def accrue_custom_payments(
    balance: Decimal,
    annual_rate_percent: Decimal,
    payments: List[CustomPayment],
    reference_date: date,
) -> CustomPaymentResult:
    """
    Apply dated payments in chronological order, accruing simple daily interest
    on the running balance between consecutive payments.

    Requirements:
    - Payments are processed sorted by date, regardless of input order
    - The first interval starts at ``reference_date``
    - Each payment is subtracted from balance plus accrued interest
    - Balance is clamped at zero; an undersized payment may leave it higher
      than before, which is not an error
    """
    rate = daily_rate(annual_rate_percent)
    ordered = sorted(payments, key=lambda p: p.date)

    running_balance = balance
    previous_date = reference_date
    total_paid = Decimal("0")
    total_interest = Decimal("0")
    rows: List[CustomPaymentRow] = []

    for number, payment in enumerate(ordered, start=1):
        # Payments dated before the previous event accrue nothing
        days = max(0, days_between(previous_date, payment.date))
        interest = running_balance * rate * Decimal(days)

        running_balance = max(Decimal("0"), running_balance + interest - payment.amount)
        total_paid += payment.amount
        total_interest += interest

        rows.append(
            CustomPaymentRow(
                number=number,
                date=payment.date,
                amount=payment.amount,
                days=days,
                interest=interest,
                balance=running_balance,
            )
        )
        previous_date = max(previous_date, payment.date)

    return CustomPaymentResult(
        rows=rows,
        total_paid=total_paid,
        total_interest_accrued=total_interest,
        final_balance=running_balance,
    )
