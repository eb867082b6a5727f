"""Monthly interest and issuer-style minimum payment"""

from decimal import Decimal
from typing import Tuple

# Minimum payment policy: greater of 2% of balance or $25, plus the month's interest
MINIMUM_PAYMENT_PERCENT = Decimal("0.02")
MINIMUM_PAYMENT_FLOOR = Decimal("25")


def monthly_rate(annual_rate_percent: Decimal) -> Decimal:
    """Convert an annual percentage rate to a monthly decimal rate"""
    return annual_rate_percent / Decimal(100) / Decimal(12)


def compute_minimum_payment(balance: Decimal, annual_rate_percent: Decimal) -> Tuple[Decimal, Decimal]:
    """
    Calculate one month of interest and the minimum payment due.

    Policy:
    - monthly interest = balance * annual rate / 100 / 12
    - minimum payment = max(2% of balance, $25) + monthly interest

    A zero balance owes nothing, so both values are zero.

    Returns: (monthly_interest, minimum_payment)

    Example:
        balance=1000, rate=18 → monthly interest 15.00
        2% of 1000 = 20, below the $25 floor → minimum 25 + 15 = 40.00
    """
    if balance == 0:
        return Decimal("0"), Decimal("0")

    monthly_interest = balance * monthly_rate(annual_rate_percent)
    minimum_payment = max(balance * MINIMUM_PAYMENT_PERCENT, MINIMUM_PAYMENT_FLOOR) + monthly_interest

    return monthly_interest, minimum_payment
