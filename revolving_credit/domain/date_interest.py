"""Simple daily interest between two calendar dates"""

from datetime import date
from decimal import Decimal

from revolving_credit.domain.exceptions import InvalidDateRangeError
from revolving_credit.domain.models import DateRangeInterest, LoanInterestRequest, LoanInterestResult
from revolving_credit.utils.date_utils import days_between

# Fixed 365-day year, no leap-year adjustment
DAYS_PER_YEAR = 365


def daily_rate(annual_rate_percent: Decimal) -> Decimal:
    """Convert an annual percentage rate to a simple daily decimal rate"""
    return annual_rate_percent / Decimal(100) / Decimal(DAYS_PER_YEAR)


def annual_rate_from_monthly(monthly_rate_percent: Decimal) -> Decimal:
    """Flat 12-month year, no compounding: 1.5% per month → 18% per year"""
    return monthly_rate_percent * Decimal(12)


def compute_range_interest(
    principal: Decimal,
    annual_rate_percent: Decimal,
    start_date: date,
    end_date: date,
) -> DateRangeInterest:
    """
    Calculate simple interest accrued between two dates.

    interest = principal * (annual rate / 100 / 365) * days

    Raises:
        InvalidDateRangeError: end_date is not strictly after start_date
    """
    if end_date <= start_date:
        raise InvalidDateRangeError("End date must be after start date")

    days = days_between(start_date, end_date)
    interest = principal * daily_rate(annual_rate_percent) * Decimal(days)

    return DateRangeInterest(start_date=start_date, end_date=end_date, days=days, interest=interest)


def compute_loan_interest(request: LoanInterestRequest) -> LoanInterestResult:
    """
    Interest on a loan between two dates when the rate is quoted per month.

    Example:
        10000 at 1.5%/month from 2024-01-01 to 2024-02-01
        → 31 days at 18%/365 daily → interest 152.88, total 10152.88
    """
    annual_rate = annual_rate_from_monthly(request.monthly_interest_rate)
    result = compute_range_interest(request.loan_amount, annual_rate, request.start_date, request.end_date)

    return LoanInterestResult(
        loan_amount=request.loan_amount,
        monthly_interest_rate=request.monthly_interest_rate,
        start_date=request.start_date,
        end_date=request.end_date,
        days=result.days,
        interest=result.interest,
        total_amount=request.loan_amount + result.interest,
    )
