"""Prometheus metrics for monitoring calculation outcomes and payoff horizons"""

from prometheus_client import Counter, Histogram

# Calculation metrics
calculation_counter = Counter(
    "credit_calculation_total",
    "Total revolving credit calculations",
    ["outcome"],  # paid_off | capped | zero_balance | rejected
)

months_to_payoff_histogram = Histogram(
    "credit_months_to_payoff",
    "Months needed to pay off the balance",
    buckets=[6, 12, 24, 36, 60, 120, 240, 600],
)

loan_interest_counter = Counter(
    "loan_interest_calculation_total",
    "Total fixed-date loan interest calculations",
    ["outcome"],  # ok | rejected
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(months_to_pay_off: int, reached_cap: bool) -> None:
    """Record payoff outcome and horizon"""
    if months_to_pay_off == 0:
        outcome = "zero_balance"
    elif reached_cap:
        outcome = "capped"
    else:
        outcome = "paid_off"

    calculation_counter.labels(outcome=outcome).inc()
    if months_to_pay_off > 0:
        months_to_payoff_histogram.observe(months_to_pay_off)


def record_rejection() -> None:
    calculation_counter.labels(outcome="rejected").inc()
