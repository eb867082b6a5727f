"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from revolving_credit.api.main import create_app
from revolving_credit.domain.models import CalculationRequest


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def standard_request() -> CalculationRequest:
    """$1000 at 18% APR paid down $100 a month"""
    return CalculationRequest(
        balance=Decimal("1000"),
        annual_interest_rate=Decimal("18"),
        payment_amount=Decimal("100"),
    )


@pytest.fixture
def standard_payload() -> dict:
    """JSON body equivalent to standard_request"""
    return {"creditLimit": 5000, "balance": 1000, "interestRate": 18, "payment": 100, "gracePeriod": 0}
