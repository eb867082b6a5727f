"""Integration tests for API endpoints"""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient, standard_payload: dict):
    """Test Prometheus metrics endpoint"""
    client.post("/api/calculate", json=standard_payload)

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "credit_calculation_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    echoed = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert echoed.headers["X-Request-ID"] == "trace-123"


def test_calculate_endpoint(client: TestClient, standard_payload: dict):
    """Test POST /api/calculate with a payable balance"""
    response = client.post("/api/calculate", json=standard_payload)

    assert response.status_code == 200
    data = response.json()
    assert data["monthlyInterest"] == 15.0
    assert data["minimumPayment"] == 40.0
    assert data["newBalance"] == 915.0
    assert data["monthsToPayOff"] == 11
    assert data["reachedCap"] is False
    assert len(data["amortizationSchedule"]) == 11
    assert data["amortizationSchedule"][0] == {
        "month": 1,
        "payment": 100.0,
        "principal": 85.0,
        "interest": 15.0,
        "remainingBalance": 915.0,
    }
    assert "dateInterest" not in data
    assert "customPayment" not in data


def test_calculate_accepts_numeric_strings(client: TestClient):
    response = client.post(
        "/api/calculate",
        json={"balance": "1,000", "interestRate": "18", "payment": "100", "creditLimit": "", "gracePeriod": ""},
    )

    assert response.status_code == 200
    assert response.json()["monthlyInterest"] == 15.0


def test_calculate_zero_balance(client: TestClient):
    response = client.post("/api/calculate", json={"balance": 0, "interestRate": 18, "payment": 0})

    assert response.status_code == 200
    data = response.json()
    assert data["amortizationSchedule"] == []
    assert data["monthsToPayOff"] == 0
    assert data["totalInterestPaid"] == 0


def test_calculate_with_date_range(client: TestClient, standard_payload: dict):
    response = client.post(
        "/api/calculate",
        json={**standard_payload, "balance": 10000, "payment": 500, "startDate": "2024-01-01", "endDate": "2024-02-01"},
    )

    assert response.status_code == 200
    assert response.json()["dateInterest"] == {
        "dateRange": "1/1/2024 to 2/1/2024",
        "startDate": "1/1/2024",
        "endDate": "2/1/2024",
        "days": 31,
        "interest": 152.88,
    }


def test_calculate_with_custom_payments(client: TestClient):
    response = client.post(
        "/api/calculate",
        json={
            "balance": 1000,
            "interestRate": 36.5,
            "payment": 100,
            "referenceDate": "2024-01-01",
            "customPayments": [
                {"amount": 300, "date": "2024-01-31"},
                {"amount": 200, "date": "2024-01-11"},
            ],
        },
    )

    assert response.status_code == 200
    summary = response.json()["customPayment"]
    assert [p["number"] for p in summary["payments"]] == [1, 2]
    assert summary["payments"][0] == {
        "number": 1,
        "date": "2024-01-11",
        "amount": 200.0,
        "days": 10,
        "interest": 10.0,
        "balance": 810.0,
    }
    assert summary["totalPaid"] == 500.0
    assert summary["totalInterestAccrued"] == 26.2
    assert summary["finalBalance"] == 526.2


def test_calculate_insufficient_payment(client: TestClient):
    response = client.post("/api/calculate", json={"balance": 1000, "interestRate": 18, "payment": 15})

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert "too low" in detail["error"]
    assert detail["monthlyInterest"] == 15.0
    assert detail["minimumPayment"] == 40.0


@pytest.mark.parametrize(
    "payload,reason",
    [
        ({"interestRate": 18, "payment": 100}, "Missing required parameters"),
        ({"balance": "abc", "interestRate": 18, "payment": 100}, "Invalid numeric value"),
        ({"balance": True, "interestRate": 18, "payment": 100}, "Invalid numeric value"),
        ({"balance": 1000, "interestRate": 18, "payment": 100, "gracePeriod": False}, "Invalid numeric value"),
        ({"balance": "1e27", "interestRate": 0, "payment": "1e27"}, "Invalid numeric value"),
        ({"balance": 1000, "interestRate": 18, "payment": 100, "gracePeriod": "1e99999999"}, "Invalid numeric value"),
        ({"balance": -5, "interestRate": 18, "payment": 100}, "cannot be negative"),
        (
            {"balance": 1000, "interestRate": 18, "payment": 100, "startDate": "2024-02-01", "endDate": "2024-02-01"},
            "End date must be after start date",
        ),
    ],
)
def test_calculate_rejects_invalid_input(client: TestClient, payload: dict, reason: str):
    response = client.post("/api/calculate", json=payload)

    assert response.status_code == 400
    assert reason in response.json()["detail"]


def test_cimb_endpoint(client: TestClient):
    """Test POST /api/cimb with a monthly rate"""
    response = client.post(
        "/api/cimb",
        json={"loanAmount": 10000, "interestRatePerMonth": 1.5, "startDate": "2024-01-01", "endDate": "2024-02-01"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "loanAmount": 10000.0,
        "interestRatePerMonth": 1.5,
        "dateRange": "1/1/2024 to 2/1/2024",
        "startDate": "1/1/2024",
        "endDate": "2/1/2024",
        "days": 31,
        "interest": 152.88,
        "totalAmount": 10152.88,
    }


@pytest.mark.parametrize(
    "payload,reason",
    [
        ({"loanAmount": 10000, "interestRatePerMonth": 1.5, "startDate": "2024-01-01"}, "Missing required parameters"),
        ({"loanAmount": "ten", "interestRatePerMonth": 1.5, "startDate": "2024-01-01", "endDate": "2024-02-01"}, "Invalid numeric value"),
        ({"loanAmount": 10000, "interestRatePerMonth": -1, "startDate": "2024-01-01", "endDate": "2024-02-01"}, "cannot be negative"),
        ({"loanAmount": 10000, "interestRatePerMonth": 1.5, "startDate": "2024-03-01", "endDate": "2024-02-01"}, "End date must be after start date"),
        ({"loanAmount": 10000, "interestRatePerMonth": 1.5, "startDate": "March", "endDate": "2024-02-01"}, "Invalid date format"),
    ],
)
def test_cimb_rejects_invalid_input(client: TestClient, payload: dict, reason: str):
    response = client.post("/api/cimb", json=payload)

    assert response.status_code == 400
    assert reason in response.json()["detail"]


@patch("revolving_credit.api.v1.calculate.calculate")
def test_calculate_unexpected_error(mock_calculate: MagicMock, client: TestClient, standard_payload: dict):
    """Unexpected failures surface as a generic 500"""
    mock_calculate.side_effect = RuntimeError("boom")

    response = client.post("/api/calculate", json=standard_payload)

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


@patch("revolving_credit.api.v1.cimb.calculate_loan_interest")
def test_cimb_unexpected_error(mock_calculate: MagicMock, client: TestClient):
    mock_calculate.side_effect = RuntimeError("boom")

    response = client.post(
        "/api/cimb",
        json={"loanAmount": 10000, "interestRatePerMonth": 1.5, "startDate": "2024-01-01", "endDate": "2024-02-01"},
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
