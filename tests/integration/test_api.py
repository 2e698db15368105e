"""Integration tests for API endpoints"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from decision_engine.api.dependencies import get_decision_engine
from decision_engine.api.main import create_app
from decision_engine.domain.engine import DecisionEngine
from decision_engine.infrastructure.validators.personal_code import EstonianPersonalCodeValidator


def post_decision(client: TestClient, personal_code: str, loan_amount: int, loan_period: int):
    return client.post(
        "/v1/loan/decision",
        json={"personal_code": personal_code, "loan_amount": loan_amount, "loan_period": loan_period},
    )


@pytest.fixture
def fixed_clock_client(engine_settings) -> TestClient:
    """Client whose engine uses the real validator but a fixed date"""
    app = create_app()
    engine = DecisionEngine(EstonianPersonalCodeValidator(), engine_settings, today=lambda: date(2026, 10, 19))
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "loan_decision_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_decision_approved(client: TestClient):
    """Segment 1 customer gets 2400 over the requested 24 months"""
    response = post_decision(client, "49002010976", 4000, 24)

    assert response.status_code == 200
    assert response.json() == {"loan_amount": 2400, "loan_period": 24, "error_message": None}


def test_decision_extends_period(client: TestClient):
    response = post_decision(client, "49002010976", 2000, 12)

    assert response.status_code == 200
    assert response.json()["loan_amount"] == 2000
    assert response.json()["loan_period"] == 20


def test_decision_segment_3_capped(client: TestClient):
    response = post_decision(client, "49002010998", 2000, 12)

    assert response.status_code == 200
    assert response.json()["loan_amount"] == 10000


def test_decision_invalid_personal_code(client: TestClient):
    response = post_decision(client, "49002010975", 4000, 24)

    assert response.status_code == 400
    assert response.json() == {"loan_amount": None, "loan_period": None, "error_message": "Invalid personal ID code!"}


def test_decision_invalid_amount(client: TestClient):
    response = post_decision(client, "49002010976", 1999, 24)

    assert response.status_code == 400
    assert response.json()["error_message"] == "Invalid loan amount!"


def test_decision_invalid_period(client: TestClient):
    response = post_decision(client, "49002010976", 4000, 49)

    assert response.status_code == 400
    assert response.json()["error_message"] == "Invalid loan period!"


def test_decision_debt_has_no_valid_loan(client: TestClient):
    response = post_decision(client, "49002010965", 4000, 24)

    assert response.status_code == 404
    assert response.json() == {"loan_amount": None, "loan_period": None, "error_message": "No valid loan found!"}


def test_decision_underage_customer(fixed_clock_client: TestClient):
    """Born 2010-01-01, 16 years old on the fixed date"""
    response = post_decision(fixed_clock_client, "61001010018", 4000, 24)

    assert response.status_code == 403
    assert response.json()["error_message"] == "Customer age is not within the approved range for loan."
    assert response.json()["loan_amount"] is None


def test_decision_malformed_body(client: TestClient):
    response = client.post("/v1/loan/decision", json={"personal_code": "49002010976", "loan_amount": 4000})

    assert response.status_code == 422
    assert "detail" in response.json()


def test_age_rejection_distinct_from_malformed_body(fixed_clock_client: TestClient):
    """An age rejection and a body validation error must not share a status code"""
    age_rejection = post_decision(fixed_clock_client, "61001010018", 4000, 24)
    malformed = fixed_clock_client.post("/v1/loan/decision", json={"personal_code": "61001010018"})

    assert age_rejection.status_code != malformed.status_code
