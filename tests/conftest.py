"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient

from decision_engine.api.main import create_app
from decision_engine.config import EngineSettings
from decision_engine.domain.engine import DecisionEngine


class AcceptAllValidator:
    """Personal code validator that trusts every code"""

    def is_valid(self, code: str) -> bool:
        return True


@pytest.fixture
def today() -> date:
    """Fixed "today" so age-dependent tests do not drift"""
    return date(2026, 10, 19)


@pytest.fixture
def engine_settings() -> EngineSettings:
    """Default business constants, independent of the environment"""
    return EngineSettings(
        min_loan_amount=2000,
        max_loan_amount=10000,
        min_loan_period=12,
        max_loan_period=48,
        max_age_months=936,
        min_customer_age_years=18,
        segment_1_credit_modifier=100,
        segment_2_credit_modifier=300,
        segment_3_credit_modifier=1000,
        min_credit_score=0.1,
    )


@pytest.fixture
def engine(engine_settings: EngineSettings, today: date) -> DecisionEngine:
    """Engine with a permissive validator and a fixed clock"""
    return DecisionEngine(AcceptAllValidator(), engine_settings, today=lambda: today)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with the real personal code validator"""
    return TestClient(create_app())
