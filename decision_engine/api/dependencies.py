"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from decision_engine.config import engine_settings
from decision_engine.domain.engine import DecisionEngine
from decision_engine.infrastructure.validators.personal_code import EstonianPersonalCodeValidator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_decision_engine() -> DecisionEngine:
    """Provide the shared, stateless decision engine"""
    return DecisionEngine(EstonianPersonalCodeValidator(), engine_settings)
