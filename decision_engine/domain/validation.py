"""Input validation - rejects malformed loan requests before any computation"""

from typing import Protocol

from decision_engine.config import EngineSettings
from decision_engine.domain.exceptions import (
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
)
from decision_engine.domain.models import LoanRequest


class PersonalCodeValidator(Protocol):
    """Authoritative check of personal code format and checksum"""

    def is_valid(self, code: str) -> bool: ...


def verify_inputs(
    request: LoanRequest,
    code_validator: PersonalCodeValidator,
    settings: EngineSettings,
) -> None:
    """
    Check the request against business bounds.

    Checks run in order (personal code, amount, period) and the first
    failure is raised; errors are never aggregated.

    Raises:
        InvalidPersonalCodeError: Code rejected by the validator
        InvalidLoanAmountError: Amount outside [min_loan_amount, max_loan_amount]
        InvalidLoanPeriodError: Period outside [min_loan_period, max_loan_period]
    """
    if not code_validator.is_valid(request.personal_code):
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    if not settings.min_loan_amount <= request.loan_amount <= settings.max_loan_amount:
        raise InvalidLoanAmountError("Invalid loan amount!")

    if not settings.min_loan_period <= request.loan_period <= settings.max_loan_period:
        raise InvalidLoanPeriodError("Invalid loan period!")
