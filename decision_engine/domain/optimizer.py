"""Loan optimizer - core business logic for picking the best approvable offer"""

from datetime import date

from decision_engine.config import EngineSettings
from decision_engine.domain.eligibility import verify_age
from decision_engine.domain.exceptions import NoValidLoanError
from decision_engine.domain.models import CreditProfile


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest amount the credit modifier allows over the given period"""
    return credit_modifier * loan_period


def find_loan_period(credit_modifier: int, requested_period: int, settings: EngineSettings) -> int:
    """
    Extend the period month by month until the highest valid amount reaches
    the minimum loan amount.

    Stops as soon as the period passes max_loan_period, so the result is at
    most max_loan_period + 1 (or the requested period, if already above).
    """
    loan_period = requested_period
    while (
        highest_valid_loan_amount(credit_modifier, loan_period) < settings.min_loan_amount
        and loan_period <= settings.max_loan_period
    ):
        loan_period += 1
    return loan_period


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """
    Credit score = (credit_modifier / loan_amount) * loan_period / 10.

    Evaluated left to right in floating point; the threshold comparison
    depends on that order.
    """
    return (credit_modifier / loan_amount) * loan_period / 10.0


def optimize_loan(
    personal_code: str,
    profile: CreditProfile,
    requested_period: int,
    today: date,
    settings: EngineSettings,
) -> tuple[int, int]:
    """
    Find the largest approvable amount, extending the period if needed.

    Returns: (loan_amount, loan_period)

    Raises:
        InvalidAgeError: Customer age does not fit the resulting period
        NoValidLoanError: No period within bounds, or score below threshold
    """
    if profile.has_debt:
        raise NoValidLoanError("No valid loan found!")

    loan_period = find_loan_period(profile.credit_modifier, requested_period, settings)

    verify_age(personal_code, loan_period, today, settings)

    if loan_period > settings.max_loan_period:
        raise NoValidLoanError("No valid loan found!")

    loan_amount = min(
        settings.max_loan_amount,
        highest_valid_loan_amount(profile.credit_modifier, loan_period),
    )

    score = calculate_credit_score(profile.credit_modifier, loan_amount, loan_period)
    if score < settings.min_credit_score:
        raise NoValidLoanError("No valid loan found!")

    return loan_amount, loan_period
