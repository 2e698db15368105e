"""Decision engine - runs validation, classification and optimization for one request"""

from datetime import date
from typing import Callable, Optional

from decision_engine.config import EngineSettings, engine_settings
from decision_engine.domain.eligibility import classify
from decision_engine.domain.exceptions import DecisionEngineException
from decision_engine.domain.models import Decision, LoanRequest
from decision_engine.domain.optimizer import optimize_loan
from decision_engine.domain.validation import PersonalCodeValidator, verify_inputs


class DecisionEngine:
    """
    Calculates the approved loan amount and period for a customer.

    The credit modifier is derived from the last four digits of the personal
    code. The engine only holds its collaborators; every intermediate value
    lives in the call, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        code_validator: PersonalCodeValidator,
        settings: Optional[EngineSettings] = None,
        today: Callable[[], date] = date.today,
    ):
        self.code_validator = code_validator
        self.settings = settings or engine_settings
        self.today = today

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Decide on a loan for the given personal code, amount and period (months).

        Never raises for a rule violation: the returned Decision either holds
        an amount and period, or an error message with its ErrorKind.
        """
        return self.evaluate(
            LoanRequest(personal_code=personal_code, loan_amount=loan_amount, loan_period=loan_period)
        )

    def evaluate(self, request: LoanRequest) -> Decision:
        try:
            verify_inputs(request, self.code_validator, self.settings)

            profile = classify(request.personal_code, self.settings)
            loan_amount, loan_period = optimize_loan(
                request.personal_code,
                profile,
                request.loan_period,
                self.today(),
                self.settings,
            )
        except DecisionEngineException as e:
            return Decision.rejected(e.kind, e.message)

        return Decision.approved(loan_amount, loan_period)
