"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from typing import Optional

from decision_engine.domain.exceptions import ErrorKind, ErrorTier


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the customer"""

    personal_code: str
    loan_amount: int
    loan_period: int  # months


@dataclass(frozen=True)
class CreditProfile:
    """Credit segment derived from a personal code, passed between stages"""

    credit_modifier: int

    @property
    def has_debt(self) -> bool:
        return self.credit_modifier == 0


@dataclass(frozen=True)
class Decision:
    """
    Outcome of a loan request.

    Either loan_amount and loan_period are both set and there is no error,
    or both are None and error_message/error_kind describe the rejection.
    """

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    def __post_init__(self) -> None:
        offer = (self.loan_amount, self.loan_period)
        error = (self.error_message, self.error_kind)
        approved = None not in offer and error == (None, None)
        rejected = offer == (None, None) and None not in error
        if not (approved or rejected):
            raise ValueError(
                "Decision must carry either an amount and period or an error, not a mix"
            )

    @classmethod
    def approved(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def rejected(cls, kind: ErrorKind, message: str) -> "Decision":
        return cls(error_message=message, error_kind=kind)

    @property
    def is_approved(self) -> bool:
        return self.error_kind is None

    @property
    def is_validation_error(self) -> bool:
        return self.error_kind is not None and self.error_kind.tier is ErrorTier.VALIDATION

    @property
    def is_business_rejection(self) -> bool:
        return self.error_kind is not None and self.error_kind.tier is ErrorTier.BUSINESS
