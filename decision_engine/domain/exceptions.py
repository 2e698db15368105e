"""Domain-specific exceptions, each tagged with the kind of rejection it produces"""

from enum import Enum


class ErrorTier(str, Enum):
    """Whether a rejection means malformed input or a business decline"""

    VALIDATION = "validation"
    BUSINESS = "business"


class ErrorKind(str, Enum):
    """Every reason a loan request can be rejected"""

    INVALID_PERSONAL_CODE = "invalid_personal_code"
    INVALID_LOAN_AMOUNT = "invalid_loan_amount"
    INVALID_LOAN_PERIOD = "invalid_loan_period"
    INVALID_AGE = "invalid_age"
    NO_VALID_LOAN = "no_valid_loan"

    @property
    def tier(self) -> ErrorTier:
        if self in (ErrorKind.INVALID_AGE, ErrorKind.NO_VALID_LOAN):
            return ErrorTier.BUSINESS
        return ErrorTier.VALIDATION


class DecisionEngineException(Exception):
    """Base exception for domain layer"""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPersonalCodeError(DecisionEngineException):
    """Personal code failed validation or encodes an unknown century"""

    kind = ErrorKind.INVALID_PERSONAL_CODE


class InvalidLoanAmountError(DecisionEngineException):
    """Requested amount is outside the configured bounds"""

    kind = ErrorKind.INVALID_LOAN_AMOUNT


class InvalidLoanPeriodError(DecisionEngineException):
    """Requested period is outside the configured bounds"""

    kind = ErrorKind.INVALID_LOAN_PERIOD


class InvalidAgeError(DecisionEngineException):
    """Customer is too young, or too old by the end of the loan"""

    kind = ErrorKind.INVALID_AGE


class NoValidLoanError(DecisionEngineException):
    """No amount and period combination can be approved"""

    kind = ErrorKind.NO_VALID_LOAN
