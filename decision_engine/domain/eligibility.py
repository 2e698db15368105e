"""Eligibility classification - credit segment and age derived from the personal code"""

from datetime import date
from typing import Dict

from decision_engine.config import EngineSettings
from decision_engine.domain.exceptions import InvalidAgeError, InvalidPersonalCodeError
from decision_engine.domain.models import CreditProfile
from decision_engine.utils.date_utils import months_between

# First digit of the personal code encodes sex and century of birth
CENTURY_BASE_YEARS: Dict[str, int] = {
    "1": 1800,
    "2": 1800,
    "3": 1900,
    "4": 1900,
    "5": 2000,
    "6": 2000,
}


def is_digits(value: str, length: int) -> bool:
    """Exactly `length` ASCII digits, nothing else"""
    return len(value) == length and value.isascii() and value.isdigit()


def get_credit_modifier(personal_code: str, settings: EngineSettings) -> int:
    """
    Map the last four digits of the code to a credit modifier.

    - Divisible by 5: 0 (customer has debt, no loan possible)
    - Last digit 1 or 6: segment 1
    - Last digit 2 or 7: segment 2
    - Anything else: segment 3
    """
    suffix = personal_code[-4:]
    if not is_digits(suffix, 4):
        raise InvalidPersonalCodeError("Invalid personal ID code!")
    last_four_digits = int(suffix)

    if last_four_digits % 5 == 0:
        return 0

    last_digit = last_four_digits % 10
    if last_digit in (1, 6):
        return settings.segment_1_credit_modifier
    elif last_digit in (2, 7):
        return settings.segment_2_credit_modifier
    else:
        return settings.segment_3_credit_modifier


def classify(personal_code: str, settings: EngineSettings) -> CreditProfile:
    """Build the credit profile handed from the classifier to the optimizer"""
    return CreditProfile(credit_modifier=get_credit_modifier(personal_code, settings))


def get_birth_date(personal_code: str) -> date:
    """
    Decode the birth date from the first seven characters (CYYMMDD).

    Raises:
        InvalidPersonalCodeError: Unknown century marker or impossible date
    """
    base_year = CENTURY_BASE_YEARS.get(personal_code[:1])
    if base_year is None:
        raise InvalidPersonalCodeError("Invalid year of birth on ID code!")

    if not is_digits(personal_code[1:7], 6):
        raise InvalidPersonalCodeError("Invalid birth date on ID code!")

    try:
        year = base_year + int(personal_code[1:3])
        month = int(personal_code[3:5])
        day = int(personal_code[5:7])
        return date(year, month, day)
    except ValueError:
        raise InvalidPersonalCodeError("Invalid birth date on ID code!")


def age_in_months(birth_date: date, today: date) -> int:
    return months_between(birth_date, today)


def verify_age(
    personal_code: str,
    loan_period: int,
    today: date,
    settings: EngineSettings,
) -> None:
    """
    Reject customers under age, or who would pass the maximum age before
    the loan period ends.

    Raises:
        InvalidPersonalCodeError: Birth date cannot be decoded
        InvalidAgeError: Customer age outside the approved range
    """
    age_months = age_in_months(get_birth_date(personal_code), today)
    max_acceptable_age_months = settings.max_age_months - loan_period

    if age_months // 12 < settings.min_customer_age_years or age_months > max_acceptable_age_months:
        raise InvalidAgeError("Customer age is not within the approved range for loan.")
