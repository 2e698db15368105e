"""Configuration management using Pydantic Settings"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "decision-engine"
    log_level: str = "INFO"


class EngineSettings(BaseSettings):
    """Business rule constants, fixed once the process has started"""

    model_config = SettingsConfigDict(
        env_prefix="DECISION_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Loan bounds (inclusive)
    min_loan_amount: int = 2000
    max_loan_amount: int = 10000
    min_loan_period: int = 12  # months
    max_loan_period: int = 48  # months

    # Age eligibility
    max_age_months: int = 78 * 12  # age the customer may reach by the end of the loan
    min_customer_age_years: int = 18

    # Credit segments
    segment_1_credit_modifier: int = 100
    segment_2_credit_modifier: int = 300
    segment_3_credit_modifier: int = 1000

    # Scores below this are declined
    min_credit_score: float = 0.1

    @model_validator(mode="after")
    def check_bounds(self) -> "EngineSettings":
        if self.min_loan_amount > self.max_loan_amount:
            raise ValueError("min_loan_amount must not exceed max_loan_amount")
        if self.min_loan_period > self.max_loan_period:
            raise ValueError("min_loan_period must not exceed max_loan_period")
        return self


settings = Settings()
engine_settings = EngineSettings()
