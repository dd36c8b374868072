"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
"""

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.domain.trade.instruction_builder import (
    DEFAULT_CURRENCY_CODE,
    DEFAULT_REDUCTION_AMOUNT,
    ISO4217_CURRENCY_SCHEME,
    ReductionTerms,
    check_reduction_amount,
)

SAMPLE_TRADE_URL = (
    "https://raw.githubusercontent.com/finos/common-domain-model/master/"
    "rosetta-source/src/main/resources/result-json-files/fpml-5-13/products/"
    "equity-swaps/eqs-ex01-single-underlyer-execution-long-form.json"
)


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_heavy: Rate limit for endpoints that fetch remote documents.
        max_request_size_bytes: Maximum allowed request body size.
        sample_trade_url: Document unwound by the sample-trade endpoint.
        fetch_timeout_seconds: Timeout for trade document retrieval.
        reduction_amount: Quantity removed from a qualified trade.
        currency_code: Currency of the reduced quantity.
        currency_scheme: Vocabulary identifier attached to the currency code.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "TradeUnwind"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"
    max_request_size_bytes: int = 1_048_576  # 1 MB

    sample_trade_url: str = SAMPLE_TRADE_URL
    fetch_timeout_seconds: float = 10.0

    reduction_amount: Decimal = Field(default=DEFAULT_REDUCTION_AMOUNT, ge=0)
    currency_code: str = DEFAULT_CURRENCY_CODE
    currency_scheme: str = ISO4217_CURRENCY_SCHEME

    @field_validator("reduction_amount")
    @classmethod
    def _reduction_amount_fits_wire_format(cls, value: Decimal) -> Decimal:
        return check_reduction_amount(value)

    def get_reduction_terms(self) -> ReductionTerms:
        """Return the unwind configuration for the instruction builder."""
        return ReductionTerms(
            reduction_amount=self.reduction_amount,
            currency_code=self.currency_code,
            currency_scheme=self.currency_scheme,
        )


settings = Settings()
