"""Configuration management using Pydantic Settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from card_payoff.domain.amortization import HORIZON_CAP, PAYOFF_THRESHOLD
from card_payoff.domain.models import MINIMUM_PAYMENT_FLOOR


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "card-payoff"
    log_level: str = "INFO"

    # Amortization engine
    horizon_months: int = Field(HORIZON_CAP, gt=0)
    payoff_threshold: float = Field(PAYOFF_THRESHOLD, ge=0)  # Balance at or below this counts as paid off
    minimum_payment_floor: float = Field(MINIMUM_PAYMENT_FLOOR, ge=0)

    # Display
    currency_symbol: str = "₺"


settings = Settings()
