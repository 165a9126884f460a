from decimal import Decimal
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PERFREVIEW_",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "perfreview"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Final score weighting (KPI average vs competency average)
    SCORE_KPI_WEIGHT: Decimal = Decimal("0.7")
    SCORE_COMPETENCY_WEIGHT: Decimal = Decimal("0.3")
    SCORE_DECIMAL_PLACES: int = 2

    # Feedback limits
    FEEDBACK_MAX_CONTENT_LENGTH: int = 5000
    FEEDBACK_MAX_RESPONSE_LENGTH: int = 2000

    # In-memory event bus
    EVENT_HISTORY_SIZE: int = 1000

    @model_validator(mode="after")
    def _check_score_weights(self) -> Self:
        total = self.SCORE_KPI_WEIGHT + self.SCORE_COMPETENCY_WEIGHT
        if total != Decimal("1"):
            raise ValueError(
                f"SCORE_KPI_WEIGHT and SCORE_COMPETENCY_WEIGHT must sum to 1, got {total}"
            )
        if self.SCORE_DECIMAL_PLACES < 0:
            raise ValueError("SCORE_DECIMAL_PLACES cannot be negative")
        return self


settings = Settings()  # type: ignore
