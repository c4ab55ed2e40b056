"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring engine settings, read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "HR Engagement & Performance Scoring"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Scoring multipliers (ScoringConfig defaults)
    DEFAULT_EVENT_WEIGHT: float = Field(default=1.0)
    DEFAULT_PENALTY_WEIGHT: float = Field(default=1.0)

    # Operator slider ranges, enforced by ScoringSession only
    EVENT_WEIGHT_MIN: float = Field(default=0.5, ge=0)
    EVENT_WEIGHT_MAX: float = Field(default=2.5, ge=0)
    PENALTY_WEIGHT_MIN: float = Field(default=0.5, ge=0)
    PENALTY_WEIGHT_MAX: float = Field(default=3.0, ge=0)

    # Dashboard KPIs
    INACTIVITY_ALERT_THRESHOLD: float = Field(
        default=0.01,
        ge=0,
        description="Inactivity penalty at or above which a subject counts as an alert",
    )

    @model_validator(mode="after")
    def validate_weight_ranges(self):
        """Ensure each range is ordered and contains its default."""
        ranges = {
            "event weight": (self.EVENT_WEIGHT_MIN, self.EVENT_WEIGHT_MAX, self.DEFAULT_EVENT_WEIGHT),
            "penalty weight": (self.PENALTY_WEIGHT_MIN, self.PENALTY_WEIGHT_MAX, self.DEFAULT_PENALTY_WEIGHT),
        }
        for label, (low, high, default) in ranges.items():
            if low > high:
                raise ValueError(f"{label} range is empty: min {low} > max {high}")
            if not low <= default <= high:
                raise ValueError(
                    f"default {label} {default} outside range [{low}, {high}]"
                )
        return self

    @property
    def event_weight_range(self) -> tuple:
        return (self.EVENT_WEIGHT_MIN, self.EVENT_WEIGHT_MAX)

    @property
    def penalty_weight_range(self) -> tuple:
        return (self.PENALTY_WEIGHT_MIN, self.PENALTY_WEIGHT_MAX)


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
