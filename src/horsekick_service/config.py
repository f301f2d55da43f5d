"""
Configuration settings for the Horse-Kick Prediction Service.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Horse-Kick Prediction Service"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # === Model ===
    MODEL_PATH: str = ""  # Empty means the bundled resources/poisson_v1.json

    # === Sanitization ===
    YEAR_MIN: int = 1701  # Inclusive
    YEAR_MAX: int = 1919  # Inclusive
    VALID_CORPS: list[str] = ["G", "I", "II", "III", "IV"]
    REQUIRED_COLUMNS: list[str] = ["year", "corps"]
    WARN_ON_DROPPED_ROWS: bool = True

    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True

    @model_validator(mode="after")
    def _check_year_bounds(self) -> "Settings":
        if self.YEAR_MIN > self.YEAR_MAX:
            raise ValueError(
                f"YEAR_MIN ({self.YEAR_MIN}) must not exceed YEAR_MAX ({self.YEAR_MAX})"
            )
        return self

    @property
    def year_bounds(self) -> tuple[int, int]:
        return (self.YEAR_MIN, self.YEAR_MAX)


# Global settings instance
settings = Settings()
