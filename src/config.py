"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Project Planning Core"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Display formatting
    currency_code: str = Field(default="USD")
    currency_symbol: str = Field(default="$")
    currency_decimals: int = Field(default=2, ge=0, le=6)
    date_format: str = Field(
        default="{d:%B} {d.day}, {d.year}",
        description="str.format pattern applied with d=<date>, e.g. 'January 5, 2025'",
    )
    time_format: str = Field(default="{d:%I}:{d:%M} {d:%p}")

    # Timeline chart styling
    task_bar_color: str = Field(default="#2ECC71")
    deliverable_color: str = Field(default="#606C38")
    decision_gate_color: str = Field(default="#BC6C25")
    timeline_padding_days: int = Field(
        default=1,
        ge=0,
        description="Days of padding around the chart viewport",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
